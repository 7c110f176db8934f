# =============================================================================
# core/router.py  —  Tool Invocation Router
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Runs one tool call end to end:
#
#     1. Look the tool up in the catalog        (UnknownTool if missing)
#     2. Build the payload and the URL
#     3. Dispatch it                            (core/dispatcher.py)
#     4. Classify the response                  (core/classifier.py)
#     5. Render the verdict as a ToolResult     (render_verdict below)
#
#   No retries and no payment logic live here.  The only exception that
#   escapes invoke() is UnknownTool; every remote-side problem comes back as
#   a ToolResult with is_error=True and one human-readable text block.
# =============================================================================

import json
import logging
from typing import Any, Mapping, Optional

from core import catalog as default_catalog
from core.classifier import DEFAULT_CURRENCY, classify, classify_failure
from core.dispatcher import RetryingDispatcher
from core.errors import DispatchError, UnknownTool
from core.models import (
    ApiError,
    BadRequest,
    InvocationRequest,
    PaymentRequired,
    Success,
    ToolDefinition,
    ToolResult,
    TransportFailure,
    Verdict,
)

PAYMENT_TEMPLATE = (
    "🛑 PAYMENT REQUIRED (X402)\n\n"
    "To complete this action, please send a Solana transaction:\n\n"
    "Amount: {amount} {currency}\n"
    "Recipient: {recipient}\n"
    "Reference/Memo: {memo}\n\n"
    "Once paid, call this tool again with the transaction signature in the 'signature' field."
)


def build_payload(definition: ToolDefinition, arguments: Mapping[str, Any]) -> dict[str, Any]:
    """Arguments as sent to the API.

    Tools with a ``signature`` field get an empty signature when the agent
    didn't pass one.  Tools with a fixed payload shape send exactly those
    keys.
    """
    payload = dict(arguments)
    if definition.accepts_signature and payload.get("signature") is None:
        payload["signature"] = ""
    if definition.payload_fields is not None:
        payload = {key: payload.get(key) for key in definition.payload_fields}
    return payload


def join_url(base_url: str, endpoint: str) -> str:
    return f"{base_url.rstrip('/')}{endpoint}"


def render_verdict(verdict: Verdict, tool_name: str, base_url: str) -> ToolResult:
    """Turn a Verdict into what the agent sees."""
    if isinstance(verdict, Success):
        return ToolResult.ok(json.dumps(verdict.data, indent=2, ensure_ascii=False, default=str))

    if isinstance(verdict, PaymentRequired):
        offer = verdict.offer
        return ToolResult.error(PAYMENT_TEMPLATE.format(
            amount=offer.amount if offer.amount is not None else "unknown",
            currency=offer.currency or DEFAULT_CURRENCY,
            recipient=offer.recipient if offer.recipient is not None else "unknown",
            memo=offer.memo or tool_name,
        ))

    if isinstance(verdict, BadRequest):
        return ToolResult.error(f"Bad Request: {verdict.message}")

    if isinstance(verdict, ApiError):
        return ToolResult.error(f"API Error ({verdict.status}): {verdict.message}")

    if isinstance(verdict, TransportFailure):
        return ToolResult.error(
            f"Network/Connection Error: {verdict.message}. "
            f"Please check if the AIFAIS API is reachable at {base_url}."
        )

    raise TypeError(f"Unknown verdict type: {type(verdict).__name__}")


class ToolRouter:
    """Resolves tool calls against the catalog and forwards them.

    Args:
        dispatcher: Sends the HTTP request (with retries).
        base_url: AIFAIS API base, e.g. "https://aifais.com/api/v1".
        logger: Injected logger; DEBUG level adds argument dumps.
        tools: Name → ToolDefinition mapping.  Defaults to the full catalog.
    """

    def __init__(
        self,
        dispatcher: RetryingDispatcher,
        base_url: str,
        logger: logging.Logger,
        tools: Optional[Mapping[str, ToolDefinition]] = None,
    ):
        self.dispatcher = dispatcher
        self.base_url = base_url
        self.logger = logger
        self.tools = tools if tools is not None else default_catalog.TOOLS

    def resolve(self, tool_name: str) -> ToolDefinition:
        try:
            return self.tools[tool_name]
        except KeyError:
            raise UnknownTool(tool_name) from None

    async def invoke(self, tool_name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Run one tool call.

        Raises:
            UnknownTool: ``tool_name`` is not in the catalog.
        """
        request = InvocationRequest(tool_name, dict(arguments or {}))
        definition = self.resolve(request.tool_name)

        self.logger.info(f"Tool call: {definition.name}")
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                "Arguments: %s",
                json.dumps(request.arguments, indent=2, ensure_ascii=False, default=str),
            )

        url = join_url(self.base_url, definition.endpoint)
        payload = build_payload(definition, request.arguments)

        try:
            outcome = await self.dispatcher.dispatch(url, payload)
        except DispatchError as e:
            self.logger.error(f"Connection error: {e}")
            return render_verdict(classify_failure(e), definition.name, self.base_url)

        self.logger.debug(f"API Response Status: {outcome.status_code}")
        verdict = classify(outcome)

        if isinstance(verdict, Success):
            self.logger.info("Operation successful")
        elif isinstance(verdict, PaymentRequired):
            self.logger.info("Payment required (402)")
        else:
            self.logger.error(f"API Error {outcome.status_code}: {outcome.body!r}")

        return render_verdict(verdict, definition.name, self.base_url)
