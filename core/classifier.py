# =============================================================================
# core/classifier.py  —  Response Classifier
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a finished HTTP exchange into a Verdict:
#
#     200  → Success(data)            data = body["data"] or the whole body
#     402  → PaymentRequired(offer)   offer from details / x402_offer / body
#     400  → BadRequest(message)
#     ...  → ApiError(status, message)
#
#   and a dispatcher fault into TransportFailure(message).
#
# BODY SHAPES ARE NOT FIXED:
#   The AIFAIS API does not use one error/offer shape across all endpoints.
#   Some put the offer under "details", older ones under "x402_offer", and
#   some return the offer fields at the top level.  Every read below goes
#   through first_present() with an explicit fallback.
#
# Everything here is a pure function of its input.
# =============================================================================

import json
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Union

from core.models import (
    ApiError,
    BadRequest,
    DispatchOutcome,
    PaymentOffer,
    PaymentRequired,
    Success,
    TransportFailure,
    Verdict,
)

DEFAULT_CURRENCY = "SOL"
GENERIC_BAD_REQUEST = "The API rejected the request. Check the tool arguments and try again."

_MISSING = object()


def first_present(source: Any, *keys: str, default: Any = None) -> Any:
    """Return the value of the first key that is present in ``source``.

    A key counts as present when it exists and its value is neither None nor
    an empty string.  Non-mapping sources have no keys, so the default is
    returned.

    >>> first_present({"address": "", "recipient": "XYZ"}, "address", "recipient")
    'XYZ'
    """
    if not isinstance(source, Mapping):
        return default
    for key in keys:
        value = source.get(key, _MISSING)
        if value is _MISSING or value is None or value == "":
            continue
        return value
    return default


def _to_amount(value: Any) -> Union[Decimal, str, None]:
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float, str)):
        try:
            return Decimal(str(value))
        except InvalidOperation:
            return str(value)
    return str(value)


def extract_offer(body: Any) -> PaymentOffer:
    """Build a PaymentOffer from a 402 body.

    The offer source is the first present of ``details`` and ``x402_offer``,
    falling back to the body itself.  The memo is left empty when absent;
    the router substitutes the tool name.
    """
    source = first_present(body, "details", "x402_offer", default=body)
    memo = first_present(source, "memo")
    return PaymentOffer(
        amount=_to_amount(first_present(source, "amount")),
        currency=str(first_present(source, "currency", default=DEFAULT_CURRENCY)),
        recipient=first_present(source, "address", "recipient"),
        memo=str(memo) if memo is not None else None,
    )


def _serialize(body: Any) -> str:
    if isinstance(body, str):
        return body
    try:
        return json.dumps(body, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(body)


def classify(outcome: DispatchOutcome) -> Verdict:
    """Map a completed HTTP exchange to a Verdict."""
    status = outcome.status_code
    body = outcome.body

    if status == 200:
        return Success(data=first_present(body, "data", default=body))

    if status == 402:
        return PaymentRequired(offer=extract_offer(body))

    if status == 400:
        return BadRequest(message=str(first_present(body, "error", default=GENERIC_BAD_REQUEST)))

    error = first_present(body, "error")
    message = str(error) if error is not None else _serialize(body)
    return ApiError(status=status, message=message)


def classify_failure(error: BaseException) -> TransportFailure:
    """Map a dispatcher fault to a TransportFailure verdict."""
    return TransportFailure(message=str(error) or type(error).__name__)
