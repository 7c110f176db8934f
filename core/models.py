# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of everything that flows through a tool
# call, in the order it flows:
#
#   ToolDefinition  →  InvocationRequest  →  DispatchOutcome  →  Verdict
#                                                                  ↓
#                                                              ToolResult
#
# All of them are frozen.  ToolDefinitions live for the whole process; the
# rest are created and thrown away inside a single call.
# =============================================================================

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# FieldSpec / ToolDefinition — the static catalog entries
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FieldSpec:
    """One input field of a tool.

    ``items`` and ``properties`` are raw JSON-schema fragments for array and
    object fields; they are passed through to the schema as-is.
    """

    name: str
    type: str
    description: Optional[str] = None
    enum: Optional[tuple[str, ...]] = None
    required: bool = False
    items: Optional[dict[str, Any]] = None
    properties: Optional[dict[str, Any]] = None

    def to_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type}
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.items is not None:
            schema["items"] = self.items
        if self.properties is not None:
            schema["properties"] = self.properties
        if self.description is not None:
            schema["description"] = self.description
        return schema


@dataclass(frozen=True)
class ToolDefinition:
    """A remote AIFAIS endpoint exposed as an MCP tool.

    ``payload_fields`` pins the outbound JSON body to a fixed set of keys
    (used by scan_invoice).  When it is None the arguments are forwarded
    as-is.
    """

    name: str
    description: str
    endpoint: str
    fields: tuple[FieldSpec, ...] = ()
    payload_fields: Optional[tuple[str, ...]] = None

    @property
    def required_fields(self) -> list[str]:
        return [f.name for f in self.fields if f.required]

    @property
    def accepts_signature(self) -> bool:
        return any(f.name == "signature" for f in self.fields)

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON Schema object advertised over MCP."""
        return {
            "type": "object",
            "properties": {f.name: f.to_schema() for f in self.fields},
            "required": self.required_fields,
        }


# -----------------------------------------------------------------------------
# Per-call values
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class InvocationRequest:
    tool_name: str
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DispatchOutcome:
    """A completed HTTP exchange.

    ``body`` is the decoded JSON when the response was JSON, otherwise the
    raw response text.
    """

    status_code: int
    body: Any = None


@dataclass(frozen=True)
class PaymentOffer:
    """What the API wants to be paid before it will run the tool."""

    amount: Union[Decimal, str, None]
    currency: str = "SOL"
    recipient: Optional[str] = None
    memo: Optional[str] = None


# -----------------------------------------------------------------------------
# Verdicts — the classifier's output
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Success:
    data: Any


@dataclass(frozen=True)
class PaymentRequired:
    offer: PaymentOffer


@dataclass(frozen=True)
class BadRequest:
    message: str


@dataclass(frozen=True)
class ApiError:
    status: int
    message: str


@dataclass(frozen=True)
class TransportFailure:
    message: str


Verdict = Union[Success, PaymentRequired, BadRequest, ApiError, TransportFailure]


# -----------------------------------------------------------------------------
# ToolResult — the only thing handed back to the agent
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextBlock:
    text: str
    type: str = "text"


@dataclass(frozen=True)
class ToolResult:
    content: tuple[TextBlock, ...]
    is_error: bool = False

    @property
    def success(self) -> bool:
        return not self.is_error

    @property
    def text(self) -> str:
        """All text blocks joined; a failure result has exactly one."""
        return "\n".join(block.text for block in self.content)

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(content=(TextBlock(text),), is_error=False)

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(content=(TextBlock(text),), is_error=True)
