# =============================================================================
# core/catalog.py  —  The Tool Catalog (a lookup table, nothing more)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares every AIFAIS endpoint we expose as an MCP tool: its name, the
#   description the agent reads, the remote endpoint path, and its input
#   fields.
#
#   There are no per-tool classes or functions.  Every tool goes through the
#   same generic path in core/router.py; the catalog is just data.
#
# PAID vs FREE TOOLS:
#   Paid tools declare an optional "signature" field.  The first call comes
#   back as HTTP 402 with a payment offer; once the agent (or its human) has
#   paid, it calls the same tool again with the Solana transaction signature.
#   Free tools have no signature field and never see a 402.
# =============================================================================

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from core.errors import UnknownTool
from core.models import FieldSpec, ToolDefinition


def _signature(description: str = "Solana transaction signature") -> FieldSpec:
    return FieldSpec("signature", "string", description=description)


_LINE_ITEM = {
    "type": "object",
    "properties": {
        "description": {"type": "string"},
        "quantity": {"type": "number"},
        "price": {"type": "number"},
    },
}

_INVOICE_LINE_ITEM = {
    "type": "object",
    "properties": {
        "description": {"type": "string"},
        "quantity": {"type": "number"},
        "price": {"type": "number"},
        "vatRate": {"type": "number"},
    },
}


_DEFINITIONS: tuple[ToolDefinition, ...] = (
    # -------------------------------------------------------------------------
    # Finance
    # -------------------------------------------------------------------------
    ToolDefinition(
        name="scan_invoice",
        description=(
            "Scans an invoice (PDF/JPG/PNG) and extracts structured data. "
            "Requires payment (X402)."
        ),
        endpoint="/finance/scan",
        fields=(
            FieldSpec("invoiceBase64", "string", required=True,
                      description="Base64 encoded string of the invoice file"),
            FieldSpec("mimeType", "string", required=True,
                      enum=("image/png", "image/jpeg", "application/pdf"),
                      description="The MIME type of the file"),
            _signature("Solana transaction signature (payment proof)"),
        ),
        # The scan endpoint only accepts this exact body shape.
        payload_fields=("invoiceBase64", "mimeType", "signature"),
    ),
    ToolDefinition(
        name="generate_quote",
        description="Generates a professional PDF quote. Free tool.",
        endpoint="/finance/generate-quote",
        fields=(
            FieldSpec("companyName", "string", required=True),
            FieldSpec("clientName", "string", required=True),
            FieldSpec("projectTitle", "string", required=True),
            FieldSpec("items", "array", required=True, items=_LINE_ITEM),
            FieldSpec("validUntil", "number"),
        ),
    ),
    ToolDefinition(
        name="create_invoice",
        description="Generates a professional PDF invoice. Free tool.",
        endpoint="/finance/create-invoice",
        fields=(
            FieldSpec("ownName", "string", required=True),
            FieldSpec("ownAddress", "string"),
            FieldSpec("clientName", "string", required=True),
            FieldSpec("clientAddress", "string"),
            FieldSpec("invoiceNumber", "string"),
            FieldSpec("invoiceDate", "string"),
            FieldSpec("expiryDate", "string"),
            FieldSpec("items", "array", required=True, items=_INVOICE_LINE_ITEM),
        ),
    ),
    ToolDefinition(
        name="price_calculator",
        description=(
            "Calculates optimal product pricing based on costs, margins, and "
            "market analysis with AI-powered insights. Free tool."
        ),
        endpoint="/finance/price-calculator",
        fields=(
            FieldSpec("productName", "string", required=True,
                      description="Name of the product"),
            FieldSpec("costPrice", "number", required=True,
                      description="Cost price per unit"),
            FieldSpec("targetMargin", "number",
                      description="Target profit margin percentage (0-100)"),
            FieldSpec("competitorPrices", "array", items={"type": "number"},
                      description="Array of competitor prices for analysis"),
            FieldSpec("marketPosition", "string",
                      enum=("budget", "mid-range", "premium"),
                      description="Market positioning strategy"),
            FieldSpec("includeVAT", "boolean",
                      description="Include VAT in calculations"),
            FieldSpec("vatRate", "number",
                      description="VAT percentage (default 21%)"),
            FieldSpec("quantity", "number",
                      description="Quantity for bulk calculations"),
            FieldSpec("additionalCosts", "object",
                      properties={
                          "shipping": {"type": "number"},
                          "packaging": {"type": "number"},
                          "marketing": {"type": "number"},
                          "overhead": {"type": "number"},
                      },
                      description="Additional costs per unit"),
        ),
    ),
    ToolDefinition(
        name="btw_calculator",
        description=(
            "Calculates Dutch VAT (BTW) amounts. Supports adding VAT to net "
            "amounts or extracting VAT from gross amounts. Free tool."
        ),
        endpoint="/finance/btw-calculator",
        fields=(
            FieldSpec("amount", "number", required=True,
                      description="The amount to calculate VAT for"),
            FieldSpec("vatRate", "string", enum=("9", "21"),
                      description="VAT rate: 9% (low) or 21% (standard)"),
            FieldSpec("calculationType", "string", enum=("addVat", "removeVat"),
                      description="addVat: net→gross, removeVat: gross→net"),
            FieldSpec("amounts", "array", items={"type": "number"},
                      description="Optional: batch calculate multiple amounts"),
        ),
    ),
    # -------------------------------------------------------------------------
    # Legal
    # -------------------------------------------------------------------------
    ToolDefinition(
        name="check_contract",
        description=(
            "Analyzes a legal contract for risks and missing clauses. "
            "Requires payment (0.01 SOL)."
        ),
        endpoint="/legal/check-contract",
        fields=(
            FieldSpec("contractBase64", "string", required=True,
                      description="Base64 encoded PDF contract"),
            _signature("Solana transaction signature (payment proof)"),
        ),
    ),
    ToolDefinition(
        name="generate_terms",
        description=(
            "Generates custom Terms & Conditions for a company. "
            "Requires payment (0.005 SOL)."
        ),
        endpoint="/legal/generate-terms",
        fields=(
            FieldSpec("companyName", "string", required=True),
            FieldSpec("companyType", "string", required=True,
                      description="e.g. BV, Eenmanszaak"),
            FieldSpec("industry", "string"),
            FieldSpec("hasPhysicalProducts", "boolean"),
            FieldSpec("hasDigitalProducts", "boolean"),
            FieldSpec("hasServices", "boolean"),
            FieldSpec("acceptsReturns", "boolean"),
            FieldSpec("returnDays", "number"),
            FieldSpec("paymentTerms", "number", required=True,
                      description="Days to pay invoice"),
            FieldSpec("jurisdiction", "string", required=True,
                      description="e.g. Amsterdam, Nederland"),
            _signature(),
        ),
    ),
    # -------------------------------------------------------------------------
    # HR
    # -------------------------------------------------------------------------
    ToolDefinition(
        name="cv_screener",
        description=(
            "Analyzes and scores a CV against a job description. "
            "Requires payment (0.001 SOL)."
        ),
        endpoint="/hr/cv-screener",
        fields=(
            FieldSpec("cvBase64", "string", required=True,
                      description="Base64 encoded CV file"),
            FieldSpec("mimeType", "string", required=True,
                      description="MIME type of the file"),
            FieldSpec("jobDescription", "string", required=True),
            _signature(),
        ),
    ),
    ToolDefinition(
        name="interview_questions",
        description=(
            "Generates personalized interview questions. "
            "Requires payment (0.001 SOL)."
        ),
        endpoint="/hr/interview-questions",
        fields=(
            FieldSpec("jobTitle", "string", required=True),
            FieldSpec("jobDescription", "string", required=True),
            FieldSpec("experienceLevel", "string", required=True,
                      enum=("junior", "medior", "senior")),
            FieldSpec("questionCount", "number"),
            _signature(),
        ),
    ),
    ToolDefinition(
        name="salary_calculator",
        description=(
            "Calculates Dutch net salary from gross salary with official "
            "2024/2025 tax rates. Includes arbeidskorting, algemene "
            "heffingskorting, 30% ruling, company car taxation, and more. "
            "Free tool."
        ),
        endpoint="/hr/salary-calculator",
        fields=(
            FieldSpec("grossSalary", "number", required=True,
                      description="Gross salary amount"),
            FieldSpec("period", "string", enum=("monthly", "yearly"),
                      description="Salary period (default: monthly)"),
            FieldSpec("taxYear", "string", enum=("2024", "2025"),
                      description="Tax year for calculations (default: 2025)"),
            FieldSpec("partTimePercentage", "number",
                      description="Part-time percentage 1-100 (default: 100)"),
            FieldSpec("holidayAllowanceIncluded", "boolean",
                      description="Whether holiday allowance (8%) is included in gross salary"),
            FieldSpec("thirteenthMonth", "boolean",
                      description="Whether 13th month is included in gross salary"),
            FieldSpec("pensionContributionEmployee", "number",
                      description="Employee pension contribution percentage (0-30)"),
            FieldSpec("pensionContributionEmployer", "number",
                      description="Employer pension contribution percentage (0-30)"),
            FieldSpec("ruling30Percent", "boolean",
                      description="Apply 30% ruling for expats"),
            FieldSpec("under30WithMasters", "boolean",
                      description="Under 30 with masters degree (affects 30% ruling threshold)"),
            FieldSpec("companyCar", "object",
                      properties={
                          "catalogValue": {"type": "number",
                                           "description": "Catalog value of the car"},
                          "isElectric": {"type": "boolean",
                                         "description": "Is the car electric"},
                          "isHydrogen": {"type": "boolean",
                                         "description": "Is the car hydrogen powered"},
                      },
                      description="Company car details for bijtelling calculation"),
            FieldSpec("commuteDistance", "number",
                      description="One-way commute distance in km for travel allowance"),
            FieldSpec("calculationMode", "string",
                      enum=("gross-to-net", "net-to-gross"),
                      description="Calculation direction (default: gross-to-net)"),
        ),
    ),
    # -------------------------------------------------------------------------
    # Marketing & Sales
    # -------------------------------------------------------------------------
    ToolDefinition(
        name="social_planner",
        description="Generates social media content plan. Requires payment (0.001 SOL).",
        endpoint="/marketing/social-planner",
        fields=(
            FieldSpec("topic", "string", required=True),
            FieldSpec("platforms", "array", required=True,
                      items={"type": "string",
                             "enum": ["linkedin", "instagram", "facebook",
                                      "twitter", "tiktok"]}),
            FieldSpec("postCount", "number"),
            FieldSpec("tone", "string"),
            FieldSpec("includeHashtags", "boolean"),
            _signature(),
        ),
    ),
    ToolDefinition(
        name="lead_scorer",
        description="Scores and prioritizes leads. Requires payment (0.001 SOL).",
        endpoint="/sales/lead-scorer",
        fields=(
            FieldSpec("companyName", "string", required=True),
            FieldSpec("industry", "string", required=True),
            FieldSpec("companySize", "string", required=True),
            FieldSpec("budget", "string"),
            FieldSpec("engagement", "object",
                      properties={
                          "websiteVisits": {"type": "number"},
                          "emailOpens": {"type": "number"},
                          "demoRequested": {"type": "boolean"},
                          "downloadedContent": {"type": "boolean"},
                      }),
            FieldSpec("notes", "string"),
            _signature(),
        ),
    ),
    ToolDefinition(
        name="pitch_deck",
        description="Generates a pitch deck structure. Requires payment (0.001 SOL).",
        endpoint="/sales/pitch-deck",
        fields=(
            FieldSpec("companyName", "string", required=True),
            FieldSpec("productService", "string", required=True),
            FieldSpec("targetAudience", "string", required=True),
            FieldSpec("problemSolution", "string", required=True),
            FieldSpec("uniqueValue", "string", required=True),
            FieldSpec("askAmount", "string"),
            FieldSpec("slideCount", "number"),
            _signature(),
        ),
    ),
)


TOOLS: Mapping[str, ToolDefinition] = MappingProxyType(
    {definition.name: definition for definition in _DEFINITIONS}
)


def get_tool(name: str) -> ToolDefinition:
    """Look up a tool by name.  Raises UnknownTool if it isn't registered."""
    try:
        return TOOLS[name]
    except KeyError:
        raise UnknownTool(name) from None


def list_tools(enabled: Optional[Iterable[str]] = None) -> list[ToolDefinition]:
    """Return catalog entries in declaration order.

    Args:
        enabled: Optional subset of tool names.  Unknown names raise
                 UnknownTool.  None means every tool.
    """
    if enabled is None:
        return list(TOOLS.values())
    wanted = {get_tool(name).name for name in enabled}
    return [definition for definition in TOOLS.values() if definition.name in wanted]
