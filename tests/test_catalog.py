"""
Tests for the static tool catalog (core/catalog.py).
"""

import pytest

from core.catalog import TOOLS, get_tool, list_tools
from core.errors import UnknownTool

PAID_TOOLS = {
    "scan_invoice", "check_contract", "generate_terms", "cv_screener",
    "interview_questions", "social_planner", "lead_scorer", "pitch_deck",
}
FREE_TOOLS = {
    "generate_quote", "create_invoice", "price_calculator",
    "btw_calculator", "salary_calculator",
}


class TestCatalogContents:
    def test_all_tools_registered(self):
        assert set(TOOLS) == PAID_TOOLS | FREE_TOOLS

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            TOOLS["new_tool"] = TOOLS["scan_invoice"]

    @pytest.mark.parametrize("name", sorted(PAID_TOOLS | FREE_TOOLS))
    def test_definition_is_well_formed(self, name):
        definition = TOOLS[name]
        schema = definition.input_schema

        assert definition.name == name
        assert definition.description
        assert definition.endpoint.startswith("/")
        assert schema["type"] == "object"
        assert set(schema["required"]) <= set(schema["properties"])

    @pytest.mark.parametrize("name", sorted(PAID_TOOLS))
    def test_paid_tools_accept_signature(self, name):
        definition = TOOLS[name]
        assert definition.accepts_signature
        assert "signature" not in definition.required_fields

    @pytest.mark.parametrize("name", sorted(FREE_TOOLS))
    def test_free_tools_have_no_signature(self, name):
        assert not TOOLS[name].accepts_signature


class TestSchemas:
    def test_scan_invoice_schema(self):
        schema = get_tool("scan_invoice").input_schema

        assert schema["required"] == ["invoiceBase64", "mimeType"]
        assert schema["properties"]["mimeType"] == {
            "type": "string",
            "enum": ["image/png", "image/jpeg", "application/pdf"],
            "description": "The MIME type of the file",
        }

    def test_nested_array_items(self):
        items = get_tool("create_invoice").input_schema["properties"]["items"]

        assert items["type"] == "array"
        assert "vatRate" in items["items"]["properties"]

    def test_nested_object_properties(self):
        car = get_tool("salary_calculator").input_schema["properties"]["companyCar"]

        assert car["type"] == "object"
        assert set(car["properties"]) == {"catalogValue", "isElectric", "isHydrogen"}

    def test_only_scan_invoice_has_fixed_payload(self):
        fixed = [d.name for d in TOOLS.values() if d.payload_fields is not None]
        assert fixed == ["scan_invoice"]


class TestLookup:
    def test_get_tool(self):
        assert get_tool("btw_calculator").endpoint == "/finance/btw-calculator"

    def test_get_unknown_tool(self):
        with pytest.raises(UnknownTool, match="Tool not found: nope"):
            get_tool("nope")

    def test_unknown_tool_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            get_tool("nope")

    def test_list_all(self):
        assert [d.name for d in list_tools()] == list(TOOLS)

    def test_list_subset_keeps_catalog_order(self):
        names = [d.name for d in list_tools(["pitch_deck", "scan_invoice"])]
        assert names == ["scan_invoice", "pitch_deck"]

    def test_list_subset_with_unknown_name(self):
        with pytest.raises(UnknownTool):
            list_tools(["scan_invoice", "bogus"])
