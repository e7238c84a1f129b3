"""
Tests for index module rendering.
"""

from app_convert.convert.index import (
    build_index_context,
    render_index,
    step_module_path,
    step_variable_name,
)


def test_step_variable_name():
    """Test variable names combine camel-cased key and category."""
    assert step_variable_name("new_contact", "trigger") == "newContactTrigger"
    assert step_variable_name("FindContact", "search") == "findContactSearch"
    assert step_variable_name("create-contact", "write") == "createContactWrite"


def test_step_module_path():
    """Test module paths use the category directory and snake-cased key."""
    assert step_module_path("NewContact", "trigger") == "triggers/new_contact"
    assert step_module_path("create_contact", "write") == "writes/create_contact"


def test_requires_follow_definition_order(simple_app):
    """Test require lines run triggers, searches, writes in insertion order."""
    context = build_index_context(simple_app)

    assert context["requires"].splitlines() == [
        "const newContactTrigger = require('./triggers/new_contact');",
        "const newDealTrigger = require('./triggers/new_deal');",
        "const findContactSearch = require('./searches/find_contact');",
        "const createContactWrite = require('./writes/create_contact');",
    ]


def test_sections(simple_app):
    """Test each category gets its own mapping section."""
    context = build_index_context(simple_app)

    assert context["triggers"] == (
        "[newContactTrigger.key]: newContactTrigger,\n[newDealTrigger.key]: newDealTrigger,"
    )
    assert context["searches"] == "[findContactSearch.key]: findContactSearch,"
    assert context["writes"] == "[createContactWrite.key]: createContactWrite,"


def test_reordering_input_reorders_output(simple_app):
    """Test the order is taken from the definition, not sorted."""
    simple_app["triggers"] = dict(reversed(list(simple_app["triggers"].items())))

    context = build_index_context(simple_app)

    assert context["triggers"].splitlines() == [
        "[newDealTrigger.key]: newDealTrigger,",
        "[newContactTrigger.key]: newContactTrigger,",
    ]
    assert context["requires"].splitlines()[0] == (
        "const newDealTrigger = require('./triggers/new_deal');"
    )


def test_empty_categories():
    """Test an app without steps still renders every section."""
    context = build_index_context({"general": {"title": "Empty"}})

    assert context == {"triggers": "", "searches": "", "writes": "", "requires": ""}


def test_render_index(simple_app, loader):
    """Test the rendered index requires and registers every step."""
    result = render_index(simple_app, loader)

    assert result.startswith("const newContactTrigger = require('./triggers/new_contact');\n")
    assert "  triggers: {\n[newContactTrigger.key]: newContactTrigger," in result
    assert "  searches: {\n[findContactSearch.key]: findContactSearch,\n  }," in result
    assert "  creates: {\n[createContactWrite.key]: createContactWrite,\n  }" in result
    assert result.endswith("module.exports = App;\n")
