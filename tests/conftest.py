"""
Pytest configuration and shared fixtures.
"""

import json
import shutil
from pathlib import Path

import pytest

from app_convert.util.templates import DEFAULT_TEMPLATE_DIR, TemplateLoader


@pytest.fixture
def fixtures_dir():
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def simple_app_file(fixtures_dir):
    """Return path to the JSON legacy definition fixture."""
    return fixtures_dir / "legacy" / "simple_app.json"


@pytest.fixture
def simple_app_yaml_file(fixtures_dir):
    """Return path to the YAML legacy definition fixture."""
    return fixtures_dir / "legacy" / "simple_app.yaml"


@pytest.fixture
def simple_app(simple_app_file):
    """Return the JSON legacy definition fixture as a raw mapping."""
    return json.loads(simple_app_file.read_text())


@pytest.fixture
def minimal_app():
    """One trigger, one search and one action."""
    return {
        "general": {"title": "Minimal App", "description": "Just enough."},
        "triggers": {
            "new_item": {
                "fields": {
                    "folder": {"type": "unicode", "label": "Folder", "help_text": "Folder to watch."}
                }
            }
        },
        "searches": {
            "find_item": {"fields": {"name": {"label": "Name", "required": True}}},
        },
        "actions": {
            "create_item": {
                "fields": {"body": {"type": "textarea", "label": "Body", "placeholder": "Hi"}}
            },
        },
    }


@pytest.fixture
def template_copy(tmp_path):
    """Copy the bundled templates to a temporary directory that tests may modify."""
    template_dir = tmp_path / "templates"
    shutil.copytree(DEFAULT_TEMPLATE_DIR, template_dir)
    return template_dir


@pytest.fixture
def loader():
    """Template loader over the bundled templates."""
    return TemplateLoader()
