"""Pytest configuration and fixtures."""

import json

import pytest

from clean_json import JSONProcessor


@pytest.fixture
def processor():
    """A fresh processor with default options."""
    return JSONProcessor()


@pytest.fixture
def sample_document():
    """Nested document mixing every JSON type."""
    return {
        "users": [
            {"name": "Alice", "email": "alice@example.com", "age": 30, "active": True},
            {"name": "Bob", "email": "bob@example.com", "age": 25, "active": False}
        ],
        "settings": {
            "theme": "dark",
            "notifications": None,
            "limits": {"max_items": 100, "ratio": 0.75}
        },
        "tags": [],
        "meta": {}
    }


@pytest.fixture
def sample_json(sample_document):
    """Sample document as indented JSON text."""
    return json.dumps(sample_document, indent=2)


@pytest.fixture
def commented_json():
    """JSON text with line and block comments."""
    return (
        '{\n'
        '  // connection settings\n'
        '  "url": "http://example.com/api", /* primary endpoint */\n'
        '  "retries": 3\n'
        '}'
    )
