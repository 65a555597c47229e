"""Pytest configuration and fixtures for manifest-validator tests."""

import json
import logging
import textwrap

import pytest


@pytest.fixture()
def write_file(tmp_path):
    """Write a file under tmp_path; dicts/lists are dumped as JSON."""

    def _write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, (dict, list)):
            content = json.dumps(content, indent=2)
        else:
            content = textwrap.dedent(content)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def version_schema(write_file):
    """Schema requiring a string ``version``."""
    return write_file(
        "schema.json",
        {
            "$schema": "http://json-schema.org/draft-07/schema#",
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "version": {"type": "string"},
            },
            "required": ["version"],
        },
    )


@pytest.fixture()
def boolean_schema(write_file):
    return write_file("bool.schema.json", {"properties": {"enabled": {"type": "boolean"}}})


@pytest.fixture()
def any_of_schema(write_file):
    """``license`` must be an SPDX-like string or an object with an identifier."""
    return write_file(
        "license.schema.json",
        {
            "type": "object",
            "properties": {
                "license": {
                    "anyOf": [
                        {"type": "string", "pattern": "^[A-Za-z0-9.-]+$"},
                        {"type": "object", "required": ["identifier"]},
                    ]
                }
            },
        },
    )


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo the handlers the CLI installs on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level

    yield

    root.handlers[:] = handlers
    root.setLevel(level)
