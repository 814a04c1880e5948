"""
Shared pytest fixtures: sample routes and a writer for manifest files.
"""

import json

import pytest

from openverb import Route


@pytest.fixture
def test_routes():
    """Routes used across registry and handler tests"""
    return [
        Route(
            id="dashboard",
            title="Dashboard",
            path="/dashboard",
            tags=["home", "overview"],
            requires_auth=True,
        ),
        Route(
            id="accounting",
            title="Accounting",
            path="/accounting",
            tags=["billing", "invoices", "payments"],
            requires_auth=True,
        ),
        Route(
            id="help",
            title="Help Center",
            path="/help",
            tags=["support", "faq"],
            requires_auth=False,
        ),
    ]


def _make_verb(verb_id, **overrides):
    verb = {
        "id": verb_id,
        "version": "1.0.0",
        "summary": f"Summary for {verb_id}",
        "input": {"type": "object", "properties": {}},
        "output": {"type": "object", "properties": {}},
    }
    verb.update(overrides)
    return verb


@pytest.fixture
def make_verb():
    """Factory for well-formed verb definition dicts, with field overrides"""
    return _make_verb


@pytest.fixture
def write_manifest(tmp_path):
    """Write a manifest (dict or raw text) into tmp_path/<name>"""

    def _write(name, manifest):
        path = tmp_path / name
        if isinstance(manifest, str):
            path.write_text(manifest, encoding="utf-8")
        else:
            path.write_text(json.dumps(manifest), encoding="utf-8")
        return path

    return _write
