"""Tests for the tool schema export script."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from export_tool_schemas import build_manifest, main  # noqa: E402


def test_manifest_covers_every_tool():
    names = [entry["name"] for entry in build_manifest()]
    assert "comparePlans" in names
    assert len(names) == len(set(names))


def test_manifest_restricted_to_named_tools():
    manifest = build_manifest(["calculateSavings"])
    assert [m["name"] for m in manifest] == ["calculateSavings"]


def test_unknown_tool_exits():
    with pytest.raises(SystemExit):
        build_manifest(["nope"])


def test_writes_output_file(tmp_path, monkeypatch):
    out = tmp_path / "tools.json"
    monkeypatch.setattr(sys, "argv", ["export_tool_schemas.py", "--output", str(out), "--tool", "comparePlans"])
    main()
    assert json.loads(out.read_text())[0]["name"] == "comparePlans"
