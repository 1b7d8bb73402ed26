# File: backend/tests/test_config_lamp.py
# Version: v0.1.0

"""
LAMP defaults loader: bundled file, missing file, partial overrides, bad content.
"""

import json

import pytest
from pydantic import ValidationError

from backend.app.config.config_lamp import DEFAULT_FILE, LampDefaults, load_lamp_defaults
from backend.app.core.primer.placeholders import PlaceholderPrimers


def test_bundled_defaults_match_builtins():
    assert DEFAULT_FILE.exists()
    assert load_lamp_defaults(DEFAULT_FILE) == LampDefaults()


def test_missing_file_gives_builtins(tmp_path):
    cfg = load_lamp_defaults(tmp_path / "nope.json")
    assert cfg.parameters.targetGC == 50
    assert cfg.placeholders == PlaceholderPrimers()


def test_partial_override(tmp_path):
    p = tmp_path / "lamp.json"
    p.write_text(
        json.dumps({"conditions": {"temperature": 63.0}, "placeholders": {"lb": "acgtacgtacgt"}}),
        encoding="utf-8",
    )
    cfg = load_lamp_defaults(p)
    assert cfg.conditions.temperature == 63.0
    assert cfg.conditions.naConc == 50.0
    assert cfg.placeholders.lb == "ACGTACGTACGT"
    assert cfg.placeholders.hairpins["FIP"] == "1 weak"


def test_invalid_content_raises(tmp_path):
    p = tmp_path / "lamp.json"
    p.write_text(json.dumps({"parameters": {"targetGC": -5}}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_lamp_defaults(p)
