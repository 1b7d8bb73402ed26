# File: backend/app/config/config_lamp.py
# Version: v0.1.0
"""
LAMP defaults loader (read-only).

- Reads from: backend/app/config/lamp_defaults.json (or Settings.LAMP_DEFAULTS_PATH)
- Validates with Pydantic models from core/primer (parameters.py, placeholders.py)
- A missing file yields the built-in defaults; malformed content raises
  pydantic.ValidationError (or json.JSONDecodeError).

Expected JSON (every section optional):

  {
    "parameters": { "targetGC": 50, "targetTm": 60, "lengthAdjustment": 0 },
    "conditions": { "naConc": 50, "mgConc": 8, "primerConc": 0.25, "dntpConc": 0.8, "temperature": 65 },
    "options": { "generateLoop": true, "optimizeSpecificity": true, "checkHairpins": true, "calculateDG": true },
    "placeholders": { "lf": "...", "lb": "...", "f1c": "...", "b1c": "...", "bip": "...", "b2": "...",
                      "hairpins": { "FIP": "1 weak" } }
  }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from backend.app.core.config import settings
from backend.app.core.primer.parameters import DesignOptions, DesignParameters, ReactionConditions
from backend.app.core.primer.placeholders import PlaceholderPrimers

_THIS_DIR = Path(__file__).resolve().parent
DEFAULT_FILE = _THIS_DIR / "lamp_defaults.json"


class LampDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    parameters: DesignParameters = Field(default_factory=DesignParameters)
    conditions: ReactionConditions = Field(default_factory=ReactionConditions)
    options: DesignOptions = Field(default_factory=DesignOptions)
    placeholders: PlaceholderPrimers = Field(default_factory=PlaceholderPrimers)


def _read_json(path: Path) -> dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def defaults_path() -> Path:
    return Path(settings.LAMP_DEFAULTS_PATH) if settings.LAMP_DEFAULTS_PATH else DEFAULT_FILE


def load_lamp_defaults(path: Optional[Union[str, Path]] = None) -> LampDefaults:
    """Load and validate LAMP defaults; `path` overrides the configured location."""
    payload = _read_json(Path(path) if path else defaults_path())
    return LampDefaults.model_validate(payload or {})
