# File: backend/app/core/export/json_exporter.py
# Version: v0.4.0

"""
Export a LAMP primer set to a clean JSON file.

The payload is the same shape the /design endpoint returns, so files written by
the CLI and API responses can be consumed interchangeably.
"""

import json
from pathlib import Path
from typing import Any, Dict

from backend.app.core.primer.models import PrimerSet
from backend.app.core.primer.schemas import PrimerSetResponse


def primer_set_to_dict(primer_set: PrimerSet) -> Dict[str, Any]:
    return PrimerSetResponse.from_primer_set(primer_set).model_dump(mode="json", exclude_none=True)


def export_primer_set_to_json(primer_set: PrimerSet, json_path: Path) -> None:
    json_path.write_text(json.dumps(primer_set_to_dict(primer_set), indent=2), encoding="utf-8")
