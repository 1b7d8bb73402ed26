# File: backend/tests/conftest.py
# Version: v0.2.0
"""
Test bootstrap: ensure project root is on sys.path so 'backend.*' imports work.

Also provides a few shared microRNA inputs.
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]  # repo root (../.. from this file)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

LET7A_RNA = "UGAGGUAGUAGGUUGUAUAGUU"
MIR21_RNA = "UAGCUUAUCAGACUGAUGUUGA"


@pytest.fixture
def let7a():
    from backend.app.core.primer.parameters import MicroRnaInput
    return MicroRnaInput(name="hsa-let-7a-5p", sequence=LET7A_RNA)


@pytest.fixture
def mir21():
    from backend.app.core.primer.parameters import MicroRnaInput
    return MicroRnaInput(name="hsa-miR-21-5p", sequence=MIR21_RNA)
