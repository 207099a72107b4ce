"""Tests for the top-level passgen package."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest


def test_core_import_does_not_load_qiskit():
    code = (
        "import sys, passgen; "
        "from passgen.keyspace import build_keyspace; "
        "passgen.PasswordGenerator().password; "
        "print('qiskit' in sys.modules, 'qiskit_aer' in sys.modules)"
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        check=True,
        cwd=Path(__file__).resolve().parents[1],
    )

    assert result.stdout.split() == ["False", "False"]


def test_unknown_attribute_raises():
    import passgen

    with pytest.raises(AttributeError):
        passgen.NoSuchThing
