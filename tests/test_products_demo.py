from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scripts.products_demo import CheckFailed, run  # noqa: E402


def test_walkthrough_passes_on_fresh_file(tmp_path, capsys):
    target = tmp_path / "prueba.json"

    run(str(target))

    out = capsys.readouterr().out
    assert "8. Second remove failed as expected" in out
    assert json.loads(target.read_text(encoding="utf-8")) == []


def test_walkthrough_fails_on_populated_file(tmp_path):
    target = tmp_path / "prueba.json"
    target.write_text(json.dumps([{"id": 1, "code": "zzz"}]), encoding="utf-8")

    with pytest.raises(CheckFailed):
        run(str(target))
