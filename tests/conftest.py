from __future__ import annotations

import json
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from simple_json_client.core.options import ResponseOptions, set_default_options  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_default_options() -> Iterator[None]:
    previous = set_default_options(ResponseOptions())
    yield
    set_default_options(previous)


@pytest.fixture(scope="session")
def fixture_dir() -> Path:
    return ROOT / "tests" / "fixtures"


@pytest.fixture(scope="session")
def fixture_loader(fixture_dir: Path):
    def _load(name: str) -> Any:
        path = fixture_dir / name
        return json.loads(path.read_text(encoding="utf-8"))

    return _load
