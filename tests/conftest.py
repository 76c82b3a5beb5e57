from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import FIXTURES, CountingRenderer


@pytest.fixture
def fixtures() -> Path:
    return FIXTURES


@pytest.fixture
def renderer() -> CountingRenderer:
    return CountingRenderer()
