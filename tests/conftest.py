from __future__ import annotations

import pytest


@pytest.fixture
def scenario_words() -> list[str]:
    return ["crane", "trace", "slate", "shale", "plate"]
