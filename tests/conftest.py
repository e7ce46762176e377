from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from mysqlbuilder.config import reset_global_config

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture(autouse=True)
def _fresh_global_config() -> Iterator[None]:
    """Every test starts and ends with the default global configuration."""
    reset_global_config()
    yield
    reset_global_config()
