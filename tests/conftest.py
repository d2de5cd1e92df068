import io

import pytest

from colorize.formatter import Colorizer
from colorize.theme.engine import ThemeRegistry


@pytest.fixture
def registry(tmp_path):
    """Registry isolated from the process-wide one."""
    return ThemeRegistry(theme_dir=tmp_path / "themes")


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def out(registry, sink):
    return Colorizer(registry=registry, stream=sink)