"""Shared test fixtures for vscode_theme_generator."""

from pathlib import Path

import pytest
from loguru import logger

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample theme files."""
    return FIXTURES_DIR


@pytest.fixture
def dark_theme_path() -> Path:
    return FIXTURES_DIR / "midnight-harbor.txt"


@pytest.fixture
def light_theme_path() -> Path:
    return FIXTURES_DIR / "paper_light.txt"


@pytest.fixture
def broken_theme_path() -> Path:
    return FIXTURES_DIR / "broken.txt"


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test.

    Returns:
        List of loguru record dicts, filled as the test logs.
    """
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def dark_palette():
    """ExtendedPalette built from the defaults."""
    from vscode_theme_generator.palette import extend_palette, map_roles

    return extend_palette(map_roles())


@pytest.fixture
def light_palette():
    from vscode_theme_generator.palette import extend_palette, map_roles, parse_theme_text

    parsed = parse_theme_text("background = #fafafa\nforeground = #383a42\n")
    return extend_palette(map_roles(parsed.colors, parsed.meta))
