"""Pytest configuration for HighlightKit tests."""

import logging
from typing import List, Tuple

import pytest
from rich.style import Style

from highlightkit import config as config_module
from highlightkit.core import LIGHT_THEME, DARK_THEME, RuleRegistry, StyledText, compile_pattern


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.highlightkit and HIGHLIGHTKIT_MODE."""
    monkeypatch.setattr(config_module, "GLOBAL_CONFIG", tmp_path / "home" / ".highlightkit" / "config.yaml")
    monkeypatch.delenv(config_module.MODE_ENV_VAR, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers/levels the CLI installs on the package logger."""
    logger = logging.getLogger("highlightkit")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def fresh_pattern_cache():
    """Clear the compiled-pattern cache so warnings are logged again."""
    compile_pattern.cache_clear()
    yield
    compile_pattern.cache_clear()


@pytest.fixture
def light_theme():
    return LIGHT_THEME


@pytest.fixture
def dark_theme():
    return DARK_THEME


@pytest.fixture
def registry():
    return RuleRegistry.default()


def styled_fragments(styled: StyledText) -> List[Tuple[str, Style]]:
    """(substring, style) for every span that carries a style."""
    return [(styled.text[s.start:s.end], s.style) for s in styled.styled_spans()]


def assert_covers(styled: StyledText):
    """Spans are ordered, contiguous and cover the whole text."""
    position = 0
    for span in styled.spans:
        assert span.start == position
        assert span.end > span.start
        position = span.end
    assert position == len(styled.text)
