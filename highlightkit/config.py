"""
Configuration for HighlightKit
===============================
YAML configuration with global (~/.highlightkit/config.yaml) and workspace
(.highlightkit/config.yaml) files. Workspace keys override global ones.

Example config.yaml:

    default_language: python
    display_mode: dark
    theme: solarized
    themes:
      solarized:
        keyword: "#859900"
        string: "#2aa198"
        comment: "#93a1a1"
        number: "#d33682"
        plain: "#657b83"
    rule_files:
      - rules/extra.yaml
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .core.registry import RuleRegistry, get_default_registry, load_rule_tables
from .core.theme import DisplayMode, Theme, theme_for
from .core.tokens import Language, normalize_language

# Configure module logger
logger = logging.getLogger(__name__)


CONFIG_DIR_NAME = ".highlightkit"
CONFIG_FILE_NAME = "config.yaml"
GLOBAL_CONFIG = Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME

# Environment override for the display mode
MODE_ENV_VAR = "HIGHLIGHTKIT_MODE"


@dataclass
class HighlightConfig:
    """Effective configuration"""
    default_language: Language = Language.PLAINTEXT
    display_mode: DisplayMode = DisplayMode.LIGHT
    theme: Optional[str] = None
    themes: Dict[str, Theme] = field(default_factory=dict)
    rule_files: List[Path] = field(default_factory=list)
    log_file: bool = False
    sources: List[Path] = field(default_factory=list)

    def resolve_theme(self, mode: Optional[DisplayMode] = None) -> Theme:
        """
        Pick the theme to highlight with.

        An explicit mode selects the matching built-in theme. Otherwise the
        configured custom theme wins, then the configured display mode.
        """
        if mode is not None:
            return theme_for(mode)

        if self.theme:
            if self.theme in self.themes:
                return self.themes[self.theme]
            logger.warning(f"Theme '{self.theme}' is not defined, using {self.display_mode.value} theme")

        return theme_for(self.display_mode)

    def build_registry(self, base: Optional[RuleRegistry] = None) -> RuleRegistry:
        """
        Build the rule registry, layering configured rule files over the
        packaged tables.
        """
        registry = get_default_registry() if base is None else base
        for path in self.rule_files:
            tables = load_rule_tables(path)
            if tables:
                logger.debug(f"Loaded {len(tables)} rule table(s) from {path}")
                registry = registry.extend(tables)
        return registry

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display"""
        return {
            "default_language": self.default_language.value,
            "display_mode": self.display_mode.value,
            "theme": self.theme,
            "themes": {name: theme.to_dict() for name, theme in self.themes.items()},
            "rule_files": [str(p) for p in self.rule_files],
            "log_file": self.log_file,
            "sources": [str(p) for p in self.sources],
        }


def _apply(config: HighlightConfig, data: Dict[str, Any], path: Path):
    """Apply one config file's data onto config"""
    if "default_language" in data:
        language = normalize_language(str(data["default_language"]))
        if language is None:
            logger.warning(f"Unknown default_language '{data['default_language']}' in {path}")
        else:
            config.default_language = language

    if "display_mode" in data:
        try:
            config.display_mode = DisplayMode(str(data["display_mode"]).lower())
        except ValueError:
            logger.warning(f"Invalid display_mode '{data['display_mode']}' in {path}")

    if "theme" in data:
        config.theme = str(data["theme"]) if data["theme"] else None

    themes = data.get("themes") or {}
    if not isinstance(themes, dict):
        logger.warning(f"'themes' in {path} must be a mapping")
        themes = {}

    for name, theme_data in themes.items():
        try:
            if not isinstance(theme_data, dict):
                raise ValueError("theme must be a mapping")
            config.themes[str(name)] = Theme.from_dict(theme_data, name=str(name))
        except (ValueError, TypeError) as e:
            logger.warning(f"Invalid theme '{name}' in {path}: {e}")

    rule_files = data.get("rule_files") or []
    if isinstance(rule_files, str):
        rule_files = [rule_files]

    for entry in rule_files:
        rule_path = Path(str(entry)).expanduser()
        if not rule_path.is_absolute():
            # Relative to the workspace/home directory holding .highlightkit
            rule_path = path.parent.parent / rule_path
        config.rule_files.append(rule_path)

    if "log_file" in data:
        config.log_file = bool(data["log_file"])


def load_config(
    workspace: Optional[Path] = None,
    global_config: Optional[Path] = None
) -> HighlightConfig:
    """
    Load and merge configuration files.

    Args:
        workspace: Directory whose .highlightkit/config.yaml is read
        global_config: Global config path (defaults to ~/.highlightkit/config.yaml)

    Returns:
        Effective HighlightConfig; defaults for anything missing or invalid
    """
    config = HighlightConfig()
    workspace = workspace or Path.cwd()
    paths = [
        global_config or GLOBAL_CONFIG,
        workspace / CONFIG_DIR_NAME / CONFIG_FILE_NAME,
    ]

    for config_path in paths:
        if not config_path.exists():
            continue
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load config from {config_path}: {e}")
            continue

        if not isinstance(data, dict):
            logger.error(f"Config in {config_path} must be a mapping")
            continue

        _apply(config, data, config_path)
        config.sources.append(config_path)

    env_mode = os.environ.get(MODE_ENV_VAR)
    if env_mode:
        try:
            config.display_mode = DisplayMode(env_mode.lower().strip())
        except ValueError:
            logger.warning(f"Ignoring invalid {MODE_ENV_VAR}={env_mode!r}")

    return config


__all__ = [
    'HighlightConfig',
    'load_config',
    'GLOBAL_CONFIG',
    'MODE_ENV_VAR',
    'CONFIG_DIR_NAME',
    'CONFIG_FILE_NAME',
]
