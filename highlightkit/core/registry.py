"""
Rule Registry for HighlightKit
===============================
Maps a Language to its ordered rule table and resolves the table against a
Theme. Tables are declarative YAML data; the registry never reorders them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import yaml

from .rules import Rule, parse_flags
from .styles import style_for
from .theme import Theme
from .tokens import Language, TokenCategory, normalize_language

# Configure module logger
logger = logging.getLogger(__name__)


# Package data holding the built-in tables
DEFAULT_RULES_RESOURCE = "rules.yaml"


@dataclass(frozen=True)
class RuleSpec:
    """Theme-independent rule table entry"""
    pattern: str
    category: TokenCategory
    flags: int = 0
    group: int = 0

    def resolve(self, theme: Theme) -> Rule:
        """Resolve this entry's style against a theme"""
        return Rule(
            pattern=self.pattern,
            style=style_for(self.category, theme),
            flags=self.flags,
            category=self.category,
            group=self.group
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RuleSpec":
        """
        Create from a rule table entry.

        Raises:
            ValueError: If the entry is missing a pattern or names an
                unknown category or flag
            KeyError: If the category key is missing
        """
        pattern = data.get("pattern")
        if not isinstance(pattern, str) or not pattern:
            raise ValueError("rule has no pattern")

        group = data.get("group", 0)
        if not isinstance(group, int) or isinstance(group, bool) or group < 0:
            raise ValueError(f"invalid group {group!r}")

        flags = data.get("flags") or []
        if isinstance(flags, str):
            flags = [flags]
        elif not isinstance(flags, list):
            raise ValueError(f"flags must be a name or a list of names, got {flags!r}")

        return cls(
            pattern=pattern,
            category=TokenCategory(str(data["category"]).lower()),
            flags=parse_flags(flags),
            group=group
        )


RuleTables = Mapping[Language, Sequence[RuleSpec]]


def parse_rule_tables(data: Any, source: str = "<data>") -> Dict[Language, Tuple[RuleSpec, ...]]:
    """
    Parse raw rule table data (as loaded from YAML).

    Unknown languages and malformed entries are logged and dropped.

    Args:
        data: Mapping of language name to list of rule entries
        source: Description of where the data came from, for log messages

    Returns:
        Mapping of Language to ordered RuleSpec tuples
    """
    tables: Dict[Language, Tuple[RuleSpec, ...]] = {}

    if not isinstance(data, dict):
        logger.error(f"Rule tables in {source} must be a mapping, got {type(data).__name__}")
        return tables

    for name, entries in data.items():
        language = normalize_language(str(name))
        if language is None:
            logger.warning(f"Unknown language '{name}' in {source}")
            continue

        if not isinstance(entries, list):
            logger.warning(f"Rules for '{name}' in {source} must be a list")
            continue

        specs: List[RuleSpec] = []
        for index, entry in enumerate(entries):
            try:
                if not isinstance(entry, dict):
                    raise ValueError("rule must be a mapping")
                specs.append(RuleSpec.from_dict(entry))
            except (ValueError, KeyError) as e:
                logger.warning(f"Invalid rule #{index} for '{name}' in {source}: {e}")

        tables[language] = tuple(specs)

    return tables


def load_rule_tables(path: Union[str, Path]) -> Dict[Language, Tuple[RuleSpec, ...]]:
    """
    Load rule tables from a YAML file.

    Args:
        path: YAML file path

    Returns:
        Parsed tables; empty if the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load rule tables from {path}: {e}")
        return {}

    return parse_rule_tables(data, source=str(path))


class RuleRegistry:
    """
    Lookup of ordered, theme-resolved rule sets.

    Resolved rule sets are cached per (language, theme); both the tables and
    the resolved tuples are immutable, so a registry can be shared freely.
    """

    def __init__(self, tables: Optional[RuleTables] = None):
        """
        Initialize the registry.

        Args:
            tables: Mapping of Language to ordered RuleSpec entries
        """
        self._tables: Dict[Language, Tuple[RuleSpec, ...]] = {
            language: tuple(specs) for language, specs in (tables or {}).items()
        }
        self._cache: Dict[Tuple[Language, Theme], Tuple[Rule, ...]] = {}

    @classmethod
    def default(cls) -> "RuleRegistry":
        """Registry built from the packaged rule tables"""
        raw = resources.files("highlightkit.data").joinpath(DEFAULT_RULES_RESOURCE).read_text(encoding="utf-8")
        return cls(parse_rule_tables(yaml.safe_load(raw), source=DEFAULT_RULES_RESOURCE))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "RuleRegistry":
        """Registry built from a single YAML rule file"""
        return cls(load_rule_tables(path))

    def extend(self, tables: RuleTables) -> "RuleRegistry":
        """
        Return a new registry with some tables replaced.

        Args:
            tables: Tables that replace (not append to) existing ones

        Returns:
            New RuleRegistry; this one is unchanged
        """
        merged: Dict[Language, Sequence[RuleSpec]] = dict(self._tables)
        merged.update(tables)
        return RuleRegistry(merged)

    def languages(self) -> List[Language]:
        """Languages that have a rule table, in table order"""
        return list(self._tables)

    def specs_for(self, language: Language) -> Tuple[RuleSpec, ...]:
        """Unresolved table for a language (empty if unsupported)"""
        return self._tables.get(language, ())

    def rules_for(self, language: Optional[Language], theme: Theme) -> Tuple[Rule, ...]:
        """
        Resolve a language's rule table against a theme.

        Args:
            language: Language to look up; None or unsupported gives ()
            theme: Theme for style resolution

        Returns:
            Ordered rules, in declaration order
        """
        if language is None:
            return ()

        key = (language, theme)
        rules = self._cache.get(key)
        if rules is None:
            rules = tuple(spec.resolve(theme) for spec in self.specs_for(language))
            self._cache[key] = rules
            logger.debug(f"Resolved {len(rules)} rule(s) for {language.value} with theme '{theme.name}'")
        return rules

    def __contains__(self, language: object) -> bool:
        return language in self._tables

    def __len__(self) -> int:
        return len(self._tables)


_DEFAULT_REGISTRY: Optional[RuleRegistry] = None


def get_default_registry() -> RuleRegistry:
    """Shared registry over the packaged tables, built on first use"""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = RuleRegistry.default()
    return _DEFAULT_REGISTRY


def rules_for(language: Optional[Language], theme: Theme) -> Tuple[Rule, ...]:
    """Resolve a rule set from the default registry"""
    return get_default_registry().rules_for(language, theme)


__all__ = [
    'RuleSpec',
    'RuleRegistry',
    'parse_rule_tables',
    'load_rule_tables',
    'get_default_registry',
    'rules_for',
]
