#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2dokuwiki/rules/registry.py
"""Rule set registry for named lookup and plugin discovery.

This module implements a registry pattern for rule sets, enabling:
- Lookup of the built-in ``rfc`` and ``classic`` recipes by name
- Plugin discovery via the ``md2dokuwiki.rulesets`` entry point group
- Registration of additional rule sets at runtime

Examples
--------
Get a rule set using the global registry instance:

    >>> from md2dokuwiki.rules import ruleset_registry
    >>> ruleset = ruleset_registry.get("rfc")

List all rule sets:

    >>> for name in ruleset_registry.list_rulesets():
    ...     print(name, ruleset_registry.get(name).description)

A plugin exposes a ``RuleSet`` instance through its packaging metadata::

    [project.entry-points."md2dokuwiki.rulesets"]
    wiki-lite = "my_package.rules:WIKI_LITE"

"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Optional

from md2dokuwiki.constants import RULESET_ENTRY_POINT_GROUP
from md2dokuwiki.rules.base import RuleSet

logger = logging.getLogger(__name__)


class RuleSetRegistry:
    """Registry for managing named rule sets.

    This singleton class registers the built-in rule sets and discovers
    plugin rule sets from entry points on first access.

    Examples
    --------
    Use the global registry instance (preferred):
        >>> from md2dokuwiki.rules import ruleset_registry
        >>> ruleset_registry.register(my_ruleset)

    """

    _instance: Optional[RuleSetRegistry] = None
    _rulesets: dict[str, RuleSet]
    _initialized: bool

    def __new__(cls) -> RuleSetRegistry:
        """Create or return singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._rulesets = {}
            cls._instance._initialized = False
        return cls._instance

    def _ensure_initialized(self) -> None:
        """Register built-ins and run plugin discovery once."""
        if not self._initialized:
            self._initialized = True
            from md2dokuwiki.rules.builtin import BUILTIN_RULESETS

            for ruleset in BUILTIN_RULESETS:
                self._rulesets.setdefault(ruleset.name, ruleset)
            self.discover_plugins()

    def register(self, ruleset: RuleSet) -> None:
        """Register a rule set under its name.

        Parameters
        ----------
        ruleset : RuleSet
            Rule set to register

        Notes
        -----
        If a rule set with the same name is already registered, it will
        be overwritten and a warning will be logged.

        """
        self._ensure_initialized()

        if ruleset.name in self._rulesets:
            logger.warning(f"Rule set '{ruleset.name}' already registered, overwriting")

        self._rulesets[ruleset.name] = ruleset
        logger.debug(f"Registered rule set: {ruleset.name}")

    def unregister(self, name: str) -> bool:
        """Unregister a rule set.

        Returns
        -------
        bool
            True if the rule set was unregistered, False if not found

        """
        self._ensure_initialized()

        if name in self._rulesets:
            del self._rulesets[name]
            logger.debug(f"Unregistered rule set: {name}")
            return True
        return False

    def get(self, name: str) -> RuleSet:
        """Get a rule set by name.

        Raises
        ------
        KeyError
            If the rule set is not registered

        """
        self._ensure_initialized()

        if name not in self._rulesets:
            raise KeyError(f"Rule set '{name}' not registered")

        return self._rulesets[name]

    def has_ruleset(self, name: str) -> bool:
        self._ensure_initialized()
        return name in self._rulesets

    def list_rulesets(self) -> list[str]:
        """List all registered rule set names, sorted alphabetically."""
        self._ensure_initialized()
        return sorted(self._rulesets.keys())

    def discover_plugins(self) -> int:
        """Discover and register rule sets from entry points.

        Entry points in the ``md2dokuwiki.rulesets`` group must resolve to a
        :class:`RuleSet` instance. Entries that fail to load or return
        something else are skipped with a warning.

        Returns
        -------
        int
            Number of rule sets discovered and registered

        """
        discovered_count = 0

        for ep in importlib.metadata.entry_points().select(group=RULESET_ENTRY_POINT_GROUP):
            try:
                ruleset = ep.load()
            except Exception as e:
                logger.warning(f"Failed to load rule set entry point '{ep.name}': {e}")
                continue

            if not isinstance(ruleset, RuleSet):
                logger.warning(f"Entry point '{ep.name}' did not return a RuleSet, skipping")
                continue

            self.register(ruleset)
            discovered_count += 1
            logger.debug(f"Discovered rule set from entry point: {ep.name}")

        logger.debug(f"Discovered {discovered_count} rule set(s) from entry points")
        return discovered_count


ruleset_registry = RuleSetRegistry()
