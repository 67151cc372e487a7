#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2dokuwiki/rules/base.py
"""Value types for the substitution cascade.

A conversion is described entirely by a :class:`RuleSet`: an ordered tuple of
regular-expression :class:`Rule` objects, an ordered tuple of
:class:`LiteralFixup` pairs applied afterwards, and a flag telling the
converter whether to insert the voting snippet.

All three types are frozen dataclasses. Rule sets are built once and shared
by reference; nothing mutates them after construction.

Examples
--------
Build a one-rule set by hand:

    >>> from md2dokuwiki.rules import Rule, RuleSet
    >>> bold = Rule("bold", r"__(.+?)__", r"**\\1**")
    >>> ruleset = RuleSet(name="bold-only", rules=(bold,))
    >>> ruleset.rules[0].apply("__x__")
    '**x**'

Build one from configuration data:

    >>> ruleset = RuleSet.from_mapping({
    ...     "name": "custom",
    ...     "rules": [{"pattern": "^> (.+)$", "replacement": "> \\\\1", "flags": ["multiline"]}],
    ... })

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from md2dokuwiki.exceptions import RuleError, ValidationError

RULE_FLAG_NAMES: dict[str, re.RegexFlag] = {
    "multiline": re.MULTILINE,
    "dotall": re.DOTALL,
    "ignorecase": re.IGNORECASE,
    "verbose": re.VERBOSE,
}


def parse_rule_flags(names: list[str] | tuple[str, ...] | str | None) -> int:
    """Convert flag names from configuration into ``re`` flags.

    Parameters
    ----------
    names : list of str, str or None
        Flag names such as ``"multiline"`` or ``"dotall"``. A single string
        may hold several names separated by commas.

    Returns
    -------
    int
        Combined ``re`` flags

    Raises
    ------
    ValidationError
        If a name is not one of ``RULE_FLAG_NAMES``

    """
    if not names:
        return 0
    if isinstance(names, str):
        names = [part.strip() for part in names.split(",") if part.strip()]

    flags = 0
    for name in names:
        key = str(name).lower()
        if key not in RULE_FLAG_NAMES:
            raise ValidationError(
                f"Unknown rule flag '{name}'. Valid flags: {', '.join(sorted(RULE_FLAG_NAMES))}",
                parameter_name="flags",
                parameter_value=name,
            )
        flags |= RULE_FLAG_NAMES[key]
    return flags


@dataclass(frozen=True)
class Rule:
    """A single pattern-to-replacement substitution.

    Parameters
    ----------
    name : str
        Short identifier used in log messages
    pattern : str
        Regular expression source
    replacement : str
        Replacement template; captured groups are referenced as ``\\1``, ``\\2``...
    flags : int, default 0
        ``re`` flags used to compile ``pattern``

    Raises
    ------
    RuleError
        If ``pattern`` does not compile

    """

    name: str
    pattern: str
    replacement: str
    flags: int = 0
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the pattern once, at construction."""
        try:
            compiled = re.compile(self.pattern, self.flags)
        except re.error as e:
            raise RuleError(
                f"Rule '{self.name}' has an invalid pattern: {e}", rule_name=self.name, original_error=e
            ) from e
        object.__setattr__(self, "regex", compiled)

    def apply(self, text: str) -> str:
        """Substitute every match of the rule in ``text``.

        Raises
        ------
        RuleError
            If the substitution fails, e.g. the template references a group
            the pattern does not define

        """
        try:
            return self.regex.sub(self.replacement, text)
        except re.error as e:
            raise RuleError(f"Rule '{self.name}' failed: {e}", rule_name=self.name, original_error=e) from e

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], index: int = 0) -> Rule:
        """Build a rule from a configuration table."""
        if "pattern" not in data or "replacement" not in data:
            raise ValidationError(
                f"Rule #{index + 1} must define both 'pattern' and 'replacement'",
                parameter_name="rules",
                parameter_value=dict(data),
            )
        return cls(
            name=str(data.get("name", f"rule-{index + 1}")),
            pattern=str(data["pattern"]),
            replacement=str(data["replacement"]),
            flags=parse_rule_flags(data.get("flags")),
        )


@dataclass(frozen=True)
class LiteralFixup:
    """An exact substring replacement applied after the rule pass."""

    find: str
    replace: str
    name: str = ""

    def __post_init__(self) -> None:
        """Reject empty search strings, which would match everywhere."""
        if not self.find:
            raise ValidationError("Literal fixup 'find' must not be empty", parameter_name="find")

    def apply(self, text: str) -> str:
        return text.replace(self.find, self.replace)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LiteralFixup:
        if "find" not in data or "replace" not in data:
            raise ValidationError(
                "Literal fixups must define both 'find' and 'replace'",
                parameter_name="fixups",
                parameter_value=dict(data),
            )
        return cls(find=str(data["find"]), replace=str(data["replace"]), name=str(data.get("name", "")))


@dataclass(frozen=True)
class RuleSet:
    """An ordered conversion recipe.

    Parameters
    ----------
    name : str
        Registry name of the rule set
    rules : tuple of Rule
        Regular-expression rules, applied in order, each on the previous
        rule's output
    fixups : tuple of LiteralFixup
        Exact substring replacements applied after all rules
    voting_snippet : bool, default False
        Whether the converter substitutes the voting snippet token
    description : str
        One-line summary shown by ``md2dokuwiki --list-rulesets``

    """

    name: str
    rules: tuple[Rule, ...] = ()
    fixups: tuple[LiteralFixup, ...] = ()
    voting_snippet: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        # Lists from callers are frozen into tuples so the ordering cannot drift
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "fixups", tuple(self.fixups))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], name: str | None = None) -> RuleSet:
        """Build a rule set from configuration data.

        Parameters
        ----------
        data : Mapping
            Table with optional keys ``name``, ``description``, ``rules``
            (list of tables with ``pattern``, ``replacement``, ``flags``, ``name``),
            ``fixups`` (list of tables with ``find``, ``replace``) and
            ``voting_snippet``
        name : str, optional
            Overrides ``data["name"]``

        Returns
        -------
        RuleSet
            The constructed rule set

        Raises
        ------
        ValidationError
            If the data is not shaped as described
        RuleError
            If a pattern does not compile

        """
        if not isinstance(data, Mapping):
            raise ValidationError(
                f"Rule set definition must be a table, got {type(data).__name__}",
                parameter_name="ruleset",
                parameter_value=data,
            )

        raw_rules = data.get("rules", [])
        raw_fixups = data.get("fixups", [])
        if not isinstance(raw_rules, list) or not isinstance(raw_fixups, list):
            raise ValidationError("'rules' and 'fixups' must be lists of tables", parameter_name="ruleset")

        return cls(
            name=name or str(data.get("name", "custom")),
            rules=tuple(Rule.from_mapping(item, index) for index, item in enumerate(raw_rules)),
            fixups=tuple(LiteralFixup.from_mapping(item) for item in raw_fixups),
            voting_snippet=bool(data.get("voting_snippet", False)),
            description=str(data.get("description", "")),
        )
