#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2dokuwiki/converter.py
"""Markdown to DokuWiki conversion.

This module provides the Converter class, which turns Markdown text into
DokuWiki markup in three steps:

1. The rule pass: every rule of the selected rule set is applied in order,
   each on the output of the previous one.
2. The literal fixups, as exact substring replacements.
3. The voting snippet: the RFC title is read from the first line of the
   input, substituted into the voting template, and the result replaces
   the snippet token wherever it appears.

The converter holds no per-document state; one instance can convert any
number of documents.

Examples
--------
    >>> from md2dokuwiki import convert
    >>> convert("## Proposal\\n\\n- use *this*\\n")
    '===== Proposal =====\\n\\n  * use //this//\\n'

"""

from __future__ import annotations

import logging

from md2dokuwiki.constants import DEFAULT_TITLE_PREFIX, DEFAULT_TITLE_TOKEN
from md2dokuwiki.exceptions import RuleError, TitleError, ValidationError
from md2dokuwiki.options import ConverterOptions
from md2dokuwiki.rules import RuleSet, ruleset_registry

logger = logging.getLogger(__name__)


def first_line(text: str) -> str:
    """Return the first line of ``text`` without its line terminator."""
    return text.split("\n", 1)[0].rstrip("\r")


def extract_rfc_title(text: str, prefix: str = DEFAULT_TITLE_PREFIX, strict: bool = False) -> str:
    """Extract the RFC title from the first line of a document.

    Parameters
    ----------
    text : str
        Raw Markdown document
    prefix : str, default "# PHP RFC: "
        Prefix that precedes the title on the first line
    strict : bool, default False
        Raise instead of falling back when the prefix is missing

    Returns
    -------
    str
        The text after ``prefix``. When the prefix is missing and ``strict``
        is False, the first line with leading ``#`` markers and whitespace
        removed.

    Raises
    ------
    TitleError
        If ``strict`` is True and the first line does not start with ``prefix``

    Examples
    --------
    >>> extract_rfc_title("# PHP RFC: Enumerations\\nbody")
    'Enumerations'
    >>> extract_rfc_title("# Enumerations\\nbody")
    'Enumerations'

    """
    line = first_line(text)
    if line.startswith(prefix):
        return line[len(prefix) :]

    if strict:
        raise TitleError(line, prefix)

    fallback = line.lstrip("#").strip()
    logger.warning(f"First line {line!r} does not start with {prefix!r}; using {fallback!r} as the RFC title")
    return fallback


def build_voting_snippet(title: str, template: str, title_token: str = DEFAULT_TITLE_TOKEN) -> str:
    """Substitute ``title`` for every ``title_token`` in ``template``."""
    return template.replace(title_token, title)


class Converter:
    """Convert Markdown text to DokuWiki markup with an ordered rule set.

    Parameters
    ----------
    options : ConverterOptions or None, default None
        Conversion options
    ruleset : RuleSet, str or None, default None
        Rule set to apply, either as an object or a registered name. When
        None, ``options.ruleset`` is looked up in the registry.

    Raises
    ------
    ValidationError
        If the named rule set is not registered

    Examples
    --------
        >>> converter = Converter(ConverterOptions(ruleset="classic"))
        >>> converter.convert("# Title")
        '====== Title ======'

    """

    def __init__(self, options: ConverterOptions | None = None, ruleset: RuleSet | str | None = None):
        """Initialize the converter with options and a resolved rule set."""
        self.options = options or ConverterOptions()
        self.ruleset = self._resolve_ruleset(ruleset if ruleset is not None else self.options.ruleset)
        logger.debug(
            f"Using rule set '{self.ruleset.name}' "
            f"({len(self.ruleset.rules)} rules, {len(self.ruleset.fixups)} fixups)"
        )

    @staticmethod
    def _resolve_ruleset(ruleset: RuleSet | str) -> RuleSet:
        if isinstance(ruleset, RuleSet):
            return ruleset
        try:
            return ruleset_registry.get(ruleset)
        except KeyError as e:
            available = ", ".join(ruleset_registry.list_rulesets())
            raise ValidationError(
                f"Unknown rule set '{ruleset}'. Available rule sets: {available}",
                parameter_name="ruleset",
                parameter_value=ruleset,
                original_error=e,
            ) from e

    def apply_rules(self, text: str) -> str:
        """Run the rule cascade over ``text``.

        A rule that fails to substitute is logged and skipped; the cascade
        continues with the text as it was before that rule.
        """
        for rule in self.ruleset.rules:
            try:
                text = rule.apply(text)
            except RuleError as e:
                logger.warning(f"Skipping rule: {e.message}")
        return text

    def apply_fixups(self, text: str) -> str:
        for fixup in self.ruleset.fixups:
            text = fixup.apply(text)
        return text

    def substitute_voting_snippet(self, text: str, source: str) -> str:
        """Replace the snippet token in ``text`` with the rendered voting snippet.

        Parameters
        ----------
        text : str
            Converted document
        source : str
            Original Markdown, whose first line carries the RFC title

        Returns
        -------
        str
            ``text`` with every snippet token replaced; unchanged when the
            token does not occur

        """
        token = self.options.snippet_token
        if token not in text:
            return text

        title = extract_rfc_title(source, self.options.title_prefix, strict=self.options.strict_title)
        snippet = build_voting_snippet(title, self.options.voting_template, self.options.title_token)
        return text.replace(token, snippet)

    def convert(self, text: str) -> str:
        """Convert a Markdown document to DokuWiki markup.

        Parameters
        ----------
        text : str
            Markdown document

        Returns
        -------
        str
            DokuWiki markup

        Raises
        ------
        TitleError
            If strict title checking is enabled, the document contains the
            snippet token, and its first line lacks the title prefix

        """
        output = self.apply_rules(text)
        output = self.apply_fixups(output)
        if self.ruleset.voting_snippet:
            output = self.substitute_voting_snippet(output, text)
        return output


def convert(text: str, options: ConverterOptions | None = None, ruleset: RuleSet | str | None = None) -> str:
    """Convert a Markdown document to DokuWiki markup.

    Shortcut for ``Converter(options, ruleset).convert(text)``.
    """
    return Converter(options, ruleset).convert(text)
