#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2dokuwiki/rules/builtin.py
"""Built-in rule sets.

Two recipes ship with the package:

``rfc`` (default)
    Headings, italics, footnotes, code, lists, links and heading clean-up,
    followed by literal fixups and the voting snippet. Written for PHP RFC
    drafts.

``classic``
    The earlier, smaller recipe: headings, code, lists, links and italics
    (applied last), with no fixups and no voting snippet.

Order matters in both: each rule sees the output of the rules before it.
"""

from __future__ import annotations

import re

from md2dokuwiki.constants import PLAIN_CODE_LANGUAGE_ALIASES, POINTER_TYPE_NAMES, RFC_WIKI_HOST
from md2dokuwiki.rules.base import LiteralFixup, Rule, RuleSet

_RFC_HOST = re.escape(RFC_WIKI_HOST)


def heading_rules() -> tuple[Rule, ...]:
    """Build the six heading rules, longest marker first.

    A level-N Markdown heading becomes a DokuWiki title wrapped by 7-N
    equals signs on each side.
    """
    rules = []
    for level in range(6, 0, -1):
        marker = "=" * (7 - level)
        rules.append(
            Rule(
                name=f"heading-{level}",
                pattern=rf"^#{{{level}}} ?([^\r\n]+)",
                replacement=rf"{marker} \1 {marker}",
                flags=re.MULTILINE,
            )
        )
    return tuple(rules)


ITALIC = Rule(
    name="italic",
    # Delimiters touching "/" are C comments; touching "*" is bold
    pattern=r"(?<![*/])\*(?![*/])(.+?)(?<![*/])\*(?![*/])",
    replacement=r"//\1//",
)

FOOTNOTE = Rule(name="footnote", pattern=r"\[1: ?(.+?)\]", replacement=r"((\1))")

PHP_BLOCK = Rule(name="code-php-block", pattern=r"`{3}php(.+?)`{3}", replacement=r"<PHP>\1</PHP>", flags=re.DOTALL)

TAGGED_BLOCK = Rule(
    name="code-tagged-block",
    pattern=r"`{3}([\w+#.-]+)\n(.*?)`{3}",
    replacement="<code \\1>\n\\2</code>",
    flags=re.DOTALL,
)

CODE_BLOCK = Rule(name="code-block", pattern=r"`{3}(.+?)`{3}", replacement=r"<code>\1</code>", flags=re.DOTALL)

DOUBLE_CODE_SPAN = Rule(
    name="code-span-double", pattern=r"`{2}(.+?)`{2}", replacement=r"<php>\1</php>", flags=re.DOTALL
)

CODE_SPAN = Rule(name="code-span", pattern=r"`(.+?)`", replacement=r"<php>\1</php>", flags=re.DOTALL)

LIST_ITEM = Rule(name="list-item", pattern=r"^ {0,3}- ([^\r\n]+)", replacement=r"  * \1", flags=re.MULTILINE)

RFC_LINK = Rule(
    name="link-rfc",
    pattern=rf"\[([^\]\n]+)\]\(https?://{_RFC_HOST}/rfc/([^)\s]+)\)",
    replacement=r"[[rfc:\2|\1]]",
)

LINK = Rule(name="link", pattern=r"\[([^\]\n]+)\]\(([^)\s]+)\)", replacement=r"[[\2|\1]]")

LINK_CODE = Rule(
    name="link-code-cleanup",
    # Link text runs from "|" to "]]" and holds no brackets
    pattern=r"<php>([^\[\]\n]*?)</php>(?=[^\[\]\n]*\]\])",
    replacement=r"\1",
)

HEADING_CODE = Rule(
    name="heading-code-cleanup",
    pattern=r"<php>([^\n]*?)</php>(?=[^\n]* ={1,6}[ \t\r]*$)",
    replacement=r"\1",
    flags=re.MULTILINE,
)


def rfc_fixups() -> tuple[LiteralFixup, ...]:
    """Build the literal fixups applied after the ``rfc`` rule pass."""
    fixups: list[LiteralFixup] = []
    for alias in PLAIN_CODE_LANGUAGE_ALIASES:
        fixups.append(LiteralFixup(f"<code {alias}>", "<code>", name=f"code-language-{alias}"))
    for type_name in POINTER_TYPE_NAMES:
        fixups.append(LiteralFixup(f"{type_name} //", f"{type_name} *", name=f"pointer-{type_name}"))
    return tuple(fixups)


RFC_RULESET = RuleSet(
    name="rfc",
    description="PHP RFC drafts: footnotes, code clean-up, pointer fixups and voting snippet",
    rules=(
        *heading_rules(),
        ITALIC,
        FOOTNOTE,
        PHP_BLOCK,
        TAGGED_BLOCK,
        CODE_BLOCK,
        DOUBLE_CODE_SPAN,
        CODE_SPAN,
        LIST_ITEM,
        RFC_LINK,
        LINK,
        LINK_CODE,
        HEADING_CODE,
    ),
    fixups=rfc_fixups(),
    voting_snippet=True,
)

CLASSIC_RULESET = RuleSet(
    name="classic",
    description="Headings, code, lists, links and italics only",
    rules=(
        *heading_rules(),
        PHP_BLOCK,
        DOUBLE_CODE_SPAN,
        CODE_SPAN,
        LIST_ITEM,
        Rule(
            name="link-rfc",
            pattern=rf"\[(.+)\]\(https?://{_RFC_HOST}/rfc/(.+)\)",
            replacement=r"[[rfc:\2|\1]]",
        ),
        Rule(name="link", pattern=r"\[(.+)\]\((.+)\)", replacement=r"[[\2|\1]]"),
        Rule(name="italic", pattern=r"\*(.+?)\*", replacement=r"//\1//"),
    ),
)

BUILTIN_RULESETS: tuple[RuleSet, ...] = (RFC_RULESET, CLASSIC_RULESET)
