"""md2dokuwiki - Convert Markdown RFC drafts to DokuWiki markup.

md2dokuwiki rewrites Markdown into DokuWiki syntax with an ordered cascade
of regular-expression rules, followed by literal fixups and, for PHP RFC
drafts, the insertion of a voting snippet titled after the document.

There is no parse tree: each rule rewrites the text produced by the rules
before it. The conversion is one-way and best-effort; malformed Markdown
yields malformed DokuWiki rather than an error.

Examples
--------
Convert a string:

    >>> from md2dokuwiki import convert
    >>> wiki = convert(open("my-rfc.md").read())

Convert every ``.md`` file in a directory into ``./dokuwiki/``:

    >>> from md2dokuwiki import convert_directory
    >>> written = convert_directory(".")

Use the earlier, smaller rule set:

    >>> from md2dokuwiki import ConverterOptions, convert
    >>> wiki = convert(text, ConverterOptions(ruleset="classic"))

See Also
--------
md2dokuwiki.rules : Rule types and built-in rule sets

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2dokuwiki requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2dokuwiki.converter import Converter, build_voting_snippet, convert, extract_rfc_title  # noqa: E402
from md2dokuwiki.driver import convert_directory, convert_file  # noqa: E402
from md2dokuwiki.exceptions import (  # noqa: E402
    FileAccessError,
    FileError,
    Md2DokuWikiError,
    OutputWriteError,
    RuleError,
    TitleError,
    ValidationError,
)
from md2dokuwiki.options import ConverterOptions  # noqa: E402
from md2dokuwiki.rules import LiteralFixup, Rule, RuleSet, ruleset_registry  # noqa: E402

__all__ = [
    "__version__",
    "Converter",
    "ConverterOptions",
    "FileAccessError",
    "FileError",
    "LiteralFixup",
    "Md2DokuWikiError",
    "OutputWriteError",
    "Rule",
    "RuleError",
    "RuleSet",
    "TitleError",
    "ValidationError",
    "build_voting_snippet",
    "convert",
    "convert_directory",
    "convert_file",
    "extract_rfc_title",
    "ruleset_registry",
]
