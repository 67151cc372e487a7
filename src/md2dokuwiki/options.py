#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2dokuwiki/options.py
"""Configuration options for Markdown-to-DokuWiki conversion.

This module defines the frozen dataclass that carries every tunable value of
a conversion run: which rule set to apply, the RFC title and voting snippet
conventions, and the file discovery settings used by the directory driver.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2dokuwiki.constants import (
    DEFAULT_ENCODING,
    DEFAULT_INPUT_EXTENSION,
    DEFAULT_OUTPUT_DIRNAME,
    DEFAULT_RULESET,
    DEFAULT_SNIPPET_TOKEN,
    DEFAULT_STRICT_TITLE,
    DEFAULT_TITLE_PREFIX,
    DEFAULT_TITLE_TOKEN,
    DEFAULT_VOTING_TEMPLATE,
)
from md2dokuwiki.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ConverterOptions(CloneFrozenMixin):
    """Configuration options for a conversion run.

    Parameters
    ----------
    ruleset : str, default "rfc"
        Name of the registered rule set to apply.
    title_prefix : str, default "# PHP RFC: "
        Prefix expected at the start of the first line; the rest of the line
        is the RFC title.
    title_token : str, default "RFC_TITLE"
        Placeholder inside ``voting_template`` replaced by the title.
    snippet_token : str, default "VOTING_SNIPPET"
        Placeholder inside the document replaced by the rendered snippet.
    voting_template : str
        DokuWiki markup for the vote, containing ``title_token``.
    strict_title : bool, default False
        Raise ``TitleError`` when the first line lacks ``title_prefix``
        instead of logging a warning and using the bare first line.
    input_extension : str, default ".md"
        Extension of the files picked up by the directory driver.
    output_dirname : str, default "dokuwiki"
        Name of the output subdirectory created inside the input directory
        when no explicit output directory is given.
    encoding : str, default "utf-8"
        Text encoding for reading and writing documents.

    Examples
    --------
    Select the earlier rule set:
        >>> options = ConverterOptions(ruleset="classic")

    Fail loudly on documents without an RFC title:
        >>> options = ConverterOptions().create_updated(strict_title=True)

    """

    ruleset: str = field(
        default=DEFAULT_RULESET,
        metadata={"help": "Name of the rule set to apply", "importance": "core"},
    )
    title_prefix: str = field(
        default=DEFAULT_TITLE_PREFIX,
        metadata={"help": "Prefix of the first line that precedes the RFC title", "importance": "advanced"},
    )
    title_token: str = field(
        default=DEFAULT_TITLE_TOKEN,
        metadata={"help": "Placeholder in the voting template replaced by the title", "importance": "advanced"},
    )
    snippet_token: str = field(
        default=DEFAULT_SNIPPET_TOKEN,
        metadata={"help": "Placeholder in the document replaced by the voting snippet", "importance": "advanced"},
    )
    voting_template: str = field(
        default=DEFAULT_VOTING_TEMPLATE,
        metadata={"help": "DokuWiki markup of the voting snippet", "importance": "advanced"},
    )
    strict_title: bool = field(
        default=DEFAULT_STRICT_TITLE,
        metadata={"help": "Fail when the first line lacks the RFC title prefix", "importance": "core"},
    )
    input_extension: str = field(
        default=DEFAULT_INPUT_EXTENSION,
        metadata={"help": "Extension of input files in directory mode", "importance": "core"},
    )
    output_dirname: str = field(
        default=DEFAULT_OUTPUT_DIRNAME,
        metadata={"help": "Default output subdirectory name", "importance": "core"},
    )
    encoding: str = field(
        default=DEFAULT_ENCODING,
        metadata={"help": "Text encoding for input and output files", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If any field value is empty or malformed.

        """
        for name in ("ruleset", "title_prefix", "title_token", "snippet_token", "encoding"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValidationError(f"{name} must be a non-empty string", parameter_name=name, parameter_value=value)

        if not self.input_extension.startswith(".") or len(self.input_extension) < 2:
            raise ValidationError(
                f"input_extension must start with '.', got {self.input_extension!r}",
                parameter_name="input_extension",
                parameter_value=self.input_extension,
            )

        if not self.output_dirname or "/" in self.output_dirname or "\\" in self.output_dirname:
            raise ValidationError(
                f"output_dirname must be a single directory name, got {self.output_dirname!r}",
                parameter_name="output_dirname",
                parameter_value=self.output_dirname,
            )

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ConverterOptions:
        """Build options from a configuration mapping.

        Raises
        ------
        ValidationError
            If the mapping contains a key that is not an option name

        """
        known = set(cls.field_names())
        unknown = sorted(key for key in data if key not in known)
        if unknown:
            raise ValidationError(
                f"Unknown option(s): {', '.join(unknown)}. Valid options: {', '.join(sorted(known))}",
                parameter_name=unknown[0],
                parameter_value=data[unknown[0]],
            )
        return cls(**dict(data))
