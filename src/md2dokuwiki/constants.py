#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2dokuwiki.

This module centralizes the literal tokens, prefixes, templates and fixup
tables used by the converter. Values are organized by category:

1. RFC Document Conventions - Title prefix and placeholder tokens
2. Voting Snippet - Default DokuWiki doodle template
3. Literal Fixups - Language aliases and pointer type names
4. Driver and CLI - File discovery and configuration defaults
"""

from __future__ import annotations

# =============================================================================
# RFC Document Conventions
# =============================================================================

# First line of every PHP RFC draft: "# PHP RFC: <title>"
DEFAULT_TITLE_PREFIX = "# PHP RFC: "

# Token inside the voting template that receives the RFC title
DEFAULT_TITLE_TOKEN = "RFC_TITLE"

# Token inside the document that receives the rendered voting snippet
DEFAULT_SNIPPET_TOKEN = "VOTING_SNIPPET"

DEFAULT_STRICT_TITLE = False

# Host whose /rfc/ pages are rewritten as internal [[rfc:...]] links
RFC_WIKI_HOST = "wiki.php.net"

# =============================================================================
# Voting Snippet
# =============================================================================

DEFAULT_VOTING_TEMPLATE = (
    '<doodle title="Implement RFC_TITLE as outlined in the RFC?" '
    'auth="registered" voteType="single" closed="true">\n'
    "   * Yes\n"
    "   * No\n"
    "</doodle>"
)

# =============================================================================
# Literal Fixups
# =============================================================================

# Code block language hints with no dedicated DokuWiki highlighter
PLAIN_CODE_LANGUAGE_ALIASES: tuple[str, ...] = ("c", "C", "h", "text", "txt", "plain", "plaintext")

# C types whose "type *name" declarations the italic rule turns into "type //name"
POINTER_TYPE_NAMES: tuple[str, ...] = (
    "char",
    "void",
    "zval",
    "zend_string",
    "zend_object",
    "zend_array",
    "zend_long",
    "zend_function",
    "zend_class_entry",
    "HashTable",
)

# =============================================================================
# Driver and CLI
# =============================================================================

DEFAULT_RULESET = "rfc"
DEFAULT_INPUT_EXTENSION = ".md"
DEFAULT_OUTPUT_DIRNAME = "dokuwiki"
DEFAULT_ENCODING = "utf-8"

CONFIG_ENV_VAR = "MD2DOKUWIKI_CONFIG"
RULESET_ENTRY_POINT_GROUP = "md2dokuwiki.rulesets"
