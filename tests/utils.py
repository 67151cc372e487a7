"""Test utilities for the md2dokuwiki test suite.

This module provides sample documents with their expected conversions and
helpers for laying out test directories.
"""

import shutil
import tempfile
from pathlib import Path

from md2dokuwiki.constants import DEFAULT_VOTING_TEMPLATE

SAMPLE_RFC = """# PHP RFC: Nullsafe operator

## Introduction

This RFC proposes the *nullsafe* operator `?->`, see [1: the discussion thread].

### The `?->` operator

- short-circuits on null
- works with `zval *value` pointers

```php
$country = $session?->user?->getAddress()?->country;
```

```c
zend_string *name;
```

Functions take zval *arg, zval *ret parameters.

Comments like /*this*/ stay.

See [the previous RFC](https://wiki.php.net/rfc/nullsafe_calls) and [3v4l](https://3v4l.org/abc).

## Vote

VOTING_SNIPPET
"""

EXPECTED_RFC = (
    """====== PHP RFC: Nullsafe operator ======

===== Introduction =====

This RFC proposes the //nullsafe// operator <php>?-></php>, see ((the discussion thread)).

==== The ?-> operator ====

  * short-circuits on null
  * works with <php>zval *value</php> pointers

<PHP>
$country = $session?->user?->getAddress()?->country;
</PHP>

<code>
zend_string *name;
</code>

Functions take zval *arg, zval *ret parameters.

Comments like /*this*/ stay.

See [[rfc:nullsafe_calls|the previous RFC]] and [[https://3v4l.org/abc|3v4l]].

===== Vote =====

"""
    + DEFAULT_VOTING_TEMPLATE.replace("RFC_TITLE", "Nullsafe operator")
    + "\n"
)


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_documents(directory: Path, documents: dict[str, str]) -> list[Path]:
    """Write ``{filename: content}`` into ``directory`` and return the paths."""
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for name, content in documents.items():
        path = directory / name
        path.write_text(content, encoding="utf-8")
        paths.append(path)
    return paths
