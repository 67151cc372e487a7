#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2dokuwiki/driver.py
"""File and directory conversion.

The driver reads Markdown files, passes their text through a
:class:`~md2dokuwiki.converter.Converter` and writes the DokuWiki result.
Directory mode converts every file with the configured extension that sits
directly inside the input directory and writes each result under the same
file name into an output directory, ``<input>/dokuwiki`` by default.

Any read or write failure aborts the run; files converted before the
failure stay on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from md2dokuwiki.converter import Converter
from md2dokuwiki.exceptions import FileAccessError
from md2dokuwiki.exceptions import FileNotFoundError as Md2DokuWikiFileNotFoundError
from md2dokuwiki.exceptions import OutputWriteError, ValidationError
from md2dokuwiki.options import ConverterOptions

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
FileCallback = Callable[[Path], None]


def _resolve_converter(options: Optional[ConverterOptions], converter: Optional[Converter]) -> Converter:
    if converter is None:
        return Converter(options)
    if options is not None:
        raise ValidationError(
            "Pass either options or a converter, not both; a converter carries its own options",
            parameter_name="options",
        )
    return converter


def read_document(path: PathLike, encoding: str = "utf-8") -> str:
    """Read a document as text.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist (the md2dokuwiki exception, not the builtin)
    FileAccessError
        If the file cannot be read or decoded

    """
    path = Path(path)
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise Md2DokuWikiFileNotFoundError(str(path), original_error=e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(str(path), message=f"Cannot read file {path}: {e}", original_error=e) from e


def write_document(path: PathLike, content: str, encoding: str = "utf-8") -> None:
    """Write converted text, overwriting any existing file.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    path = Path(path)
    try:
        path.write_text(content, encoding=encoding)
    except OSError as e:
        raise OutputWriteError(str(path), original_error=e) from e


def find_documents(input_dir: PathLike, extension: str) -> list[Path]:
    """List the files in ``input_dir`` ending with ``extension``, sorted by name.

    Raises
    ------
    FileNotFoundError
        If ``input_dir`` is not an existing directory

    """
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise Md2DokuWikiFileNotFoundError(str(input_dir), message=f"Input directory not found: {input_dir}")

    return sorted(p for p in input_dir.glob(f"*{extension}") if p.is_file())


def convert_file(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    options: Optional[ConverterOptions] = None,
    converter: Optional[Converter] = None,
) -> str:
    """Convert one Markdown file.

    Parameters
    ----------
    input_path : str or Path
        Markdown file to read
    output_path : str or Path, optional
        Where to write the DokuWiki result; nothing is written when omitted
    options : ConverterOptions, optional
        Conversion options; mutually exclusive with ``converter``
    converter : Converter, optional
        Pre-built converter, e.g. one carrying a custom rule set

    Returns
    -------
    str
        The converted DokuWiki text

    Raises
    ------
    ValidationError
        If both ``options`` and ``converter`` are given

    """
    converter = _resolve_converter(options, converter)
    encoding = converter.options.encoding

    content = read_document(input_path, encoding)
    result = converter.convert(content)

    if output_path is not None:
        write_document(output_path, result, encoding)
        logger.info(f"Converted {input_path} -> {output_path}")

    return result


def convert_directory(
    input_dir: PathLike,
    output_dir: Optional[PathLike] = None,
    options: Optional[ConverterOptions] = None,
    converter: Optional[Converter] = None,
    on_file: Optional[FileCallback] = None,
) -> list[Path]:
    """Convert every matching file in a directory.

    Parameters
    ----------
    input_dir : str or Path
        Directory scanned (non-recursively) for ``options.input_extension`` files
    output_dir : str or Path, optional
        Destination directory, created if missing. Defaults to
        ``input_dir / options.output_dirname``
    options : ConverterOptions, optional
        Conversion options; mutually exclusive with ``converter``
    converter : Converter, optional
        Pre-built converter
    on_file : callable, optional
        Called with each input path after its output has been written

    Returns
    -------
    list[Path]
        Paths of the written output files, in processing order

    Raises
    ------
    FileNotFoundError
        If ``input_dir`` does not exist
    ValidationError
        If both ``options`` and ``converter`` are given
    FileAccessError
        If an input file cannot be read
    OutputWriteError
        If the output directory or an output file cannot be written

    """
    converter = _resolve_converter(options, converter)
    opts = converter.options
    input_dir = Path(input_dir)
    target_dir = Path(output_dir) if output_dir is not None else input_dir / opts.output_dirname

    documents = find_documents(input_dir, opts.input_extension)
    logger.debug(f"Found {len(documents)} {opts.input_extension} file(s) in {input_dir}")

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(
            str(target_dir), message=f"Cannot create output directory {target_dir}", original_error=e
        ) from e

    written: list[Path] = []
    for source in documents:
        target = target_dir / source.name
        convert_file(source, target, converter=converter)
        written.append(target)
        if on_file is not None:
            on_file(source)

    return written
