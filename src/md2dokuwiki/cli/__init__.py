"""Command-line interface for md2dokuwiki.

Converts every Markdown file in a directory (the current directory by
default) into DokuWiki markup, writing results into a ``dokuwiki``
subdirectory and printing each processed file name.

Examples
--------
Convert all ``.md`` files in the current directory::

    $ md2dokuwiki

Convert a directory into a chosen output directory::

    $ md2dokuwiki ./rfcs --output-dir ./wiki

Convert one file and print the result::

    $ md2dokuwiki my-rfc.md --stdout

Use the earlier rule set and fail on documents without an RFC title::

    $ md2dokuwiki ./rfcs --ruleset classic --strict-title

Use a configuration file::

    $ export MD2DOKUWIKI_CONFIG=./md2dokuwiki.yaml
    $ md2dokuwiki ./rfcs

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from md2dokuwiki.constants import CONFIG_ENV_VAR
from md2dokuwiki.exceptions import FileError, Md2DokuWikiError, OutputWriteError, RuleError, ValidationError
from md2dokuwiki.logging_utils import configure_logging

if TYPE_CHECKING:
    from md2dokuwiki.cli.output import ProgressReporter
    from md2dokuwiki.converter import Converter

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "get_exit_code_for_exception"]

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code."""
    if isinstance(exception, (ValidationError, RuleError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (FileError, OutputWriteError)):
        return EXIT_FILE_ERROR

    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    from md2dokuwiki import __version__

    parser = argparse.ArgumentParser(
        prog="md2dokuwiki",
        description="Convert Markdown documents to DokuWiki markup.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=".",
        help="Markdown file or directory of Markdown files (default: current directory)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        help="Output directory (default: a 'dokuwiki' subdirectory next to the input)",
    )
    parser.add_argument("--ruleset", help="Rule set to apply (default: rfc)")
    parser.add_argument(
        "--strict-title",
        action="store_true",
        default=None,
        help="Fail when a document's first line lacks the RFC title prefix",
    )
    parser.add_argument("--extension", dest="input_extension", help="Input file extension (default: .md)")
    parser.add_argument("--stdout", action="store_true", help="Print the result of a single file instead of writing it")
    parser.add_argument("--list-rulesets", action="store_true", help="List available rule sets and exit")

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help=f"Configuration file (default: ${CONFIG_ENV_VAR} or auto-discovery)")
    config_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    output_group = parser.add_argument_group("output and logging")
    output_group.add_argument("--rich", action="store_true", help="Use rich terminal output")
    output_group.add_argument("--force-rich", action="store_true", help="Use rich output even when not on a TTY")
    output_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    output_group.add_argument("--log-file", help="Also write log messages to this file")
    output_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_config(parsed_args: argparse.Namespace) -> dict:
    from md2dokuwiki.cli.config import load_config_with_priority

    if parsed_args.no_config:
        return {}
    return load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))


def _convert_single_file(parsed_args: argparse.Namespace, converter: "Converter", reporter: "ProgressReporter") -> int:
    """Convert the single file named on the command line."""
    from md2dokuwiki.driver import convert_file

    source = Path(parsed_args.input)
    if parsed_args.stdout:
        sys.stdout.write(convert_file(source, converter=converter))
        return EXIT_SUCCESS

    output_dir = (
        Path(parsed_args.output_dir) if parsed_args.output_dir else source.parent / converter.options.output_dirname
    )
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(
            str(output_dir), message=f"Cannot create output directory {output_dir}", original_error=e
        ) from e

    convert_file(source, output_dir / source.name, converter=converter)
    reporter.file_done(source)
    reporter.summary(output_dir)
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the md2dokuwiki command line."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    from md2dokuwiki.cli.config import build_options_from_config
    from md2dokuwiki.cli.output import ProgressReporter, print_rulesets, should_use_rich_output
    from md2dokuwiki.converter import Converter
    from md2dokuwiki.driver import convert_directory

    use_rich = should_use_rich_output(parsed_args)

    if parsed_args.list_rulesets:
        print_rulesets(use_rich)
        return EXIT_SUCCESS

    try:
        config = _load_config(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    overrides = {
        "ruleset": parsed_args.ruleset,
        "strict_title": parsed_args.strict_title,
        "input_extension": parsed_args.input_extension,
    }

    input_path = Path(parsed_args.input)
    if parsed_args.stdout and not input_path.is_file():
        print("Error: --stdout requires a single input file", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    reporter = ProgressReporter(use_rich=use_rich)
    try:
        options, custom_ruleset = build_options_from_config(config, overrides)
        converter = Converter(options, ruleset=custom_ruleset)

        if input_path.is_file():
            return _convert_single_file(parsed_args, converter, reporter)

        output_dir = Path(parsed_args.output_dir) if parsed_args.output_dir else input_path / options.output_dirname
        convert_directory(input_path, output_dir, converter=converter, on_file=reporter.file_done)
        reporter.summary(output_dir)
    except Md2DokuWikiError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
