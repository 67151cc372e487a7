#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the md2dokuwiki CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and turning the loaded values into
converter options and an optional custom rule set.

A configuration file holds option names at the top level and, optionally, a
``ruleset`` table defining a custom rule set::

    # .md2dokuwiki.toml
    strict_title = true
    output_dirname = "wiki"

    [ruleset]
    name = "quotes"

    [[ruleset.rules]]
    pattern = "^> (.+)$"
    replacement = "> \\1"
    flags = ["multiline"]

A ``ruleset`` given as a string selects a registered rule set by name.
"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from md2dokuwiki.options import ConverterOptions
from md2dokuwiki.rules import RuleSet

CONFIG_FILENAMES = [".md2dokuwiki.toml", ".md2dokuwiki.yaml", ".md2dokuwiki.yml", ".md2dokuwiki.json"]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.md2dokuwiki] section from a pyproject.toml file.

    Returns
    -------
    dict
        Configuration dictionary from the section, or empty dict if not found

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("md2dokuwiki", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.md2dokuwiki] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for the dedicated config files and then for a
    pyproject.toml with a [tool.md2dokuwiki] section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Invalid pyproject.toml, keep searching
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Searches the current directory and its parents first, then the user's
    home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents()
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise argparse.ArgumentTypeError(f"Invalid config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (MD2DOKUWIKI_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration, or empty dict if no file was found

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered = discover_config_file()
    if discovered:
        return load_config_file(discovered)

    return {}


def build_options_from_config(
    config: Dict[str, Any], overrides: Optional[Dict[str, Any]] = None
) -> tuple[ConverterOptions, Optional[RuleSet]]:
    """Turn a loaded configuration into converter options and a custom rule set.

    Parameters
    ----------
    config : dict
        Loaded configuration
    overrides : dict, optional
        Option values from the command line; ``None`` values are ignored

    Returns
    -------
    tuple[ConverterOptions, RuleSet or None]
        The options, and the rule set defined inline by the ``ruleset`` table
        (None when ``ruleset`` is absent or names a registered rule set)

    Raises
    ------
    ValidationError
        If the configuration holds unknown keys or invalid values
    RuleError
        If a custom rule's pattern does not compile

    """
    values = dict(config)
    custom_ruleset: Optional[RuleSet] = None

    ruleset_value = values.pop("ruleset", None)
    if isinstance(ruleset_value, dict):
        custom_ruleset = RuleSet.from_mapping(ruleset_value)
        values["ruleset"] = custom_ruleset.name
    elif ruleset_value is not None:
        values["ruleset"] = ruleset_value

    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value

    # A rule set named on the command line wins over one defined in the file
    if custom_ruleset is not None and values.get("ruleset") != custom_ruleset.name:
        custom_ruleset = None

    return ConverterOptions.from_mapping(values), custom_ruleset
