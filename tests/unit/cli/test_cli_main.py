#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the md2dokuwiki command line entry point."""

from pathlib import Path

import pytest
import yaml
from utils import EXPECTED_RFC, SAMPLE_RFC, write_documents

from md2dokuwiki.cli import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
    main,
)
from md2dokuwiki.constants import CONFIG_ENV_VAR
from md2dokuwiki.exceptions import (
    FileAccessError,
    Md2DokuWikiError,
    OutputWriteError,
    RuleError,
    TitleError,
    ValidationError,
)


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test exception to exit code mapping."""

    @pytest.mark.parametrize(
        "exception,expected",
        [
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (TitleError("x", "# PHP RFC: "), EXIT_VALIDATION_ERROR),
            (RuleError("bad rule"), EXIT_VALIDATION_ERROR),
            (FileAccessError("a.md"), EXIT_FILE_ERROR),
            (OutputWriteError("out"), EXIT_FILE_ERROR),
            (Md2DokuWikiError("other"), EXIT_ERROR),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, expected):
        assert get_exit_code_for_exception(exception) == expected


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Test argument defaults."""

    def test_defaults(self):
        args = create_parser().parse_args([])
        assert args.input == "."
        assert args.output_dir is None
        assert args.ruleset is None
        assert args.strict_title is None
        assert args.log_level == "WARNING"

    def test_strict_title_flag(self):
        assert create_parser().parse_args(["--strict-title"]).strict_title is True


@pytest.mark.unit
@pytest.mark.cli
class TestMainDirectory:
    """Test directory conversion through main()."""

    def test_converts_directory_and_prints_names(self, tmp_path: Path, capsys):
        write_documents(tmp_path, {"b.md": "## B", "a.md": "# A", "notes.txt": "x"})

        assert main([str(tmp_path), "--no-config"]) == EXIT_SUCCESS

        assert capsys.readouterr().out == "a.md\nb.md\n"
        assert (tmp_path / "dokuwiki" / "a.md").read_text(encoding="utf-8") == "====== A ======"
        assert (tmp_path / "dokuwiki" / "b.md").read_text(encoding="utf-8") == "===== B ====="
        assert not (tmp_path / "dokuwiki" / "notes.txt").exists()

    def test_defaults_to_current_directory(self, tmp_path: Path, monkeypatch, capsys):
        write_documents(tmp_path, {"rfc.md": SAMPLE_RFC})
        monkeypatch.chdir(tmp_path)

        assert main(["--no-config"]) == EXIT_SUCCESS

        assert capsys.readouterr().out == "rfc.md\n"
        assert (tmp_path / "dokuwiki" / "rfc.md").read_text(encoding="utf-8") == EXPECTED_RFC

    def test_output_dir(self, tmp_path: Path):
        write_documents(tmp_path / "in", {"a.md": "*a*"})

        assert main([str(tmp_path / "in"), "-o", str(tmp_path / "wiki"), "--no-config"]) == EXIT_SUCCESS

        assert (tmp_path / "wiki" / "a.md").read_text(encoding="utf-8") == "//a//"

    def test_classic_ruleset(self, tmp_path: Path):
        write_documents(tmp_path, {"a.md": "[1: note]\nVOTING_SNIPPET"})

        assert main([str(tmp_path), "--ruleset", "classic", "--no-config"]) == EXIT_SUCCESS

        assert (tmp_path / "dokuwiki" / "a.md").read_text(encoding="utf-8") == "[1: note]\nVOTING_SNIPPET"

    def test_extension(self, tmp_path: Path, capsys):
        write_documents(tmp_path, {"a.markdown": "# A", "b.md": "# B"})

        assert main([str(tmp_path), "--extension", ".markdown", "--no-config"]) == EXIT_SUCCESS

        assert capsys.readouterr().out == "a.markdown\n"

    def test_missing_directory(self, tmp_path: Path, capsys):
        assert main([str(tmp_path / "missing"), "--no-config"]) == EXIT_FILE_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_unknown_ruleset(self, tmp_path: Path, capsys):
        assert main([str(tmp_path), "--ruleset", "nope", "--no-config"]) == EXIT_VALIDATION_ERROR
        assert "Unknown rule set 'nope'" in capsys.readouterr().err

    def test_strict_title_failure(self, tmp_path: Path, capsys):
        write_documents(tmp_path, {"a.md": "No title\nVOTING_SNIPPET"})

        assert main([str(tmp_path), "--strict-title", "--no-config"]) == EXIT_VALIDATION_ERROR
        assert "RFC title prefix" in capsys.readouterr().err

    def test_rich_summary(self, tmp_path: Path, capsys):
        write_documents(tmp_path, {"a.md": "# A"})

        assert main([str(tmp_path), "--no-config", "--rich", "--force-rich"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "a.md" in out
        assert "Conversion Summary" in out


@pytest.mark.unit
@pytest.mark.cli
class TestMainSingleFile:
    """Test single file conversion through main()."""

    def test_stdout(self, tmp_path: Path, capsys):
        (source,) = write_documents(tmp_path, {"rfc.md": SAMPLE_RFC})

        assert main([str(source), "--stdout", "--no-config"]) == EXIT_SUCCESS

        assert capsys.readouterr().out == EXPECTED_RFC
        assert not (tmp_path / "dokuwiki").exists()

    def test_writes_next_to_source(self, tmp_path: Path, capsys):
        (source,) = write_documents(tmp_path, {"a.md": "- item"})

        assert main([str(source), "--no-config"]) == EXIT_SUCCESS

        assert capsys.readouterr().out == "a.md\n"
        assert (tmp_path / "dokuwiki" / "a.md").read_text(encoding="utf-8") == "  * item"

    def test_stdout_requires_file(self, tmp_path: Path, capsys):
        assert main([str(tmp_path), "--stdout", "--no-config"]) == EXIT_VALIDATION_ERROR
        assert "--stdout requires a single input file" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestMainConfig:
    """Test configuration handling in main()."""

    def test_config_file_custom_ruleset(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.safe_dump(
                {
                    "output_dirname": "wiki",
                    "ruleset": {
                        "name": "quotes",
                        "rules": [{"pattern": "^> (.+)$", "replacement": r"QUOTE \1", "flags": ["multiline"]}],
                    },
                }
            )
        )
        write_documents(tmp_path / "docs", {"a.md": "> hello\n# not a rule here"})

        assert main([str(tmp_path / "docs"), "--config", str(config_file)]) == EXIT_SUCCESS

        output = (tmp_path / "docs" / "wiki" / "a.md").read_text(encoding="utf-8")
        assert output == "QUOTE hello\n# not a rule here"

    def test_env_var_config(self, tmp_path: Path, monkeypatch):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"ruleset": "classic"}')
        write_documents(tmp_path / "docs", {"a.md": "[1: note]"})
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        assert main([str(tmp_path / "docs")]) == EXIT_SUCCESS

        assert (tmp_path / "docs" / "dokuwiki" / "a.md").read_text(encoding="utf-8") == "[1: note]"

    def test_command_line_overrides_config(self, tmp_path: Path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"ruleset": "classic"}')
        write_documents(tmp_path / "docs", {"a.md": "[1: note]"})

        assert main([str(tmp_path / "docs"), "--config", str(config_file), "--ruleset", "rfc"]) == EXIT_SUCCESS

        assert (tmp_path / "docs" / "dokuwiki" / "a.md").read_text(encoding="utf-8") == "((note))"

    def test_no_config_ignores_env_var(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))

        assert main([str(tmp_path), "--no-config"]) == EXIT_SUCCESS

    def test_invalid_config(self, tmp_path: Path, capsys):
        config_file = tmp_path / "config.toml"
        config_file.write_text("ruleset = \n")

        assert main([str(tmp_path), "--config", str(config_file)]) == EXIT_VALIDATION_ERROR
        assert "Invalid config file" in capsys.readouterr().err

    def test_unknown_config_key(self, tmp_path: Path, capsys):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"colour": "blue"}')

        assert main([str(tmp_path), "--config", str(config_file)]) == EXIT_VALIDATION_ERROR
        assert "colour" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
def test_list_rulesets(capsys):
    assert main(["--list-rulesets"]) == EXIT_SUCCESS

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("classic: ")
    assert lines[1].startswith("rfc: ")
