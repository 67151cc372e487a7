"""Unit tests for __main__.py entry points."""

import runpy
import sys
from unittest.mock import patch

import pytest


@pytest.mark.unit
class TestMd2DokuWikiMain:
    """Test md2dokuwiki/__main__.py entry point."""

    def test_main_module_importable(self):
        """Test that __main__.py module is importable."""
        import md2dokuwiki.__main__  # noqa: F401

    def test_run_as_module_exits_with_cli_code(self):
        with patch("md2dokuwiki.cli.main", return_value=3), pytest.raises(SystemExit) as exc_info:
            runpy.run_module("md2dokuwiki", run_name="__main__")
        assert exc_info.value.code == 3

    def test_version(self, capsys):
        from md2dokuwiki import __version__
        from md2dokuwiki.cli import main

        with patch.object(sys, "argv", ["md2dokuwiki", "--version"]), pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
