"""Tests for running SafeRoute as a module (`python -m saferoute`)."""

from __future__ import annotations

import runpy
from unittest.mock import patch

import pytest


def test_module_help_exits_zero() -> None:
    with patch("sys.argv", ["saferoute", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("saferoute", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_subcommand_help_exits_zero() -> None:
    with patch("sys.argv", ["saferoute", "route", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("saferoute", run_name="__main__")
    assert exc_info.value.code == 0
