"""Tests for the command line front end."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from keygroup.cli import app

runner = CliRunner()


@pytest.fixture
def names(tmp_path: Path) -> Path:
    path = tmp_path / "names.txt"
    path.write_text("John\nPaul\nGeorge\nRingo\n", encoding="utf-8")
    return path


def test_json_by_length(names: Path) -> None:
    """Groups are printed in first-occurrence order."""
    result = runner.invoke(app, ["lines", str(names), "--by", "length", "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert list(data.items()) == [("4", ["John", "Paul"]), ("6", ["George"]), ("5", ["Ringo"])]


def test_stdin_casefold() -> None:
    """'-' reads from stdin."""
    result = runner.invoke(app, ["lines", "-", "--by", "casefold", "--json"], input="A\nb\nB\na\n")
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"a": ["A", "a"], "b": ["b", "B"]}


def test_field_key(tmp_path: Path) -> None:
    """--field groups on a separated column."""
    path = tmp_path / "data.csv"
    path.write_text("x,paris\ny,rome\nz,paris\n", encoding="utf-8")
    result = runner.invoke(app, ["lines", str(path), "--field", "1", "--sep", ",", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"paris": ["x,paris", "z,paris"], "rome": ["y,rome"]}


def test_missing_field_fails(tmp_path: Path) -> None:
    """A line without the requested field aborts with exit code 1."""
    path = tmp_path / "data.txt"
    path.write_text("a b\nc\n", encoding="utf-8")
    result = runner.invoke(app, ["lines", str(path), "--field", "1", "--json"])
    assert result.exit_code == 1
    assert "error" in result.output
    assert "IndexError" in result.output


def test_table_output(names: Path) -> None:
    """Default output is a table listing keys and members."""
    result = runner.invoke(app, ["lines", str(names), "--by", "first-word"])
    assert result.exit_code == 0, result.output
    assert "4 groups" in result.stdout
    assert "George" in result.stdout


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    pkg_logger = logging.getLogger("keygroup")
    handlers, level = list(pkg_logger.handlers), pkg_logger.level
    yield pkg_logger
    pkg_logger.handlers = handlers
    pkg_logger.setLevel(level)


def test_verbose_flag(names: Path, package_logger: logging.Logger) -> None:
    """--verbose sends debug records of the grouping to stderr."""
    result = runner.invoke(app, ["--verbose", "lines", str(names), "--json"])
    assert result.exit_code == 0, result.output
    assert package_logger.level == logging.DEBUG
    assert "grouped 4 elements into 4 groups" in result.output
