"""Tests for CLI tool."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from telegramtl.cli.main import main


@pytest.fixture
def schema_file(tmp_path: Path, telegram_json_schema: dict[str, Any]) -> Path:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(telegram_json_schema))
    return path


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "telegramtl.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "telegramtl: Telegram Type Language" in result.stdout
    assert "--inspect" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "telegramtl.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "telegramtl 0.1.0" in result.stdout


def test_cli_inspect(schema_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --inspect prints both namespaces."""
    assert main(["--inspect", str(schema_file)]) == 0

    out = capsys.readouterr().out
    assert "4 types, 2 methods loaded." in out
    assert "Telegram.type" in out
    assert "Telegram.service" in out
    assert "messages" in out


def test_cli_inspect_prefixes(schema_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --type-prefix and --service-prefix."""
    args = ["--inspect", str(schema_file), "--type-prefix", "types", "--service-prefix", "methods"]

    assert main(args) == 0

    out = capsys.readouterr().out
    assert "= types =" in out
    assert "= methods =" in out


def test_cli_inspect_missing_file(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --inspect with missing file."""
    assert main(["--inspect", "nonexistent.json"]) == 1
    assert "not found" in capsys.readouterr().err.lower()


def test_cli_inspect_invalid_schema(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --inspect with a schema missing its methods."""
    path = tmp_path / "schema.json"
    path.write_text('{"constructors": []}')

    assert main(["--inspect", str(path)]) == 1
    assert "Error inspecting schema" in capsys.readouterr().err


def test_cli_password(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --password prints hex of the requested size."""
    assert main(["--password", "16"]) == 0

    password = capsys.readouterr().out.strip()
    assert len(password) == 32
    int(password, 16)


def test_cli_password_default(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--password"]) == 0
    assert len(capsys.readouterr().out.strip()) == 256


def test_cli_no_args(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI with no arguments (should show help)."""
    assert main([]) == 0
    assert "telegramtl: Telegram Type Language" in capsys.readouterr().out
