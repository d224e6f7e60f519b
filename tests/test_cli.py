"""CLI tests driven through :class:`click.testing.CliRunner`."""

import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from graphql_config.cli import main as cli_main

_DOC = {
    "schemaPath": "./greatRootLibrary.schema.graphql",
    "projects": {
        "evenMoreAmazingLibrary": {"schemaPath": "./evenMoreAmazingLibrary.schema.graphql"},
        "amazingLibrary": {"schemaPath": "./amazingLibrary.schema.graphql"},
        "bare": {},
    },
}


def _write(root: Path, doc=None) -> Path:
    """Write ``doc`` (default ``_DOC``) to ``root/.graphqlconfig``."""
    path = root / ".graphqlconfig"
    path.write_text(json.dumps(_DOC if doc is None else doc), encoding="utf-8")
    return path


def test_validate(tmp_path: Path):
    """Verify validate success output."""
    _write(tmp_path)
    result = CliRunner().invoke(cli_main, ["-r", str(tmp_path), "validate"])

    assert result.exit_code == 0, result.output
    assert "valid GraphQL config (3 project(s))" in result.output


def test_validate_reports_type_mismatch(tmp_path: Path):
    """Decode failures turn into a non-zero exit with the location."""
    _write(tmp_path, {"includes": ["ok", 3]})
    result = CliRunner().invoke(cli_main, ["-r", str(tmp_path), "validate"])

    assert result.exit_code == 1
    assert "includes[1]: expected a string" in result.output


def test_missing_config(tmp_path: Path):
    """An explicit but missing file is reported."""
    result = CliRunner().invoke(
        cli_main, ["-c", str(tmp_path / "nope.json"), "validate"]
    )

    assert result.exit_code == 1
    assert "GraphQL config not found" in result.output


def test_show_json(tmp_path: Path):
    """``show`` prints the re-encoded document."""
    path = _write(tmp_path)
    result = CliRunner().invoke(cli_main, ["-c", str(path), "show"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == _DOC


def test_show_yaml_single_project(tmp_path: Path):
    """``show --project`` prints only that project."""
    _write(tmp_path)
    result = CliRunner().invoke(
        cli_main,
        ["-r", str(tmp_path), "show", "--format", "yaml", "--project", "amazingLibrary"],
    )

    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output) == {"schemaPath": "./amazingLibrary.schema.graphql"}


def test_show_unknown_project(tmp_path: Path):
    """Unknown project names are rejected."""
    _write(tmp_path)
    result = CliRunner().invoke(cli_main, ["-r", str(tmp_path), "show", "-p", "ghost"])

    assert result.exit_code == 1
    assert "Unknown project: ghost" in result.output


def test_projects_listing(tmp_path: Path):
    """``projects`` lists names in lexicographic order."""
    _write(tmp_path)
    result = CliRunner().invoke(cli_main, ["-r", str(tmp_path), "projects"])

    assert result.exit_code == 0, result.output
    lines = [line.strip() for line in result.output.splitlines() if line.strip()]
    assert lines == [
        "• amazingLibrary: ./amazingLibrary.schema.graphql",
        "• bare",
        "• evenMoreAmazingLibrary: ./evenMoreAmazingLibrary.schema.graphql",
    ]


def test_projects_none_declared(tmp_path: Path):
    """A document without projects says so."""
    _write(tmp_path, {"schemaPath": "s.graphql"})
    result = CliRunner().invoke(cli_main, ["-r", str(tmp_path), "projects"])

    assert result.exit_code == 0, result.output
    assert "No projects declared." in result.output


def test_root_from_environment(tmp_path: Path, monkeypatch):
    """``$GRAPHQL_CONFIG_ROOT`` replaces ``--root``."""
    _write(tmp_path)
    monkeypatch.setenv("GRAPHQL_CONFIG_ROOT", str(tmp_path))
    result = CliRunner().invoke(cli_main, ["projects"])

    assert result.exit_code == 0, result.output
    assert "amazingLibrary" in result.output


def test_save_logfile(tmp_path: Path):
    """``--save-logfile`` mirrors INFO output when verbose."""
    _write(tmp_path)
    logfile = tmp_path / "logs" / "run.txt"
    result = CliRunner().invoke(
        cli_main,
        ["-r", str(tmp_path), "-v", "--save-logfile", str(logfile), "validate"],
    )

    assert result.exit_code == 0, result.output
    assert "Loaded GraphQL config" in logfile.read_text(encoding="utf-8")


def test_log_dir_option(tmp_path: Path):
    """``--log-dir`` writes the rotating ``graphql_config.log``."""
    _write(tmp_path)
    result = CliRunner().invoke(
        cli_main,
        ["-r", str(tmp_path), "--log-dir", str(tmp_path / "logs"), "validate"],
    )

    assert result.exit_code == 0, result.output
    log_file = tmp_path / "logs" / "graphql_config.log"
    assert "Loaded GraphQL config" in log_file.read_text(encoding="utf-8")
