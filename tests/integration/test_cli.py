"""Integration tests for the command line interface."""

import json
import logging
import warnings

import pytest
from click.testing import CliRunner

import cyrlat.cyrlat_cli
from cyrlat.cyrlat_cli import cli
from cyrlat.exceptions import SchemaFormatError


@pytest.fixture
def runner():
    """Click runner that restores package logging afterwards."""
    logger = logging.getLogger("cyrlat")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield CliRunner()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_translit_arguments(runner):
    """Test transliterating command line arguments."""
    result = runner.invoke(cli, ["translit", "Юлия,", "съешь", "ещё"])

    assert result.exit_code == 0, result.output
    assert result.output == "Yuliya, syesh yeshchyo\n"


def test_translit_schema_option(runner):
    """Test choosing a bundled schema."""
    result = runner.invoke(cli, ["translit", "-s", "icao_doc_9303", "Юлия"])

    assert result.exit_code == 0, result.output
    assert result.output == "Iuliia\n"


def test_translit_stdin(runner):
    """Test transliterating stdin line by line."""
    result = runner.invoke(cli, ["translit"], input="Юлия\nхороший чаю\n")

    assert result.exit_code == 0, result.output
    assert result.output == "Yuliya\nkhoroshy chayu\n"


def test_translit_stdin_without_deprecation_warnings(runner):
    """Test reading stdin does not rely on deprecated click helpers."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = runner.invoke(cli, ["translit"], input="ель\n")

    assert result.exit_code == 0, result.output
    assert result.output == "yel\n"
    assert not [
        w for w in caught
        if issubclass(w.category, DeprecationWarning) and w.filename.endswith("cyrlat_cli.py")
    ]


def test_translit_schema_file(runner, definition_file):
    """Test using a schema definition file."""
    result = runner.invoke(cli, ["translit", "--schema-file", str(definition_file), "баш"])

    assert result.exit_code == 0, result.output
    assert result.output == "bash!\n"


def test_translit_unknown_schema(runner):
    """Test unknown schema exits with an error."""
    result = runner.invoke(cli, ["translit", "-s", "klingon", "Юлия"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "klingon" in result.output


def test_file_to_output(runner, tmp_path):
    """Test transliterating a file into another file."""
    input_path = tmp_path / "in.txt"
    input_path.write_text("Юлия\nВЕЛИКИЙ бульон\n", encoding="utf-8")
    output_path = tmp_path / "out" / "result.txt"

    result = runner.invoke(
        cli, ["file", str(input_path), "-o", str(output_path), "--workers", "2"]
    )

    assert result.exit_code == 0, result.output
    assert "Wrote 2 lines" in result.output
    assert output_path.read_text(encoding="utf-8") == "Yuliya\nVELIKY bulyon\n"


def test_file_to_stdout(runner, tmp_path):
    """Test transliterating a file to stdout."""
    input_path = tmp_path / "in.txt"
    input_path.write_text("ель\nпол", encoding="utf-8")

    result = runner.invoke(cli, ["file", str(input_path)])

    assert result.exit_code == 0, result.output
    assert result.output == "yel\npol"


def test_settings_override(runner, tmp_path):
    """Test a settings file changes the default schema."""
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("default_schema: telegram\n", encoding="utf-8")

    result = runner.invoke(cli, ["--settings", str(settings_path), "translit", "Щука"])

    assert result.exit_code == 0, result.output
    assert result.output == "Schuka\n"


def test_invalid_settings(runner, tmp_path):
    """Test invalid settings are rejected."""
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("logging:\n  level: LOUD\n", encoding="utf-8")

    result = runner.invoke(cli, ["--settings", str(settings_path), "translit", "Юлия"])

    assert result.exit_code == 1
    assert "Invalid settings" in result.output


def test_schemas_list(runner):
    """Test listing bundled schemas."""
    result = runner.invoke(cli, ["schemas", "list"])

    assert result.exit_code == 0, result.output
    assert "wikipedia" in result.output
    assert "ala_lc" in result.output


def test_schemas_list_malformed_definition(runner, monkeypatch):
    """Test a broken bundled definition is reported, not raised."""

    def broken(name):
        raise SchemaFormatError(f"{name}.json", ["mapping: required property"])

    monkeypatch.setattr(cyrlat.cyrlat_cli, "load_schema", broken)
    result = runner.invoke(cli, ["schemas", "list"])

    assert result.exit_code == 1
    assert "Error: Malformed schema definition" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_schemas_show(runner):
    """Test dumping a schema definition."""
    result = runner.invoke(cli, ["schemas", "show", "wikipedia"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["name"] == "wikipedia"
    assert data["ending_mapping"]["ий"] == "y"


def test_schemas_show_unknown(runner):
    """Test showing an unknown schema fails."""
    result = runner.invoke(cli, ["schemas", "show", "klingon"])

    assert result.exit_code == 1


def test_schemas_validate(runner):
    """Test validating all bundled schemas."""
    result = runner.invoke(cli, ["schemas", "validate"])

    assert result.exit_code == 0, result.output
    assert "passed validation" in result.output


def test_schemas_validate_unknown(runner):
    """Test validating an unknown schema name fails."""
    result = runner.invoke(cli, ["schemas", "validate", "klingon"])

    assert result.exit_code == 1
    assert "klingon" in result.output
