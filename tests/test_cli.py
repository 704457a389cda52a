"""Tests for the click command line."""

import json

import pytest
from click.testing import CliRunner

from resourcegen import __version__
from resourcegen.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestGenerateCommand:
    def test_generates_modules(self, runner, sample_schema_path, tmp_path):
        output_dir = tmp_path / "api_client"
        result = runner.invoke(main, ["generate", "-s", str(sample_schema_path), "-o", str(output_dir)])

        assert result.exit_code == 0, result.output
        assert "Schema: " in result.output
        assert "Generated 6 modules:" in result.output
        assert "tasks_api.py" in result.output
        assert "getTasksCollectionApi" in result.output
        assert "└── user_limits_api.py" in result.output
        assert (output_dir / "tasks_api.py").is_file()
        assert (output_dir / "__init__.py").is_file()

    def test_quiet_hides_banner(self, runner, sample_schema_path, tmp_path):
        result = runner.invoke(
            main, ["generate", "-s", str(sample_schema_path), "-o", str(tmp_path / "out"), "-q"]
        )
        assert result.exit_code == 0, result.output
        assert "Schema:" not in result.output
        assert "Generated 6 modules:" in result.output

    def test_options_from_environment(self, runner, sample_schema_path, tmp_path):
        output_dir = tmp_path / "env_out"
        result = runner.invoke(
            main,
            ["generate"],
            env={
                "RESOURCEGEN_SCHEMA": str(sample_schema_path),
                "RESOURCEGEN_OUTPUT": str(output_dir),
                "RESOURCEGEN_API_PREFIX": "/v2",
            },
        )
        assert result.exit_code == 0, result.output
        assert "API Prefix: /v2" in result.output
        assert "DEFAULT_API_PREFIX = '/v2'" in (output_dir / "client.py").read_text(encoding="utf-8")

    def test_token_env_var_and_manifest_from_environment(self, runner, sample_schema_path, tmp_path):
        output_dir = tmp_path / "env_out"
        manifest = tmp_path / "manifest.json"
        result = runner.invoke(
            main,
            ["generate", "-s", str(sample_schema_path), "-o", str(output_dir)],
            env={
                "RESOURCEGEN_TOKEN_ENV_VAR": "HABITS_TOKEN",
                "RESOURCEGEN_MANIFEST": str(manifest),
            },
        )
        assert result.exit_code == 0, result.output
        assert "TOKEN_ENV_VAR = 'HABITS_TOKEN'" in (output_dir / "client.py").read_text(encoding="utf-8")
        assert manifest.is_file()

    def test_runtime_import(self, runner, sample_schema_path, tmp_path):
        output_dir = tmp_path / "out"
        result = runner.invoke(main, [
            "generate", "-s", str(sample_schema_path), "-o", str(output_dir),
            "--runtime-import", "myapp.http",
        ])
        assert result.exit_code == 0, result.output
        assert "from myapp.http import ApiClient" in (output_dir / "goals_api.py").read_text(encoding="utf-8")

    def test_manifest(self, runner, sample_schema_path, tmp_path):
        manifest = tmp_path / "manifest.json"
        result = runner.invoke(main, [
            "generate", "-s", str(sample_schema_path), "-o", str(tmp_path / "out"),
            "--manifest", str(manifest),
        ])
        assert result.exit_code == 0, result.output
        entries = json.loads(manifest.read_text(encoding="utf-8"))
        assert [e["class_name"] for e in entries][0] == "AuthenticationApi"

    def test_missing_schema(self, runner, tmp_path):
        result = runner.invoke(main, ["generate", "-s", str(tmp_path / "nope.json"), "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert "Schema file not found at:" in result.output

    def test_invalid_schema(self, runner, tmp_path):
        schema = tmp_path / "api.json"
        schema.write_text(json.dumps({"openapi": "3.1.0", "paths": {}}), encoding="utf-8")
        result = runner.invoke(main, ["generate", "-s", str(schema), "-o", str(tmp_path / "out")])
        assert result.exit_code == 1
        assert "no paths defined" in result.output


class TestOtherCommands:
    def test_init(self, runner):
        result = runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert "resourcegen generate --schema" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
