"""
Tests for CLI commands — generate, config check, map-type, global options.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from voschema.main import cli


def _generate_args(inputs_dir: Path, compilation: str = "compilation.yml") -> list[str]:
    return [
        "--config", str(inputs_dir / "voschema.yml"),
        "generate",
        "--work-items", str(inputs_dir / "items.yml"),
        "--compilation", str(inputs_dir / compilation),
    ]


class TestCLIGlobal:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Swashbuckle schema synthesizer" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestGenerateCommand:
    def test_prints_artifact(self, inputs_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, _generate_args(inputs_dir))
        assert result.exit_code == 0
        assert "VogenSwashbuckleExtensions" in result.output
        assert "MapType<App.Age>" in result.output

    def test_json(self, inputs_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, [*_generate_args(inputs_dir), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["framework_referenced"] is True
        assert data["artifact"]["name"] == "SwashbuckleSchemaExtensions_g.cs"

    def test_nothing_generated(self, inputs_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, _generate_args(inputs_dir, "bare.yml"))
        assert result.exit_code == 0
        assert "VogenSwashbuckleExtensions" not in result.output

    def test_writes_out(self, inputs_dir: Path):
        out = inputs_dir / "generated"
        runner = CliRunner()
        result = runner.invoke(cli, [*_generate_args(inputs_dir), "--out", str(out)])
        assert result.exit_code == 0
        assert (out / "SwashbuckleSchemaExtensions_g.cs").is_file()

        again = runner.invoke(cli, [*_generate_args(inputs_dir), "--out", str(out)])
        assert again.exit_code == 1
        assert "already exists" in again.output

        forced = runner.invoke(cli, [*_generate_args(inputs_dir), "--out", str(out), "--overwrite"])
        assert forced.exit_code == 0

    def test_existing_file_json_exit_code(self, inputs_dir: Path):
        """--json reports a refused overwrite with exit code 1, like text mode."""
        out = inputs_dir / "generated"
        out.mkdir()
        (out / "SwashbuckleSchemaExtensions_g.cs").write_text("old")
        runner = CliRunner()
        result = runner.invoke(cli, [*_generate_args(inputs_dir), "--out", str(out), "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["written"][0]["written"] is False
        assert (out / "SwashbuckleSchemaExtensions_g.cs").read_text() == "old"

    def test_misspelled_config_key(self, inputs_dir: Path):
        (inputs_dir / "voschema.yml").write_text("swashbuckle_schema_generaton: generate-schema-filter\n")
        runner = CliRunner()
        result = runner.invoke(cli, _generate_args(inputs_dir))
        assert result.exit_code == 1
        assert "Invalid generator configuration" in result.output

    def test_missing_input(self, inputs_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "--config", str(inputs_dir / "voschema.yml"),
            "generate",
            "--work-items", str(inputs_dir / "nope.yml"),
            "--compilation", str(inputs_dir / "compilation.yml"),
        ])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_missing_input_json(self, inputs_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "--config", str(inputs_dir / "voschema.yml"),
            "generate",
            "--work-items", str(inputs_dir / "nope.yml"),
            "--compilation", str(inputs_dir / "compilation.yml"),
            "--json",
        ])
        assert result.exit_code == 1
        assert "error" in json.loads(result.output)


class TestConfigCheckCommand:
    def test_valid(self, inputs_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(inputs_dir / "voschema.yml"), "config", "check"])
        assert result.exit_code == 0
        assert "generate-extension-method" in result.output

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "voschema.yml"
        path.write_text("swashbuckle_schema_generation: nope\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(path), "config", "check", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["valid"] is False


class TestMapTypeCommand:
    def test_text(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["map-type", "System.Int32", "System.Guid"])
        assert result.exit_code == 0
        assert "System.Int32 → integer" in result.output
        assert "System.Guid → object" in result.output

    def test_json(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["map-type", "System.Boolean", "--json"])
        assert json.loads(result.output) == {"System.Boolean": "boolean"}
