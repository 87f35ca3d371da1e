"""
Tests for CLI commands — generate, resolve, config, and global options.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from dart_exports.main import cli


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "barrel files" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestGenerateCommand:
    def _make_tree(self, tmp_path: Path) -> Path:
        root = tmp_path / "lib"
        (root / "widgets").mkdir(parents=True)
        (root / "widgets" / "button.dart").write_text("class Button {}")
        (root / "main.dart").write_text("void main() {}")
        return root

    def test_generate(self, tmp_path: Path):
        root = self._make_tree(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(root), "--on-conflict", "overwrite"])
        assert result.exit_code == 0, result.output
        assert (root / "lib.dart").read_text() == (
            "export 'widgets/widgets.dart';\nexport 'main.dart';"
        )
        assert "2 written" in result.output
        assert "Exporter files created recursively" in result.output

    def test_generate_json(self, tmp_path: Path):
        root = self._make_tree(tmp_path)
        runner = CliRunner()
        result = runner.invoke(
            cli, ["--quiet", "generate", str(root), "--on-conflict", "overwrite", "--json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["counts"] == {"written": 2, "skipped": 0, "empty": 0, "failed": 0}
        assert [Path(d["path"]).name for d in data["directories"]] == ["widgets", "lib"]

    def test_generate_missing_root_is_noop(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(tmp_path / "nope")])
        assert result.exit_code == 0
        assert "Exporter files created" not in result.output

    def test_interactive_skip(self, tmp_path: Path):
        root = self._make_tree(tmp_path)
        (root / "lib.dart").write_text("export 'old.dart';")
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(root)], input="Skip\n")
        assert result.exit_code == 0, result.output
        assert "already exists" in result.output
        assert "Skipping folder 'lib' as requested." in result.output
        assert (root / "lib.dart").read_text() == "export 'old.dart';"
        assert not (root / "widgets" / "widgets.dart").exists()

    def test_interactive_overwrite_all(self, tmp_path: Path):
        root = self._make_tree(tmp_path)
        (root / "lib.dart").write_text("export 'old.dart';")
        (root / "widgets" / "widgets.dart").write_text("export 'old.dart';")
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(root)], input="overwrite all\n")
        assert result.exit_code == 0, result.output
        assert result.output.count("already exists") == 1
        assert (root / "widgets" / "widgets.dart").read_text() == "export 'button.dart';"

    def test_skip_policy(self, tmp_path: Path):
        root = self._make_tree(tmp_path)
        (root / "lib.dart").write_text("export 'old.dart';")
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(root), "--on-conflict", "skip"])
        assert result.exit_code == 0
        assert (root / "lib.dart").read_text() == "export 'old.dart';"

    def test_generate_with_config(self, tmp_path: Path):
        root = self._make_tree(tmp_path)
        (root / "generated").mkdir()
        (root / "generated" / "api.dart").write_text("")
        config = tmp_path / "dart_exports.yml"
        config.write_text("skip_folders: [generated]\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(root), "--on-conflict", "overwrite"])
        assert result.exit_code == 0, result.output
        assert "generated" not in (root / "lib.dart").read_text()

    def test_generate_bad_config(self, tmp_path: Path):
        root = self._make_tree(tmp_path)
        config = tmp_path / "broken.yml"
        config.write_text("skip_folders: 5\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "generate", str(root)])
        assert result.exit_code == 1
        assert not (root / "lib.dart").exists()


class TestResolveCommand:
    def test_default_name(self, tmp_path: Path):
        folder = tmp_path / "widgets"
        folder.mkdir()
        result = CliRunner().invoke(cli, ["resolve", str(folder)])
        assert result.exit_code == 0
        assert result.output.strip() == "widgets.dart"

    def test_index_name(self, tmp_path: Path):
        folder = tmp_path / "widgets"
        folder.mkdir()
        (folder / "widgets.dart").write_text("class Widgets {}")
        result = CliRunner().invoke(cli, ["resolve", str(folder)])
        assert result.output.strip() == "index.dart"


class TestConfigCommands:
    def test_check_valid(self, tmp_path: Path):
        config = tmp_path / "dart_exports.yml"
        config.write_text("skip_folders: [l10n, generated]\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "config", "check"])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "generated" in result.output

    def test_check_invalid_json(self, tmp_path: Path):
        config = tmp_path / "dart_exports.yml"
        config.write_text("extension: dart\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "config", "check", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["valid"] is False

    def test_show(self, tmp_path: Path):
        config = tmp_path / "dart_exports.yml"
        config.write_text("index_file: barrel.dart\n")
        result = CliRunner().invoke(
            cli, ["--config", str(config), "config", "show", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["index_file"] == "barrel.dart"
        assert data["skip_folders"] == ["l10n"]


class TestCollaboratorFor:
    def test_ask_is_interactive(self):
        from dart_exports.ui.cli.prompts import ClickCollaborator, collaborator_for

        assert type(collaborator_for("ask")) is ClickCollaborator

    def test_fixed_policy_answers_without_prompting(self):
        from dart_exports.ui.cli.prompts import collaborator_for

        collab = collaborator_for("overwrite-all")
        assert collab.prompt_choice("Overwrite?", ["Overwrite", "Skip"]) == "Overwrite All"
        assert not hasattr(collab, "messages")
