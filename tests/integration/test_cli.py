"""
Integration tests for the rosalina-generate command.
"""

import json
from unittest.mock import patch

import pytest

import rosalina
from rosalina.cli import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, build_argument_parser, main
from rosalina.utils.logging import RosalinaLogger, setup_logging


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each command from an empty directory without a config file."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    yield workdir
    setup_logging(level="INFO")


class TestArgumentParser:
    """Test command-line parsing."""

    def test_defaults(self):
        args = build_argument_parser().parse_args(["UI/MainMenu.uxml"])

        assert args.paths == ["UI/MainMenu.uxml"]
        assert args.config is None
        assert args.dry_run is False
        assert args.stdout is False

    def test_paths_required(self):
        with pytest.raises(SystemExit):
            build_argument_parser().parse_args([])


class TestGenerateCommand:
    """Test running the command end to end."""

    def test_generate_single_document(self, ui_project):
        document = ui_project / "Assets" / "UI" / "MainMenu.uxml"

        assert main([str(document)]) == EXIT_OK

        output = (ui_project / "Assets" / "UI" / "MainMenu.g.cs").read_text(encoding="utf-8")
        assert "public partial class MainMenu : MonoBehaviour" in output
        assert f"Version: {rosalina.__version__}" in output

    def test_generate_directory_skips_other_files(self, ui_project):
        assert main([str(ui_project)]) == EXIT_OK

        assert (ui_project / "Assets" / "UI" / "MainMenu.g.cs").exists()
        assert (ui_project / "Assets" / "UI" / "Menus" / "Settings.g.cs").exists()
        assert not (ui_project / "Assets" / "UI" / "Theme.g.cs").exists()

    def test_non_document_file_is_skipped(self, ui_project, capsys):
        theme = ui_project / "Assets" / "UI" / "Theme.uss"

        assert main([str(theme)]) == EXIT_USAGE
        assert "no UI documents found" in capsys.readouterr().err

    def test_dry_run(self, ui_project):
        assert main([str(ui_project), "--dry-run"]) == EXIT_OK
        assert not (ui_project / "Assets" / "UI" / "MainMenu.g.cs").exists()

    def test_stdout(self, ui_project, capsys):
        document = ui_project / "Assets" / "UI" / "MainMenu.uxml"

        assert main([str(document), "--stdout"]) == EXIT_OK

        out = capsys.readouterr().out
        assert out.startswith("//----")
        assert "public void InitializeDocument()" in out
        assert not (ui_project / "Assets" / "UI" / "MainMenu.g.cs").exists()

    def test_config_file_sets_banner(self, ui_project, tmp_path, capsys):
        config_file = tmp_path / "rosalina.json"
        config_file.write_text(json.dumps({"generator": {"tool_name": "Studio Gen", "version": "5.5"}}))
        document = ui_project / "Assets" / "UI" / "MainMenu.uxml"

        assert main([str(document), "--config", str(config_file), "--stdout"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "generated by the Studio Gen tool." in out
        assert "Version: 5.5" in out

    def test_bad_config_file(self, ui_project, tmp_path, capsys):
        config_file = tmp_path / "rosalina.json"
        config_file.write_text("{broken")

        assert main([str(ui_project), "--config", str(config_file)]) == EXIT_USAGE
        assert "error:" in capsys.readouterr().err

    def test_write_failure_reported(self, ui_project, capsys):
        document = ui_project / "Assets" / "UI" / "MainMenu.uxml"
        # A directory in the way of the generated file
        (ui_project / "Assets" / "UI" / "MainMenu.g.cs").mkdir()

        assert main([str(document)]) == EXIT_FAILURE

        err = capsys.readouterr().err
        assert f"{document}: Failed to write generated file" in err

    def test_missing_document_is_not_generated(self, tmp_path):
        document = tmp_path / "Missing.uxml"

        assert main([str(document)]) == EXIT_USAGE
        assert list(tmp_path.iterdir()) == [tmp_path / "cwd"]

    def test_missing_path_skipped_alongside_existing(self, ui_project):
        document = ui_project / "Assets" / "UI" / "MainMenu.uxml"
        missing = ui_project / "Assets" / "UI" / "Typo.uxml"

        with patch.object(RosalinaLogger, "log_skipped") as skipped:
            assert main([str(missing), str(document)]) == EXIT_OK

        skipped.assert_called_once_with(str(missing), "no such file or directory")
        assert (ui_project / "Assets" / "UI" / "MainMenu.g.cs").exists()
        assert not (ui_project / "Assets" / "UI" / "Typo.g.cs").exists()
