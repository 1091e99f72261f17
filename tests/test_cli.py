"""
Tests for CLI commands — add, config check, and global options.
"""

import json
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from gomanctl.main import cli


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "scaffold commands for goman" in result.output
        assert "add" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestAddCommand:
    """Tests for the add command."""

    def test_add_default_parent(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "my-server"])
        assert result.exit_code == 0, result.output

        target = go_project.resolve() / "cmd" / "myServer.go"
        assert result.output.strip() == f"myServer created at {target}"

        content = target.read_text(encoding="utf-8")
        assert "var myServerCmd = &goman.Command{" in content
        assert "rootCmd.AddCommand(myServerCmd)" in content
        assert "\npackage cmd\n" in content

    def test_add_custom_parent(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "user_list", "--parent", "userCmd"])
        assert result.exit_code == 0, result.output
        content = (go_project / "cmd" / "userList.go").read_text(encoding="utf-8")
        assert "userCmd.AddCommand(userListCmd)" in content

    def test_command_alias(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["command", "serve", "-p", "appCmd"])
        assert result.exit_code == 0, result.output
        assert (go_project / "cmd" / "serve.go").is_file()

    def test_missing_name_is_fatal(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add"])
        assert result.exit_code == 1
        assert "add needs a name for the command" in result.output
        assert list((go_project / "cmd").iterdir()) == [go_project / "cmd" / "root.go"]

    def test_non_ascii_name_rejected(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "größe"])
        assert result.exit_code == 1
        assert "ASCII" in result.output

    def test_path_name_rejected(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "../evil"])
        assert result.exit_code == 1
        assert "may only contain" in result.output
        assert not (go_project / "evil.go").exists()
        assert list((go_project / "cmd").iterdir()) == [go_project / "cmd" / "root.go"]

    def test_nested_name_rejected(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "foo/bar"])
        assert result.exit_code == 1
        assert "may only contain" in result.output
        assert not (go_project / "cmd" / "foo").exists()

    def test_removed_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        gone = tmp_path / "gone"
        gone.mkdir()
        monkeypatch.chdir(gone)
        os.rmdir(gone)
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "serve"])
        assert result.exit_code == 1
        assert "Cannot resolve working directory" in result.output

    def test_separator_only_name_rejected(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "--", "--"])
        assert result.exit_code == 1
        assert "no identifier characters" in result.output

    def test_existing_file_is_fatal(self, go_project: Path):
        (go_project / "cmd" / "serve.go").write_text("package cmd\n// mine\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "serve"])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert "// mine" in (go_project / "cmd" / "serve.go").read_text()

    def test_exported_name_kept(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "Server"])
        assert result.exit_code == 0, result.output
        content = (go_project / "cmd" / "Server.go").read_text(encoding="utf-8")
        assert "var ServerCmd = &goman.Command{" in content

    def test_package_option(self, gopath_dir: Path, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "serve", "--package", "github.com/acme/tool"])
        assert result.exit_code == 0, result.output
        target = gopath_dir / "src" / "github.com" / "acme" / "tool" / "cmd" / "serve.go"
        assert target.is_file()

    def test_config_license_and_author(self, go_project: Path):
        (go_project / "goman.yml").write_text(
            "author: Jane Doe\nyear: 2020\nlicense: bsd\n"
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "serve"])
        assert result.exit_code == 0, result.output
        content = (go_project / "cmd" / "serve.go").read_text(encoding="utf-8")
        assert content.startswith(
            "// Copyright © 2020 Jane Doe\n"
            "// Use of this source code is governed by a BSD-style\n"
            "// license that can be found in the LICENSE file.\n"
            "\n"
            "package cmd\n"
        )

    def test_explicit_config_option(self, go_project: Path, tmp_path: Path):
        config = tmp_path / "elsewhere.yml"
        config.write_text("author: Ops\nyear: 2021\nlicense: none\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "add", "serve"])
        assert result.exit_code == 0, result.output
        content = (go_project / "cmd" / "serve.go").read_text(encoding="utf-8")
        assert content.startswith("// Copyright © 2021 Ops\n\npackage cmd\n")

    def test_bad_license_is_fatal(self, go_project: Path):
        (go_project / "goman.yml").write_text("license: wtfpl\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "serve"])
        assert result.exit_code == 1
        assert "Unknown license" in result.output
        assert not (go_project / "cmd" / "serve.go").exists()

    def test_dry_run(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "my-server", "--dry-run"])
        assert result.exit_code == 0, result.output
        assert "rootCmd.AddCommand(myServerCmd)" in result.output
        assert not (go_project / "cmd" / "myServer.go").exists()

    def test_json(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "my-server", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["cmd_name"] == "myServer"
        assert data["exported"] is False
        assert data["cmd_path"].endswith("myServer.go")
        assert data["project"]["license"] == "Apache 2.0"
        assert data["reason"] == "Command myServer registered on rootCmd"

    def test_json_error(self, go_project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["add", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"] == "add needs a name for the command"


class TestConfigCheckCommand:
    """Tests for the config check command."""

    def test_valid_config(self, go_project: Path):
        (go_project / "goman.yml").write_text("author: Jane\nlicense: mit\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "check"])
        assert result.exit_code == 0
        assert "valid" in result.output.lower()
        assert "MIT License" in result.output

    def test_valid_config_json(self, go_project: Path):
        (go_project / "goman.yml").write_text("author: Jane\nlicense: mit\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "check", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True
        assert data["author"] == "Jane"

    def test_invalid_config(self, go_project: Path):
        (go_project / "goman.yml").write_text("license: wtfpl\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "check"])
        assert result.exit_code == 1
        assert "Unknown license" in result.output

    def test_missing_config_file(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yml"), "config", "check"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_removed_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        gone = tmp_path / "gone"
        gone.mkdir()
        monkeypatch.chdir(gone)
        os.rmdir(gone)
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "check"])
        assert result.exit_code == 1
        assert "Cannot resolve working directory" in result.output
