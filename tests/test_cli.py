"""Tests for plowfinder.cli - CLI entrypoint and argument parsing."""

import json
from pathlib import Path

import pytest

from plowfinder.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["export", "sitemap", "resolve", "routes"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_export_missing_shell(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["export", "--out", "dist"])
        assert exc_info.value.code == 2

    def test_resolve_missing_path(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "plowfinder" in capsys.readouterr().out


class TestExportCommand:
    def test_writes_tree(
        self, providers_file: Path, shell_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        out = tmp_path / "dist"
        main(["export", "--providers", str(providers_file), "--shell", str(shell_file), "--out", str(out)])

        assert (out / "index.html").is_file()
        assert (out / "lake-city-mn-snow-removal" / "index.html").is_file()
        assert (out / "provider" / "13" / "glander-excavating" / "index.html").is_file()
        assert (out / "sitemap.xml").is_file()
        assert (out / "robots.txt").is_file()

        captured = capsys.readouterr()
        assert "Exported" in captured.out
        assert "Skipped 3 short URLs" in captured.err

    def test_strict_fails_on_skipped_short_urls(
        self, providers_file: Path, shell_file: Path, tmp_path: Path
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([
                "export",
                "--providers", str(providers_file),
                "--shell", str(shell_file),
                "--out", str(tmp_path / "dist"),
                "--strict",
            ])
        assert exc_info.value.code == 1

    def test_no_sitemap(self, providers_file: Path, shell_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "dist"
        main([
            "export",
            "--providers", str(providers_file),
            "--shell", str(shell_file),
            "--out", str(out),
            "--no-sitemap",
        ])
        assert not (out / "sitemap.xml").exists()

    def test_missing_providers(
        self, shell_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([
                "export",
                "--providers", str(tmp_path / "missing.json"),
                "--shell", str(shell_file),
                "--out", str(tmp_path / "dist"),
            ])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_bad_base_url(
        self, providers_file: Path, shell_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([
                "export",
                "--providers", str(providers_file),
                "--shell", str(shell_file),
                "--out", str(tmp_path / "dist"),
                "--base-url", "mnplowfinder.com",
            ])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestSitemapCommand:
    def test_writes_sitemap(
        self, providers_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        target = tmp_path / "sitemap.xml"
        main(["sitemap", "--providers", str(providers_file), "--out", str(target)])
        assert "https://mnplowfinder.com/provider/2/red-wing-plow-and-haul" in target.read_text(encoding="utf-8")
        assert "Sitemap written" in capsys.readouterr().out


class TestResolveCommand:
    def test_city(self, providers_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "--providers", str(providers_file), "/lake-city"])
        assert capsys.readouterr().out.strip() == (
            "city: Lake City -> https://mnplowfinder.com/lake-city-mn-snow-removal"
        )

    def test_provider_json(self, providers_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "--providers", str(providers_file), "--json", "/glander-excavating"])
        record = json.loads(capsys.readouterr().out)
        assert record["kind"] == "provider"
        assert record["provider"]["id"] == 13
        assert record["canonical_path"] == "/provider/13/glander-excavating"

    def test_not_found_exits_one(self, providers_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "--providers", str(providers_file), "/nowhere-at-all"])
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().out


class TestRoutesCommand:
    def test_lists_routes_and_flags_skips(
        self, providers_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["routes", "--providers", str(providers_file)])
        out = capsys.readouterr().out
        assert out.splitlines()[0].split() == ["KIND", "PATH", "RESOURCE", "NOTE"]
        assert "/provider/13/glander-excavating" in out
        assert "skipped: /lake-city already belongs to city 'Lake City'" in out
        assert "skipped: /about already belongs to static 'About'" in out
