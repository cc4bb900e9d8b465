from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from jsimports import cli

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from jsimports.settings import Settings


def test_build_parser_supports_version_flag(capsys) -> None:
    parser = cli.build_parser()

    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])
    assert exc_info.value.code == 0

    captured = capsys.readouterr()
    assert "0.1.0" in captured.out


def test_main_without_command_prints_help(mocker, capsys, settings: Settings) -> None:
    mocker.patch("jsimports.cli.get_settings", return_value=settings)

    assert cli.main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_main_prints_report_to_stdout(
    mocker,
    capsys,
    settings: Settings,
    write_source: Callable[[str, str], Path],
) -> None:
    mocker.patch("jsimports.cli.get_settings", return_value=settings)
    path = write_source("app.js", "const b = require('B');\nimport A from './A';\n")

    result = cli.main(["extract", str(path)])

    assert result == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["files"] == [{"path": str(path), "imports": ["./A", "b"], "error": None}]


def test_main_persists_report_to_output(
    mocker,
    settings: Settings,
    write_source: Callable[[str, str], Path],
    tmp_path: Path,
) -> None:
    mocker.patch("jsimports.cli.get_settings", return_value=settings)
    source = write_source("src/index.ts", "export * from './lib';\n")
    output_path = tmp_path / "out" / "report.json"

    result = cli.main(["extract", str(tmp_path / "src"), "--output", str(output_path)])

    assert result == 0
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["files"][0]["path"] == str(source)
    assert payload["files"][0]["imports"] == ["./lib"]


def test_main_fails_fast_on_malformed_literal(
    mocker,
    settings: Settings,
    write_source: Callable[[str, str], Path],
) -> None:
    mocker.patch("jsimports.cli.get_settings", return_value=settings)
    mock_persist = mocker.patch("jsimports.cli.persist_report")
    path = write_source("bad.js", 'require("oops\\");\n')

    assert cli.main(["extract", str(path), "--output", "report.json"]) == 1
    mock_persist.assert_not_called()


def test_main_keep_going_records_failures(
    mocker,
    settings: Settings,
    write_source: Callable[[str, str], Path],
    tmp_path: Path,
) -> None:
    mocker.patch("jsimports.cli.get_settings", return_value=settings)
    write_source("a_bad.js", 'require("oops\\");\n')
    write_source("b_good.js", "require('fine');\n")
    output_path = tmp_path / "report.json"

    result = cli.main(["extract", str(tmp_path), "--keep-going", "--output", str(output_path)])

    assert result == 1
    files = json.loads(output_path.read_text(encoding="utf-8"))["files"]
    assert [entry["imports"] for entry in files] == [[], ["fine"]]
    assert "unterminated escape" in files[0]["error"]
    assert files[1]["error"] is None


def test_main_returns_error_for_missing_path(mocker, settings: Settings, tmp_path: Path) -> None:
    mocker.patch("jsimports.cli.get_settings", return_value=settings)

    assert cli.main(["extract", str(tmp_path / "typo.js")]) == 1


def test_main_returns_error_on_unexpected_failure(mocker, settings: Settings, tmp_path: Path) -> None:
    mocker.patch("jsimports.cli.get_settings", return_value=settings)
    mocker.patch("jsimports.cli.scan_paths", side_effect=RuntimeError("boom"))

    assert cli.main(["extract", str(tmp_path)]) == 1


def test_main_reports_non_utf8_literal(mocker, capsys, settings: Settings, tmp_path: Path) -> None:
    mocker.patch("jsimports.cli.get_settings", return_value=settings)
    path = tmp_path / "latin.js"
    path.write_bytes(b"require('caf\xe9');\n")

    assert cli.main(["extract", str(path)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["files"][0]["imports"] == ["caf\\xe9"]
    assert payload["errors"] == 0
    assert payload["import_count"] == 1
