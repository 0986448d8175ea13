# File: tests/test_cli.py
"""Тесты для CLI (`favscout.cli`) с использованием click.testing.CliRunner.
run_pipeline подменяется, сеть не используется.
"""
import json

import pytest
from click.testing import CliRunner

import favscout.cli as cli_module
from favscout.cli import cli
from favscout.errors import InputError, StorageError
from favscout.models import FaviconRecord, PageResult, RunSummary


@pytest.fixture()
def calls(monkeypatch):
    """Патчим run_pipeline: запоминаем аргументы и возвращаем фиктивный результат."""
    seen = []

    async def fake_run(cfg, input_file):
        seen.append((cfg, input_file))
        return RunSummary(
            pages=[
                PageResult(
                    url="http://example.com",
                    favicons=[FaviconRecord("http://example.com/favicon.ico", "m" * 32, "s" * 64)],
                ),
                PageResult(url="http://example.com/missing", error="error: status code 404"),
            ]
        )

    monkeypatch.setattr(cli_module, "run_pipeline", fake_run)
    return seen


@pytest.fixture()
def urls_file(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text("http://example.com\n", encoding="utf-8")
    return path


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "FavScout" in result.output


def test_missing_file_flag_prints_usage(calls):
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 0
    assert "--file" in result.output
    assert "Usage:" in result.output
    assert calls == []


def test_defaults_passed_to_pipeline(calls, urls_file):
    result = CliRunner().invoke(cli, ["--file", str(urls_file)])
    assert result.exit_code == 0, result.output
    cfg, input_file = calls[0]
    assert input_file == urls_file
    assert str(cfg.database) == "favicons.db"
    assert cfg.refetch_digests is True
    assert cfg.extraction_mode == "loose"


def test_flags_override_config(calls, urls_file, tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("timeout: 5\nconcurrency: 2\n", encoding="utf-8")
    db = tmp_path / "out.db"

    result = CliRunner().invoke(
        cli,
        [
            "-f", str(urls_file),
            "--config", str(cfg_file),
            "--db", str(db),
            "--timeout", "1.5",
            "--single-fetch",
            "--mode", "html",
        ],
    )
    assert result.exit_code == 0, result.output
    cfg, _ = calls[0]
    assert cfg.database == db
    assert cfg.timeout == 1.5
    assert cfg.concurrency == 2
    assert cfg.refetch_digests is False
    assert cfg.extraction_mode == "html"


def test_invalid_config_exits(calls, urls_file, tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("timeout: -1\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["-f", str(urls_file), "-c", str(cfg_file)])
    assert result.exit_code == 1
    assert "Error loading configuration" in result.output
    assert calls == []


@pytest.mark.parametrize(
    "exc,message",
    [
        (InputError("Input file not found: urls.txt"), "Error reading URLs from file"),
        (StorageError("unable to open database file"), "Error opening database"),
    ],
)
def test_fatal_errors_exit_nonzero(monkeypatch, urls_file, exc, message):
    async def failing(cfg, input_file):
        raise exc

    monkeypatch.setattr(cli_module, "run_pipeline", failing)
    result = CliRunner().invoke(cli, ["--file", str(urls_file)])
    assert result.exit_code == 1
    assert message in result.output


def test_json_report(calls, urls_file, tmp_path):
    out = tmp_path / "reports" / "run.json"
    result = CliRunner().invoke(cli, ["--file", str(urls_file), "--json", str(out)])
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["totals"] == {"pages": 2, "failed_pages": 1, "favicons": 1, "stored": 1, "errors": 1}
    assert data["pages"][0]["favicons"][0]["link"] == "http://example.com/favicon.ico"


def test_html_report(calls, urls_file, tmp_path):
    out = tmp_path / "run.html"
    result = CliRunner().invoke(cli, ["--file", str(urls_file), "--html", str(out)])
    assert result.exit_code == 0, result.output
    html = out.read_text(encoding="utf-8")
    assert "http://example.com/favicon.ico" in html
    assert "error: status code 404" in html
