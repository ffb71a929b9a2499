import json

import pytest

from clubfacts import cli
from clubfacts.pipeline import runner
from tests.support import FIXTURES_DIR, WIKI, build_fixture_site

pytestmark = pytest.mark.integration

CONFIG_DIR = FIXTURES_DIR.parent.parent / "config"


def _patch_client(monkeypatch, site):
    monkeypatch.setattr(runner, "HttpClient", lambda **kwargs: site)


def test_cli_partial_run_writes_report_and_log(monkeypatch, tmp_path, capsys):
    site = build_fixture_site()
    _patch_client(monkeypatch, site)

    code = cli.main(
        [
            "--config-dir",
            str(CONFIG_DIR),
            "--hub-url",
            f"{WIKI}/List_of_clubs",
            "--delay",
            "0",
            "--data-dir",
            str(tmp_path),
            "--run-id",
            "crawl-smoke",
        ]
    )

    assert code == 10
    assert capsys.readouterr().out == (FIXTURES_DIR / "expected_output.txt").read_text(encoding="utf-8")
    assert site.closed is True

    summary = json.loads((tmp_path / "out" / "reports" / "run_summary.json").read_text(encoding="utf-8"))
    assert summary["run_id"] == "crawl-smoke"
    assert summary["counts"]["resolved"] == 3

    log_lines = (tmp_path / "run_meta" / "crawl-smoke.log.jsonl").read_text(encoding="utf-8").splitlines()
    events = [json.loads(line)["event"] for line in log_lines]
    assert events[0] == "CRAWL_START"
    assert events[-1] == "CRAWL_END"
    assert "DECODE_FAIL" in events


def test_cli_success_exit_code(monkeypatch, tmp_path, capsys):
    _patch_client(monkeypatch, build_fixture_site())

    code = cli.main(
        ["--config-dir", str(CONFIG_DIR), "--hub-url", f"{WIKI}/List_of_clubs", "--delay", "0", "--limit", "2"]
    )

    assert code == 0
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_cli_hard_fails_when_hub_missing(monkeypatch, tmp_path):
    _patch_client(monkeypatch, build_fixture_site())

    code = cli.main(
        [
            "--config-dir",
            str(CONFIG_DIR),
            "--hub-url",
            f"{WIKI}/Missing_list",
            "--delay",
            "0",
            "--data-dir",
            str(tmp_path),
        ]
    )

    assert code == 20
    summary = json.loads((tmp_path / "out" / "reports" / "run_summary.json").read_text(encoding="utf-8"))
    assert summary["status"] == "error"
    assert summary["error_code"] == "STAGE_ERROR"


def test_cli_rejects_invalid_config(tmp_path):
    (tmp_path / "crawler.yml").write_text("hub:\n  url: not-a-url\n", encoding="utf-8")

    assert cli.main(["--config-dir", str(tmp_path)]) == 20


def test_cli_hard_fails_on_malformed_config(tmp_path):
    (tmp_path / "crawler.yml").write_text("hub: [unclosed\n", encoding="utf-8")

    assert cli.main(["--config-dir", str(tmp_path)]) == 20


def test_cli_allow_unknown_config_accepts_extra_keys(monkeypatch, tmp_path, capsys):
    _patch_client(monkeypatch, build_fixture_site())
    (tmp_path / "crawler.yml").write_text("pacing:\n  jitter_seconds: 0.5\n", encoding="utf-8")
    argv = ["--config-dir", str(tmp_path), "--hub-url", f"{WIKI}/List_of_clubs", "--delay", "0", "--limit", "1"]

    assert cli.main(argv) == 20
    assert cli.main(argv + ["--allow-unknown-config"]) == 0
    assert capsys.readouterr().out == "CountryX|TeamY|10.0,20.0|rgb(1,2,3)\n"
