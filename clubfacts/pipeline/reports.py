"""Run report output."""

from __future__ import annotations

from pathlib import Path

from clubfacts.common.fs import write_json


def failed_run_summary(run_id: str, hub_url: str, error_code: str) -> dict:
    return {
        "run_id": run_id,
        "hub_url": hub_url,
        "team_count": 0,
        "counts": {},
        "status": "error",
        "error_code": error_code,
    }


def write_run_summary(data_dir: Path, summary: dict) -> Path:
    summary_path = data_dir / "out" / "reports" / "run_summary.json"
    write_json(summary_path, summary)
    return summary_path
