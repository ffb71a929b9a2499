"""CLI entrypoint for the club kit colour and ground location crawler."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from clubfacts.common.config_loader import load_crawler_config
from clubfacts.common.constants import EXIT_HARD_FAIL, EXIT_PARTIAL, EXIT_SUCCESS
from clubfacts.common.errors import ConfigError, CrawlError, StageError
from clubfacts.common.logging import build_logger, log_event
from clubfacts.common.time_utils import generate_run_id
from clubfacts.pipeline.reports import failed_run_summary, write_run_summary
from clubfacts.pipeline.runner import run_crawl


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--allow-unknown-config", action="store_true", help="accept config keys this version does not know")
    parser.add_argument("--hub-url", default=None)
    parser.add_argument("--delay", type=float, default=None, help="seconds to pause after each club")
    parser.add_argument("--limit", type=_positive_int, default=None, help="only process the first N clubs")
    parser.add_argument("--data-dir", default=None, help="write the run log and summary report here")
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def _overrides(args: argparse.Namespace) -> dict:
    overrides: dict = {}
    if args.hub_url is not None:
        overrides["hub"] = {"url": args.hub_url}
    if args.delay is not None:
        overrides["pacing"] = {"delay_seconds": args.delay}
    return overrides


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    data_dir = Path(args.data_dir) if args.data_dir else None
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None

    logger = build_logger(run_id, data_dir=data_dir, level=args.log_level)

    try:
        config = load_crawler_config(
            Path(args.config_dir),
            allow_unknown=args.allow_unknown_config,
            overlay_config_dir=overlay_config_dir,
            overrides=_overrides(args),
        )
    except ConfigError as exc:
        log_event(logger, str(exc), run_id=run_id, stage="config", event="CONFIG_FAIL", status="error", error_code=exc.error_code)
        return EXIT_HARD_FAIL

    try:
        summary = run_crawl(config, run_id=run_id, logger=logger, limit=args.limit)
    except StageError as exc:
        log_event(logger, str(exc), run_id=run_id, stage="roster", event="CRAWL_FAIL", status="error", error_code=exc.error_code)
        if data_dir is not None:
            write_run_summary(data_dir, failed_run_summary(run_id, config.hub_url, exc.error_code))
        return EXIT_HARD_FAIL

    if data_dir is not None:
        write_run_summary(data_dir, summary)
    if summary["status"] == "success":
        return EXIT_SUCCESS
    return EXIT_PARTIAL


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return run_command(args)
    except CrawlError:
        return EXIT_HARD_FAIL
    except Exception:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
