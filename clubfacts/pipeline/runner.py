"""Sequential crawl over the hub page roster with fail-soft semantics."""

from __future__ import annotations

import logging
import sys
import time
from typing import Callable, TextIO

from clubfacts.common.config_loader import CrawlerConfig
from clubfacts.common.constants import (
    STATUS_COLOUR_MISSING,
    STATUS_FAILED,
    STATUS_LOCATION_MISSING,
    STATUS_RESOLVED,
)
from clubfacts.common.errors import StageError
from clubfacts.common.http import HttpClient
from clubfacts.common.logging import log_event
from clubfacts.common.models import ExtractionResult, TeamReference
from clubfacts.extract.markup import extract_teams
from clubfacts.pipeline.pages import PageFetcher
from clubfacts.pipeline.resolve import format_line, resolve_team


def load_roster(fetcher: PageFetcher, hub_url: str) -> list[TeamReference]:
    hub = fetcher.fetch_document(hub_url)
    if hub is None:
        raise StageError(f"Hub page unavailable: {hub_url}")
    teams = extract_teams(hub, hub_url)
    if not teams:
        raise StageError(f"No clubs listed on hub page: {hub_url}")
    return teams


def _summary_status(counts: dict[str, int]) -> str:
    if any(count for status, count in counts.items() if status != STATUS_RESOLVED):
        return "partial"
    return "success"


def run_crawl(
    config: CrawlerConfig,
    *,
    run_id: str,
    logger: logging.Logger,
    http_client: HttpClient | None = None,
    out: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
    limit: int | None = None,
) -> dict:
    """Resolve every club on the hub page and write one line per club to ``out``.

    Clubs are processed strictly one after another with a blocking pause
    after each. A failure for one club is reported on its line and the
    crawl carries on. Raises ``StageError`` when the hub page yields no
    clubs at all.
    """
    out = out or sys.stdout
    counts = {
        STATUS_RESOLVED: 0,
        STATUS_COLOUR_MISSING: 0,
        STATUS_LOCATION_MISSING: 0,
        STATUS_FAILED: 0,
    }

    owns_client = http_client is None
    client = http_client or HttpClient(timeout=config.timeout, user_agent=config.user_agent)
    try:
        fetcher = PageFetcher(client, logger=logger, run_id=run_id)
        log_event(logger, "crawl start", run_id=run_id, stage="roster", url=config.hub_url, event="CRAWL_START", status="ok")
        teams = load_roster(fetcher, config.hub_url)
        if limit is not None:
            teams = teams[:limit]
        log_event(
            logger,
            f"roster loaded with {len(teams)} clubs",
            run_id=run_id,
            stage="roster",
            url=config.hub_url,
            event="ROSTER_LOADED",
            status="ok",
        )

        for team in teams:
            started = time.monotonic()
            try:
                result = resolve_team(fetcher, team, config.location_labels)
                status = result.status
                event = "TEAM_RESOLVED" if status == STATUS_RESOLVED else "TEAM_UNRESOLVED"
                log_event(
                    logger,
                    f"team {status}",
                    run_id=run_id,
                    stage="resolve",
                    team=team.name,
                    url=team.page_url,
                    event=event,
                    status="ok" if status == STATUS_RESOLVED else "warning",
                    duration_ms=round((time.monotonic() - started) * 1000),
                )
            except Exception as exc:
                result = ExtractionResult(colours=None, location=None)
                status = STATUS_FAILED
                log_event(
                    logger,
                    f"unexpected failure for team {team.name}: {exc!r}",
                    level=logging.ERROR,
                    exc_info=True,
                    run_id=run_id,
                    stage="resolve",
                    team=team.name,
                    url=team.page_url,
                    event="TEAM_FAIL",
                    status="error",
                    error_code="UNEXPECTED_ERROR",
                )
            counts[status] += 1
            out.write(format_line(team, result))
            out.flush()
            sleep(config.delay_seconds)
    finally:
        if owns_client:
            client.close()

    summary = {
        "run_id": run_id,
        "hub_url": config.hub_url,
        "team_count": len(teams),
        "counts": counts,
        "status": _summary_status(counts),
    }
    log_event(logger, "crawl end", run_id=run_id, stage="roster", event="CRAWL_END", status=summary["status"])
    return summary
