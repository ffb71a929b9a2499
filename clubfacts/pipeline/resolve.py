"""Per-team resolution of kit colours and ground coordinates."""

from __future__ import annotations

from functools import partial
from typing import Collection

from clubfacts.common.constants import LOCATION_LABELS, STATUS_COLOUR_MISSING, STATUS_LOCATION_MISSING
from clubfacts.common.errors import ParseMismatch
from clubfacts.common.fallback import first_successful
from clubfacts.common.models import Coordinate, ExtractionResult, TeamReference
from clubfacts.extract.markup import extract_colours, extract_coordinates, extract_location_urls
from clubfacts.pipeline.pages import PageFetcher


def _coordinates_at(fetcher: PageFetcher, url: str) -> Coordinate | None:
    doc = fetcher.fetch_document(url)
    if doc is None:
        return None
    try:
        return extract_coordinates(doc)
    except ParseMismatch as exc:
        fetcher.log_parse_mismatch(url, exc)
        return None


def _coordinates_via_links(fetcher: PageFetcher, url: str, labels: Collection[str]) -> Coordinate | None:
    doc = fetcher.fetch_document(url)
    if doc is None:
        return None
    linked = extract_location_urls(doc, url, labels)
    return first_successful(partial(_coordinates_at, fetcher, linked_url) for linked_url in linked)


def find_location(
    fetcher: PageFetcher,
    candidates: list[str],
    labels: Collection[str] = LOCATION_LABELS,
) -> Coordinate | None:
    """Search candidate pages for coordinates, at most two links deep.

    Every candidate is tried directly first. Only when none of them carries
    coordinates is each candidate's own ground link list followed, one
    candidate at a time and in order. The search stops at the first hit.
    """
    direct = first_successful(partial(_coordinates_at, fetcher, url) for url in candidates)
    if direct is not None:
        return direct
    return first_successful(partial(_coordinates_via_links, fetcher, url, labels) for url in candidates)


def resolve_team(
    fetcher: PageFetcher,
    team: TeamReference,
    labels: Collection[str] = LOCATION_LABELS,
) -> ExtractionResult:
    page = fetcher.fetch_document(team.page_url)
    if page is None:
        return ExtractionResult(colours=None, location=None)

    colours = extract_colours(page, team.page_url, fetcher.fetch_image)
    if colours is None:
        # Reported as a colour failure whatever the location would be.
        return ExtractionResult(colours=None, location=None)

    candidates = extract_location_urls(page, team.page_url, labels)
    return ExtractionResult(colours=colours, location=find_location(fetcher, candidates, labels))


def format_line(team: TeamReference, result: ExtractionResult) -> str:
    status = result.status
    if status == STATUS_COLOUR_MISSING:
        return f"Unable to fetch colour for {team.name}\n"
    if status == STATUS_LOCATION_MISSING:
        return f"Unable to fetch location for {team.name}\n"
    latitude, longitude = result.location
    colours = ",".join(result.colours)
    return f"{team.country or ''}|{team.name}|{latitude},{longitude}|{colours}\n"
