"""Fact extraction from club wiki pages and the club list hub page."""

from __future__ import annotations

from functools import partial
from typing import Callable, Collection, Iterator
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from clubfacts.common.constants import LOCATION_LABELS
from clubfacts.common.fallback import first_successful
from clubfacts.common.models import Coordinate, PixelGrid, TeamReference
from clubfacts.extract.colours import extract_palette, extract_style_fallback
from clubfacts.extract.dms import pair_coordinates

ImageLoader = Callable[[str], PixelGrid | None]

INFO_BOX_SELECTOR = "td.toccolours"
KIT_BODY_IMAGE_SELECTOR = "img[src*='/Kit_body_']"
KIT_BODY_PLACEHOLDER_SELECTOR = "img[src*='/Kit_body.svg']"
LOCATION_LABEL_SELECTOR = "th.infobox-label"
COORDINATE_CONTAINER_SELECTORS = ("span.geo-dms", "#coordinates")
# Latitude sources come before longitude sources; pairing is positional.
COORDINATE_TEXT_SELECTORS = (
    "span.latitude",
    "span.longitude",
    "span[title='Breitengrad']",
    "span[title='Längengrad']",
)
CLUB_TABLE_SELECTOR = "table.wikitable"
CLUB_ROW_HEADER_SELECTOR = "th[scope='row']"


def soup_from_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _clean_text(element: Tag) -> str:
    return " ".join(element.get_text().split())


def _element_siblings(siblings: Iterator) -> Iterator[Tag]:
    return (sibling for sibling in siblings if isinstance(sibling, Tag))


def _kit_image_palette(info_box: Tag, base_url: str, load_image: ImageLoader) -> tuple[str, ...] | None:
    image = info_box.select_one(KIT_BODY_IMAGE_SELECTOR)
    if image is None or not image.get("src"):
        return None
    # Kit images are referenced scheme-relative ("//upload.wikimedia.org/...").
    return extract_palette(load_image(urljoin(base_url, image["src"])))


def _kit_style_palette(info_box: Tag) -> tuple[str, ...] | None:
    placeholder = info_box.select_one(KIT_BODY_PLACEHOLDER_SELECTOR)
    if placeholder is None:
        return None
    wrapper = placeholder.find_parent("div")
    if wrapper is None:
        return None
    swatch = next(_element_siblings(wrapper.previous_siblings), None)
    if swatch is None:
        return None
    return extract_style_fallback(swatch.get("style"))


def extract_colours(doc: BeautifulSoup, base_url: str, load_image: ImageLoader) -> tuple[str, ...] | None:
    """Kit colours of a club page.

    The rendered kit body image is preferred. Kits drawn as a plain SVG
    outline over a coloured block fall back to that block's inline
    ``background-color``.
    """
    info_box = doc.select_one(INFO_BOX_SELECTOR)
    if info_box is None:
        return None
    return first_successful(
        (
            partial(_kit_image_palette, info_box, base_url, load_image),
            partial(_kit_style_palette, info_box),
        )
    )


def extract_location_urls(
    doc: BeautifulSoup,
    base_url: str,
    labels: Collection[str] = LOCATION_LABELS,
) -> list[str]:
    """Pages that may carry the coordinates of a club's ground.

    Taken from the info box row labelled ground, stadium or similar. A row
    without usable links points back at the page itself; a page without
    such a row has no candidates.
    """
    label_cell = next(
        (cell for cell in doc.select(LOCATION_LABEL_SELECTOR) if _clean_text(cell).lower() in labels),
        None,
    )
    if label_cell is None:
        return []
    value_cell = next(_element_siblings(label_cell.next_siblings), None)
    if value_cell is None:
        return []

    urls = []
    for anchor in value_cell.select("a[href]"):
        href = anchor["href"].strip()
        # Red links ("new") point at pages that do not exist yet.
        if "new" in (anchor.get("class") or []) or not href or href.startswith("#"):
            continue
        urls.append(urljoin(base_url, href))
    return urls or [base_url]


def extract_coordinates(doc: BeautifulSoup) -> Coordinate | None:
    container = first_successful(partial(doc.select_one, selector) for selector in COORDINATE_CONTAINER_SELECTORS)
    if container is None:
        return None
    texts = [
        " ".join(_clean_text(element) for element in container.select(selector))
        for selector in COORDINATE_TEXT_SELECTORS
    ]
    return pair_coordinates(text for text in texts if text)


def _level3_heading(element: Tag) -> Tag | None:
    if element.name == "h3":
        return element
    # Newer skins wrap headings: <div class="mw-heading mw-heading3"><h3>...</h3></div>
    if element.name == "div" and "mw-heading3" in (element.get("class") or []):
        return element.find("h3")
    return None


def _table_country(table: Tag) -> str | None:
    for sibling in _element_siblings(table.previous_siblings):
        heading = _level3_heading(sibling)
        if heading is not None:
            headline = heading.select_one(".mw-headline") or heading
            return _clean_text(headline) or None
    return None


def extract_teams(doc: BeautifulSoup, base_url: str) -> list[TeamReference]:
    teams: list[TeamReference] = []
    for table in doc.select(CLUB_TABLE_SELECTOR):
        country = _table_country(table)
        for cell in table.select(CLUB_ROW_HEADER_SELECTOR):
            anchor = next((a for a in cell.select("a[href]") if _clean_text(a)), None)
            if anchor is None:
                continue
            teams.append(TeamReference(country, _clean_text(anchor), urljoin(base_url, anchor["href"])))
    return teams
