from __future__ import annotations

import io
from pathlib import Path

from PIL import Image

from clubfacts.common.errors import HttpRequestError

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"
WIKI = "https://en.wikipedia.org/wiki"
UPLOADS = "https://upload.wikimedia.org/wikipedia/commons"


class FakeHttpClient:
    def __init__(self, pages: dict[str, str] | None = None, images: dict[str, bytes] | None = None):
        self.pages = pages or {}
        self.images = images or {}
        self.text_calls: list[str] = []
        self.byte_calls: list[str] = []
        self.closed = False

    def get_text(self, url: str) -> str:
        self.text_calls.append(url)
        if url not in self.pages:
            raise HttpRequestError(f"HTTP status 404 for {url}")
        return self.pages[url]

    def get_bytes(self, url: str) -> bytes:
        self.byte_calls.append(url)
        if url not in self.images:
            raise HttpRequestError(f"HTTP status 404 for {url}")
        return self.images[url]

    def close(self):
        self.closed = True


def png_bytes(colours: list[tuple[int, int, int]], width: int = 4) -> bytes:
    image = Image.new("RGB", (width, len(colours) // width))
    image.putdata(colours)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def read_page(name: str) -> str:
    return (FIXTURES_DIR / "pages" / name).read_text(encoding="utf-8")


def build_fixture_site() -> FakeHttpClient:
    pages = {
        f"{WIKI}/List_of_clubs": read_page("hub.html"),
        f"{WIKI}/TeamY": read_page("team_y.html"),
        f"{WIKI}/Y_Arena": read_page("y_arena.html"),
        f"{WIKI}/Team_V": read_page("team_v.html"),
        f"{WIKI}/V_Stadium": read_page("v_stadium.html"),
        f"{WIKI}/V_Town": read_page("v_town.html"),
        f"{WIKI}/Team_U": read_page("team_u.html"),
        f"{WIKI}/Team_W": read_page("team_w.html"),
        f"{WIKI}/W_Field": read_page("w_field.html"),
        f"{WIKI}/Team_Z": read_page("team_z.html"),
    }
    images = {
        f"{UPLOADS}/a/ab/Kit_body_teamy2425h.png": png_bytes([(1, 2, 3)] * 16),
        f"{UPLOADS}/c/cd/Kit_body_teamv.png": png_bytes([(200, 0, 0)] * 8 + [(0, 0, 0)] * 5 + [(255, 255, 255)] * 3),
        f"{UPLOADS}/e/ef/Kit_body_teamu.png": png_bytes([(0, 128, 0)] * 16),
        f"{UPLOADS}/0/01/Kit_body_teamw.png": b"<html>not an image</html>",
    }
    return FakeHttpClient(pages, images)


