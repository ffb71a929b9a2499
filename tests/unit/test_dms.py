import pytest

from clubfacts.common.errors import ParseMismatch
from clubfacts.common.models import Coordinate
from clubfacts.extract.dms import normalise_dms_text, pair_coordinates, parse_dms


def test_parse_dms_north_and_west():
    assert parse_dms("51°30′26″N") == pytest.approx(51.5072, abs=1e-4)
    assert parse_dms("0°7′39″W") == pytest.approx(-0.1275, abs=1e-4)


def test_parse_dms_seconds_are_optional():
    assert parse_dms("52°30′N") == 52.5
    assert parse_dms("33°52′S") == pytest.approx(-33.8667, abs=1e-4)


def test_parse_dms_treats_o_as_east():
    assert parse_dms("11°15′O") == 11.25
    assert parse_dms("11°15′E") == 11.25


def test_parse_dms_accepts_decimal_comma_and_spacing():
    assert parse_dms("48° 30′ 0,0″ N") == 48.5
    assert parse_dms("48°\xa030′\xa0N") == 48.5


@pytest.mark.parametrize("token", ["", "51.5", "51°N", "51°30′26″", "51°30′26″X", "abc°1′N"])
def test_parse_dms_rejects_malformed_tokens(token):
    with pytest.raises(ParseMismatch):
        parse_dms(token)


def test_normalise_dms_text_strips_markup_and_entities():
    assert normalise_dms_text("<b>51</b>°&nbsp;30′ 26,5″ N") == "51°30′26.5″N"


def test_pair_coordinates_pairs_by_position():
    assert pair_coordinates(["10°0′0″N", "20°0′0″E"]) == Coordinate(10.0, 20.0)


def test_pair_coordinates_skips_empty_values_and_ignores_extra():
    assert pair_coordinates(["", "  ", "10°0′N", "20°0′W", "30°0′N"]) == Coordinate(10.0, -20.0)


def test_pair_coordinates_needs_two_values():
    assert pair_coordinates(["10°0′N"]) is None
    assert pair_coordinates([]) is None


def test_pair_coordinates_rejects_out_of_range_latitude():
    assert pair_coordinates(["95°0′N", "20°0′E"]) is None


def test_pair_coordinates_propagates_parse_mismatch():
    with pytest.raises(ParseMismatch):
        pair_coordinates(["10°0′N", "twenty east"])
