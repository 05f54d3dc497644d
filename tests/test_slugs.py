"""Tests for plowfinder.slugs - the slug normalizer."""

import re

import pytest

from plowfinder.slugs import is_slug, normalize

SLUG_OR_EMPTY = re.compile(r"^(?:[a-z0-9]+(?:-[a-z0-9]+)*)?$")

SAMPLES = [
    "",
    "Lake City",
    "Glander Excavating & Sons",
    "  --Red   Wing!! ",
    "A&B",
    "&&&",
    "Plow/Haul_Co.",
    "Café Déneigement",
    "---",
    "O'Brien's 24/7 Snow",
    "lake-city-mn-snow-removal",
    "\t\nTabs\tand\nnewlines",
    "ALL CAPS 123",
]


class TestNormalize:
    def test_ampersand_becomes_and(self) -> None:
        assert normalize("Glander Excavating & Sons") == "glander-excavating-and-sons"

    def test_spaces_to_dashes(self) -> None:
        assert normalize("Lake City") == "lake-city"

    def test_collapses_runs(self) -> None:
        assert normalize("Red   --  Wing") == "red-wing"

    def test_strips_edges(self) -> None:
        assert normalize("  --Red Wing!! ") == "red-wing"

    def test_ampersand_without_spaces(self) -> None:
        assert normalize("A&B") == "aandb"

    def test_empty(self) -> None:
        assert normalize("") == ""

    def test_only_punctuation(self) -> None:
        assert normalize("!!! ---") == ""

    def test_non_ascii_letters_are_separators(self) -> None:
        assert normalize("Café Déneigement") == "caf-d-neigement"

    def test_digits_kept(self) -> None:
        assert normalize("O'Brien's 24/7 Snow") == "o-brien-s-24-7-snow"

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text: str) -> None:
        once = normalize(text)
        assert normalize(once) == once

    @pytest.mark.parametrize("text", SAMPLES)
    def test_output_shape(self, text: str) -> None:
        assert SLUG_OR_EMPTY.match(normalize(text))


class TestIsSlug:
    def test_valid(self) -> None:
        assert is_slug("lake-city-mn-snow-removal")

    def test_empty_is_not_slug(self) -> None:
        assert not is_slug("")

    def test_double_dash(self) -> None:
        assert not is_slug("lake--city")

    def test_uppercase(self) -> None:
        assert not is_slug("Lake-City")
