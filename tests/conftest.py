"""Shared fixtures: a small registry with deliberate slug collisions."""

import json
from pathlib import Path

import pytest

from plowfinder.registry import Provider, Registry, default_cities

PROVIDER_RECORDS = [
    {"id": 13, "name": "Glander Excavating", "city": "Wabasha", "serviceAreas": ["Wabasha", "Lake City"]},
    {"id": 2, "name": "Red Wing Plow & Haul", "city": "Red Wing", "serviceAreas": ["Red Wing"]},
    # Same slug as id 13; registered later, so it never owns the short URL.
    {"id": 5, "name": "Glander  Excavating!", "city": "Lake City", "serviceAreas": ["Lake City"]},
    # Normalizes onto a city slug and a reserved page slug.
    {"id": 8, "name": "Lake City", "serviceAreas": ["Lake City"]},
    {"id": 9, "name": "About", "serviceAreas": []},
]


@pytest.fixture
def providers() -> tuple[Provider, ...]:
    return tuple(
        Provider(
            id=record["id"],
            name=record["name"],
            city=record.get("city", ""),
            service_areas=tuple(record["serviceAreas"]),
        )
        for record in PROVIDER_RECORDS
    )


@pytest.fixture
def registry(providers: tuple[Provider, ...]) -> Registry:
    return Registry(default_cities(), providers)


@pytest.fixture
def providers_file(tmp_path: Path) -> Path:
    path = tmp_path / "providers.json"
    path.write_text(json.dumps(PROVIDER_RECORDS), encoding="utf-8")
    return path


@pytest.fixture
def shell_file(tmp_path: Path) -> Path:
    build = tmp_path / "build"
    build.mkdir()
    path = build / "index.html"
    path.write_text("<!DOCTYPE html><div id=root></div>", encoding="utf-8")
    return path
