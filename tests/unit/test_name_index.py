from __future__ import annotations

import json
from pathlib import Path

from services.name_index import build_name_index


def _load(name: str):
    p = Path(__file__).resolve().parents[1] / "fixtures" / "api_responses" / name
    return json.loads(p.read_text(encoding="utf-8"))


def test_build_name_index_from_fixture() -> None:
    index = build_name_index(_load("countries_all.json"))
    assert index == {
        "DEU": "Germany",
        "FRA": "France",
        "JPN": "Japan",
        "ATA": "Antarctica",
    }


def test_records_missing_code_or_name_are_skipped() -> None:
    countries = [
        {"cca3": "AAA"},
        {"name": {"common": "No Code"}},
        {"cca3": "BBB", "name": {"official": "Only Official"}},
        {"cca3": "CCC", "name": "flat string"},
        None,
        "garbage",
        {"cca3": "DDD", "name": {"common": "Dee"}},
    ]
    assert build_name_index(countries) == {"DDD": "Dee"}


def test_build_name_index_is_order_independent() -> None:
    countries = _load("countries_all.json")
    assert build_name_index(countries) == build_name_index(list(reversed(countries)))


def test_build_name_index_empty() -> None:
    assert build_name_index([]) == {}
