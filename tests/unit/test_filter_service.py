from __future__ import annotations

from models.country import Card, FilterState
from services.filter_service import ALL, apply_filters, is_all


def _cards() -> list[Card]:
    return [
        Card(name="Testland", region="Europe"),
        Card(name="Other", region="Europe"),
        Card(name="Testville", region="Asia"),
        Card(name="Atlantis", region="Oceania"),
    ]


def test_no_filters_is_identity() -> None:
    cards = _cards()
    assert apply_filters(cards, FilterState()) == cards


def test_result_is_a_new_list() -> None:
    cards = _cards()
    result = apply_filters(cards, FilterState())
    result.pop()
    assert len(cards) == 4


def test_region_and_search_combine() -> None:
    result = apply_filters(_cards(), FilterState(region="Europe", search="test"))
    assert result == [Card(name="Testland", region="Europe")]


def test_region_is_exact_and_case_insensitive() -> None:
    cards = _cards() + [Card(name="Eurasia Minor", region="Europe Minor")]
    assert [c.name for c in apply_filters(cards, FilterState(region="europe"))] == ["Testland", "Other"]


def test_all_sentinel_disables_region() -> None:
    cards = _cards()
    assert apply_filters(cards, FilterState(region=ALL)) == cards
    assert apply_filters(cards, FilterState(region="all")) == cards
    assert is_all("") and is_all("ALL") and not is_all("Asia")


def test_search_is_case_insensitive_substring() -> None:
    result = apply_filters(_cards(), FilterState(search="TEST"))
    assert [c.name for c in result] == ["Testland", "Testville"]
    result = apply_filters(_cards(), FilterState(search="lant"))
    assert [c.name for c in result] == ["Atlantis"]


def test_sequential_filters_equal_combined() -> None:
    cards = _cards()
    for region in ["", "Europe", "Asia", "Nowhere"]:
        for search in ["", "test", "o", "zzz"]:
            step = apply_filters(apply_filters(cards, FilterState(region=region)), FilterState(search=search))
            other = apply_filters(apply_filters(cards, FilterState(search=search)), FilterState(region=region))
            combined = apply_filters(cards, FilterState(region=region, search=search))
            assert step == combined == other


def test_no_match_returns_empty() -> None:
    assert apply_filters(_cards(), FilterState(region="Antarctic")) == []
