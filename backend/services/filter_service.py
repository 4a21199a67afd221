from collections.abc import Iterable

from models.country import Card, FilterState

ALL = "ALL"
REGIONS = ["Africa", "Americas", "Antarctic", "Asia", "Europe", "Oceania"]


def is_all(region: str) -> bool:
    return not region or region.upper() == ALL


def apply_filters(cards: Iterable[Card], filters: FilterState) -> list[Card]:
    """Return the cards matching every active filter, in their original order.

    Region is a case-insensitive exact match and search a case-insensitive
    substring of the name. An empty value, or ALL for region, disables that
    filter.
    """
    result = list(cards)

    if not is_all(filters.region):
        region = filters.region.casefold()
        result = [c for c in result if c.region.casefold() == region]

    if filters.search:
        search = filters.search.casefold()
        result = [c for c in result if search in c.name.casefold()]

    return result
