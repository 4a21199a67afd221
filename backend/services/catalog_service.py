"""In-memory country catalog: owns the card list, name index and filters."""

import logging
from collections.abc import Awaitable, Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any
from urllib.parse import quote

from models.country import Card, Detail, FilterState
from services.cache_service import KeyValueStore
from services.filter_service import apply_filters, is_all
from services.name_index import build_name_index
from services.projection_service import to_cards, to_detail
from utils.http_client import request_json

logger = logging.getLogger(__name__)

Transport = Callable[..., Awaitable[Any | None]]

CARDS_KEY = "countries:cards"
NAME_INDEX_KEY = "countries:name_index"


class CatalogState(str, Enum):
    EMPTY = "empty"
    LOADED = "loaded"


class CountryCatalog:
    """Cards and the code->name index always come from the same snapshot.

    A failed refresh keeps whatever was loaded before. Filter changes are
    synchronous, so the stored filters and the returned view never diverge.
    """

    def __init__(
        self,
        countries_url: str,
        country_info_url: str,
        transport: Transport = request_json,
        store: KeyValueStore | None = None,
    ):
        self._countries_url = countries_url
        self._country_info_url = country_info_url.rstrip("/")
        self._transport = transport
        self._store = store
        self.reset()

    def reset(self) -> None:
        self._cards: tuple[Card, ...] = ()
        self._name_index: dict[str, str] = {}
        self._filters = FilterState()
        self._state = CatalogState.EMPTY

    @property
    def state(self) -> CatalogState:
        return self._state

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    @property
    def name_index(self) -> Mapping[str, str]:
        return MappingProxyType(self._name_index)

    @property
    def filters(self) -> FilterState:
        return self._filters

    async def fetch_all(self) -> list[Card]:
        """Load every country, replacing cards and name index together."""
        countries = await self._transport(self._countries_url)
        if countries is None:
            return []
        if not isinstance(countries, list):
            logger.error("Expected a list of countries, got %s", type(countries).__name__)
            return []

        name_index = build_name_index(countries)
        cards = tuple(to_cards(countries))
        self._replace(cards, name_index)
        self._persist()
        logger.info("Loaded %d countries (%d codes indexed)", len(cards), len(name_index))
        return list(cards)

    async def fetch_detail(self, name: str) -> Detail | None:
        """Fetch one country by exact common name and build its detail view."""
        if not name or not name.strip():
            return None

        # fullText avoids partial matches, e.g. "China" also matching Macau
        url = f"{self._country_info_url}/{quote(name.strip().lower())}"
        data = await self._transport(url, params={"fullText": "true"})
        if not data or not isinstance(data, list):
            logger.warning("No data returned for country: %s", name)
            return None

        return to_detail(data[0], self._name_index)

    def set_region_filter(self, region: str) -> list[Card]:
        self._filters = self._filters.model_copy(
            update={"region": "" if is_all(region) else region}
        )
        return self.filtered()

    def set_search_filter(self, text: str) -> list[Card]:
        self._filters = self._filters.model_copy(update={"search": text.strip()})
        return self.filtered()

    def filtered(self) -> list[Card]:
        return apply_filters(self._cards, self._filters)

    def restore(self) -> list[Card]:
        """Load the last persisted snapshot without touching the network.

        Persisted values were written by this catalog and are trusted as-is.
        """
        if self._store is None:
            return []
        raw_cards = self._store.load(CARDS_KEY)
        name_index = self._store.load(NAME_INDEX_KEY)
        if raw_cards is None or name_index is None:
            return []

        cards = tuple(Card.model_construct(**c) for c in raw_cards)
        self._replace(cards, dict(name_index))
        logger.info("Restored %d countries from cache", len(cards))
        return list(cards)

    def _replace(self, cards: tuple[Card, ...], name_index: dict[str, str]) -> None:
        self._cards = cards
        self._name_index = name_index
        self._filters = FilterState()
        self._state = CatalogState.LOADED

    def _persist(self) -> None:
        if self._store is None:
            return
        try:
            self._store.save(CARDS_KEY, [c.model_dump() for c in self._cards])
            self._store.save(NAME_INDEX_KEY, dict(self._name_index))
        except OSError as e:
            logger.exception("Failed to persist country snapshot: %s", e)
