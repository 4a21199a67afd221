"""Projection of raw REST Countries records into card and detail views."""

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from models.country import (
    NOT_AVAILABLE,
    UNKNOWN,
    Card,
    Detail,
    RawCountry,
    flag_alt_for,
)

logger = logging.getLogger(__name__)

_WORD = re.compile(r"\w\S*")


def to_card(item: Any) -> Card:
    """Flatten one raw record into a card. Missing fields fall back to defaults."""
    try:
        raw = RawCountry.model_validate(item)
    except ValidationError:
        logger.warning("Malformed country record, using card defaults: %.200r", item)
        return Card()

    name = raw.common_name or UNKNOWN
    return Card(
        name=name,
        capital=_first(raw.capital) or NOT_AVAILABLE,
        population=raw.population or 0,
        region=raw.region or UNKNOWN,
        flag_url=raw.flag_url or "",
        flag_alt=_flag_alt(raw, name),
    )


def to_cards(countries: list[Any]) -> list[Card]:
    # One card per record, input order kept
    return [to_card(item) for item in countries]


def to_detail(item: Any, name_index: Mapping[str, str]) -> Detail:
    """Build the detail view for one raw record.

    Border codes are resolved through ``name_index``; codes it does not know
    are kept as-is. A record that cannot be read at all yields an
    all-default Detail rather than an error.
    """
    try:
        raw = RawCountry.model_validate(item)
    except ValidationError as e:
        logger.error("Failed to parse country detail: %s", e)
        return Detail()

    name = raw.common_name or UNKNOWN
    currencies = [title_case(currency) for currency in raw.currency_names]
    languages = raw.language_names

    return Detail(
        name=name,
        native_name=get_native_name(raw),
        population=raw.population or 0,
        region=raw.region or UNKNOWN,
        subregion=raw.subregion or UNKNOWN,
        capital=_first(raw.capital) or NOT_AVAILABLE,
        top_level_domain=_first(raw.tld) or NOT_AVAILABLE,
        currencies=_join(currencies),
        languages=_join(languages),
        borders=resolve_borders(raw.borders, name_index),
        flag_url=raw.flag_url or "",
        flag_alt=_flag_alt(raw, name),
    )


def resolve_borders(codes: Any, name_index: Mapping[str, str]) -> list[str]:
    """Map border codes to names. Unknown codes pass through unchanged.

    One entry out per entry in; a missing code shows as Unknown.
    """
    if not isinstance(codes, list):
        return []
    return [_border_name(code, name_index) for code in codes]


def _border_name(code: Any, name_index: Mapping[str, str]) -> str:
    if code is None:
        return UNKNOWN
    if not isinstance(code, str):
        return str(code)
    return name_index.get(code, code)


def get_native_name(raw: RawCountry) -> str:
    """Native common name for the first spoken language that has one.

    Language order in the payload does not reflect how widely each language
    is spoken, so for multilingual countries this is a best guess.
    """
    fallback = raw.common_name or UNKNOWN
    native_names = raw.name.native_name if raw.name else None
    if not native_names:
        return fallback
    for lang in raw.languages or {}:
        entry = native_names.get(lang)
        if entry and entry.common:
            return entry.common
    return fallback


def title_case(text: str) -> str:
    """Upper-case the first letter of every word ("euro" -> "Euro")."""
    return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:], text)


def _first(values: list[str] | None) -> str | None:
    return values[0] if values else None


def _join(values: list[str]) -> str:
    return ", ".join(values) if values else NOT_AVAILABLE


def _flag_alt(raw: RawCountry, name: str) -> str:
    alt = raw.flags.alt if raw.flags else None
    return alt or flag_alt_for(name)
