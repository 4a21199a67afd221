import logging
from typing import Any

from pydantic import ValidationError

from models.country import RawCountry

logger = logging.getLogger(__name__)


def build_name_index(countries: list[Any]) -> dict[str, str]:
    """Map each country's cca3 code to its common name.

    Records missing either field are skipped. Used to resolve border codes
    into readable names in the detail view.
    """
    index: dict[str, str] = {}
    for item in countries:
        try:
            raw = RawCountry.model_validate(item)
        except ValidationError:
            continue
        if raw.cca3 and raw.common_name:
            index[raw.cca3] = raw.common_name
    logger.debug("Built name index with %d of %d countries", len(index), len(countries))
    return index
