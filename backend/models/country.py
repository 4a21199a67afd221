import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"
NOT_AVAILABLE = "N/A"


def flag_alt_for(name: str) -> str:
    return f"Flag of {name}"


class PartialRecord(BaseModel):
    """Base for upstream REST Countries payloads.

    Every field is optional. A field whose value has the wrong shape is
    logged and treated as absent, so one bad field never costs the rest of
    the record.
    """

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="wrap")
    @classmethod
    def _drop_malformed(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.warning(
                "Dropping malformed field %s.%s: %.100r", cls.__name__, info.field_name, value
            )
            return None


class RawNativeName(PartialRecord):
    official: str | None = None
    common: str | None = None


class RawName(PartialRecord):
    common: str | None = None
    official: str | None = None
    native_name: dict[str, RawNativeName] | None = Field(default=None, alias="nativeName")


class RawCurrency(PartialRecord):
    name: str | None = None
    symbol: str | None = None


class RawFlags(PartialRecord):
    svg: str | None = None
    png: str | None = None
    alt: str | None = None


class RawCountry(PartialRecord):
    name: RawName | None = None
    cca3: str | None = None
    capital: list[str] | None = None
    population: StrictInt | None = Field(default=None, ge=0)
    region: str | None = None
    subregion: str | None = None
    tld: list[str] | None = None
    # Entries are read one by one so a bad entry only costs itself
    currencies: dict[str, Any] | None = None
    languages: dict[str, Any] | None = None
    borders: list[Any] | None = None
    flags: RawFlags | None = None

    @property
    def common_name(self) -> str | None:
        return self.name.common if self.name else None

    @property
    def flag_url(self) -> str | None:
        if not self.flags:
            return None
        return self.flags.svg or self.flags.png

    @property
    def currency_names(self) -> list[str]:
        names = []
        for code, entry in (self.currencies or {}).items():
            try:
                currency = RawCurrency.model_validate(entry)
            except ValidationError:
                logger.warning("Skipping malformed currency %s: %.100r", code, entry)
                continue
            if currency.name:
                names.append(currency.name)
        return names

    @property
    def language_names(self) -> list[str]:
        return [lang for lang in (self.languages or {}).values() if isinstance(lang, str) and lang]


class _ViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _synthesize_flag_alt(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("flag_alt"):
            data = {**data, "flag_alt": flag_alt_for(data.get("name") or UNKNOWN)}
        return data


class Card(_ViewModel):
    name: str = UNKNOWN
    capital: str = NOT_AVAILABLE
    population: int = Field(default=0, ge=0)
    region: str = UNKNOWN
    flag_url: str = ""
    flag_alt: str = ""


class Detail(_ViewModel):
    name: str = UNKNOWN
    native_name: str = UNKNOWN
    population: int = Field(default=0, ge=0)
    region: str = UNKNOWN
    subregion: str = UNKNOWN
    capital: str = NOT_AVAILABLE
    top_level_domain: str = NOT_AVAILABLE
    currencies: str = NOT_AVAILABLE
    languages: str = NOT_AVAILABLE
    borders: list[str] = []
    flag_url: str = ""
    flag_alt: str = ""


class FilterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    region: str = ""
    search: str = ""
