from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from contracts.errors import InvalidConfiguration
from contracts.schemas import CityOverrideRecord, ProductionConfiguration
from jurisdiction_repository import JurisdictionSource

logger = logging.getLogger(__name__)

_TRUE_STRINGS = ("1", "true", "yes", "y", "on")

# Canonical field -> accepted request keys, first match wins.
_ALIASES = {
    "country_code": ("country_code", "countryCode", "country"),
    "city_name": ("city_name", "cityName", "city"),
    "has_drones": ("has_drones", "hasDrones"),
    "has_minors": ("has_minors", "hasMinors"),
    "has_foreign_crew": ("has_foreign_crew", "hasForeignCrew"),
    "shoot_date": ("shoot_date", "shootDate"),
}


def _get(raw: Mapping[str, Any], name: str) -> Any:
    for key in _ALIASES[name]:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def _coerce_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in _TRUE_STRINGS


def _coerce_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = str(value).strip()
    if not s:
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        raise InvalidConfiguration(f"shoot_date_invalid:{s}") from None


def normalize_configuration(
    raw: Union[Mapping[str, Any], ProductionConfiguration],
) -> ProductionConfiguration:
    """
    Build the canonical configuration from raw request fields.

    Country codes are stripped and upper-cased; an empty code is the only
    hard failure besides an unparseable shoot date. A city is kept as given
    (stripped) and resolved against the repository later.
    """
    if isinstance(raw, ProductionConfiguration):
        raw = raw.to_dict()
    if not isinstance(raw, Mapping):
        raise InvalidConfiguration("request_not_an_object")

    country_code = str(_get(raw, "country_code") or "").strip().upper()
    if not country_code:
        raise InvalidConfiguration("country_code_missing")

    city_name = str(_get(raw, "city_name") or "").strip() or None

    return ProductionConfiguration(
        country_code=country_code,
        city_name=city_name,
        has_drones=_coerce_bool(_get(raw, "has_drones")),
        has_minors=_coerce_bool(_get(raw, "has_minors")),
        has_foreign_crew=_coerce_bool(_get(raw, "has_foreign_crew")),
        shoot_date=_coerce_date(_get(raw, "shoot_date")),
    )


def resolve_city_override(
    config: ProductionConfiguration,
    repository: JurisdictionSource,
    strict: bool = False,
) -> Optional[CityOverrideRecord]:
    if not config.city_name:
        return None

    override = repository.lookup_city_override(config.city_name)
    if override is None:
        if strict:
            raise InvalidConfiguration(f"city_not_found:{config.city_name}")
        logger.warning("No city override for %r; brief will use country data only", config.city_name)
        return None

    if override.country != config.country_code:
        if strict:
            raise InvalidConfiguration(f"city_country_mismatch:{config.city_name}")
        logger.warning(
            "City %r belongs to %s, not %s; override ignored",
            config.city_name,
            override.country,
            config.country_code,
        )
        return None

    return override
