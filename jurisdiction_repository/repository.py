from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, Tuple

from contracts.errors import JurisdictionNotFound
from contracts.schemas import CityOverrideRecord, CulturalSensitivityRecord, JurisdictionRecord

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_DATASET = DATA_DIR / "jurisdictions.json"
DATASET_PATH_ENV = "POLICYBRIEF_JURISDICTIONS_PATH"


def _norm_code(code: Any) -> str:
    return "" if code is None else str(code).strip().upper()


def _norm_city(city: Any) -> str:
    return "" if city is None else str(city).strip()


class JurisdictionSource(Protocol):
    """Read-only lookups the composition layers depend on."""

    def lookup_country(self, code: str) -> JurisdictionRecord: ...

    def lookup_cultural_sensitivity(self, code: str) -> Optional[CulturalSensitivityRecord]: ...

    def lookup_city_override(self, city_name: str) -> Optional[CityOverrideRecord]: ...


@dataclass(frozen=True)
class InMemoryJurisdictionRepository:
    """
    Jurisdiction data held in memory, keyed by normalized country code / city name.

    Records are loaded once and never mutated. Insertion order of the source
    data is kept so listings are stable.
    """

    countries: Tuple[Tuple[str, JurisdictionRecord], ...] = ()
    cultural_sensitivities: Tuple[Tuple[str, CulturalSensitivityRecord], ...] = ()
    city_overrides: Tuple[Tuple[str, CityOverrideRecord], ...] = ()
    dataset_version: str = ""
    _country_index: dict[str, JurisdictionRecord] = field(init=False, repr=False, compare=False)
    _cultural_index: dict[str, CulturalSensitivityRecord] = field(init=False, repr=False, compare=False)
    _city_index: dict[str, CityOverrideRecord] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_country_index", dict(self.countries))
        object.__setattr__(self, "_cultural_index", dict(self.cultural_sensitivities))
        object.__setattr__(self, "_city_index", dict(self.city_overrides))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "InMemoryJurisdictionRepository":
        if not isinstance(raw, Mapping):
            raise ValueError("Invalid jurisdiction data: expected an object")

        countries_raw = raw.get("countries") or {}
        cultural_raw = raw.get("cultural_sensitivities") or {}
        cities_raw = raw.get("city_overrides") or {}
        for name, section in (
            ("countries", countries_raw),
            ("cultural_sensitivities", cultural_raw),
            ("city_overrides", cities_raw),
        ):
            if not isinstance(section, Mapping):
                raise ValueError(f"Invalid jurisdiction data: '{name}' must be an object")

        try:
            countries = tuple(
                (_norm_code(code), JurisdictionRecord.from_dict(code, body))
                for code, body in countries_raw.items()
                if _norm_code(code)
            )
            cultural = tuple(
                (_norm_code(code), CulturalSensitivityRecord.from_dict(body))
                for code, body in cultural_raw.items()
                if _norm_code(code)
            )
            cities = tuple(
                (_norm_city(city), CityOverrideRecord.from_dict(city, body))
                for city, body in cities_raw.items()
                if _norm_city(city)
            )
        except (AttributeError, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid jurisdiction data: {exc}") from exc

        return cls(
            countries=countries,
            cultural_sensitivities=cultural,
            city_overrides=cities,
            dataset_version=str(raw.get("dataset_version", "")),
        )

    @classmethod
    def from_json_file(cls, path: str | os.PathLike[str]) -> "InMemoryJurisdictionRepository":
        dataset_path = Path(path)
        if not dataset_path.exists():
            raise FileNotFoundError(f"Jurisdiction dataset not found: {dataset_path}")

        with open(dataset_path, "r", encoding="utf-8") as f:
            try:
                raw = json.load(f)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid jurisdiction data in {dataset_path}: {exc}") from exc

        repo = cls.from_mapping(raw)
        logger.info(
            "Loaded jurisdiction dataset %s (%d countries, %d cities) from %s",
            repo.dataset_version or "unversioned",
            len(repo.countries),
            len(repo.city_overrides),
            dataset_path,
        )
        return repo

    def lookup_country(self, code: str) -> JurisdictionRecord:
        key = _norm_code(code)
        record = self._country_index.get(key)
        if record is None:
            raise JurisdictionNotFound(key)
        return record

    def lookup_cultural_sensitivity(self, code: str) -> Optional[CulturalSensitivityRecord]:
        return self._cultural_index.get(_norm_code(code))

    def lookup_city_override(self, city_name: str) -> Optional[CityOverrideRecord]:
        return self._city_index.get(_norm_city(city_name))

    def available_countries(self) -> Tuple[Tuple[str, str], ...]:
        return tuple((code, record.country or code) for code, record in self.countries)

    def available_cities(self, country_code: str) -> Tuple[str, ...]:
        key = _norm_code(country_code)
        return tuple(city for city, override in self.city_overrides if override.country == key)


@lru_cache(maxsize=None)
def _load_cached(path: str) -> InMemoryJurisdictionRepository:
    return InMemoryJurisdictionRepository.from_json_file(path)


def load_default_repository() -> InMemoryJurisdictionRepository:
    """Process-wide repository; the env override wins over the bundled dataset."""
    path = os.getenv(DATASET_PATH_ENV) or str(DEFAULT_DATASET)
    return _load_cached(path)
