from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from contracts.schemas import PolicyBrief
from jurisdiction_repository import JurisdictionSource

from .pipeline import generate

logger = logging.getLogger(__name__)


def _country_key(value: Any) -> str:
    return "" if value is None else str(value).strip().upper()


_FIELDS = ("country_code", "city_name", "has_drones", "has_minors", "has_foreign_crew", "shoot_date")


class BriefSession:
    """
    Caller-side adapter that regenerates a brief whenever its inputs change.

    Every recompute is a full, independent `generate` call. Selecting a new
    country clears the city, since city overrides are scoped to one country.
    """

    def __init__(
        self,
        repository: JurisdictionSource,
        on_generated: Optional[Callable[[PolicyBrief], None]] = None,
        strict_city: bool = False,
    ) -> None:
        self._repository = repository
        self._on_generated = on_generated
        self._strict_city = strict_city
        self._fields: dict[str, Any] = {
            "country_code": "",
            "city_name": None,
            "has_drones": False,
            "has_minors": False,
            "has_foreign_crew": False,
            "shoot_date": None,
        }
        self.brief: Optional[PolicyBrief] = None

    @property
    def request(self) -> dict[str, Any]:
        return dict(self._fields)

    def update(self, **changes: Any) -> Optional[PolicyBrief]:
        unknown = sorted(set(changes) - set(_FIELDS))
        if unknown:
            raise TypeError("unknown brief fields: " + ", ".join(unknown))

        if "country_code" in changes:
            if _country_key(changes["country_code"]) != _country_key(self._fields["country_code"]):
                changes.setdefault("city_name", None)

        if all(self._fields.get(k) == v for k, v in changes.items()) and self.brief is not None:
            return self.brief

        return self._generate(dict(self._fields, **changes))

    def recompute(self) -> Optional[PolicyBrief]:
        return self._generate(dict(self._fields))

    def _generate(self, candidate: dict[str, Any]) -> Optional[PolicyBrief]:
        # Fields are committed only together with the brief they produced.
        if not _country_key(candidate.get("country_code")):
            self._fields = candidate
            self.brief = None
            return None

        logger.debug("Recomputing brief for %s", candidate["country_code"])
        brief = generate(candidate, self._repository, strict_city=self._strict_city)
        self._fields = candidate
        self.brief = brief
        if self._on_generated is not None:
            self._on_generated(brief)
        return brief
