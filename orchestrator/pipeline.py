from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from contracts.schemas import (
    BriefLocation,
    CityOverrideRecord,
    CulturalSensitivityRecord,
    DocumentChecklistItem,
    JurisdictionRecord,
    PolicyBrief,
    ProductionConfiguration,
    RiskAssessment,
)
from document_checklist import compose_checklist
from jurisdiction_repository import JurisdictionSource, load_default_repository
from production_config import normalize_configuration, resolve_city_override
from risk_assessment import assess_risk

logger = logging.getLogger(__name__)

BriefRequest = Union[Mapping[str, Any], ProductionConfiguration]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def assemble_brief(
    config: ProductionConfiguration,
    record: Optional[JurisdictionRecord],
    cultural: Optional[CulturalSensitivityRecord],
    city_override: Optional[CityOverrideRecord],
    checklist: Tuple[DocumentChecklistItem, ...],
    assessment: RiskAssessment,
    generated_at: datetime,
) -> PolicyBrief:
    location = BriefLocation(
        country=record.country if record and record.country else config.country_code,
        country_code=config.country_code,
        city=config.city_name,
    )
    return PolicyBrief(
        location=location,
        filming_laws=record,
        cultural_sensitivity=cultural,
        city_specific=city_override,
        document_checklist=tuple(checklist),
        risk_assessment=assessment,
        generated_at=generated_at.isoformat(),
    )


def generate(
    request: BriefRequest,
    repository: Optional[JurisdictionSource] = None,
    *,
    strict_city: bool = False,
    clock: Optional[Callable[[], datetime]] = None,
) -> PolicyBrief:
    """
    Compose a compliance brief for one request.

    Raises InvalidConfiguration for an unusable request and JurisdictionNotFound
    when the country has no record; no partial brief is produced in either case.
    """
    repo = repository if repository is not None else load_default_repository()
    config = normalize_configuration(request)

    record = repo.lookup_country(config.country_code)
    cultural = repo.lookup_cultural_sensitivity(config.country_code)
    city_override = resolve_city_override(config, repo, strict=strict_city)
    logger.debug(
        "Lookups for %s: cultural=%s city_override=%s",
        config.country_code,
        cultural is not None,
        city_override is not None,
    )

    checklist = compose_checklist(record, config, city_override)
    assessment = assess_risk(config, cultural, city_override)

    brief = assemble_brief(
        config,
        record,
        cultural,
        city_override,
        checklist,
        assessment,
        (clock or _utc_now)(),
    )
    logger.info(
        "Generated policy brief country=%s city=%s documents=%d risk=%s",
        config.country_code,
        config.city_name or "-",
        len(checklist),
        assessment.overall_risk.value,
    )
    return brief
