from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Tuple


def _pick(raw: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for k in keys:
        if k in raw and raw[k] is not None:
            return raw[k]
    return default


def _str(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _flag(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in ("1", "true", "yes", "y", "on")


def _str_tuple(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    if values is None or isinstance(values, (str, bytes)):
        return ()
    return tuple(s for s in (_str(v) for v in values) if s)


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class DocumentCategory(str, Enum):
    PERMIT = "PERMIT"
    LEGAL = "LEGAL"
    INSURANCE = "INSURANCE"
    VISA = "VISA"
    CONSENT = "CONSENT"


@dataclass(frozen=True)
class DronePolicy:
    allowed: bool = False
    requires_license: bool = True
    license_type: str = ""
    restrictions: Tuple[str, ...] = ()
    night_flying: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "DronePolicy":
        return cls(
            allowed=_flag(_pick(raw, "allowed"), False),
            requires_license=_flag(_pick(raw, "requires_license", "requiresLicense"), True),
            license_type=_str(_pick(raw, "license_type", "licenseType")),
            restrictions=_str_tuple(_pick(raw, "restrictions")),
            night_flying=_str(_pick(raw, "night_flying", "nightFlying")),
        )


@dataclass(frozen=True)
class ConsentRequirements:
    minors: str = ""
    general: str = ""
    property_releases: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ConsentRequirements":
        return cls(
            minors=_str(_pick(raw, "minors")),
            general=_str(_pick(raw, "general")),
            property_releases=_str(_pick(raw, "property_releases", "propertyReleases")),
        )


@dataclass(frozen=True)
class WorkPermits:
    foreign_crew_required: bool = True
    visa_type: str = ""
    processing_time: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "WorkPermits":
        return cls(
            foreign_crew_required=_flag(_pick(raw, "foreign_crew_required", "foreignCrewRequired"), True),
            visa_type=_str(_pick(raw, "visa_type", "visaType")),
            processing_time=_str(_pick(raw, "processing_time", "processingTime")),
        )


@dataclass(frozen=True)
class InsuranceMinimums:
    general_liability: str = ""
    workers_comp: str = ""
    equipment_coverage: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "InsuranceMinimums":
        return cls(
            general_liability=_str(_pick(raw, "general_liability", "generalLiability")),
            workers_comp=_str(_pick(raw, "workers_comp", "workersComp")),
            equipment_coverage=_str(_pick(raw, "equipment_coverage", "equipmentCoverage")),
        )


@dataclass(frozen=True)
class NoiseRestrictions:
    residential_hours: str = ""
    commercial_hours: str = ""
    decibel_limit: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "NoiseRestrictions":
        return cls(
            residential_hours=_str(_pick(raw, "residential_hours", "residentialHours")),
            commercial_hours=_str(_pick(raw, "commercial_hours", "commercialHours")),
            decibel_limit=_str(_pick(raw, "decibel_limit", "decibelLimit")),
        )


@dataclass(frozen=True)
class JurisdictionRecord:
    """Country-level filming law. One record per ISO country code."""

    country_code: str
    country: str = ""
    permit_required: bool = True
    permit_authority: str = ""
    permit_lead_time: str = ""
    public_space_restrictions: str = ""
    drone_policy: DronePolicy = field(default_factory=DronePolicy)
    consent_requirements: ConsentRequirements = field(default_factory=ConsentRequirements)
    work_permits: WorkPermits = field(default_factory=WorkPermits)
    insurance_minimums: InsuranceMinimums = field(default_factory=InsuranceMinimums)
    noise_restrictions: NoiseRestrictions = field(default_factory=NoiseRestrictions)
    union_rules: Tuple[str, ...] = ()
    special_notes: str = ""

    @classmethod
    def from_dict(cls, country_code: str, raw: Mapping[str, Any]) -> "JurisdictionRecord":
        return cls(
            country_code=_str(country_code).upper(),
            country=_str(_pick(raw, "country", "name")),
            permit_required=_flag(_pick(raw, "permit_required", "permitRequired"), True),
            permit_authority=_str(_pick(raw, "permit_authority", "permitAuthority")),
            permit_lead_time=_str(_pick(raw, "permit_lead_time", "permitLeadTime")),
            public_space_restrictions=_str(_pick(raw, "public_space_restrictions", "publicSpaceRestrictions")),
            drone_policy=DronePolicy.from_dict(_pick(raw, "drone_policy", "dronePolicy", default={})),
            consent_requirements=ConsentRequirements.from_dict(
                _pick(raw, "consent_requirements", "consentRequirements", default={})
            ),
            work_permits=WorkPermits.from_dict(_pick(raw, "work_permits", "workPermits", default={})),
            insurance_minimums=InsuranceMinimums.from_dict(
                _pick(raw, "insurance_minimums", "insuranceMinimums", default={})
            ),
            noise_restrictions=NoiseRestrictions.from_dict(
                _pick(raw, "noise_restrictions", "noiseRestrictions", default={})
            ),
            union_rules=_str_tuple(_pick(raw, "union_rules", "unionRules")),
            special_notes=_str(_pick(raw, "special_notes", "specialNotes")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "country_code": self.country_code,
            "country": self.country,
            "permit_required": self.permit_required,
            "permit_authority": self.permit_authority,
            "permit_lead_time": self.permit_lead_time,
            "public_space_restrictions": self.public_space_restrictions,
            "drone_policy": {
                "allowed": self.drone_policy.allowed,
                "requires_license": self.drone_policy.requires_license,
                "license_type": self.drone_policy.license_type,
                "restrictions": list(self.drone_policy.restrictions),
                "night_flying": self.drone_policy.night_flying,
            },
            "consent_requirements": {
                "minors": self.consent_requirements.minors,
                "general": self.consent_requirements.general,
                "property_releases": self.consent_requirements.property_releases,
            },
            "work_permits": {
                "foreign_crew_required": self.work_permits.foreign_crew_required,
                "visa_type": self.work_permits.visa_type,
                "processing_time": self.work_permits.processing_time,
            },
            "insurance_minimums": {
                "general_liability": self.insurance_minimums.general_liability,
                "workers_comp": self.insurance_minimums.workers_comp,
                "equipment_coverage": self.insurance_minimums.equipment_coverage,
            },
            "noise_restrictions": {
                "residential_hours": self.noise_restrictions.residential_hours,
                "commercial_hours": self.noise_restrictions.commercial_hours,
                "decibel_limit": self.noise_restrictions.decibel_limit,
            },
            "union_rules": list(self.union_rules),
            "special_notes": self.special_notes,
        }


@dataclass(frozen=True)
class CulturalSensitivityRecord:
    religious_considerations: Tuple[str, ...] = ()
    political_restrictions: Tuple[str, ...] = ()
    social_norms: Tuple[str, ...] = ()
    holidays: Tuple[str, ...] = ()
    risk_level: RiskLevel = RiskLevel.LOW

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "CulturalSensitivityRecord":
        level = _str(_pick(raw, "risk_level", "riskLevel", default=RiskLevel.LOW.value)).upper()
        return cls(
            religious_considerations=_str_tuple(_pick(raw, "religious_considerations", "religiousConsiderations")),
            political_restrictions=_str_tuple(_pick(raw, "political_restrictions", "politicalRestrictions")),
            social_norms=_str_tuple(_pick(raw, "social_norms", "socialNorms")),
            holidays=_str_tuple(_pick(raw, "holidays")),
            # ValueError on an unknown level; loaders surface it as malformed data.
            risk_level=RiskLevel(level),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "religious_considerations": list(self.religious_considerations),
            "political_restrictions": list(self.political_restrictions),
            "social_norms": list(self.social_norms),
            "holidays": list(self.holidays),
            "risk_level": self.risk_level.value,
        }


@dataclass(frozen=True)
class CityOverrideRecord:
    """City-level supplement. Only applies when `country` matches the request."""

    city: str
    country: str
    additional_permits: Tuple[str, ...] = ()
    restrictions: Tuple[str, ...] = ()
    fees: str = ""
    contacts: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, city: str, raw: Mapping[str, Any]) -> "CityOverrideRecord":
        return cls(
            city=_str(city),
            country=_str(_pick(raw, "country", "country_code", "countryCode")).upper(),
            additional_permits=_str_tuple(_pick(raw, "additional_permits", "additionalPermits")),
            restrictions=_str_tuple(_pick(raw, "restrictions")),
            fees=_str(_pick(raw, "fees")),
            contacts=_str_tuple(_pick(raw, "contacts")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "city": self.city,
            "country": self.country,
            "additional_permits": list(self.additional_permits),
            "restrictions": list(self.restrictions),
            "fees": self.fees,
            "contacts": list(self.contacts),
        }


@dataclass(frozen=True)
class ProductionConfiguration:
    country_code: str
    city_name: Optional[str] = None
    has_drones: bool = False
    has_minors: bool = False
    has_foreign_crew: bool = False
    # Informational only; no rule reads it yet.
    shoot_date: Optional[date] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "country_code": self.country_code,
            "city_name": self.city_name,
            "has_drones": self.has_drones,
            "has_minors": self.has_minors,
            "has_foreign_crew": self.has_foreign_crew,
            "shoot_date": self.shoot_date.isoformat() if self.shoot_date else None,
        }


@dataclass(frozen=True)
class DocumentChecklistItem:
    document: str
    required: bool
    lead_time: str
    notes: str
    category: DocumentCategory

    def to_dict(self) -> dict[str, Any]:
        return {
            "document": self.document,
            "required": self.required,
            "lead_time": self.lead_time,
            "notes": self.notes,
            "category": self.category.value,
        }


@dataclass(frozen=True)
class RiskAssessment:
    risk_factors: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    overall_risk: RiskLevel = RiskLevel.LOW

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_risk": self.overall_risk.value,
            "risk_factors": list(self.risk_factors),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class BriefLocation:
    country: str
    country_code: str
    city: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {"country": self.country, "country_code": self.country_code, "city": self.city}


@dataclass(frozen=True)
class PolicyBrief:
    location: BriefLocation
    filming_laws: Optional[JurisdictionRecord]
    cultural_sensitivity: Optional[CulturalSensitivityRecord]
    city_specific: Optional[CityOverrideRecord]
    document_checklist: Tuple[DocumentChecklistItem, ...]
    risk_assessment: RiskAssessment
    generated_at: str

    def summary(self) -> dict[str, Any]:
        laws = self.filming_laws
        return {
            "required_documents": sum(1 for item in self.document_checklist if item.required),
            "permit_lead_time": laws.permit_lead_time if laws and laws.permit_lead_time else "N/A",
            "union_considerations": len(laws.union_rules) if laws else 0,
            "city_specific_rules": len(self.city_specific.restrictions) if self.city_specific else 0,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "location": self.location.to_dict(),
            "filming_laws": self.filming_laws.to_dict() if self.filming_laws else None,
            "cultural_sensitivity": self.cultural_sensitivity.to_dict() if self.cultural_sensitivity else None,
            "city_specific": self.city_specific.to_dict() if self.city_specific else None,
            "document_checklist": [item.to_dict() for item in self.document_checklist],
            "risk_assessment": self.risk_assessment.to_dict(),
            "generated_at": self.generated_at,
            "summary": self.summary(),
        }
