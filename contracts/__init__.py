from .errors import InvalidConfiguration, JurisdictionNotFound, NotFound
from .schemas import (
    BriefLocation,
    CityOverrideRecord,
    ConsentRequirements,
    CulturalSensitivityRecord,
    DocumentCategory,
    DocumentChecklistItem,
    DronePolicy,
    InsuranceMinimums,
    JurisdictionRecord,
    NoiseRestrictions,
    PolicyBrief,
    ProductionConfiguration,
    RiskAssessment,
    RiskLevel,
    WorkPermits,
)

__all__ = [
    "BriefLocation",
    "CityOverrideRecord",
    "ConsentRequirements",
    "CulturalSensitivityRecord",
    "DocumentCategory",
    "DocumentChecklistItem",
    "DronePolicy",
    "InsuranceMinimums",
    "InvalidConfiguration",
    "JurisdictionNotFound",
    "JurisdictionRecord",
    "NoiseRestrictions",
    "NotFound",
    "PolicyBrief",
    "ProductionConfiguration",
    "RiskAssessment",
    "RiskLevel",
    "WorkPermits",
]
