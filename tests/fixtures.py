from __future__ import annotations

import copy
from typing import Any

from jurisdiction_repository import InMemoryJurisdictionRepository

_SAMPLE: dict[str, Any] = {
    "dataset_version": "test_v1",
    "countries": {
        "US": {
            "country": "United States",
            "permit_required": True,
            "permit_authority": "Local Film Commission",
            "permit_lead_time": "2-4 weeks",
            "public_space_restrictions": "Permit required in public spaces",
            "drone_policy": {
                "allowed": True,
                "requires_license": True,
                "license_type": "FAA Part 107 Remote Pilot Certificate",
                "restrictions": ["No flying over crowds"],
                "night_flying": "Requires waiver",
            },
            "consent_requirements": {
                "minors": "Written parental consent required",
                "general": "Model releases recommended for identifiable individuals",
                "property_releases": "Required for private property",
            },
            "work_permits": {
                "foreign_crew_required": True,
                "visa_type": "O-1 or P-1 visa",
                "processing_time": "2-6 months",
            },
            "insurance_minimums": {
                "general_liability": "$1,000,000",
                "workers_comp": "Required by state law",
                "equipment_coverage": "Recommended",
            },
            "union_rules": ["SAG-AFTRA", "DGA", "IATSE"],
            "special_notes": "Union rules vary",
        },
        "AE": {
            "country": "United Arab Emirates",
            "permit_required": True,
            "permit_authority": "Dubai Film & TV Commission",
            "permit_lead_time": "2-4 weeks",
            "drone_policy": {"allowed": True, "requires_license": True, "license_type": "GCAA Registration"},
            "work_permits": {"foreign_crew_required": True, "visa_type": "Media production visa", "processing_time": "2-4 weeks"},
            "insurance_minimums": {"general_liability": "$1,000,000 USD equivalent", "workers_comp": "Required"},
        },
        "ZZ": {
            "country": "Testland",
            "permit_required": False,
            "drone_policy": {"allowed": True, "requires_license": False, "license_type": "None needed"},
            "work_permits": {"foreign_crew_required": False, "visa_type": "Visa waiver", "processing_time": "On arrival"},
        },
    },
    "cultural_sensitivities": {
        "US": {"religious_considerations": ["Be inclusive"], "holidays": ["Thanksgiving"], "risk_level": "LOW"},
        "AE": {"religious_considerations": ["No filming during prayer times"], "risk_level": "MEDIUM"},
    },
    "city_overrides": {
        "Los Angeles": {
            "country": "US",
            "additional_permits": ["FilmLA permit required"],
            "restrictions": ["Residential neighborhoods have strict hours", "Highway filming requires CHP coordination"],
            "fees": "Starting at $625 for first day",
            "contacts": ["FilmLA: +1 213-977-8600"],
        },
        "New York City": {
            "country": "US",
            "additional_permits": ["Mayor's Office permit", "NYPD Movie/TV Unit notice"],
            "restrictions": [],
        },
        "Dubai": {
            "country": "AE",
            "additional_permits": ["Dubai Film & TV Commission permit mandatory"],
            "restrictions": ["Burj Khalifa requires special permission"],
        },
    },
}


def sample_data() -> dict[str, Any]:
    return copy.deepcopy(_SAMPLE)


def sample_repository(**section_updates: dict[str, Any]) -> InMemoryJurisdictionRepository:
    """Sample repository; keyword args merge into the named top-level sections."""
    data = sample_data()
    for section, updates in section_updates.items():
        data.setdefault(section, {}).update(updates)
    return InMemoryJurisdictionRepository.from_mapping(data)
