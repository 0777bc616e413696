from __future__ import annotations

from typing import Iterable, Optional, Tuple

from contracts.schemas import (
    CityOverrideRecord,
    DocumentCategory,
    DocumentChecklistItem,
    JurisdictionRecord,
    ProductionConfiguration,
)

CATEGORY_ORDER: Tuple[DocumentCategory, ...] = (
    DocumentCategory.PERMIT,
    DocumentCategory.LEGAL,
    DocumentCategory.INSURANCE,
    DocumentCategory.VISA,
    DocumentCategory.CONSENT,
)


def _or(value: Optional[str], fallback: str) -> str:
    return value if value else fallback


def _item(document: str, required: bool, lead_time: str, notes: str, category: DocumentCategory) -> DocumentChecklistItem:
    return DocumentChecklistItem(
        document=document,
        required=bool(required),
        lead_time=lead_time,
        notes=notes,
        category=category,
    )


def _drone_items(record: Optional[JurisdictionRecord]) -> list[DocumentChecklistItem]:
    drone = record.drone_policy if record else None
    return [
        _item(
            "Drone Pilot License",
            drone.requires_license if drone else True,
            "2-4 weeks for certification",
            _or(drone.license_type if drone else None, "Check local drone licensing requirements"),
            DocumentCategory.PERMIT,
        ),
        _item(
            "Drone Flight Authorization",
            True,
            "2-4 weeks",
            "Required for commercial drone operations",
            DocumentCategory.PERMIT,
        ),
        _item("Drone Insurance", True, "1 week", "Aviation liability insurance required", DocumentCategory.INSURANCE),
    ]


def _minor_items(record: Optional[JurisdictionRecord]) -> list[DocumentChecklistItem]:
    consent = record.consent_requirements if record else None
    return [
        _item(
            "Parental Consent Forms",
            True,
            "Before shoot",
            _or(consent.minors if consent else None, "Written parental consent required"),
            DocumentCategory.CONSENT,
        ),
        _item("Child Work Permit", True, "2-4 weeks", "Required for minors working in film", DocumentCategory.LEGAL),
        _item(
            "Studio Teacher / Welfare Worker",
            True,
            "Book 2 weeks ahead",
            "Required when filming with minors",
            DocumentCategory.LEGAL,
        ),
    ]


def _foreign_crew_items(record: Optional[JurisdictionRecord]) -> list[DocumentChecklistItem]:
    permits = record.work_permits if record else None
    return [
        _item(
            "Work Visas",
            permits.foreign_crew_required if permits else True,
            _or(permits.processing_time if permits else None, "Check local processing times"),
            _or(permits.visa_type if permits else None, "Check local visa requirements"),
            DocumentCategory.VISA,
        ),
        _item("Equipment Carnet (ATA)", True, "2-4 weeks", "For temporary import of equipment", DocumentCategory.LEGAL),
    ]


def compose_checklist(
    record: Optional[JurisdictionRecord],
    config: ProductionConfiguration,
    city_override: Optional[CityOverrideRecord] = None,
) -> Tuple[DocumentChecklistItem, ...]:
    """
    Build the required-document checklist in its fixed order:

      permit -> insurance -> drones -> minors -> foreign crew -> releases -> city permits

    `city_override` must already be scoped to `config.country_code`; an override
    owned by another country is ignored here as well.
    """
    items: list[DocumentChecklistItem] = []
    insurance = record.insurance_minimums if record else None
    consent = record.consent_requirements if record else None

    if record is not None and record.permit_required:
        items.append(
            _item(
                "Filming Permit",
                True,
                record.permit_lead_time,
                f"Apply through {_or(record.permit_authority, 'the local film commission')}",
                DocumentCategory.PERMIT,
            )
        )

    items.append(
        _item(
            "General Liability Insurance",
            True,
            "1-2 weeks",
            f"Minimum coverage: {_or(insurance.general_liability if insurance else None, 'Check local requirements')}",
            DocumentCategory.INSURANCE,
        )
    )
    items.append(
        _item(
            "Workers Compensation",
            True,
            "1 week",
            _or(insurance.workers_comp if insurance else None, "Required"),
            DocumentCategory.INSURANCE,
        )
    )

    if config.has_drones:
        items.extend(_drone_items(record))
    if config.has_minors:
        items.extend(_minor_items(record))
    if config.has_foreign_crew:
        items.extend(_foreign_crew_items(record))

    items.append(
        _item(
            "Model Releases",
            True,
            "Before shoot",
            _or(consent.general if consent else None, "Required for identifiable individuals"),
            DocumentCategory.CONSENT,
        )
    )
    items.append(
        _item(
            "Location Releases / Property Agreements",
            True,
            "1-2 weeks before shoot",
            _or(consent.property_releases if consent else None, "Required for private property"),
            DocumentCategory.CONSENT,
        )
    )

    if city_override is not None and city_override.country == config.country_code:
        city = config.city_name or city_override.city
        for permit in city_override.additional_permits:
            items.append(
                _item(permit, True, "2-4 weeks", f"City-specific requirement for {city}", DocumentCategory.PERMIT)
            )

    return tuple(items)


def group_by_category(
    items: Iterable[DocumentChecklistItem],
) -> dict[DocumentCategory, Tuple[DocumentChecklistItem, ...]]:
    items = tuple(items)
    grouped: dict[DocumentCategory, Tuple[DocumentChecklistItem, ...]] = {}
    for category in CATEGORY_ORDER:
        in_category = tuple(i for i in items if i.category == category)
        if in_category:
            grouped[category] = in_category
    return grouped


def count_required(items: Iterable[DocumentChecklistItem]) -> int:
    return sum(1 for i in items if i.required)
