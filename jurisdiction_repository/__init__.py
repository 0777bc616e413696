from .repository import (
    DATASET_PATH_ENV,
    DEFAULT_DATASET,
    InMemoryJurisdictionRepository,
    JurisdictionSource,
    load_default_repository,
)

__all__ = [
    "DATASET_PATH_ENV",
    "DEFAULT_DATASET",
    "InMemoryJurisdictionRepository",
    "JurisdictionSource",
    "load_default_repository",
]
