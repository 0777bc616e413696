from .normalize import normalize_configuration, resolve_city_override

__all__ = [
    "normalize_configuration",
    "resolve_city_override",
]
