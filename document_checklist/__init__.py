from .checklist import CATEGORY_ORDER, compose_checklist, count_required, group_by_category

__all__ = [
    "CATEGORY_ORDER",
    "compose_checklist",
    "count_required",
    "group_by_category",
]
