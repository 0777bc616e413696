from .pipeline import BriefRequest, assemble_brief, generate
from .session import BriefSession

__all__ = [
    "BriefRequest",
    "BriefSession",
    "assemble_brief",
    "generate",
]
