"""Cache option protocols."""

from .name_deriver import NameDeriver
from .limit_collaborator import LimitCollaborator

__all__ = [
    "NameDeriver",
    "LimitCollaborator",
]
