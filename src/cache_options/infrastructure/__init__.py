"""Default collaborator implementations for cache option parsing."""

from .limits import DefaultLimitCollaborator, create_limit_collaborator
from .naming import DefaultNameDeriver, create_name_deriver

__all__ = [
    "DefaultLimitCollaborator",
    "create_limit_collaborator",
    "DefaultNameDeriver",
    "create_name_deriver",
]
