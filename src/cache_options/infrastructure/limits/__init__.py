from .limit_collaborator import DefaultLimitCollaborator, create_limit_collaborator

__all__ = [
    "DefaultLimitCollaborator",
    "create_limit_collaborator",
]
