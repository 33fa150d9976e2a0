from .name_deriver import DefaultNameDeriver, create_name_deriver

__all__ = [
    "DefaultNameDeriver",
    "create_name_deriver",
]
