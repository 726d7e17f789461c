"""Domain value objects."""

from sysroles.domain.value_objects.projection import Projection

__all__ = [
    "Projection",
]
