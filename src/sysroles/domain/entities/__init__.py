"""Domain entities."""

from sysroles.domain.entities.system_role import SystemRole

__all__ = [
    "SystemRole",
]
