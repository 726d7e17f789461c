"""Repository ports."""

from sysroles.application.ports.repositories.system_role_repository import (
    SystemRoleRepository,
)

__all__ = [
    "SystemRoleRepository",
]
