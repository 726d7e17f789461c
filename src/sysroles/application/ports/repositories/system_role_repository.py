"""System role repository port."""

from typing import Any, Protocol
from uuid import UUID

from sysroles.domain.entities import SystemRole


class SystemRoleRepository(Protocol):
    """Port for system role persistence.

    ``create`` and ``update`` raise ``DuplicateKey`` when the backend
    rejects a unique field. There is no delete: deletion is the
    ``is_deleted`` flag set through ``update``.
    """

    async def create(self, role: SystemRole) -> SystemRole: ...

    async def list_all(self, *, is_deleted: bool | None = None) -> list[SystemRole]: ...

    async def get_by_id(self, role_id: UUID) -> SystemRole | None: ...

    async def update(self, role_id: UUID, changes: dict[str, Any]) -> SystemRole | None: ...
