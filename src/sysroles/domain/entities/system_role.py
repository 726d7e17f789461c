"""System role entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass
class SystemRole:
    """System role - named set of permissions, soft-deleted via is_deleted."""

    id: UUID
    name: str
    created_by: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    permissions: list[str] = field(default_factory=list)
    is_deleted: bool = False
    updated_by: str | None = None
    version: int = 0

    def to_document(self) -> dict[str, Any]:
        """JSON-ready representation with camelCase keys."""
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "permissions": list(self.permissions),
            "isDeleted": self.is_deleted,
            "createdBy": self.created_by,
            "updatedBy": self.updated_by,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
            "version": self.version,
        }
