"""System role persistence service.

Every operation is total: storage outcomes, including failures, are
folded into a result (see ``sysroles.application.results``) and nothing
is raised to the caller.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from sysroles.application.ports import Logger, UnitOfWorkFactory
from sysroles.application.results import (
    Conflict,
    Created,
    NotFound,
    Result,
    ServerError,
    Success,
)
from sysroles.domain.entities import SystemRole
from sysroles.domain.exceptions import DuplicateKey, ValidationError
from sysroles.domain.value_objects import Projection

DEFAULT_PROJECTION = Projection.default()

# request key -> entity field, for the attributes callers may set
_MUTABLE_ATTRIBUTES = {
    "name": "name",
    "description": "description",
    "permissions": "permissions",
    "isDeleted": "is_deleted",
}


def _parse_attributes(attributes: Any) -> dict[str, Any]:
    """Map a request attribute set onto entity fields. Unknown keys are ignored."""
    if not isinstance(attributes, dict):
        raise ValidationError("System role attributes must be an object")

    fields: dict[str, Any] = {}
    for key, field_name in _MUTABLE_ATTRIBUTES.items():
        if key not in attributes:
            continue
        value = attributes[key]
        if key == "name":
            if not isinstance(value, str) or not value.strip():
                raise ValidationError("name must be a non-empty string")
            value = value.strip()
        elif key == "description":
            if value is not None and not isinstance(value, str):
                raise ValidationError("description must be a string")
        elif key == "permissions":
            if not isinstance(value, list) or not all(isinstance(p, str) for p in value):
                raise ValidationError("permissions must be a list of strings")
        elif key == "isDeleted":
            if not isinstance(value, bool):
                raise ValidationError("isDeleted must be a boolean")
        fields[field_name] = value
    return fields


def _parse_id(system_role_id: Any) -> UUID | None:
    """Storage identifier, or None when the value is not a valid id."""
    try:
        return UUID(system_role_id)
    except (AttributeError, TypeError, ValueError):
        return None


class SystemRoleService:
    """Create, list, read and update system roles through the unit of work."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory, logger: Logger) -> None:
        self._uow_factory = unit_of_work_factory
        self._logger = logger

    async def create(self, attributes: dict[str, Any], creator_id: str) -> Result:
        """Persist a new role stamped with a generated id and its creator."""
        try:
            fields = _parse_attributes(attributes)
            if "name" not in fields:
                raise ValidationError("name is required")

            now = datetime.now(UTC)
            role = SystemRole(
                id=uuid4(),
                created_by=creator_id,
                created_at=now,
                updated_at=now,
                **fields,
            )
            async with self._uow_factory() as uow:
                created = await uow.system_roles.create(role)
        except DuplicateKey as e:
            return Conflict(error=str(e))
        except Exception as e:
            self._logger.error("Saving system role failed", exc_info=True)
            return ServerError(error=str(e))

        return Created(data=DEFAULT_PROJECTION.apply(created.to_document()))

    async def list_all(
        self,
        projection: Projection = DEFAULT_PROJECTION,
        *,
        is_deleted: bool | None = None,
    ) -> Result:
        """All roles ordered by creation time; optionally only (non-)deleted ones."""
        try:
            async with self._uow_factory() as uow:
                roles = await uow.system_roles.list_all(is_deleted=is_deleted)
        except Exception as e:
            self._logger.error("Listing system roles failed", exc_info=True)
            return ServerError(error=str(e))

        return Success(data=[projection.apply(r.to_document()) for r in roles])

    async def find_by_id(
        self,
        system_role_id: str,
        projection: Projection = DEFAULT_PROJECTION,
    ) -> Result:
        """Single role by id. Soft-deleted roles are still returned."""
        role_id = _parse_id(system_role_id)
        if role_id is None:
            return NotFound(error=f"Invalid system role id: {system_role_id!r}.")

        try:
            async with self._uow_factory() as uow:
                role = await uow.system_roles.get_by_id(role_id)
        except Exception as e:
            self._logger.error("Fetching system role %s failed", role_id, exc_info=True)
            return ServerError(error=str(e))

        if role is None:
            return NotFound(error=f"System role {role_id} not found.")
        return Success(data=projection.apply(role.to_document()))

    async def update_by_id(
        self,
        system_role_id: str,
        attributes: dict[str, Any],
        actor_id: str,
        projection: Projection = DEFAULT_PROJECTION,
    ) -> Result:
        """Replace the given attributes and stamp the actor.

        Soft delete is ``{"isDeleted": True}``; nothing is ever removed.
        """
        role_id = _parse_id(system_role_id)
        if role_id is None:
            return NotFound(error=f"Invalid system role id: {system_role_id!r}.")

        try:
            changes = _parse_attributes(attributes)
            changes["updated_by"] = actor_id
            changes["updated_at"] = datetime.now(UTC)
            async with self._uow_factory() as uow:
                updated = await uow.system_roles.update(role_id, changes)
        except DuplicateKey as e:
            return Conflict(error=str(e))
        except Exception as e:
            self._logger.error("Updating system role %s failed", role_id, exc_info=True)
            return ServerError(error=str(e))

        if updated is None:
            return NotFound(error=f"System role {role_id} not found.")
        return Success(data=projection.apply(updated.to_document()))
