"""PostgreSQL system role repository implementation."""

from typing import Any
from uuid import UUID

from psycopg import AsyncConnection, errors

from sysroles.domain.entities import SystemRole
from sysroles.domain.exceptions import DuplicateKey

_COLUMNS = (
    "id, name, description, permissions, is_deleted, "
    "created_by, updated_by, created_at, updated_at, version"
)

_UPDATABLE_COLUMNS = frozenset(
    {"name", "description", "permissions", "is_deleted", "updated_by", "updated_at"}
)


def _build_update_assignments(changes: dict[str, Any]) -> tuple[list[str], list[Any]]:
    """SET clauses and params for an update; version is always bumped."""
    unknown = set(changes) - _UPDATABLE_COLUMNS
    if unknown:
        raise ValueError(f"Cannot update column(s): {', '.join(sorted(unknown))}")
    columns = sorted(changes)
    assignments = [f"{c} = %s" for c in columns]
    assignments.append("version = version + 1")
    return assignments, [changes[c] for c in columns]


def _row_to_role(r: tuple) -> SystemRole:
    return SystemRole(
        id=r[0],
        name=r[1],
        description=r[2],
        permissions=list(r[3] or []),
        is_deleted=r[4],
        created_by=r[5],
        updated_by=r[6],
        created_at=r[7],
        updated_at=r[8],
        version=r[9],
    )


def _duplicate(e: errors.UniqueViolation) -> DuplicateKey:
    detail = e.diag.constraint_name or str(e)
    return DuplicateKey("System role", detail)


class PostgresSystemRoleRepository:
    """System role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, role: SystemRole) -> SystemRole:
        """Insert role; unique violations become DuplicateKey."""
        try:
            await self._conn.execute(
                f"INSERT INTO system_role ({_COLUMNS}) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
                (
                    role.id,
                    role.name,
                    role.description,
                    role.permissions,
                    role.is_deleted,
                    role.created_by,
                    role.updated_by,
                    role.created_at,
                    role.updated_at,
                    role.version,
                ),
            )
        except errors.UniqueViolation as e:
            raise _duplicate(e) from e
        return role

    async def list_all(self, *, is_deleted: bool | None = None) -> list[SystemRole]:
        """List roles ordered by creation time."""
        q = f"SELECT {_COLUMNS} FROM system_role"
        params: tuple = ()
        if is_deleted is not None:
            q += " WHERE is_deleted = %s"
            params = (is_deleted,)
        q += " ORDER BY created_at, id"
        cur = await self._conn.execute(q, params)
        rows = await cur.fetchall()
        return [_row_to_role(r) for r in rows]

    async def get_by_id(self, role_id: UUID) -> SystemRole | None:
        """Get role by id, deleted or not."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM system_role WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_role(r)

    async def update(self, role_id: UUID, changes: dict[str, Any]) -> SystemRole | None:
        """Apply changes and return the updated role, or None if no row matched."""
        assignments, params = _build_update_assignments(changes)
        try:
            cur = await self._conn.execute(
                f"UPDATE system_role SET {', '.join(assignments)} "
                f"WHERE id = %s RETURNING {_COLUMNS}",
                (*params, role_id),
            )
        except errors.UniqueViolation as e:
            raise _duplicate(e) from e
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_role(r)
