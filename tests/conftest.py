"""Pytest fixtures for sysroles tests."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import replace
from typing import Any
from unittest.mock import MagicMock
from uuid import UUID

import psycopg
import pytest

from sysroles.application.services.system_role_service import SystemRoleService
from sysroles.domain.entities import SystemRole
from sysroles.domain.exceptions import DuplicateKey

_UPDATABLE = {"name", "description", "permissions", "is_deleted", "updated_by", "updated_at"}


# --- Fake repositories ---


class FakeSystemRoleRepository:
    """In-memory system role repository with a unique index on name."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, SystemRole] = {}

    def _check_unique_name(self, name: str, role_id: UUID) -> None:
        for other in self._by_id.values():
            if other.name == name and other.id != role_id:
                raise DuplicateKey("System role", "ix_system_role_name")

    async def create(self, role: SystemRole) -> SystemRole:
        self._check_unique_name(role.name, role.id)
        self._by_id[role.id] = replace(role, permissions=list(role.permissions))
        return role

    async def list_all(self, *, is_deleted: bool | None = None) -> list[SystemRole]:
        roles = [
            r
            for r in self._by_id.values()
            if is_deleted is None or r.is_deleted == is_deleted
        ]
        return sorted(roles, key=lambda r: r.created_at)

    async def get_by_id(self, role_id: UUID) -> SystemRole | None:
        return self._by_id.get(role_id)

    async def update(self, role_id: UUID, changes: dict[str, Any]) -> SystemRole | None:
        unknown = set(changes) - _UPDATABLE
        if unknown:
            raise ValueError(f"Cannot update column(s): {sorted(unknown)}")
        role = self._by_id.get(role_id)
        if role is None:
            return None
        if "name" in changes:
            self._check_unique_name(changes["name"], role_id)
        updated = replace(role, **changes, version=role.version + 1)
        self._by_id[role_id] = updated
        return updated


class BrokenSystemRoleRepository:
    """Repository whose every call fails like a lost database connection."""

    def _fail(self) -> None:
        raise psycopg.OperationalError("connection to server was lost")

    async def create(self, role: SystemRole) -> SystemRole:
        self._fail()

    async def list_all(self, *, is_deleted: bool | None = None) -> list[SystemRole]:
        self._fail()

    async def get_by_id(self, role_id: UUID) -> SystemRole | None:
        self._fail()

    async def update(self, role_id: UUID, changes: dict[str, Any]) -> SystemRole | None:
        self._fail()


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self, system_roles: Any | None = None) -> None:
        self.system_roles = system_roles or FakeSystemRoleRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same UoW on every call, so state survives between calls."""

    @asynccontextmanager
    async def _factory():
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def broken_uow_factory():
    """Factory whose repository raises a backend error on every call."""
    return make_uow_factory(FakeUnitOfWork(BrokenSystemRoleRepository()))


@pytest.fixture
def mock_logger() -> MagicMock:
    """Stand-in Logger recording warning/error calls."""
    return MagicMock()


@pytest.fixture
def service(uow_factory, mock_logger) -> SystemRoleService:
    return SystemRoleService(uow_factory, mock_logger)


@pytest.fixture
def broken_service(broken_uow_factory, mock_logger) -> SystemRoleService:
    return SystemRoleService(broken_uow_factory, mock_logger)
