"""Unit tests for SystemRole documents and Projection."""

from datetime import UTC, datetime
from uuid import uuid4

from sysroles.domain.entities import SystemRole
from sysroles.domain.value_objects import Projection


def _role(**overrides) -> SystemRole:
    now = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
    fields = dict(
        id=uuid4(),
        name="Admin",
        created_by="creator-1",
        created_at=now,
        updated_at=now,
    )
    fields.update(overrides)
    return SystemRole(**fields)


class TestToDocument:
    def test_defaults(self) -> None:
        role = _role()
        doc = role.to_document()
        assert doc["id"] == str(role.id)
        assert doc["isDeleted"] is False
        assert doc["permissions"] == []
        assert doc["description"] is None
        assert doc["updatedBy"] is None
        assert doc["version"] == 0

    def test_timestamps_iso(self) -> None:
        doc = _role().to_document()
        assert doc["createdAt"] == "2026-01-02T03:04:05+00:00"
        assert doc["updatedAt"] == "2026-01-02T03:04:05+00:00"

    def test_permissions_copied(self) -> None:
        role = _role(permissions=["roles:read"])
        doc = role.to_document()
        doc["permissions"].append("roles:write")
        assert role.permissions == ["roles:read"]


class TestProjection:
    def test_default_hides_version(self) -> None:
        doc = Projection.default().apply(_role().to_document())
        assert "version" not in doc
        assert "name" in doc

    def test_none_keeps_everything(self) -> None:
        full = _role().to_document()
        assert Projection.none().apply(full) == full

    def test_exclude_custom_keys(self) -> None:
        doc = Projection.exclude("createdBy", "updatedBy").apply(_role().to_document())
        assert "createdBy" not in doc
        assert "updatedBy" not in doc
        assert "version" in doc

    def test_apply_does_not_mutate_input(self) -> None:
        full = _role().to_document()
        Projection.default().apply(full)
        assert "version" in full
