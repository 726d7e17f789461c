"""Domain exceptions."""


class SysRolesError(Exception):
    """Base exception for sysroles."""

    pass


class DuplicateKey(SysRolesError):
    """A unique field of the resource already exists in storage."""

    def __init__(self, resource: str, detail: str) -> None:
        super().__init__(f"{resource} with duplicate field(s) exists: {detail}")
        self.resource = resource
        self.detail = detail


class ValidationError(SysRolesError):
    """Validation failed for input data."""

    pass
