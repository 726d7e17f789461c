"""Application ports (interfaces)."""

from sysroles.application.ports.logger import Logger
from sysroles.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Logger",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
