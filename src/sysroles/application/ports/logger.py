"""Logger port - diagnostic sink injected into services and resources."""

from typing import Any, Protocol


class Logger(Protocol):
    """Anything with warning/error, e.g. a stdlib ``logging.Logger``."""

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
