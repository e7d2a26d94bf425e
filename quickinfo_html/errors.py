"""Fatal error types raised while rendering."""

from __future__ import annotations

from typing import Any


class UnrenderableValueError(NotImplementedError):
    """Raised for a result value that is not a Node, a string or a sequence."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Can't render {value!r}")
        self.value = value


class IndentUnderflowError(RuntimeError):
    """Raised when indentation is released more often than it was acquired."""


__all__ = ["IndentUnderflowError", "UnrenderableValueError"]
