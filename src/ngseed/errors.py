"""Exception types raised by the ngseed generator."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base class for failures that abort a generator run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PromptError(ScaffoldError):
    """Raised when a question cannot be answered."""


class TemplateRenderingError(ScaffoldError):
    """Raised when the renderer cannot evaluate a template."""


class ConfigStoreError(ScaffoldError):
    """Raised when the persisted project config cannot be read."""


__all__ = [
    "ConfigStoreError",
    "PromptError",
    "ScaffoldError",
    "TemplateRenderingError",
]
