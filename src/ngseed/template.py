"""Template rendering backed by Jinja2."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from jinja2 import (
    DebugUndefined,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    Undefined,
)

from .errors import TemplateRenderingError
from .naming import npm_package_name, slugify

__all__ = [
    "TEMPLATE_ROOT",
    "TemplateRenderer",
    "TemplateRenderingError",
    "WriteStatus",
]


LOGGER = logging.getLogger(__name__)

TEMPLATE_ROOT = Path(__file__).resolve().parent / "templates"

_UNDEFINED_POLICIES: dict[str, type[Undefined]] = {
    "keep": DebugUndefined,
    "empty": Undefined,
    "error": StrictUndefined,
}


class WriteStatus(str, Enum):
    """Outcome of writing a rendered template to disk."""

    CREATE = "create"
    IDENTICAL = "identical"
    FORCE = "force"


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates found under ``source_root``.

    Parameters
    ----------
    source_root:
        Directory holding the template files.
    missing:
        Controls what happens when a placeholder cannot be resolved. The
        supported policies are ``"keep"`` (leave the placeholder in the
        output), ``"empty"`` (replace with an empty string) and ``"error"``
        (raise :class:`TemplateRenderingError`).
    """

    source_root: Path = TEMPLATE_ROOT
    missing: str = "keep"
    environment: Environment = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.missing not in _UNDEFINED_POLICIES:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

        self.source_root = Path(self.source_root)
        self.environment = Environment(
            loader=FileSystemLoader(str(self.source_root)),
            undefined=_UNDEFINED_POLICIES[self.missing],
            keep_trailing_newline=True,
            autoescape=False,
        )
        self.environment.filters.update(
            {
                "slug": slugify,
                "npm_name": npm_package_name,
            }
        )

    def template_path(self, *parts: str) -> Path:
        """Return the path of a template inside :attr:`source_root`."""

        return self.source_root.joinpath(*parts)

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render an inline ``template`` using ``context``."""

        try:
            return self.environment.from_string(template).render(**context)
        except TemplateError as exc:
            raise TemplateRenderingError(f"cannot render template: {exc}") from exc

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        """Render the template ``name`` relative to :attr:`source_root`."""

        try:
            template = self.environment.get_template(name)
        except TemplateNotFound as exc:
            raise FileNotFoundError(self.template_path(name)) from exc

        try:
            return template.render(**context)
        except TemplateError as exc:
            raise TemplateRenderingError(f"cannot render template '{name}': {exc}") from exc

    def copy_template(
        self,
        name: str,
        destination: str | Path,
        context: Mapping[str, Any],
        *,
        force: bool = False,
        encoding: str = "utf-8",
    ) -> WriteStatus:
        """Render ``name`` and write the result to ``destination``.

        An existing file with the same content is left alone. An existing file
        with different content is only replaced when ``force`` is set,
        otherwise :class:`FileExistsError` is raised.
        """

        rendered = self.render(name, context)
        target_path = Path(destination)

        status = WriteStatus.CREATE
        if target_path.exists():
            if target_path.read_text(encoding=encoding) == rendered:
                LOGGER.debug("%s is identical, skipping write", target_path)
                return WriteStatus.IDENTICAL
            if not force:
                raise FileExistsError(f"{target_path} already exists")
            status = WriteStatus.FORCE

        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_text(rendered, encoding=encoding)
        LOGGER.debug("wrote %s (%s)", target_path, status.value)
        return status
