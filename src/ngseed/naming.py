"""Helpers that turn free-form project names into npm friendly identifiers."""

from __future__ import annotations

import re
import unicodedata

__all__ = ["is_valid_npm_name", "npm_package_name", "slugify"]


NPM_NAME_MAX_LENGTH = 214

_SEPARATORS = re.compile(r"[\s_\-]+")
_UNSAFE_CHARACTERS = re.compile(r"[^a-z0-9\-._~]")
_VALID_NPM_NAME = re.compile(r"^(?:@[a-z0-9\-~][a-z0-9\-._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*$")


def _ascii(value: str) -> str:
    text = unicodedata.normalize("NFKD", value)
    return text.encode("ascii", "ignore").decode("ascii")


def slugify(value: str, *, separator: str = "-") -> str:
    """Return a lowercase ASCII slug for ``value``.

    Whitespace, underscores and dashes collapse into ``separator``; any other
    punctuation is dropped.
    """

    text = _ascii(str(value)).lower()
    text = re.sub(r"[^\w\s\-]", "", text)
    text = _SEPARATORS.sub(separator, text.strip())
    return text.strip(separator)


def _npm_segment(value: str) -> str:
    segment = slugify(value)
    segment = _UNSAFE_CHARACTERS.sub("", segment)
    return segment.lstrip("._")


def npm_package_name(value: str) -> str:
    """Derive a name ``npm`` will accept for ``package.json``.

    Scoped names (``@scope/name``) keep their scope. When nothing usable is
    left the generic ``"project"`` is returned.
    """

    text = str(value).strip()
    scope = ""
    if text.startswith("@") and "/" in text:
        raw_scope, _, text = text[1:].partition("/")
        scope = _npm_segment(raw_scope)

    name = _npm_segment(text) or "project"
    candidate = f"@{scope}/{name}" if scope else name
    return candidate[:NPM_NAME_MAX_LENGTH]


def is_valid_npm_name(value: str) -> bool:
    """Return ``True`` when ``value`` can be used verbatim as an npm name."""

    if not value or len(value) > NPM_NAME_MAX_LENGTH:
        return False
    return bool(_VALID_NPM_NAME.match(value))
