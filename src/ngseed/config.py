"""Project level key/value config persisted next to the generated files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .errors import ConfigStoreError

__all__ = ["CONFIG_FILENAME", "ConfigStore", "JSONValue"]


LOGGER = logging.getLogger(__name__)

CONFIG_FILENAME = ".ngseed-rc.json"

JSONPrimitive = Union[str, int, float, bool, None]
JSONValue = Union[JSONPrimitive, Dict[str, "JSONValue"], List["JSONValue"]]


class ConfigStore:
    """Values for one generator namespace stored in ``<root>/.ngseed-rc.json``.

    ``set`` only changes the in-memory copy; nothing reaches the disk until
    :meth:`save` is called. Other namespaces sharing the file are preserved.
    """

    def __init__(self, root: Path | str, namespace: str, *, filename: str = CONFIG_FILENAME):
        self.root = Path(root)
        self.namespace = namespace
        self.path = self.root / filename
        self._values: dict[str, JSONValue] = dict(self._load_namespace(self._read_document()))

    def _read_document(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigStoreError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(document, dict):
            raise ConfigStoreError(f"{self.path} must contain a JSON object")
        return document

    def _load_namespace(self, document: dict[str, Any]) -> dict[str, JSONValue]:
        values = document.get(self.namespace, {})
        if not isinstance(values, dict):
            raise ConfigStoreError(f"'{self.namespace}' in {self.path} must be a JSON object")
        return values

    def get(self, key: str, default: JSONValue = None) -> JSONValue:
        return self._values.get(key, default)

    def set(self, key: str, value: JSONValue) -> None:
        if not key:
            raise ValueError("config keys must not be empty")
        self._values[key] = value

    def all(self) -> dict[str, JSONValue]:
        return dict(self._values)

    def save(self) -> Path:
        """Write the namespace to disk and return the file path."""

        document = self._read_document()
        document[self.namespace] = dict(self._values)
        self.root.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(document, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
        LOGGER.debug("saved %d config value(s) to %s", len(self._values), self.path)
        return self.path
