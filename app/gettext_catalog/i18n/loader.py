"""Catalog loading interface and implementations.

Loaders sit outside the lookup core: they read pre-converted catalog files
(po2json-style JSON, or the same structure in YAML) and hand back a payload
for ``CatalogStore.merge``. Binary .mo and .po parsing is not supported.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import structlog
import yaml

from gettext_catalog.i18n.exceptions import CatalogFormatError

logger = structlog.get_logger()

Payload = Dict[str, Dict[str, Any]]


class CatalogLoader(ABC):
    """Abstract base for catalog loaders.

    Implementations define where payloads come from. The payload must be a
    mapping of domain -> {lookup key -> variant list, "" -> header}.
    """

    @abstractmethod
    def load(self) -> Payload:
        """Load a catalog payload.

        Returns:
            Payload ready for CatalogStore.merge().

        Raises:
            FileNotFoundError: If no catalog files are found.
            CatalogFormatError: If a file cannot be parsed.
        """
        pass


class DictCatalogLoader(CatalogLoader):
    """Loader for payloads that are already in memory (embedded data)."""

    def __init__(self, payload: Mapping[str, Mapping[str, Any]]):
        self.payload = payload

    def load(self) -> Payload:
        return {domain: dict(data or {}) for domain, data in self.payload.items()}


class FileCatalogLoader(CatalogLoader):
    """Loader for catalog files on disk.

    Reads a single file, or every matching file in a directory in sorted
    order. Files are combined domain by domain; later files win.

    Attributes:
        path: File or directory to read.
        use_cache: Whether to keep the combined payload in memory.
    """

    suffixes: Tuple[str, ...] = ()

    def __init__(self, path: Path, use_cache: bool = True):
        """Initialize file loader.

        Args:
            path: Catalog file or directory of catalog files.
            use_cache: Whether to cache the loaded payload in memory.

        Raises:
            ValueError: If path does not exist.
        """
        self.path = Path(path)
        self.use_cache = use_cache
        self.cache: Optional[Payload] = None

        if not self.path.exists():
            raise ValueError(f"Catalog path not found: {self.path}")

        logger.info(
            "initialized_catalog_loader",
            loader=type(self).__name__,
            path=str(self.path),
            use_cache=use_cache,
        )

    @abstractmethod
    def parse(self, stream) -> Any:
        """Parse an open file into Python data."""
        pass

    def files(self) -> List[Path]:
        if self.path.is_file():
            return [self.path] if self.path.suffix in self.suffixes else []
        return sorted(
            p for p in self.path.iterdir() if p.is_file() and p.suffix in self.suffixes
        )

    def load(self) -> Payload:
        """Load and combine every catalog file.

        Returns:
            Combined payload.

        Raises:
            FileNotFoundError: If no catalog files are found.
            CatalogFormatError: If a file cannot be parsed or is not a mapping.
        """
        if self.use_cache and self.cache is not None:
            logger.info("loaded_from_cache", path=str(self.path))
            return self.cache

        catalog_files = self.files()
        if not catalog_files:
            raise FileNotFoundError(f"No catalog files found in {self.path}")

        payload: Payload = {}
        for catalog_file in catalog_files:
            with open(catalog_file, "r", encoding="utf-8") as f:
                try:
                    data = self.parse(f)
                except (ValueError, yaml.YAMLError) as e:
                    logger.error("catalog_parse_error", file=str(catalog_file), error=str(e))
                    raise CatalogFormatError(f"Failed to parse {catalog_file}: {e}") from e
            self._combine(payload, data, catalog_file)

        logger.info(
            "loaded_catalog_files",
            path=str(self.path),
            file_count=len(catalog_files),
            domain_count=len(payload),
        )

        if self.use_cache:
            self.cache = payload

        return payload

    def clear_cache(self) -> None:
        """Clear the cached payload."""
        self.cache = None
        logger.info("cleared_catalog_cache")

    def _combine(self, payload: Payload, data: Any, source_file: Path) -> None:
        if data is None:
            return
        if not isinstance(data, dict):
            logger.error("invalid_catalog_file", file=str(source_file), expected="dict")
            raise CatalogFormatError(f"Catalog file {source_file} must contain a mapping")

        for domain, messages in data.items():
            if messages is None:
                continue
            if not isinstance(messages, dict):
                raise CatalogFormatError(
                    f"Domain '{domain}' in {source_file} must contain a mapping"
                )
            target = payload.setdefault(domain, {})
            for key, value in messages.items():
                if key == "" and isinstance(value, dict):
                    target.setdefault("", {}).update(value)
                else:
                    target[key] = value


class JSONCatalogLoader(FileCatalogLoader):
    """Loader for po2json-style ``.json`` catalog files."""

    suffixes = (".json",)

    def parse(self, stream) -> Any:
        return json.load(stream)


class YAMLCatalogLoader(FileCatalogLoader):
    """Loader for ``.yml``/``.yaml`` files holding the same structure as JSON.

    YAML's ``null`` maps to the empty msgid_plural slot::

        messages:
          "":
            plural-forms: "nplurals=2; plural=(n != 1);"
          test: [null, XXtestXX]
    """

    suffixes = (".yml", ".yaml")

    def parse(self, stream) -> Any:
        return yaml.safe_load(stream)
