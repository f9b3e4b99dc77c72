from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from .construct import construct, read_data, read_from_file
from .errors import UnknownCategory
from .failure import FAILURE_TYPES, DomainFailure, FailureLevel
from .logging import logger


log = logger()


@dataclass
class FailureOverride:
    """Replacement defaults for a single failure category. Fields left as
    `None` keep the built-in default."""
    message: Optional[str] = None
    code: Optional[int] = None
    level: Optional[FailureLevel] = None
    hint: Optional[str] = None
    source: Optional[str] = None

    def as_kwargs(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class CatalogConfig:
    """Configuration as found in `mirror.toml` or `[tool.mirror]`:

    ```toml
    [failure.ServerFailure]
    message = "Our servers are having a bad day."
    level = "critical"
    ```
    """
    failure: dict[str, FailureOverride] = field(default_factory=dict)


class Catalog:
    def __init__(self, config: CatalogConfig | None = None):
        self.config = config or CatalogConfig()
        for name in self.config.failure:
            if name not in FAILURE_TYPES:
                raise UnknownCategory(name)

    def make(self, name: str, **overrides: Any) -> DomainFailure:
        """Build the failure category `name`. Explicit keyword arguments take
        precedence over configured overrides, which take precedence over the
        class defaults."""
        if name not in FAILURE_TYPES:
            raise UnknownCategory(name)
        args = self.config.failure[name].as_kwargs() if name in self.config.failure else {}
        args.update(overrides)
        return FAILURE_TYPES[name](**args)

    def entries(self) -> Iterator[tuple[str, DomainFailure]]:
        return ((name, self.make(name)) for name in FAILURE_TYPES)

    @staticmethod
    def read(path: Path, section: Optional[str] = None) -> Catalog:
        config = read_from_file(CatalogConfig, path, section)
        log.debug("read failure catalog from `%s`", path)
        return Catalog(config)


def find_config(directory: Path | None = None) -> Catalog:
    """Look for `mirror.toml` first, then for a `[tool.mirror]` section in
    `pyproject.toml`. Without either, the built-in defaults are used."""
    directory = directory or Path.cwd()
    if (directory / "mirror.toml").exists():
        return Catalog.read(directory / "mirror.toml")

    pyproject = directory / "pyproject.toml"
    if pyproject.exists():
        section = read_data(pyproject).get("tool", {}).get("mirror")
        if section is not None:
            log.debug("read failure catalog from `%s`", pyproject)
            return Catalog(construct(CatalogConfig, section))
        log.debug("no `[tool.mirror]` section in `%s`", pyproject)

    return Catalog()
