r"""Project configuration from ``pyproject.toml``.

Reads the ``[tool.doctags]`` table:

    [tool.doctags]
    namespace = "App\\Models"

    [tool.doctags.aliases]
    Carbon = "Carbon\\Carbon"

    [tool.doctags.tags]
    deprecated = "myproject.tags:Deprecated"
"""
from __future__ import annotations

import importlib
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

from doctags.context import Context
from doctags.errors import ConfigurationError
from doctags.factory import StandardTagFactory, TagDependencies
from doctags.tags.base import Tag

# Python 3.11+ has tomllib built-in
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore

logger = logging.getLogger(__name__)


@dataclass
class DocTagsConfig:
    """Settings from the ``[tool.doctags]`` table.

    Attributes:
        namespace: Default namespace for the resolution context
        aliases: Default import aliases for the resolution context
        tags: Tag keyword -> ``"module:ClassName"`` of a Tag subclass
    """

    namespace: str = ""
    aliases: dict[str, str] = field(default_factory=dict)
    tags: dict[str, str] = field(default_factory=dict)

    def context(self) -> Context:
        """Build the default resolution context."""
        return Context(self.namespace, self.aliases)

    def build_factory(self, dependencies: TagDependencies | None = None) -> StandardTagFactory:
        """Create a factory with the standard kinds plus configured ones.

        Raises
        ------
        ConfigurationError
            If a configured handler cannot be imported or is not a Tag.
        """
        factory = StandardTagFactory(dependencies)
        for name, target in self.tags.items():
            factory.register(name, import_handler(target))
        return factory


def import_handler(target: str) -> type[Tag]:
    """Import a handler given as ``"package.module:ClassName"``.

    Raises
    ------
    ConfigurationError
        If the path is malformed, cannot be imported, or is not a Tag class.
    """
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise ConfigurationError(f"Handler {target!r} must look like 'package.module:ClassName'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import handler module {module_name!r}: {e}") from e

    handler = getattr(module, attribute, None)
    if not (isinstance(handler, type) and issubclass(handler, Tag)):
        raise ConfigurationError(f"Handler {target!r} is not a Tag subclass")
    return handler


def load_config(path: Path | str) -> DocTagsConfig:
    """Load configuration from a pyproject.toml file or its directory.

    A missing file or missing ``[tool.doctags]`` table gives the defaults.

    Parameters
    ----------
    path : Path | str
        Path to ``pyproject.toml``, or a directory containing one.

    Returns
    -------
    DocTagsConfig
        The loaded configuration.

    Raises
    ------
    ConfigurationError
        If the file cannot be parsed or a value has the wrong type.
    """
    path = Path(path)
    if path.is_dir():
        path = path / "pyproject.toml"

    if not path.exists():
        logger.debug("No configuration file at %s, using defaults", path)
        return DocTagsConfig()

    if tomllib is None:
        raise ConfigurationError("tomllib or tomli is required to read pyproject.toml")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    section = data.get("tool", {}).get("doctags", {})
    namespace = section.get("namespace", "")
    aliases = section.get("aliases", {})
    tags = section.get("tags", {})

    if not isinstance(namespace, str):
        raise ConfigurationError("tool.doctags.namespace must be a string")
    for key, table in (("aliases", aliases), ("tags", tags)):
        if not isinstance(table, dict) or not all(isinstance(v, str) for v in table.values()):
            raise ConfigurationError(f"tool.doctags.{key} must be a table of strings")

    logger.info("Loaded doctags configuration from %s", path)
    return DocTagsConfig(namespace=namespace, aliases=dict(aliases), tags=dict(tags))
