"""
GraphQL config file loader.

This helper locates, reads and parses a graphql-config file before handing the
resulting value tree to :meth:`RootConfig.from_document`.

Search precedence (first match wins)
1. An explicit path argument (``--config`` on the CLI).
2. The nearest ``.graphqlconfig`` / ``.graphqlconfig.yaml`` /
   ``.graphqlconfig.yml`` found while walking upwards from the search root.

Format is chosen from the file name: ``.yaml``/``.yml`` are YAML, ``.json``
and the bare ``.graphqlconfig`` are JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from ..utils.errors import (
    ConfigNotFoundError,
    ConfigParseError,
    UnsupportedConfigFormatError,
)
from .schema import RootConfig

log = structlog.get_logger()

# Discovery order inside a single directory.
CONFIG_FILENAMES: tuple[str, ...] = (
    ".graphqlconfig",
    ".graphqlconfig.yaml",
    ".graphqlconfig.yml",
)

# --------------------------------------------------------------------------- #
# Helper functions                                                            #
# --------------------------------------------------------------------------- #


def find_config(start: Optional[str | Path] = None) -> Optional[Path]:
    """Return the nearest graphql-config file at or above *start*.

    Args:
        start: Directory (or file inside it) where the search begins.
            Defaults to the current working directory.

    Returns:
        Path to the first matching file, or ``None`` when no ancestor holds
        one.
    """
    cur = Path(start or Path.cwd()).expanduser().resolve()
    if cur.is_file():
        cur = cur.parent
    for parent in (cur, *cur.parents):
        for fname in CONFIG_FILENAMES:
            candidate = parent / fname
            if candidate.is_file():
                return candidate
    return None


def config_format(path: Path) -> str:
    """Return ``"json"`` or ``"yaml"`` for *path*.

    Raises:
        UnsupportedConfigFormatError: When the name matches neither format.
    """
    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return "yaml"
    # Path(".graphqlconfig").suffix is "" – the bare name is JSON.
    if suffix == ".json" or path.name == ".graphqlconfig":
        return "json"
    raise UnsupportedConfigFormatError(f"Unsupported config format: {path.name}")


def parse_config_text(text: str, fmt: str) -> Any:
    """Parse *text* as ``fmt`` (``"json"`` or ``"yaml"``).

    Args:
        text: Raw file contents.
        fmt: Serialisation format.

    Returns:
        The generic value tree produced by the parser.

    Raises:
        ConfigParseError: If parsing fails or the document is empty.
    """
    if fmt not in {"json", "yaml"}:
        raise UnsupportedConfigFormatError(f"Unsupported config format: {fmt}")
    if not text.strip():
        raise ConfigParseError("GraphQL config file is empty")
    try:
        if fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigParseError(f"Could not parse {fmt.upper()} config – {exc}") from exc
    if data is None:
        raise ConfigParseError("GraphQL config file is empty")
    return data


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #
def load_config(
    *,
    config_path: Optional[str | Path] = None,
    search_root: Optional[str | Path] = None,
) -> RootConfig:
    """Return a fully decoded :class:`RootConfig`.

    Args:
        config_path: Explicit config file. ``None`` triggers discovery.
        search_root: Directory where discovery starts (defaults to the
            current working directory).

    Returns:
        A :class:`RootConfig` ready for downstream use.

    Raises:
        ConfigNotFoundError: When the explicit file is missing or discovery
            finds nothing.
        UnsupportedConfigFormatError: When the file name has no known format.
        ConfigParseError: When the file is empty or unparsable.
        MalformedDocumentError: When the document is not an object.
        TypeMismatchError: When a field has the wrong shape.
    """
    path = resolve_config_path(config_path=config_path, search_root=search_root)
    fmt = config_format(path)
    log.debug("Reading %s config: %s", fmt, path)
    data = parse_config_text(path.read_text(encoding="utf-8"), fmt)

    cfg = RootConfig.from_document(data)
    log.info(
        "Loaded GraphQL config %s (%d project(s))",
        path,
        len(cfg.projects or {}),
    )
    return cfg


def resolve_config_path(
    *,
    config_path: Optional[str | Path] = None,
    search_root: Optional[str | Path] = None,
) -> Path:
    """Resolve the config file according to the documented precedence.

    Raises:
        ConfigNotFoundError: When no file can be located.
    """
    if config_path is not None:
        path = Path(config_path).expanduser().resolve()
        if not path.is_file():
            raise ConfigNotFoundError(f"GraphQL config not found: {path}")
        return path

    found = find_config(search_root)
    if found is None:
        start = Path(search_root or Path.cwd()).expanduser().resolve()
        raise ConfigNotFoundError(
            f"No {' / '.join(CONFIG_FILENAMES)} found in {start} or its parents"
        )
    log.debug("Discovered config file: %s", found)
    return found


__all__ = [
    "CONFIG_FILENAMES",
    "find_config",
    "config_format",
    "parse_config_text",
    "resolve_config_path",
    "load_config",
]
