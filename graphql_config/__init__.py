"""
graphql_config package initialisation.

1. **Expose the version string**
   ``graphql_config.__version__`` is resolved at import-time from the
   installed distribution metadata.

2. **Re-export the public API**
   The decoded models, the file loader and the error types are available at
   the top level::

       from graphql_config import RootConfig, load_config

       cfg = RootConfig.from_document({"schemaPath": "./schema.graphql"})
"""

from importlib.metadata import PackageNotFoundError, version

# --------------------------------------------------------------------------- #
# Version resolution
# --------------------------------------------------------------------------- #
try:
    __version__: str = version("graphql_config")
except PackageNotFoundError:
    # Source tree without an installed wheel.
    __version__ = "0.0.0"

# --------------------------------------------------------------------------- #
# Public re-exports
# --------------------------------------------------------------------------- #
from .config import ProjectConfig, RootConfig, find_config, load_config  # noqa: E402
from .utils.errors import (  # noqa: E402
    ConfigNotFoundError,
    ConfigParseError,
    GraphQLConfigError,
    MalformedDocumentError,
    TypeMismatchError,
    UnsupportedConfigFormatError,
)

__all__: list[str] = [
    "__version__",
    "ProjectConfig",
    "RootConfig",
    "find_config",
    "load_config",
    "GraphQLConfigError",
    "MalformedDocumentError",
    "TypeMismatchError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "UnsupportedConfigFormatError",
]
