"""
Configuration package façade.

Exports the small, stable surface that external callers rely on:

* :func:`load_config` – Locate, parse and decode a graphql-config file into a
  :class:`RootConfig` instance.
* :class:`RootConfig` / :class:`ProjectConfig` – Pydantic models representing
  the decoded document.

Anything not imported here is considered private implementation detail.
"""

from .loader import find_config, load_config  # noqa: F401
from .schema import ProjectConfig, RootConfig  # noqa: F401

__all__: list[str] = ["find_config", "load_config", "ProjectConfig", "RootConfig"]
