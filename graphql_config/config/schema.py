"""
Pydantic models that mirror a GraphQL config document (graphql-config v2.0.1).

Two records make up the whole model:

* :class:`ProjectConfig` – schema path, include/exclude globs, name and the
  ``extensions`` vendor namespace of a single project.
* :class:`RootConfig` – the document itself: a top-level
  :class:`ProjectConfig` plus an optional ``projects`` mapping that shares the
  exact same shape.

Notes:
* Document keys are camelCase (``schemaPath``). Each field declares its key
  through an explicit alias; no case conversion happens at runtime.
* The top-level fields are *flattened* into the document. ``projects`` is a
  reserved key and never reaches the root record.
* Decoding is pure and fail-fast: the first offending value raises and no
  partial record is returned.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    StrictStr,
    ValidationError,
    field_validator,
)

from ..utils.errors import MalformedDocumentError, TypeMismatchError

# Key of the project map inside the top-level document.
PROJECTS_KEY = "projects"

# pydantic error types → shape description used in TypeMismatchError.
_EXPECTED: Dict[str, str] = {
    "string_type": "a string",
    "tuple_type": "an array",
    "list_type": "an array",
    "dict_type": "an object",
    "invalid-json-value": "a JSON-compatible value",
}


# Union branch tags pydantic inserts before every nested JsonValue member.
_JSON_TAGS = frozenset({"dict", "list", "str", "int", "float", "bool"})


def _document_loc(loc: Tuple[Any, ...]) -> Tuple[Any, ...]:
    """Reduce a pydantic error location to the keys found in the document.

    Below ``extensions.<key>`` pydantic alternates a branch tag with the
    actual key or index (``a.dict.b.list.0``); only the members are kept.
    A trailing ``[key]`` marker (invalid mapping key) is dropped as well.
    """
    if loc and loc[-1] == "[key]":
        loc = loc[:-1]
    if len(loc) <= 2 or loc[0] != "extensions":
        return loc
    out = list(loc[:2])
    rest = loc[2:]
    while len(rest) >= 2 and rest[0] in _JSON_TAGS:
        out.append(rest[1])
        rest = rest[2:]
    return tuple(out) + tuple(rest)


def _mismatch(exc: ValidationError, prefix: Tuple[Any, ...]) -> TypeMismatchError:
    """Translate the first pydantic error of *exc* into a TypeMismatchError."""
    err = exc.errors(include_url=False)[0]
    loc = prefix + _document_loc(tuple(err["loc"]))
    expected = _EXPECTED.get(err["type"], err["msg"].lower())
    return TypeMismatchError(loc, expected, err.get("input"))


def _typed(value: Any) -> Any:
    """Tag every JSON leaf with its type so ``True``, ``1`` and ``1.0`` differ."""
    if isinstance(value, Mapping):
        return {k: _typed(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_typed(v) for v in value]
    return (type(value).__name__, value)


# --------------------------------------------------------------------------- #
# 1.  Leaf model – one project                                                #
# --------------------------------------------------------------------------- #


class ProjectConfig(BaseModel):
    """Settings of a single project (also the shape of the document root).

    Attributes:
        name: Display name. The graphql-config specification says it should
            default to the project key; this is deliberately not enforced.
        schema_path: File holding the schema IDL (``schemaPath``).
        includes: Glob patterns to include, in document order.
        excludes: Glob patterns to exclude, in document order.
        extensions: Reserved vendor namespace. Values are kept verbatim and
            keys are ordered lexicographically.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # Every field declares its document key so the mapping stays auditable.
    name: Optional[StrictStr] = Field(None, alias="name")
    schema_path: Optional[StrictStr] = Field(None, alias="schemaPath")
    includes: Optional[Tuple[StrictStr, ...]] = Field(None, alias="includes")
    excludes: Optional[Tuple[StrictStr, ...]] = Field(None, alias="excludes")
    extensions: Optional[Dict[StrictStr, JsonValue]] = Field(None, alias="extensions")

    @field_validator("extensions")
    @classmethod
    def _sort_extensions(cls, v):
        """Order extension keys lexicographically behind a read-only view."""
        return None if v is None else MappingProxyType(dict(sorted(v.items())))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ProjectConfig):
            return NotImplemented
        # Python equality alone would make True == 1 == 1.0 inside extensions.
        return super().__eq__(other) and _typed(self.extensions) == _typed(
            other.extensions
        )

    __hash__ = None  # extensions hold unhashable JSON containers

    # --------------------------- convenience ----------------------------- #
    @property
    def schema_file(self) -> Optional[Path]:
        """``schema_path`` as a :class:`~pathlib.Path` (``None`` when unset)."""
        return None if self.schema_path is None else Path(self.schema_path)

    @classmethod
    def document_keys(cls) -> Dict[str, str]:
        """Return the static field-name → document-key table."""
        return {name: info.alias or name for name, info in cls.model_fields.items()}

    # ----------------------------- decode -------------------------------- #
    @classmethod
    def from_document(
        cls, data: Any, *, loc: Tuple[Any, ...] = ()
    ) -> "ProjectConfig":
        """Decode one project object.

        Args:
            data: Generic value tree, expected to be a mapping.
            loc: Location of *data* inside the whole document; prefixed to
                the location reported by errors.

        Returns:
            The decoded :class:`ProjectConfig`.

        Raises:
            TypeMismatchError: If *data* is not a mapping or a known key holds
                a value of the wrong shape.
        """
        if not isinstance(data, Mapping):
            raise TypeMismatchError(loc, "an object", data)

        # Unknown keys (including snake_case spellings) are dropped here.
        keys = set(cls.document_keys().values())
        known = {k: v for k, v in data.items() if k in keys}
        try:
            return cls.model_validate(known)
        except ValidationError as exc:
            raise _mismatch(exc, loc) from None

    # ----------------------------- encode -------------------------------- #
    def to_document(self) -> Dict[str, Any]:
        """Return the camelCase document form, omitting absent fields."""
        doc: Dict[str, Any] = {}
        for field, key in self.document_keys().items():
            value = getattr(self, field)
            if value is None:
                continue
            if isinstance(value, tuple):
                value = list(value)
            elif isinstance(value, Mapping):
                value = copy.deepcopy(dict(value))
            else:
                value = copy.deepcopy(value)
            doc[key] = value
        return doc


# --------------------------------------------------------------------------- #
# 2.  Top-level model – the whole document                                    #
# --------------------------------------------------------------------------- #


class RootConfig(BaseModel):
    """The whole GraphQL config document.

    Attributes:
        root: Top-level settings; decoded from the document object itself.
        projects: Optional project name → :class:`ProjectConfig` mapping.
            Names are kept verbatim and ordered lexicographically.
    """

    model_config = ConfigDict(frozen=True)

    root: ProjectConfig = Field(default_factory=ProjectConfig)
    projects: Optional[Dict[str, ProjectConfig]] = None

    @field_validator("projects")
    @classmethod
    def _sort_projects(cls, v):
        """Order project names lexicographically behind a read-only view."""
        return None if v is None else MappingProxyType(dict(sorted(v.items())))

    # ----------------------------- decode -------------------------------- #
    @classmethod
    def from_document(cls, data: Any) -> "RootConfig":
        """Decode a parsed GraphQL config document.

        The reserved ``projects`` key is extracted first and every entry is
        decoded on its own; the remaining keys are then decoded as the root
        :class:`ProjectConfig`.

        Args:
            data: Generic value tree produced by a JSON/YAML parser.

        Returns:
            The decoded :class:`RootConfig`.

        Raises:
            MalformedDocumentError: If *data* is not a mapping.
            TypeMismatchError: If any field anywhere has the wrong shape.
        """
        if not isinstance(data, Mapping):
            raise MalformedDocumentError(data)

        fields: Dict[str, Any] = {}

        raw_projects = data.get(PROJECTS_KEY)
        if raw_projects is not None:
            if not isinstance(raw_projects, Mapping):
                raise TypeMismatchError((PROJECTS_KEY,), "an object", raw_projects)
            projects: Dict[str, ProjectConfig] = {}
            for name, body in raw_projects.items():
                if not isinstance(name, str):
                    raise TypeMismatchError(
                        (PROJECTS_KEY,), "a string project name", name
                    )
                projects[name] = ProjectConfig.from_document(
                    body, loc=(PROJECTS_KEY, name)
                )
            fields["projects"] = projects

        rest = {k: v for k, v in data.items() if k != PROJECTS_KEY}
        fields["root"] = ProjectConfig.from_document(rest)
        return cls(**fields)

    # ----------------------------- encode -------------------------------- #
    def to_document(self) -> Dict[str, Any]:
        """Return the document form: root fields flattened, then ``projects``."""
        doc = self.root.to_document()
        if self.projects is not None:
            doc[PROJECTS_KEY] = {
                name: project.to_document() for name, project in self.projects.items()
            }
        return doc

    def get_project(self, name: str) -> ProjectConfig:
        """Return the project called *name*.

        Raises:
            KeyError: If the document declares no such project.
        """
        if not self.projects or name not in self.projects:
            raise KeyError(name)
        return self.projects[name]


__all__ = ["PROJECTS_KEY", "ProjectConfig", "RootConfig"]
