# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Validation of versioned attributes nodes read from YAML.

Validates a YAML document (or an already-parsed mapping) against a
parametrized ``ModelVersionedAttributes`` and collects actionable errors
with field paths and line hints instead of raising on the first failure.

YAML is parsed with a SafeLoader variant that keeps numeric-looking
scalars as strings, so ``Version: 1.10`` reads as ``"1.10"`` and not as
the float ``1.1``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import yaml
from pydantic import ValidationError

from apinotes.codec import format_loc
from apinotes.models.model_versioned_attributes import (
    VERSION_KEY,
    ModelVersionedAttributes,
)
from apinotes.settings import ApiNotesSettings

logger = logging.getLogger(__name__)

ItemsT = TypeVar("ItemsT")

VERSION_TUPLE_SIGNED_SEGMENT = "version_tuple_signed_segment"

_NUMERIC_TAGS = frozenset({"tag:yaml.org,2002:int", "tag:yaml.org,2002:float"})


class _StringScalarLoader(yaml.SafeLoader):
    """SafeLoader that does not resolve plain scalars to int or float."""


_StringScalarLoader.yaml_implicit_resolvers = {
    first_char: [
        (tag, regexp) for tag, regexp in resolvers if tag not in _NUMERIC_TAGS
    ]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass
class VersionedAttributesValidationError:
    """A validation error with actionable context.

    Attributes:
        field: The field path that caused the error (e.g., "Version").
        message: Human-readable error description.
        error_type: Stable error type (pydantic type or a loader-level type).
        line_hint: Optional line number hint if available from YAML parsing.
    """

    field: str
    message: str
    error_type: str = "value_error"
    line_hint: int | None = None

    def __str__(self) -> str:
        location = f"line {self.line_hint}: " if self.line_hint else ""
        return f"{location}{self.field}: {self.message}"


@dataclass
class VersionedAttributesValidationResult(Generic[ItemsT]):
    """Result of validating a versioned attributes node.

    Attributes:
        attributes: The decoded container (None if validation failed).
        errors: List of validation errors (empty if valid).
    """

    attributes: ModelVersionedAttributes[ItemsT] | None
    errors: list[VersionedAttributesValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Return True if there are no blocking errors."""
        return len(self.errors) == 0 and self.attributes is not None


class ValidatorVersionedAttributes(Generic[ItemsT]):
    """Validates versioned attributes nodes for one bundle type.

    Usage::

        validator = ValidatorVersionedAttributes(
            ModelVersionedAttributes[ModelModuleItems]
        )
        result = validator.validate_yaml_string(yaml_content)
        if not result.is_valid:
            for error in result.errors:
                print(f"ERROR: {error}")
    """

    def __init__(
        self,
        model: type[ModelVersionedAttributes[ItemsT]],
        settings: ApiNotesSettings | None = None,
    ) -> None:
        self.model = model
        self.settings = settings if settings is not None else ApiNotesSettings()

    def _failure(
        self, field_path: str, message: str, error_type: str, line_hint: int | None = None
    ) -> VersionedAttributesValidationResult[ItemsT]:
        return VersionedAttributesValidationResult(
            attributes=None,
            errors=[
                VersionedAttributesValidationError(
                    field=field_path,
                    message=message,
                    error_type=error_type,
                    line_hint=line_hint,
                )
            ],
        )

    def validate_file(self, path: str) -> VersionedAttributesValidationResult[ItemsT]:
        """Validate the YAML document at ``path``."""
        try:
            with open(path, encoding="utf-8") as f:
                content = f.read()
        except OSError as exc:
            logger.warning("Cannot read API notes file %s: %s", path, exc)
            return self._failure(
                "file", f"Cannot read API notes file {path!r}: {exc}", "file_error"
            )
        return self.validate_yaml_string(content)

    def validate_yaml_string(
        self, yaml_content: str
    ) -> VersionedAttributesValidationResult[ItemsT]:
        """Validate a versioned attributes node from a YAML string."""
        size = len(yaml_content.encode("utf-8"))
        if size > self.settings.max_document_bytes:
            logger.warning(
                "Rejecting API notes document of %d bytes (limit %d)",
                size,
                self.settings.max_document_bytes,
            )
            return self._failure(
                "yaml",
                f"Document is {size} bytes, larger than the "
                f"{self.settings.max_document_bytes} byte limit",
                "document_too_large",
            )

        try:
            data = yaml.load(yaml_content, Loader=_StringScalarLoader)  # noqa: S506
        except yaml.YAMLError as exc:
            line_hint: int | None = None
            mark = getattr(exc, "problem_mark", None)
            if mark is not None:
                line_hint = mark.line + 1
            logger.warning("Invalid YAML in API notes document: %s", exc)
            return self._failure(
                "yaml", f"Invalid YAML syntax: {exc}", "yaml_syntax", line_hint
            )

        if not isinstance(data, Mapping):
            logger.warning(
                "API notes node is %s, not a mapping", type(data).__name__
            )
            return self._failure(
                "root",
                "Versioned attributes must be a YAML mapping (key: value pairs), "
                f"got {type(data).__name__}",
                "model_type",
            )

        return self.validate_dict(data)

    # any-ok: document node values are dynamically typed
    def validate_dict(
        self, data: Mapping[str, Any]
    ) -> VersionedAttributesValidationResult[ItemsT]:
        """Validate a versioned attributes node from a parsed mapping."""
        # Check the version key before pydantic for a better message
        if VERSION_KEY not in data:
            return self._failure(
                VERSION_KEY,
                f"Required field {VERSION_KEY!r} is missing. "
                f'Add: {VERSION_KEY}: "1.0"',
                "missing",
            )

        raw_version = data[VERSION_KEY]
        if not self.settings.allow_signed_segments and isinstance(raw_version, str):
            if any(segment[:1] in ("+", "-") for segment in raw_version.split(".")):
                return self._failure(
                    VERSION_KEY,
                    f"{raw_version} has a signed segment; "
                    "signed versions are disabled (APINOTES_ALLOW_SIGNED_SEGMENTS)",
                    VERSION_TUPLE_SIGNED_SEGMENT,
                )

        try:
            attributes = self.model.model_validate(data)
        except ValidationError as exc:
            errors: list[VersionedAttributesValidationError] = []
            for error in exc.errors():
                loc = tuple(error.get("loc", ()))
                field_path = format_loc(loc) if loc else "root"
                errors.append(
                    VersionedAttributesValidationError(
                        field=field_path,
                        message=error.get("msg", "Validation error"),
                        error_type=error.get("type", "value_error"),
                    )
                )
            return VersionedAttributesValidationResult(attributes=None, errors=errors)

        return VersionedAttributesValidationResult(attributes=attributes)


__all__ = [
    "VERSION_TUPLE_SIGNED_SEGMENT",
    "ValidatorVersionedAttributes",
    "VersionedAttributesValidationError",
    "VersionedAttributesValidationResult",
]
