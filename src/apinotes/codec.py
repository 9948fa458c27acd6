# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Decode and encode entry points that raise typed errors.

The models report failures as pydantic ``ValidationError``s with stable
error types. The functions here run that validation and translate the
first failure into an ``ApiNotesDecodeError`` subclass, so callers can
handle a bad version string or a missing attribute bundle without
inspecting pydantic error dictionaries.

Usage::

    from apinotes.codec import decode_versioned_attributes

    attrs = decode_versioned_attributes(
        ModelVersionedAttributes[ModelModuleItems], node
    )
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from apinotes.errors import (
    ApiNotesDecodeError,
    VersionItemsMissingError,
    VersionTupleDecodeError,
)
from apinotes.models.model_version_tuple import (
    VERSION_TUPLE_TYPE_MISMATCH,
    ModelVersionTuple,
    VersionTupleStr,
)
from apinotes.models.model_versioned_attributes import (
    VERSION_ITEMS_MISSING,
    ModelVersionedAttributes,
)

logger = logging.getLogger(__name__)

ItemsT = TypeVar("ItemsT")

_VERSION_TUPLE_ADAPTER: TypeAdapter[ModelVersionTuple] = TypeAdapter(VersionTupleStr)


def format_loc(loc: tuple[int | str, ...]) -> str:
    """Join a pydantic error location into a dotted path."""
    return ".".join(str(part) for part in loc)


def translate_validation_error(exc: ValidationError) -> ApiNotesDecodeError:
    """Map the first error of ``exc`` to a typed decode error."""
    error = exc.errors()[0]
    loc = tuple(error.get("loc", ()))
    ctx = error.get("ctx") or {}
    error_type = error.get("type")
    logger.debug(
        "Translating %s validation error at %s (%d errors total)",
        error_type,
        loc,
        exc.error_count(),
    )

    if error_type == VERSION_TUPLE_TYPE_MISMATCH:
        return VersionTupleDecodeError(raw=error.get("input"), path=format_loc(loc))

    if error_type == VERSION_ITEMS_MISSING:
        # The error sits on the ``items`` field; report the node itself.
        return VersionItemsMissingError(
            expected_type=str(ctx.get("expected_type", "")),
            version=str(ctx.get("version", "<invalid>")),
            path=format_loc(loc[:-1]),
        )

    return ApiNotesDecodeError(
        error.get("msg", "Validation error"), path=format_loc(loc)
    )


# any-ok: wire values are dynamically typed
def decode_version_tuple(value: Any) -> ModelVersionTuple:
    """Decode a wire value into a version tuple.

    Raises:
        VersionTupleDecodeError: If ``value`` is not a valid version string.
    """
    try:
        return _VERSION_TUPLE_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise translate_validation_error(exc) from exc


def encode_version_tuple(version: ModelVersionTuple) -> str:
    """Encode a version tuple as its canonical string."""
    return _VERSION_TUPLE_ADAPTER.dump_python(version)


# any-ok: document node values are dynamically typed
def decode_versioned_attributes(
    model: type[ModelVersionedAttributes[ItemsT]], node: Any
) -> ModelVersionedAttributes[ItemsT]:
    """Decode a flattened document node with a parametrized container.

    Raises:
        VersionTupleDecodeError: If ``Version`` is not a valid version string.
        VersionItemsMissingError: If the node has no decodable bundle.
        ApiNotesDecodeError: For any other failure (e.g. no ``Version`` key).
    """
    try:
        return model.model_validate(node)
    except ValidationError as exc:
        raise translate_validation_error(exc) from exc


# any-ok: document node values are dynamically typed
def encode_versioned_attributes(
    attributes: ModelVersionedAttributes[Any],
    node: MutableMapping[str, Any] | None = None,
) -> MutableMapping[str, Any]:
    """Encode ``attributes`` into ``node`` (a new dict when omitted)."""
    target: MutableMapping[str, Any] = {} if node is None else node
    attributes.encode_into(target)
    return target


__all__ = [
    "decode_version_tuple",
    "decode_versioned_attributes",
    "encode_version_tuple",
    "encode_versioned_attributes",
    "format_loc",
    "translate_validation_error",
]
