# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Version tuple value type for API notes documents.

A version tuple is ``major[.minor[.patch]]``. Missing trailing components
are kept absent so the tuple renders exactly as it was written, but they
compare as zero: ``1``, ``1.0`` and ``1.0.0`` are equal and hash alike.

Wire form::

    Version: "5.1"

The ``VersionTupleStr`` annotated type carries the string codec used when a
tuple appears as a field of another model.
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator
from pydantic_core import PydanticCustomError

# One integer segment: optional sign, ASCII digits only.
_SEGMENT_PATTERN = re.compile(r"[+-]?[0-9]+")

_MAX_SEGMENTS = 3

VERSION_TUPLE_TYPE_MISMATCH = "version_tuple_type_mismatch"


class ModelVersionTuple(BaseModel):
    """A ``major[.minor[.patch]]`` version number.

    Components are not range checked; only ``parse`` rejects input.

    Attributes:
        major: The major part of the version number.
        minor: The minor part, or None when it was not written.
        patch: The patch part, or None when it was not written.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    major: int = Field(..., description="Major part of the version number")
    minor: int | None = Field(
        default=None, description="Minor part of the version number"
    )
    patch: int | None = Field(
        default=None, description="Patch part of the version number"
    )

    @classmethod
    def make(
        cls, major: int, minor: int | None = None, patch: int | None = None
    ) -> ModelVersionTuple:
        """Build a tuple from positional components."""
        return cls(major=major, minor=minor, patch=patch)

    @classmethod
    def parse(cls, text: str) -> ModelVersionTuple | None:
        """Parse ``text`` as a version tuple.

        Returns None when ``text`` has no segments, more than three, or any
        segment (empty ones included) that is not an integer, or has too many
        digits to convert.
        """
        segments = text.split(".")
        if len(segments) > _MAX_SEGMENTS:
            return None
        if not all(_SEGMENT_PATTERN.fullmatch(segment) for segment in segments):
            return None
        try:
            values = [int(segment) for segment in segments]
        except ValueError:
            # Over the interpreter's integer string conversion limit.
            return None
        return cls(
            major=values[0],
            minor=values[1] if len(values) > 1 else None,
            patch=values[2] if len(values) > 2 else None,
        )

    @property
    def comparison_key(self) -> tuple[int, int, int]:
        """Components with absent parts read as zero."""
        return (self.major, self.minor or 0, self.patch or 0)

    def __str__(self) -> str:
        if self.patch is not None:
            # A patch without a minor renders the minor as 0.
            return f"{self.major}.{self.minor or 0}.{self.patch}"
        if self.minor is not None:
            return f"{self.major}.{self.minor}"
        return f"{self.major}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelVersionTuple):
            return NotImplemented
        return self.comparison_key == other.comparison_key

    def __hash__(self) -> int:
        return hash(self.comparison_key)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ModelVersionTuple):
            return NotImplemented
        return self.comparison_key < other.comparison_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ModelVersionTuple):
            return NotImplemented
        return self.comparison_key <= other.comparison_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ModelVersionTuple):
            return NotImplemented
        return self.comparison_key > other.comparison_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ModelVersionTuple):
            return NotImplemented
        return self.comparison_key >= other.comparison_key


def _decode_version_tuple(value: Any) -> ModelVersionTuple:
    if isinstance(value, ModelVersionTuple):
        return value
    if isinstance(value, str):
        parsed = ModelVersionTuple.parse(value)
        if parsed is not None:
            return parsed
    raise PydanticCustomError(
        VERSION_TUPLE_TYPE_MISMATCH,
        "{raw} is not a valid version tuple",
        {"raw": value},
    )


def _encode_version_tuple(value: ModelVersionTuple) -> str:
    return str(value)


VersionTupleStr = Annotated[
    ModelVersionTuple,
    PlainValidator(_decode_version_tuple),
    PlainSerializer(_encode_version_tuple, return_type=str),
]


__all__ = [
    "VERSION_TUPLE_TYPE_MISMATCH",
    "ModelVersionTuple",
    "VersionTupleStr",
]
