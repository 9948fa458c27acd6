# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Attributes that apply to one specific version of an API.

A versioned attributes node keeps the version and the attribute bundle
side by side in a single mapping::

    - Version: "5.0"
      Functions:
        - Name: legacyOpen
          Availability: nonswift
      Tags:
        - Name: LegacyHandle

Decoding reads ``Version`` as a version tuple and hands the same node to
the bundle type's ``decode_if_present``. A node whose bundle is absent is
rejected with a ``version_items_missing`` error naming the version.

The container is generic over the bundle type and must be parametrized
before use::

    VersionedModuleItems = ModelVersionedAttributes[ModelModuleItems]
    attrs = VersionedModuleItems.model_validate(node)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticCustomError

from apinotes.models.model_version_tuple import ModelVersionTuple, VersionTupleStr
from apinotes.protocols import ProtocolTopLevelItems

VERSION_KEY = "Version"

VERSION_ITEMS_MISSING = "version_items_missing"

ItemsT = TypeVar("ItemsT")


class ModelVersionedAttributes(BaseModel, Generic[ItemsT]):
    """An attribute bundle scoped to a version number.

    Attributes:
        version: The version number these attributes apply to.
        items: The attributes that apply to this specific version.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    version: VersionTupleStr = Field(
        ...,
        alias=VERSION_KEY,
        description="Version number these attributes apply to",
    )
    items: ItemsT = Field(
        ..., description="Attributes that apply to this specific version"
    )

    @classmethod
    def items_type(cls) -> type[ItemsT]:
        """Return the bundle type this container was parametrized with."""
        annotation = cls.model_fields["items"].annotation
        if not (
            isinstance(annotation, type)
            and issubclass(annotation, ProtocolTopLevelItems)
        ):
            raise TypeError(
                f"{cls.__name__} must be parametrized with a bundle type "
                "implementing ProtocolTopLevelItems, "
                "e.g. ModelVersionedAttributes[ModelModuleItems]"
            )
        return annotation

    # any-ok: document node values are dynamically typed
    @classmethod
    def _is_keyword_input(cls, data: Mapping[Any, Any]) -> bool:
        # A document node always carries ``Version``; a lowercase ``items``
        # key in a node is just an unknown document key.
        if VERSION_KEY in data:
            return isinstance(data.get("items"), cls.items_type())
        return "version" in data

    @model_validator(mode="before")
    @classmethod
    def split_document_node(cls, data: Any) -> Any:
        """Separate a flattened document node into version and bundle."""
        if not isinstance(data, Mapping) or cls._is_keyword_input(data):
            return data
        remaining = {key: value for key, value in data.items() if key != VERSION_KEY}
        split: dict[str, Any] = {
            "items": cls.items_type().decode_if_present(remaining)
        }
        if VERSION_KEY in data:
            split[VERSION_KEY] = data[VERSION_KEY]
        return split

    @field_validator("items", mode="before")
    @classmethod
    def require_items(cls, value: Any, info: ValidationInfo) -> Any:
        """Reject a node whose attribute bundle is absent."""
        if value is not None:
            return value
        version = info.data.get("version")
        raise PydanticCustomError(
            VERSION_ITEMS_MISSING,
            "Items of type {expected_type} in Version {version} "
            "are not present or failed to decode",
            {
                "expected_type": cls.items_type().__name__,
                "version": str(version) if version is not None else "<invalid>",
            },
        )

    def __hash__(self) -> int:
        # Bundles may hold lists; equal containers always share a version.
        return hash(self.version)

    # any-ok: document node values are dynamically typed
    def encode_into(self, node: MutableMapping[str, Any]) -> None:
        """Write ``Version`` and the bundle's fields into ``node``."""
        node[VERSION_KEY] = str(self.version)
        self.items.encode_into(node)

    def to_node(self) -> dict[str, Any]:
        """Return the flattened document node for these attributes."""
        node: dict[str, Any] = {}
        self.encode_into(node)
        return node

    @model_serializer(mode="plain")
    def serialize_document_node(self) -> dict[str, Any]:
        return self.to_node()


def find_for_version(
    entries: Iterable[ModelVersionedAttributes[ItemsT]],
    version: ModelVersionTuple,
) -> ModelVersionedAttributes[ItemsT] | None:
    """Return the first entry whose version equals ``version``.

    Versions compare with absent components as zero, so ``5`` finds an
    entry written as ``5.0``.
    """
    for entry in entries:
        if entry.version == version:
            return entry
    return None


__all__ = [
    "VERSION_ITEMS_MISSING",
    "VERSION_KEY",
    "ModelVersionedAttributes",
    "find_for_version",
]
