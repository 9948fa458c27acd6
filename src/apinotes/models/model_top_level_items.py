# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pydantic base for attribute bundles stored beside a ``Version`` key.

Concrete bundles subclass ``ModelTopLevelItemsBase`` and declare their
document keys as field aliases::

    class ModelModuleItems(ModelTopLevelItemsBase):
        functions: list[ModelFunction] | None = Field(default=None, alias="Functions")
        tags: list[ModelTag] | None = Field(default=None, alias="Tags")

The base implements ``ProtocolTopLevelItems``. A bundle is absent when the
node has none of its document keys, or when those keys fail validation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class ModelTopLevelItemsBase(BaseModel):
    """Base class for attribute bundles decoded from a flattened node."""

    model_config = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True, from_attributes=True
    )

    @classmethod
    def document_keys(cls) -> frozenset[str]:
        """Return the node keys this bundle recognizes."""
        return frozenset(
            field.alias or name for name, field in cls.model_fields.items()
        )

    # any-ok: document node values are dynamically typed
    @classmethod
    def decode_if_present(cls, node: Mapping[str, Any]) -> Self | None:
        """Decode the bundle from ``node``, returning None when absent."""
        if cls.document_keys().isdisjoint(node.keys()):
            logger.debug(
                "No %s keys present in node (keys=%s)", cls.__name__, list(node)
            )
            return None
        try:
            return cls.model_validate(dict(node))
        except ValidationError as exc:
            logger.debug(
                "Discarding undecodable %s (%d errors): %s",
                cls.__name__,
                exc.error_count(),
                exc,
            )
            return None

    # any-ok: document node values are dynamically typed
    def encode_into(self, node: MutableMapping[str, Any]) -> None:
        """Write the bundle's fields into ``node`` under their document keys."""
        node.update(self.model_dump(mode="json", by_alias=True, exclude_none=True))


__all__ = ["ModelTopLevelItemsBase"]
