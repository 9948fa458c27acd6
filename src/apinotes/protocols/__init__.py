# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Protocol definitions for API notes attribute bundles.

A versioned attributes container depends on its attribute bundle only
through this protocol, so the bundle's schema can change without touching
the container.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class ProtocolTopLevelItems(Protocol):
    """Protocol for an attribute bundle that shares a node with other fields.

    The bundle is decoded from, and encoded into, the same mapping that
    holds the ``Version`` key; it is never nested under a key of its own.
    """

    # any-ok: document node values are dynamically typed
    @classmethod
    def decode_if_present(cls, node: Mapping[str, Any]) -> Self | None:
        """Decode a bundle from ``node``, or return None if there is none.

        Must not raise for a missing or undecodable bundle.
        """
        ...

    # any-ok: document node values are dynamically typed
    def encode_into(self, node: MutableMapping[str, Any]) -> None:
        """Write this bundle's fields directly into ``node``."""
        ...


__all__ = ["ProtocolTopLevelItems"]
