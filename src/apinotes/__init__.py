# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""apinotes - version tuples and version-scoped attributes for API notes.

Quick Start:
    >>> from apinotes import ModelVersionTuple
    >>> version = ModelVersionTuple.parse("5.1")
    >>> str(version)
    '5.1'
    >>> version == ModelVersionTuple.make(5, 1, 0)
    True
    >>> ModelVersionTuple.parse("5.x") is None
    True
"""

from apinotes.codec import (
    decode_version_tuple,
    decode_versioned_attributes,
    encode_version_tuple,
    encode_versioned_attributes,
)
from apinotes.errors import (
    ApiNotesDecodeError,
    VersionItemsMissingError,
    VersionTupleDecodeError,
)
from apinotes.models import (
    VERSION_KEY,
    ModelTopLevelItemsBase,
    ModelVersionedAttributes,
    ModelVersionTuple,
    VersionTupleStr,
    find_for_version,
)
from apinotes.protocols import ProtocolTopLevelItems
from apinotes.settings import ApiNotesSettings

__version__ = "0.1.0"

__all__ = [
    "VERSION_KEY",
    "ApiNotesDecodeError",
    "ApiNotesSettings",
    "ModelTopLevelItemsBase",
    "ModelVersionTuple",
    "ModelVersionedAttributes",
    "ProtocolTopLevelItems",
    "VersionItemsMissingError",
    "VersionTupleDecodeError",
    "VersionTupleStr",
    "decode_version_tuple",
    "decode_versioned_attributes",
    "encode_version_tuple",
    "encode_versioned_attributes",
    "find_for_version",
]
