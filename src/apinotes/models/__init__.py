# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Domain models for API notes version scoping."""

from apinotes.models.model_top_level_items import ModelTopLevelItemsBase
from apinotes.models.model_version_tuple import ModelVersionTuple, VersionTupleStr
from apinotes.models.model_versioned_attributes import (
    VERSION_KEY,
    ModelVersionedAttributes,
    find_for_version,
)

__all__ = [
    "VERSION_KEY",
    "ModelTopLevelItemsBase",
    "ModelVersionTuple",
    "ModelVersionedAttributes",
    "VersionTupleStr",
    "find_for_version",
]
