# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Validation of versioned attributes documents."""

from apinotes.validators.validator_versioned_attributes import (
    ValidatorVersionedAttributes,
    VersionedAttributesValidationError,
    VersionedAttributesValidationResult,
)

__all__ = [
    "ValidatorVersionedAttributes",
    "VersionedAttributesValidationError",
    "VersionedAttributesValidationResult",
]
