# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Environment settings for loading API notes documents."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ONE_MIB = 1024 * 1024


class ApiNotesSettings(BaseSettings):
    """Pydantic Settings for API notes loading, read from the environment.

    Environment variables:
        APINOTES_MAX_DOCUMENT_BYTES: int (default 1048576)
        APINOTES_ALLOW_SIGNED_SEGMENTS: bool (default true)
    """

    model_config = SettingsConfigDict(
        env_prefix="APINOTES_",
        extra="ignore",
    )

    max_document_bytes: int = Field(
        default=_ONE_MIB,
        ge=1,
        description="Largest YAML document the validator will parse, in bytes",
    )
    allow_signed_segments: bool = Field(
        default=True,
        description="Accept version segments written with a leading + or -",
    )


__all__ = ["ApiNotesSettings"]
