"""
Pytest configuration and fixtures for apinotes tests.

Provides a small attribute bundle so the versioned container can be
exercised without a full API notes schema.
"""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import BaseModel, ConfigDict, Field

from apinotes.models import ModelTopLevelItemsBase, ModelVersionedAttributes
from apinotes.settings import ApiNotesSettings

# =========================================================================
# Sample Attribute Bundle
# =========================================================================


class ModelSampleFunction(BaseModel):
    """A function entry carried by the sample bundle."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(..., alias="Name", min_length=1)
    availability: str | None = Field(default=None, alias="Availability")


class ModelSampleItems(ModelTopLevelItemsBase):
    """Bundle with two optional groups; at least one must be present."""

    functions: list[ModelSampleFunction] | None = Field(
        default=None, alias="Functions"
    )
    tags: list[str] | None = Field(default=None, alias="Tags")


SampleVersionedAttributes = ModelVersionedAttributes[ModelSampleItems]


# =========================================================================
# Fixtures
# =========================================================================


@pytest.fixture
def sample_items_type() -> type[ModelSampleItems]:
    """Provide the sample bundle type."""
    return ModelSampleItems


@pytest.fixture
def versioned_model() -> type[ModelVersionedAttributes[ModelSampleItems]]:
    """Provide the container parametrized with the sample bundle."""
    return SampleVersionedAttributes


@pytest.fixture
def sample_items() -> ModelSampleItems:
    """Provide a populated sample bundle."""
    return ModelSampleItems(
        functions=[
            ModelSampleFunction(name="legacyOpen", availability="nonswift"),
            ModelSampleFunction(name="close"),
        ],
        tags=["LegacyHandle"],
    )


@pytest.fixture
def sample_node() -> dict[str, Any]:
    """Provide a flattened document node for version 5.0."""
    return {
        "Version": "5.0",
        "Functions": [
            {"Name": "legacyOpen", "Availability": "nonswift"},
            {"Name": "close"},
        ],
        "Tags": ["LegacyHandle"],
    }


@pytest.fixture
def default_settings(monkeypatch: pytest.MonkeyPatch) -> ApiNotesSettings:
    """Provide settings unaffected by APINOTES_* variables in the environment."""
    monkeypatch.delenv("APINOTES_MAX_DOCUMENT_BYTES", raising=False)
    monkeypatch.delenv("APINOTES_ALLOW_SIGNED_SEGMENTS", raising=False)
    return ApiNotesSettings()
