"""Unit tests for ValidatorVersionedAttributes.

Covers YAML parsing, pre-checks with actionable messages, pydantic error
collection, and the environment-driven settings.
"""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from typing import Any

import pytest

from apinotes.models import ModelVersionTuple
from apinotes.settings import ApiNotesSettings
from apinotes.validators import (
    ValidatorVersionedAttributes,
    VersionedAttributesValidationError,
)

VALID_YAML = textwrap.dedent(
    """\
    Version: 5.10
    Functions:
      - Name: legacyOpen
        Availability: nonswift
    Tags:
      - LegacyHandle
    """
)


@pytest.fixture
def validator(
    versioned_model: Any, default_settings: ApiNotesSettings
) -> ValidatorVersionedAttributes[Any]:
    return ValidatorVersionedAttributes(versioned_model, settings=default_settings)


# ---------------------------------------------------------------------------
# YAML input
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestValidateYamlString:
    def test_valid_document(self, validator: Any) -> None:
        result = validator.validate_yaml_string(VALID_YAML)
        assert result.is_valid
        assert result.errors == []
        assert result.attributes.version == ModelVersionTuple.make(5, 10)
        assert result.attributes.items.tags == ["LegacyHandle"]

    def test_numeric_version_kept_as_string(self, validator: Any) -> None:
        result = validator.validate_yaml_string("Version: 1.10\nTags: [A]\n")
        assert result.is_valid
        assert str(result.attributes.version) == "1.10"

    def test_integer_version(self, validator: Any) -> None:
        result = validator.validate_yaml_string("Version: 4\nTags: [A]\n")
        assert result.is_valid
        assert str(result.attributes.version) == "4"

    def test_invalid_yaml_has_line_hint(self, validator: Any) -> None:
        result = validator.validate_yaml_string("Version: 1\nTags: [A\n")
        assert not result.is_valid
        error = result.errors[0]
        assert error.field == "yaml"
        assert error.error_type == "yaml_syntax"
        assert error.line_hint is not None

    def test_non_mapping_root(self, validator: Any) -> None:
        result = validator.validate_yaml_string("- 1.0\n- 2.0\n")
        assert not result.is_valid
        assert result.errors[0].field == "root"
        assert "list" in result.errors[0].message

    def test_oversized_document_rejected(
        self, versioned_model: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        validator = ValidatorVersionedAttributes(
            versioned_model, settings=ApiNotesSettings(max_document_bytes=8)
        )
        with caplog.at_level(logging.WARNING, logger="apinotes"):
            result = validator.validate_yaml_string(VALID_YAML)
        assert not result.is_valid
        assert result.errors[0].error_type == "document_too_large"
        assert "limit 8" in caplog.text


# ---------------------------------------------------------------------------
# Dict input
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestValidateDict:
    def test_missing_version(self, validator: Any) -> None:
        result = validator.validate_dict({"Tags": ["A"]})
        assert not result.is_valid
        assert result.errors[0].field == "Version"
        assert "missing" in result.errors[0].message

    def test_invalid_version(self, validator: Any) -> None:
        result = validator.validate_dict({"Version": "1.2.3.4", "Tags": ["A"]})
        assert not result.is_valid
        error = result.errors[0]
        assert error.field == "Version"
        assert error.error_type == "version_tuple_type_mismatch"
        assert "1.2.3.4" in error.message

    def test_missing_items(self, validator: Any) -> None:
        result = validator.validate_dict({"Version": "1.0"})
        assert not result.is_valid
        error = result.errors[0]
        assert error.field == "items"
        assert error.error_type == "version_items_missing"
        assert "Version 1.0" in error.message

    def test_collects_all_errors(self, validator: Any) -> None:
        result = validator.validate_dict({"Version": "x"})
        assert [e.error_type for e in result.errors] == [
            "version_tuple_type_mismatch",
            "version_items_missing",
        ]


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, default_settings: ApiNotesSettings) -> None:
        assert default_settings.max_document_bytes == 1024 * 1024
        assert default_settings.allow_signed_segments is True

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APINOTES_MAX_DOCUMENT_BYTES", "2048")
        monkeypatch.setenv("APINOTES_ALLOW_SIGNED_SEGMENTS", "false")
        settings = ApiNotesSettings()
        assert settings.max_document_bytes == 2048
        assert settings.allow_signed_segments is False

    def test_signed_segments_allowed_by_default(self, validator: Any) -> None:
        result = validator.validate_dict({"Version": "-1.2", "Tags": ["A"]})
        assert result.is_valid

    def test_signed_segments_rejected_when_disabled(self, versioned_model: Any) -> None:
        validator = ValidatorVersionedAttributes(
            versioned_model, settings=ApiNotesSettings(allow_signed_segments=False)
        )
        result = validator.validate_dict({"Version": "1.+2", "Tags": ["A"]})
        assert not result.is_valid
        assert result.errors[0].error_type == "version_tuple_signed_segment"


# ---------------------------------------------------------------------------
# File input and error rendering
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestValidateFile:
    def test_valid_file(self, validator: Any, tmp_path: Path) -> None:
        path = tmp_path / "Module.apinotes"
        path.write_text(VALID_YAML, encoding="utf-8")
        result = validator.validate_file(str(path))
        assert result.is_valid

    def test_missing_file(self, validator: Any, tmp_path: Path) -> None:
        result = validator.validate_file(str(tmp_path / "absent.apinotes"))
        assert not result.is_valid
        assert result.errors[0].field == "file"


@pytest.mark.unit
class TestValidationErrorStr:
    def test_with_line_hint(self) -> None:
        error = VersionedAttributesValidationError(
            field="yaml", message="Invalid YAML syntax", line_hint=3
        )
        assert str(error) == "line 3: yaml: Invalid YAML syntax"

    def test_without_line_hint(self) -> None:
        error = VersionedAttributesValidationError(field="Version", message="bad")
        assert str(error) == "Version: bad"
