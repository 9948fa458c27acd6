# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Error types raised when decoding API notes documents.

A malformed version string is not an error at the parsing layer:
``ModelVersionTuple.parse`` returns None and the caller decides what to do.
These errors are raised only by the decode entry points in
``apinotes.codec``, and every one of them aborts the enclosing decode.
"""

__all__ = [
    "ApiNotesDecodeError",
    "VersionItemsMissingError",
    "VersionTupleDecodeError",
]


class ApiNotesDecodeError(ValueError):
    """Base error for a document node that could not be decoded.

    Attributes:
        path: Dotted location of the failure inside the document
            (e.g. "Versions.0.Version"); empty for the document root.
        detail: The message without the location prefix.
    """

    def __init__(self, detail: str, *, path: str = "") -> None:
        self.path = path
        self.detail = detail
        location = f"{path}: " if path else ""
        super().__init__(f"{location}{detail}")


class VersionTupleDecodeError(ApiNotesDecodeError):
    """Raised when a ``Version`` value is not a valid version tuple.

    Example:
        >>> raise VersionTupleDecodeError(raw="1.x", path="Version")
        Traceback (most recent call last):
        ...
        apinotes.errors.VersionTupleDecodeError: Version: 1.x is not a valid version tuple
    """

    def __init__(self, *, raw: object, path: str = "") -> None:
        """Initialize with the rejected raw value and its location.

        Args:
            raw: The value found in the document, usually a string.
            path: Dotted location of the value.
        """
        self.raw = raw
        super().__init__(f"{raw} is not a valid version tuple", path=path)


class VersionItemsMissingError(ApiNotesDecodeError):
    """Raised when a versioned node carries no decodable attribute bundle.

    The version is part of the message so the node can be found in a large
    document.
    """

    def __init__(self, *, expected_type: str, version: str, path: str = "") -> None:
        """Initialize with the bundle type, the node's version and location.

        Args:
            expected_type: Name of the bundle type that failed to decode.
            version: Rendered version of the node, or "<invalid>".
            path: Dotted location of the node.
        """
        self.expected_type = expected_type
        self.version = version
        super().__init__(
            f"Items of type {expected_type} in Version {version} "
            "are not present or failed to decode",
            path=path,
        )
