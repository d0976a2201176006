"""Exceptions raised while loading OpenAPI / Swagger documents.

Hierarchy:

- OpenApiDocError
  - IoError              reading the document source failed
  - ParseError           input is not well-formed JSON
  - VersionError
    - UnknownFormatError     no usable version discriminant
    - VersionMismatchError   both discriminants, or an unsupported version
  - SchemaError          valid JSON that does not fit the object model
"""

from typing import Any


class OpenApiDocError(Exception):
    """Base class for every error raised by openapi_doc."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class IoError(OpenApiDocError):
    """The document source could not be read."""

    def __init__(self, message: str, path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.path = path


class ParseError(OpenApiDocError):
    """Input is not valid JSON.

    ``pos`` is the character (or byte) offset of the failure; ``lineno`` and
    ``colno`` are 1-based and may be None for undecodable bytes.
    """

    def __init__(
        self,
        message: str,
        pos: int,
        lineno: int | None = None,
        colno: int | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error)
        self.pos = pos
        self.lineno = lineno
        self.colno = colno


class VersionError(OpenApiDocError):
    """The version discriminant is missing, ambiguous or unsupported."""

    def __init__(self, message: str, found: Any = None):
        super().__init__(message)
        self.found = found


class UnknownFormatError(VersionError):
    """Neither a ``swagger`` nor an ``openapi`` key is present."""


class VersionMismatchError(VersionError):
    """Both discriminants are present, or one names an unsupported major version."""


class SchemaError(OpenApiDocError):
    """JSON is valid but violates the object model of the selected version.

    ``pointer`` is a JSON Pointer (RFC 6901) to the offending location in the
    input document; the empty string refers to the document root.
    """

    def __init__(self, pointer: str, detail: str, original_error: Exception | None = None):
        where = pointer or "/"
        super().__init__(f"{where}: {detail}", original_error)
        self.pointer = pointer
        self.detail = detail
