"""Detect which specification version a parsed document follows."""

from typing import Any

from openapi_doc.errors import UnknownFormatError, VersionMismatchError

SWAGGER_KEY = "swagger"
OPENAPI_KEY = "openapi"


def detect_version(data: Any) -> str:
    """Inspect the top-level discriminant of a parsed JSON document.

    Returns: '2' for Swagger documents, '3' for OpenAPI documents.
    """
    if not isinstance(data, dict):
        raise UnknownFormatError(
            f"Expected a JSON object at the document root, got {type(data).__name__}"
        )

    has_swagger = SWAGGER_KEY in data
    has_openapi = OPENAPI_KEY in data

    if has_swagger and has_openapi:
        found = {SWAGGER_KEY: data[SWAGGER_KEY], OPENAPI_KEY: data[OPENAPI_KEY]}
        raise VersionMismatchError(
            "Document declares both 'swagger' and 'openapi'", found=found
        )
    if not has_swagger and not has_openapi:
        raise UnknownFormatError("Document declares neither 'swagger' nor 'openapi'")

    if has_swagger:
        key, major = SWAGGER_KEY, "2"
    else:
        key, major = OPENAPI_KEY, "3"

    value = data[key]
    if not isinstance(value, str) or not value.startswith(major):
        raise VersionMismatchError(
            f"Unsupported '{key}' version {value!r}, expected {major}.x", found=value
        )
    return major
