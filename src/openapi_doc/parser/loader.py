"""Load entry points: raw JSON in, Doc tree (or a single error) out.

Every function is pure apart from reading its source, keeps no state between
calls and never returns a partially decoded document.
"""

import json
import logging
from pathlib import Path
from typing import IO, Any, TypeVar

from pydantic import BaseModel, ValidationError

from openapi_doc.errors import IoError, ParseError, SchemaError
from openapi_doc.models.doc import Doc
from openapi_doc.models.v2 import Swagger
from openapi_doc.models.v3 import OpenApi
from openapi_doc.parser.detect import detect_version

logger = logging.getLogger(__name__)

# Maximum number of nested JSON objects/arrays accepted in one document.
DEFAULT_MAX_DEPTH = 128

ModelT = TypeVar("ModelT", bound=BaseModel)


def from_path(path: str | Path, max_depth: int = DEFAULT_MAX_DEPTH) -> Doc:
    """Read and decode the JSON document at ``path``."""
    path = Path(path)
    logger.debug("Reading %s", path)
    try:
        content = path.read_bytes()
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
        raise IoError(f"Cannot read {path}: {e}", path=str(path), original_error=e) from e
    return from_bytes(content, max_depth=max_depth)


def from_reader(stream: IO, max_depth: int = DEFAULT_MAX_DEPTH) -> Doc:
    """Decode a document from an open text or binary stream."""
    return from_dict(_parse_json(_read(stream), max_depth), max_depth=max_depth)


def from_str(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Doc:
    return from_dict(_parse_json(text, max_depth), max_depth=max_depth)


def from_bytes(content: bytes, max_depth: int = DEFAULT_MAX_DEPTH) -> Doc:
    """Decode UTF-8 (or UTF-16/32) encoded JSON."""
    return from_dict(_parse_json(content, max_depth), max_depth=max_depth)


def from_dict(data: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> Doc:
    """Decode an already parsed JSON value, dispatching on its version discriminant."""
    _check_depth(data, max_depth)
    major = detect_version(data)
    if major == "2":
        logger.debug("Detected Swagger %s document", data["swagger"])
        root = _validate(Swagger, data)
    else:
        logger.debug("Detected OpenAPI %s document", data["openapi"])
        root = _validate(OpenApi, data)
    logger.debug("Decoded %d paths", len(root.paths))
    return Doc(root)


def swagger_from_dict(data: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> Swagger:
    """Decode ``data`` as a Swagger 2.0 document without inspecting its version."""
    _check_depth(data, max_depth)
    return _validate(Swagger, data)


def swagger_from_str(text: str | bytes, max_depth: int = DEFAULT_MAX_DEPTH) -> Swagger:
    return swagger_from_dict(_parse_json(text, max_depth), max_depth=max_depth)


def swagger_from_reader(stream: IO, max_depth: int = DEFAULT_MAX_DEPTH) -> Swagger:
    return swagger_from_dict(_parse_json(_read(stream), max_depth), max_depth=max_depth)


def openapi_from_dict(data: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> OpenApi:
    """Decode ``data`` as an OpenAPI 3.x document without inspecting its version."""
    _check_depth(data, max_depth)
    return _validate(OpenApi, data)


def openapi_from_str(text: str | bytes, max_depth: int = DEFAULT_MAX_DEPTH) -> OpenApi:
    return openapi_from_dict(_parse_json(text, max_depth), max_depth=max_depth)


def openapi_from_reader(stream: IO, max_depth: int = DEFAULT_MAX_DEPTH) -> OpenApi:
    return openapi_from_dict(_parse_json(_read(stream), max_depth), max_depth=max_depth)


def _read(stream: IO) -> str | bytes:
    try:
        return stream.read()
    except OSError as e:
        name = getattr(stream, "name", None)
        logger.debug("Cannot read stream %s: %s", name, e)
        raise IoError(f"Cannot read stream: {e}", path=name, original_error=e) from e


def _parse_json(content: str | bytes, max_depth: int) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        logger.debug("Invalid JSON: %s", e)
        raise ParseError(
            f"Invalid JSON at line {e.lineno} column {e.colno}: {e.msg}",
            pos=e.pos,
            lineno=e.lineno,
            colno=e.colno,
            original_error=e,
        ) from e
    except UnicodeDecodeError as e:
        logger.debug("Undecodable input: %s", e)
        raise ParseError(
            f"Undecodable input at byte {e.start}: {e.reason}", pos=e.start, original_error=e
        ) from e
    except RecursionError as e:
        raise SchemaError("", f"nesting deeper than {max_depth} levels", e) from e


def _check_depth(data: Any, max_depth: int) -> None:
    """Reject documents nested deeper than ``max_depth`` containers.

    Walks the tree with an explicit stack so hostile input cannot exhaust the
    interpreter before the model validators run.
    """
    stack = [(data, 1, ())]
    while stack:
        node, depth, path = stack.pop()
        if isinstance(node, dict):
            children = node.items()
        elif isinstance(node, list):
            children = enumerate(node)
        else:
            continue
        if depth > max_depth:
            raise SchemaError(_pointer(path), f"nesting deeper than {max_depth} levels")
        for key, child in children:
            if isinstance(child, (dict, list)):
                stack.append((child, depth + 1, path + (key,)))


def _validate(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        # Every branch of a failed union reports its own error; the one that
        # got furthest into the input names the offending value.
        located = [
            (_locate(err["loc"], data, missing=err["type"] == "missing"), err)
            for err in e.errors()
        ]
        parts, error = max(located, key=lambda pair: len(pair[0]))
        pointer = _pointer(parts)
        logger.debug("Document does not fit %s at %r: %s", model.__name__, pointer, error["msg"])
        raise SchemaError(pointer, error["msg"], e) from e


def _locate(loc: tuple, data: Any, missing: bool) -> list:
    """Turn a pydantic error location into the keys of a JSON Pointer into ``data``.

    Pydantic interleaves union tags and type labels with the real keys; only
    the parts that actually exist in the input are kept, plus the final key
    when the error is a missing field.
    """
    parts = []
    node = data
    for i, part in enumerate(loc):
        if isinstance(node, dict) and part in node:
            parts.append(part)
            node = node[part]
        elif isinstance(node, list) and isinstance(part, int) and 0 <= part < len(node):
            parts.append(part)
            node = node[part]
        elif missing and i == len(loc) - 1:
            parts.append(part)
    return parts


def _pointer(parts) -> str:
    return "".join("/" + str(p).replace("~", "~0").replace("/", "~1") for p in parts)
