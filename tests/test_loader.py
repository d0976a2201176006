import io
import json
import logging
from pathlib import Path

import pytest

from openapi_doc.errors import (
    IoError,
    OpenApiDocError,
    ParseError,
    SchemaError,
    UnknownFormatError,
    VersionMismatchError,
)
from openapi_doc.models.base import Reference
from openapi_doc.models.v2 import Swagger
from openapi_doc.models.v3 import OpenApi
from openapi_doc.parser.loader import (
    DEFAULT_MAX_DEPTH,
    from_bytes,
    from_dict,
    from_path,
    from_reader,
    from_str,
    openapi_from_reader,
    openapi_from_str,
    swagger_from_reader,
    swagger_from_str,
)

FIXTURES = Path(__file__).parent / "fixtures"

MINIMAL_V2 = '{"swagger":"2.0","info":{"title":"T","version":"1.0"},"paths":{}}'
MINIMAL_V3 = (
    '{"openapi":"3.0.0","info":{"title":"T","version":"1.0"},"paths":{},'
    '"components":{"schemas":{"Pet":{"$ref":"#/components/schemas/Animal"}}}}'
)


class _BrokenStream:
    name = "broken.json"

    def read(self):
        raise OSError("device not ready")


def _nested_schema(depth: int) -> dict:
    schema = {"type": "string"}
    for _ in range(depth):
        schema = {"type": "array", "items": schema}
    return schema


class TestEndToEnd:
    def test_minimal_swagger(self):
        doc = from_str(MINIMAL_V2)
        assert doc.is_v2
        assert isinstance(doc.root, Swagger)
        assert doc.root.swagger == "2.0"
        assert doc.root.info.title == "T"
        assert doc.root.info.version == "1.0"
        assert doc.root.info.description is None
        assert len(doc.root.paths) == 0
        assert doc.root.paths.extensions is None
        assert doc.root.definitions is None

    def test_minimal_openapi_with_reference(self):
        doc = from_str(MINIMAL_V3)
        assert doc.is_v3
        assert isinstance(doc.root, OpenApi)
        assert doc.version == "3.0.0"
        pet = doc.root.components.schemas["Pet"]
        assert pet == Reference.model_validate({"$ref": "#/components/schemas/Animal"})

    def test_fixture_versions(self):
        assert from_path(FIXTURES / "petstore_v2.json").version == "2.0"
        assert from_path(FIXTURES / "petstore_v3.json").version == "3.0.3"

    def test_decoding_is_deterministic(self):
        assert from_str(MINIMAL_V3) == from_str(MINIMAL_V3)

    def test_dump_restores_source(self):
        doc = from_str(MINIMAL_V2)
        assert doc.model_dump(by_alias=True, exclude_none=True) == json.loads(MINIMAL_V2)


class TestEntryPoints:
    def test_from_bytes(self):
        assert from_bytes(MINIMAL_V2.encode("utf-8")).is_v2

    def test_from_text_reader(self):
        assert from_reader(io.StringIO(MINIMAL_V3)).is_v3

    def test_from_binary_reader(self):
        assert from_reader(io.BytesIO(MINIMAL_V2.encode("utf-8"))).is_v2

    def test_from_path_accepts_str(self, tmp_path):
        f = tmp_path / "doc.json"
        f.write_text(MINIMAL_V2, encoding="utf-8")
        assert from_path(str(f)).is_v2

    def test_from_dict(self):
        assert from_dict(json.loads(MINIMAL_V3)).is_v3

    def test_version_specific_entry_points(self):
        assert swagger_from_str(MINIMAL_V2).swagger == "2.0"
        assert openapi_from_str(MINIMAL_V3).openapi == "3.0.0"
        assert isinstance(swagger_from_reader(io.StringIO(MINIMAL_V2)), Swagger)
        assert isinstance(openapi_from_reader(io.StringIO(MINIMAL_V3)), OpenApi)

    def test_version_specific_entry_point_does_not_dispatch(self):
        with pytest.raises(SchemaError) as exc:
            swagger_from_str(MINIMAL_V3)
        assert exc.value.pointer == "/swagger"


class TestLoadErrors:
    def test_truncated_json(self):
        with pytest.raises(ParseError) as exc:
            from_str('{"swagger":')
        assert exc.value.pos == 11
        assert exc.value.lineno == 1
        assert exc.value.colno == 12

    def test_undecodable_bytes(self):
        with pytest.raises(ParseError) as exc:
            from_bytes(b'{"swagger": "\xff"}')
        assert exc.value.pos == 13

    def test_both_discriminants(self):
        with pytest.raises(VersionMismatchError):
            from_str('{"swagger":"2.0","openapi":"3.0.0","info":{"title":"T","version":"1"},"paths":{}}')

    def test_no_discriminant(self):
        with pytest.raises(UnknownFormatError):
            from_str('{"info":{"title":"T","version":"1"},"paths":{}}')

    def test_missing_paths(self):
        with pytest.raises(SchemaError) as exc:
            from_str('{"openapi":"3.0.0","info":{"title":"T","version":"1"}}')
        assert exc.value.pointer == "/paths"

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.json"
        with pytest.raises(IoError) as exc:
            from_path(missing)
        assert exc.value.path == str(missing)
        assert isinstance(exc.value.original_error, FileNotFoundError)

    def test_unreadable_stream(self):
        with pytest.raises(IoError) as exc:
            from_reader(_BrokenStream())
        assert exc.value.path == "broken.json"

    def test_errors_share_a_base(self):
        for bad in ('{"swagger":', '{}', '{"swagger":"2.0"}'):
            with pytest.raises(OpenApiDocError):
                from_str(bad)


class TestDepthCeiling:
    def test_default_ceiling(self):
        assert DEFAULT_MAX_DEPTH == 128

    def test_reasonable_nesting_decodes(self):
        data = json.loads(MINIMAL_V2)
        data["definitions"] = {"Deep": _nested_schema(20)}
        doc = from_dict(data)
        assert doc.root.definitions["Deep"].items.items.type_ == "array"

    def test_deep_nesting_rejected(self):
        data = json.loads(MINIMAL_V2)
        data["definitions"] = {"Deep": _nested_schema(10)}
        with pytest.raises(SchemaError) as exc:
            from_dict(data, max_depth=5)
        assert exc.value.pointer.startswith("/definitions/Deep/items")

    def test_hostile_json_rejected(self):
        hostile = '{"swagger":"2.0","x":' + "[" * 100000 + "]" * 100000 + "}"
        with pytest.raises(SchemaError):
            from_str(hostile)


class TestLogging:
    def test_debug_logs_detected_version(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="openapi_doc.parser.loader"):
            from_str(MINIMAL_V2)
        assert "Detected Swagger 2.0 document" in caplog.text
