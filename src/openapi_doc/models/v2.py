"""Swagger 2.0 object model.

See https://swagger.io/specification/v2/ for the meaning of each field.
"""

from enum import Enum

from pydantic import Field

from .base import (
    Extensible,
    ExtensibleMap,
    Flag,
    Integer,
    JsonValue,
    Number,
    SecurityRequirement,
    Text,
    ref_or,
)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


class Scheme(str, Enum):
    """Transfer protocol of the API."""

    HTTP = "http"
    HTTPS = "https"
    WS = "ws"
    WSS = "wss"


class ParameterLocation(str, Enum):
    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    FORM_DATA = "formData"
    BODY = "body"


class ParameterType(str, Enum):
    """Primitive types allowed for non-body parameters."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    FILE = "file"


class ItemsType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"


class CollectionFormat(str, Enum):
    CSV = "csv"
    SSV = "ssv"
    TSV = "tsv"
    PIPES = "pipes"
    MULTI = "multi"  # query and formData only


class SecuritySchemeType(str, Enum):
    BASIC = "basic"
    API_KEY = "apiKey"
    OAUTH2 = "oauth2"


class ApiKeyLocation(str, Enum):
    QUERY = "query"
    HEADER = "header"


class OAuth2Flow(str, Enum):
    IMPLICIT = "implicit"
    PASSWORD = "password"
    APPLICATION = "application"
    ACCESS_CODE = "accessCode"


class Contact(Extensible):
    name: Text | None = None
    url: Text | None = None
    email: Text | None = None


class License(Extensible):
    name: Text
    url: Text | None = None


class Info(Extensible):
    """Metadata about the API."""

    title: Text
    version: Text
    description: Text | None = None
    terms_of_service: Text | None = Field(None, alias="termsOfService")
    contact: Contact | None = None
    license: License | None = None


class ExternalDocs(Extensible):
    url: Text
    description: Text | None = None


class Tag(Extensible):
    name: Text
    description: Text | None = None
    external_docs: ExternalDocs | None = Field(None, alias="externalDocs")


class Xml(Extensible):
    """XML representation hints for a schema property."""

    name: Text | None = None
    namespace: Text | None = None
    prefix: Text | None = None
    attribute: Flag | None = None
    wrapped: Flag | None = None


class ValidationKeywords(Extensible):
    """JSON Schema validation keywords shared by schemas, parameters, items and headers."""

    maximum: Number | None = None
    exclusive_maximum: Flag | None = Field(None, alias="exclusiveMaximum")
    minimum: Number | None = None
    exclusive_minimum: Flag | None = Field(None, alias="exclusiveMinimum")
    max_length: Integer | None = Field(None, alias="maxLength")
    min_length: Integer | None = Field(None, alias="minLength")
    pattern: Text | None = None
    max_items: Integer | None = Field(None, alias="maxItems")
    min_items: Integer | None = Field(None, alias="minItems")
    unique_items: Flag | None = Field(None, alias="uniqueItems")
    enum_: list[JsonValue] | None = Field(None, alias="enum")
    multiple_of: Number | None = Field(None, alias="multipleOf")


class Items(ValidationKeywords):
    """Type of the elements of an array parameter or header."""

    type_: ItemsType = Field(alias="type")
    format: Text | None = None
    items: "Items | None" = None
    collection_format: CollectionFormat | None = Field(None, alias="collectionFormat")
    default: JsonValue = None


class Header(ValidationKeywords):
    type_: ItemsType = Field(alias="type")
    description: Text | None = None
    format: Text | None = None
    items: Items | None = None
    collection_format: CollectionFormat | None = Field(None, alias="collectionFormat")
    default: JsonValue = None


class Schema(ValidationKeywords):
    """Schema Object: a JSON Schema draft 4 subset, recursive through
    ``items``, ``properties``, ``additionalProperties`` and the composition
    keywords."""

    type_: Text | None = Field(None, alias="type")
    format: Text | None = None
    title: Text | None = None
    description: Text | None = None
    default: JsonValue = None
    max_properties: Integer | None = Field(None, alias="maxProperties")
    min_properties: Integer | None = Field(None, alias="minProperties")
    required: list[Text] | None = None
    items: "SchemaOrRef | list[SchemaOrRef] | None" = None
    properties: "dict[str, SchemaOrRef] | None" = None
    additional_properties: "Flag | SchemaOrRef | None" = Field(None, alias="additionalProperties")
    all_of: "list[SchemaOrRef] | None" = Field(None, alias="allOf")
    one_of: "list[SchemaOrRef] | None" = Field(None, alias="oneOf")
    any_of: "list[SchemaOrRef] | None" = Field(None, alias="anyOf")
    discriminator: Text | None = None
    read_only: Flag | None = Field(None, alias="readOnly")
    xml: Xml | None = None
    external_docs: ExternalDocs | None = Field(None, alias="externalDocs")
    example: JsonValue = None


SchemaOrRef = ref_or(Schema)
Schema.model_rebuild()


class Parameter(ValidationKeywords):
    """Operation parameter. Body parameters carry ``schema_``; all others
    describe their value with ``type_`` and friends."""

    name: Text
    location: ParameterLocation = Field(alias="in")
    description: Text | None = None
    required: Flag | None = None
    schema_: SchemaOrRef | None = Field(None, alias="schema")
    type_: ParameterType | None = Field(None, alias="type")
    format: Text | None = None
    allow_empty_value: Flag | None = Field(None, alias="allowEmptyValue")
    items: Items | None = None
    collection_format: CollectionFormat | None = Field(None, alias="collectionFormat")
    default: JsonValue = None


ParameterOrRef = ref_or(Parameter)


class Response(Extensible):
    description: Text
    schema_: SchemaOrRef | None = Field(None, alias="schema")
    headers: dict[str, Header] | None = None
    examples: dict[str, JsonValue] | None = None


ResponseOrRef = ref_or(Response)


class Responses(ExtensibleMap):
    """Responses keyed by HTTP status code or "default"."""

    entries: dict[str, ResponseOrRef] = Field(default_factory=dict)


class SecurityScheme(Extensible):
    """Security scheme. Which optional fields are set depends on ``type_``."""

    type_: SecuritySchemeType = Field(alias="type")
    description: Text | None = None
    name: Text | None = None
    location: ApiKeyLocation | None = Field(None, alias="in")
    flow: OAuth2Flow | None = None
    authorization_url: Text | None = Field(None, alias="authorizationUrl")
    token_url: Text | None = Field(None, alias="tokenUrl")
    scopes: dict[str, Text] | None = None


class Operation(Extensible):
    tags: list[Text] | None = None
    summary: Text | None = None
    description: Text | None = None
    external_docs: ExternalDocs | None = Field(None, alias="externalDocs")
    operation_id: Text | None = Field(None, alias="operationId")
    consumes: list[Text] | None = None
    produces: list[Text] | None = None
    parameters: list[ParameterOrRef] | None = None
    responses: Responses
    schemes: list[Scheme] | None = None
    deprecated: Flag | None = None
    security: list[SecurityRequirement] | None = None


class PathItem(Extensible):
    """Operations available on a single path."""

    reference: Text | None = Field(None, alias="$ref")
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    parameters: list[ParameterOrRef] | None = None

    def operations(self) -> dict[str, Operation]:
        """Return the defined operations keyed by lowercase HTTP method."""
        return {m: getattr(self, m) for m in HTTP_METHODS if getattr(self, m) is not None}


class Paths(ExtensibleMap):
    """Path items keyed by path template (``/pets/{petId}``)."""

    entries: dict[str, PathItem] = Field(default_factory=dict)


class Swagger(Extensible):
    """Root of a Swagger 2.0 document."""

    swagger: Text
    info: Info
    host: Text | None = None
    base_path: Text | None = Field(None, alias="basePath")
    schemes: list[Scheme] | None = None
    consumes: list[Text] | None = None
    produces: list[Text] | None = None
    paths: Paths
    definitions: dict[str, SchemaOrRef] | None = None
    parameters: dict[str, Parameter] | None = None
    responses: dict[str, Response] | None = None
    security_definitions: dict[str, SecurityScheme] | None = Field(None, alias="securityDefinitions")
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocs | None = Field(None, alias="externalDocs")
