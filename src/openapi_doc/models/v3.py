"""OpenAPI 3.x object model.

Covers OpenAPI 3.0 and the 3.1 additions that change the shape of a document
(webhooks, ``pathItems`` components, ``summary`` on references, list-valued
schema ``type`` and numeric exclusive bounds).
See https://spec.openapis.org/oas/v3.1.0 for the meaning of each field.
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
from .base import Reference as BaseReference

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class ParameterLocation(str, Enum):
    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    COOKIE = "cookie"


class SecuritySchemeType(str, Enum):
    API_KEY = "apiKey"
    HTTP = "http"
    MUTUAL_TLS = "mutualTLS"
    OAUTH2 = "oauth2"
    OPEN_ID_CONNECT = "openIdConnect"


class ApiKeyLocation(str, Enum):
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


class Reference(BaseReference):
    """Reference Object. ``summary`` and ``description`` override those of the target."""

    summary: Text | None = None
    description: Text | None = None


def _ref_or(target):
    return ref_or(target, reference=Reference)


class Contact(Extensible):
    name: Text | None = None
    url: Text | None = None
    email: Text | None = None


class License(Extensible):
    name: Text
    identifier: Text | None = None
    url: Text | None = None


class Info(Extensible):
    """Metadata about the API."""

    title: Text
    version: Text
    summary: Text | None = None
    description: Text | None = None
    terms_of_service: Text | None = Field(None, alias="termsOfService")
    contact: Contact | None = None
    license: License | None = None


class ServerVariable(Extensible):
    """Substitution value for a templated server URL."""

    default: Text
    enum_: list[Text] | None = Field(None, alias="enum")
    description: Text | None = None


class Server(Extensible):
    url: Text
    description: Text | None = None
    variables: dict[str, ServerVariable] | None = None


class ExternalDocs(Extensible):
    url: Text
    description: Text | None = None


class Tag(Extensible):
    name: Text
    description: Text | None = None
    external_docs: ExternalDocs | None = Field(None, alias="externalDocs")


class Discriminator(Extensible):
    property_name: Text = Field(alias="propertyName")
    mapping: dict[str, Text] | None = None


class Xml(Extensible):
    name: Text | None = None
    namespace: Text | None = None
    prefix: Text | None = None
    attribute: Flag | None = None
    wrapped: Flag | None = None


class Schema(Extensible):
    """Schema Object.

    Nested schemas (``items``, ``properties``, ``additionalProperties``,
    ``allOf``/``oneOf``/``anyOf``/``not``) are each either a Reference or an
    inline Schema. ``type_`` is a single name in 3.0 and may be a list in 3.1;
    the exclusive bounds are booleans in 3.0 and numbers in 3.1.
    """

    title: Text | None = None
    description: Text | None = None
    type_: Text | list[Text] | None = Field(None, alias="type")
    format: Text | None = None
    enum_: list[JsonValue] | None = Field(None, alias="enum")
    const: JsonValue = None
    default: JsonValue = None
    multiple_of: Number | None = Field(None, alias="multipleOf")
    maximum: Number | None = None
    exclusive_maximum: Flag | Number | None = Field(None, alias="exclusiveMaximum")
    minimum: Number | None = None
    exclusive_minimum: Flag | Number | None = Field(None, alias="exclusiveMinimum")
    max_length: Integer | None = Field(None, alias="maxLength")
    min_length: Integer | None = Field(None, alias="minLength")
    pattern: Text | None = None
    max_items: Integer | None = Field(None, alias="maxItems")
    min_items: Integer | None = Field(None, alias="minItems")
    unique_items: Flag | None = Field(None, alias="uniqueItems")
    max_properties: Integer | None = Field(None, alias="maxProperties")
    min_properties: Integer | None = Field(None, alias="minProperties")
    required: list[Text] | None = None
    items: "SchemaOrRef | None" = None
    properties: "dict[str, SchemaOrRef] | None" = None
    additional_properties: "Flag | SchemaOrRef | None" = Field(None, alias="additionalProperties")
    all_of: "list[SchemaOrRef] | None" = Field(None, alias="allOf")
    one_of: "list[SchemaOrRef] | None" = Field(None, alias="oneOf")
    any_of: "list[SchemaOrRef] | None" = Field(None, alias="anyOf")
    not_: "SchemaOrRef | None" = Field(None, alias="not")
    nullable: Flag | None = None
    discriminator: Discriminator | None = None
    read_only: Flag | None = Field(None, alias="readOnly")
    write_only: Flag | None = Field(None, alias="writeOnly")
    deprecated: Flag | None = None
    xml: Xml | None = None
    external_docs: ExternalDocs | None = Field(None, alias="externalDocs")
    example: JsonValue = None
    examples: list[JsonValue] | None = None


SchemaOrRef = _ref_or(Schema)
Schema.model_rebuild()


class Example(Extensible):
    summary: Text | None = None
    description: Text | None = None
    value: JsonValue = None
    external_value: Text | None = Field(None, alias="externalValue")


ExampleOrRef = _ref_or(Example)


class Header(Extensible):
    """Header Object: a Parameter without ``name`` and ``in``."""

    description: Text | None = None
    required: Flag | None = None
    deprecated: Flag | None = None
    allow_empty_value: Flag | None = Field(None, alias="allowEmptyValue")
    style: Text | None = None
    explode: Flag | None = None
    allow_reserved: Flag | None = Field(None, alias="allowReserved")
    schema_: SchemaOrRef | None = Field(None, alias="schema")
    example: JsonValue = None
    examples: dict[str, ExampleOrRef] | None = None
    content: "dict[str, MediaType] | None" = None


HeaderOrRef = _ref_or(Header)


class Encoding(Extensible):
    content_type: Text | None = Field(None, alias="contentType")
    headers: dict[str, HeaderOrRef] | None = None
    style: Text | None = None
    explode: Flag | None = None
    allow_reserved: Flag | None = Field(None, alias="allowReserved")


class MediaType(Extensible):
    schema_: SchemaOrRef | None = Field(None, alias="schema")
    example: JsonValue = None
    examples: dict[str, ExampleOrRef] | None = None
    encoding: dict[str, Encoding] | None = None


class Parameter(Extensible):
    """Operation parameter, described either by ``schema_`` or by ``content``."""

    name: Text
    location: ParameterLocation = Field(alias="in")
    description: Text | None = None
    required: Flag | None = None
    deprecated: Flag | None = None
    allow_empty_value: Flag | None = Field(None, alias="allowEmptyValue")
    style: Text | None = None
    explode: Flag | None = None
    allow_reserved: Flag | None = Field(None, alias="allowReserved")
    schema_: SchemaOrRef | None = Field(None, alias="schema")
    example: JsonValue = None
    examples: dict[str, ExampleOrRef] | None = None
    content: dict[str, MediaType] | None = None


ParameterOrRef = _ref_or(Parameter)


class RequestBody(Extensible):
    content: dict[str, MediaType]
    description: Text | None = None
    required: Flag | None = None


RequestBodyOrRef = _ref_or(RequestBody)


class Link(Extensible):
    """Design-time link from a response to another operation."""

    operation_ref: Text | None = Field(None, alias="operationRef")
    operation_id: Text | None = Field(None, alias="operationId")
    parameters: dict[str, JsonValue] | None = None
    request_body: JsonValue = Field(None, alias="requestBody")
    description: Text | None = None
    server: Server | None = None


LinkOrRef = _ref_or(Link)


class Response(Extensible):
    description: Text
    headers: dict[str, HeaderOrRef] | None = None
    content: dict[str, MediaType] | None = None
    links: dict[str, LinkOrRef] | None = None


ResponseOrRef = _ref_or(Response)


class Responses(ExtensibleMap):
    """Responses keyed by HTTP status code, status range ("2XX") or "default"."""

    entries: dict[str, ResponseOrRef] = Field(default_factory=dict)


class OAuthFlow(Extensible):
    """Configuration of one OAuth flow. Which URLs are set depends on the flow."""

    scopes: dict[str, Text]
    authorization_url: Text | None = Field(None, alias="authorizationUrl")
    token_url: Text | None = Field(None, alias="tokenUrl")
    refresh_url: Text | None = Field(None, alias="refreshUrl")


class OAuthFlows(Extensible):
    implicit: OAuthFlow | None = None
    password: OAuthFlow | None = None
    client_credentials: OAuthFlow | None = Field(None, alias="clientCredentials")
    authorization_code: OAuthFlow | None = Field(None, alias="authorizationCode")


class SecurityScheme(Extensible):
    """Security scheme. Which optional fields are set depends on ``type_``."""

    type_: SecuritySchemeType = Field(alias="type")
    description: Text | None = None
    name: Text | None = None
    location: ApiKeyLocation | None = Field(None, alias="in")
    scheme: Text | None = None
    bearer_format: Text | None = Field(None, alias="bearerFormat")
    flows: OAuthFlows | None = None
    open_id_connect_url: Text | None = Field(None, alias="openIdConnectUrl")


SecuritySchemeOrRef = _ref_or(SecurityScheme)


class Operation(Extensible):
    tags: list[Text] | None = None
    summary: Text | None = None
    description: Text | None = None
    external_docs: ExternalDocs | None = Field(None, alias="externalDocs")
    operation_id: Text | None = Field(None, alias="operationId")
    parameters: list[ParameterOrRef] | None = None
    request_body: RequestBodyOrRef | None = Field(None, alias="requestBody")
    # Required in 3.0, optional in 3.1.
    responses: Responses | None = None
    callbacks: "dict[str, CallbackOrRef] | None" = None
    deprecated: Flag | None = None
    security: list[SecurityRequirement] | None = None
    servers: list[Server] | None = None


class PathItem(Extensible):
    """Operations available on a single path."""

    reference: Text | None = Field(None, alias="$ref")
    summary: Text | None = None
    description: Text | None = None
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: list[Server] | None = None
    parameters: list[ParameterOrRef] | None = None

    def operations(self) -> dict[str, Operation]:
        """Return the defined operations keyed by lowercase HTTP method."""
        return {m: getattr(self, m) for m in HTTP_METHODS if getattr(self, m) is not None}


class Callback(ExtensibleMap):
    """Path items keyed by the runtime expression that yields the callback URL."""

    entries: dict[str, PathItem] = Field(default_factory=dict)


class Paths(ExtensibleMap):
    """Path items keyed by path template (``/pets/{petId}``)."""

    entries: dict[str, PathItem] = Field(default_factory=dict)


CallbackOrRef = _ref_or(Callback)

Header.model_rebuild()
Encoding.model_rebuild()
MediaType.model_rebuild()
Parameter.model_rebuild()
RequestBody.model_rebuild()
Response.model_rebuild()
Responses.model_rebuild()
Operation.model_rebuild()
PathItem.model_rebuild()
Callback.model_rebuild()
Paths.model_rebuild()


class Components(Extensible):
    """Reusable objects, each registry keyed by component name."""

    schemas: dict[str, SchemaOrRef] | None = None
    responses: dict[str, ResponseOrRef] | None = None
    parameters: dict[str, ParameterOrRef] | None = None
    examples: dict[str, ExampleOrRef] | None = None
    request_bodies: dict[str, RequestBodyOrRef] | None = Field(None, alias="requestBodies")
    headers: dict[str, HeaderOrRef] | None = None
    security_schemes: dict[str, SecuritySchemeOrRef] | None = Field(None, alias="securitySchemes")
    links: dict[str, LinkOrRef] | None = None
    callbacks: dict[str, CallbackOrRef] | None = None
    path_items: dict[str, PathItem] | None = Field(None, alias="pathItems")


class OpenApi(Extensible):
    """Root of an OpenAPI 3.x document."""

    openapi: Text
    info: Info
    json_schema_dialect: Text | None = Field(None, alias="jsonSchemaDialect")
    servers: list[Server] | None = None
    paths: Paths
    webhooks: dict[str, PathItem] | None = None
    components: Components | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocs | None = Field(None, alias="externalDocs")


