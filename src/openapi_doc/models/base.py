"""Shared building blocks for the Swagger 2.0 and OpenAPI 3.x models.

Every record is a frozen pydantic model. Fields are looked up by their wire
name only: camelCase keys carry an explicit ``alias`` and the few keys that
clash with Python names are renamed on the field itself:

    in      -> location
    $ref    -> reference
    type    -> type_
    enum    -> enum_
    not     -> not_
    schema  -> schema_
"""

from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    SerializerFunctionWrapHandler,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    Tag,
    model_serializer,
    model_validator,
)

# Scalars are never coerced: "1" is not a number and 1 is not a string.
Text = StrictStr
Flag = StrictBool
Integer = StrictInt
Number = Union[StrictInt, StrictFloat]

# Plain JSON value (default, example, const and friends).
JsonValue = Any

SecurityRequirement = dict[StrictStr, list[StrictStr]]

REFERENCE_TAG = "reference"
INLINE_TAG = "inline"
EXTENSION_PREFIX = "x-"


class WireModel(BaseModel):
    """Immutable record decoded from a JSON object.

    Freezing is per record: fields cannot be reassigned, but plain ``dict``
    and ``list`` field values are the containers pydantic built and are not
    copied or wrapped. Treat them as read-only.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")


class Extensible(WireModel):
    """Record that may carry vendor extensions (``x-*`` keys)."""

    extensions: dict[str, JsonValue] | None = None

    @model_validator(mode="before")
    @classmethod
    def collect_extensions(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        found = {}
        fields = {}
        for key, value in data.items():
            if isinstance(key, str) and key.startswith(EXTENSION_PREFIX):
                found[key] = value
            elif key != "extensions":
                fields[key] = value
        if found:
            fields["extensions"] = found
        return fields


class ExtensibleMap(WireModel):
    """Map-shaped object (Paths, Responses, Callback) whose entries share the
    object with ``x-*`` keys.

    Entries are read with ``[]``, ``in``, ``len``, ``get``, ``keys``,
    ``values`` and ``items``. There is no item assignment.
    """

    entries: dict[str, Any] = Field(default_factory=dict)
    extensions: dict[str, JsonValue] | None = None

    @model_validator(mode="before")
    @classmethod
    def split_extensions(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        entries = {}
        found = {}
        for key, value in data.items():
            if isinstance(key, str) and key.startswith(EXTENSION_PREFIX):
                found[key] = value
            else:
                entries[key] = value
        return {"entries": entries, "extensions": found or None}

    @model_serializer(mode="wrap")
    def flatten(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {**data.get("entries", {}), **(data.get("extensions") or {})}

    def __getitem__(self, key: str) -> Any:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str, default: Any = None) -> Any:
        return self.entries.get(key, default)

    def keys(self):
        return self.entries.keys()

    def values(self):
        return self.entries.values()

    def items(self):
        return self.entries.items()


class Reference(WireModel):
    """Pointer to another location, stored as written and never resolved."""

    reference: Text = Field(alias="$ref")


def _pick_alternative(value: Any) -> str:
    if isinstance(value, dict):
        return REFERENCE_TAG if "$ref" in value else INLINE_TAG
    if isinstance(value, Reference):
        return REFERENCE_TAG
    return INLINE_TAG


def ref_or(target: Any, reference: type[Reference] = Reference) -> Any:
    """Build the "Reference or inline object" sum type for ``target``.

    An object holding a ``$ref`` key always decodes as ``reference``; its
    other keys are never merged into an inline ``target``.
    """
    return Annotated[
        Union[
            Annotated[reference, Tag(REFERENCE_TAG)],
            Annotated[target, Tag(INLINE_TAG)],
        ],
        Discriminator(_pick_alternative),
    ]
