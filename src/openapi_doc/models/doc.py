"""The Doc union: a Swagger 2.0 document or an OpenAPI 3.x document."""

from typing import Annotated, Any, Union

from pydantic import ConfigDict, Discriminator, RootModel, Tag

from .v2 import Swagger
from .v3 import OpenApi

V2 = "v2"
V3 = "v3"


def _version_tag(value: Any) -> str | None:
    if isinstance(value, Swagger):
        return V2
    if isinstance(value, OpenApi):
        return V3
    if isinstance(value, dict):
        if "swagger" in value:
            return V2
        if "openapi" in value:
            return V3
    return None


class Doc(
    RootModel[
        Annotated[
            Union[Annotated[Swagger, Tag(V2)], Annotated[OpenApi, Tag(V3)]],
            Discriminator(_version_tag),
        ]
    ]
):
    """A decoded document. ``root`` is either a Swagger or an OpenApi tree."""

    model_config = ConfigDict(frozen=True)

    @property
    def is_v2(self) -> bool:
        return isinstance(self.root, Swagger)

    @property
    def is_v3(self) -> bool:
        return isinstance(self.root, OpenApi)

    @property
    def version(self) -> str:
        """The version string exactly as written in the source document."""
        if isinstance(self.root, Swagger):
            return self.root.swagger
        return self.root.openapi
