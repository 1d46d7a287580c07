from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ServiceRoot(BaseModel):
    """Endpoints advertised at the database service root.

    Any entry may be missing; an empty string means the server does not
    offer that feature.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    node: str = ""
    reference_node: str = ""
    node_index: str = ""
    relationship_index: str = ""
    relationship_types: str = ""
    batch: str = ""
    cypher: str = ""
    extensions_info: str = ""
    extensions: dict[str, Any] = Field(default_factory=dict)
    neo4j_version: str = ""


class NeoError(BaseModel):
    """Error payload the server sends alongside a failing status."""

    model_config = ConfigDict(extra="ignore")

    message: str | None = None
    exception: str | None = None
    stacktrace: list[str] = Field(default_factory=list)

    @classmethod
    def from_response(cls, r: httpx.Response) -> NeoError | None:
        if not r.content:
            return None
        try:
            d = r.json()
        except ValueError:
            return cls(message=r.text)
        if isinstance(d, dict):
            try:
                return cls.model_validate(d)
            except ValidationError:
                return cls(message=r.text)
        return cls(message=str(d))

    def pretty(self) -> str:
        return self.model_dump_json(indent=2, exclude_defaults=True)
