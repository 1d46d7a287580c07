"""Shared behaviour of nodes and relationships.

Both are read from the server as documents of URIs: `self` names the
entity and ends in its numeric id, `properties` and `property` point at
its property map and at a single property (with a `{key}` placeholder).
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from .errors import BadResponse, MalformedEntity, NeoRestError

if TYPE_CHECKING:
    from .database import Database
    from .http import RestResponse


class Entity(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    href_self: str = Field(default="", alias="self")
    href_property: str = Field(default="", alias="property")
    href_properties: str = Field(default="", alias="properties")
    data: dict[str, Any] = Field(default_factory=dict)

    # Weak reference to the Database the entity was read from.
    _db: Any = PrivateAttr(default=None)

    @classmethod
    def from_response(cls, db: Database, resp: RestResponse):
        try:
            entity = cls.model_validate(resp.body if resp.body is not None else {})
        except ValidationError as e:
            raise BadResponse(resp.status, resp.url, reason="unexpected body") from e
        entity._db = weakref.ref(db)
        return entity

    @property
    def id(self) -> int:
        """Numeric id parsed from the trailing segment of the self URI."""
        tail = self.href_self.split("/")[-1]
        digits = tail[1:] if tail.startswith(("+", "-")) else tail
        if not (digits.isascii() and digits.isdigit()):
            raise MalformedEntity(f"cannot parse an id from self URI {self.href_self!r}")
        return int(tail)

    def _database(self) -> Database:
        db = self._db() if self._db is not None else None
        if db is None:
            raise NeoRestError(f"{type(self).__name__} {self.href_self!r} is not bound to an open database")
        return db

    def properties(self) -> dict[str, Any]:
        """Fetch all properties; an entity without any yields an empty dict."""
        resp = self._database().rc.get(self.href_properties)
        resp.raise_for_status(ok=(200, 204))
        return resp.body or {}

    def property(self, key: str) -> Any:
        """Fetch a single property value. Raises NotFound if it is not set."""
        uri = self.href_property.replace("{key}", quote(key, safe=""))
        resp = self._database().rc.get(uri)
        resp.raise_for_status()
        return resp.body
