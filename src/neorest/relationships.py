from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import Field

from .entity import Entity
from .errors import BadResponse, FeatureUnavailable
from .http import join_url

if TYPE_CHECKING:
    from .database import Database
    from .nodes import Node

logger = logging.getLogger(__name__)


class Relationship(Entity):
    """A directional connection between two Nodes, with an optional set of
    arbitrary properties.

    Start and end nodes are kept as URIs and fetched on demand.
    """

    href_start: str = Field(default="", alias="start")
    href_end: str = Field(default="", alias="end")
    href_type: str = Field(default="", alias="type")

    @property
    def type(self) -> str:
        return self.href_type

    def start(self) -> Node:
        """Fetch the starting Node of this Relationship."""
        return self._database().nodes.get_by_uri(self.href_start)

    def end(self) -> Node:
        """Fetch the ending Node of this Relationship."""
        return self._database().nodes.get_by_uri(self.href_end)


class RelationshipManager:
    def __init__(self, db: Database):
        self.db = db

    def get(self, rel_id: int) -> Relationship:
        """Fetch a Relationship by id.

        Raises NotFound on 404 and BadResponse on any other non-200 status.
        """
        uri = join_url(self.db.url, "relationship", str(rel_id))
        logger.debug(f"GET relationship {uri}")
        resp = self.db.rc.get(uri)
        resp.raise_for_status()
        return Relationship.from_response(self.db, resp)

    def types(self) -> list[str]:
        """List all existing relationship types, sorted."""
        endpoint = self.db.info.relationship_types
        if not endpoint:
            raise FeatureUnavailable("server does not advertise a relationship_types endpoint")
        resp = self.db.rc.get(endpoint)
        resp.raise_for_status(not_found=False)
        body = resp.body if resp.body is not None else []
        if not isinstance(body, list) or not all(isinstance(t, str) for t in body):
            raise BadResponse(resp.status, resp.url, reason="expected a list of type names")
        return sorted(body)
