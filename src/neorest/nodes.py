from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import Field

from .entity import Entity
from .http import join_url

if TYPE_CHECKING:
    from .database import Database

logger = logging.getLogger(__name__)


class Node(Entity):
    """A vertex in the graph."""

    href_outgoing_relationships: str = Field(default="", alias="outgoing_relationships")
    href_incoming_relationships: str = Field(default="", alias="incoming_relationships")
    href_all_relationships: str = Field(default="", alias="all_relationships")
    href_create_relationship: str = Field(default="", alias="create_relationship")


class NodeManager:
    def __init__(self, db: Database):
        self.db = db

    def get(self, node_id: int) -> Node:
        """Fetch a Node by id."""
        return self.get_by_uri(join_url(self.db.url, "node", str(node_id)))

    def get_by_uri(self, uri: str) -> Node:
        """Fetch the Node whose self URI is `uri`."""
        logger.debug(f"GET node {uri}")
        resp = self.db.rc.get(uri)
        resp.raise_for_status()
        return Node.from_response(self.db, resp)
