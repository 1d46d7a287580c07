from __future__ import annotations

import httpx
import pytest

from neorest.database import Database

BASE = "http://localhost:7474/db/data/"

SERVICE_ROOT = {
    "node": BASE + "node",
    "reference_node": BASE + "node/0",
    "node_index": BASE + "index/node",
    "relationship_index": BASE + "index/relationship",
    "relationship_types": BASE + "relationship/types",
    "batch": BASE + "batch",
    "cypher": BASE + "cypher",
    "extensions_info": BASE + "ext",
    "extensions": {},
    "neo4j_version": "1.8.M01",
}


def node_body(node_id: int, data: dict | None = None) -> dict:
    uri = f"{BASE}node/{node_id}"
    return {
        "self": uri,
        "property": uri + "/properties/{key}",
        "properties": uri + "/properties",
        "outgoing_relationships": uri + "/relationships/out",
        "incoming_relationships": uri + "/relationships/in",
        "all_relationships": uri + "/relationships/all",
        "create_relationship": uri + "/relationships",
        "data": data or {},
    }


def rel_body(rel_id: int, rel_type: str, start: int, end: int, data: dict | None = None) -> dict:
    uri = f"{BASE}relationship/{rel_id}"
    return {
        "self": uri,
        "property": uri + "/properties/{key}",
        "properties": uri + "/properties",
        "type": rel_type,
        "start": f"{BASE}node/{start}",
        "end": f"{BASE}node/{end}",
        "data": data or {},
        "extensions": {},
    }


class FakeServer:
    """Canned responses keyed by absolute URL; records every request."""

    def __init__(self):
        self.root: dict = dict(SERVICE_ROOT)
        self.root_status = 200
        self.routes: dict[str, tuple[int, object]] = {}
        self.calls: list[str] = []

    def add(self, url: str, status: int = 200, json=None) -> None:
        self.routes[url] = (status, json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls.append(url)
        if url == BASE:
            return httpx.Response(self.root_status, json=self.root)
        if url in self.routes:
            status, payload = self.routes[url]
            if payload is None:
                return httpx.Response(status)
            return httpx.Response(status, json=payload)
        return httpx.Response(404, json={"message": f"no route for {url}"})

    def connect(self, **kwargs) -> Database:
        return Database.connect(BASE, transport=httpx.MockTransport(self.handler), **kwargs)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def db(server: FakeServer):
    database = server.connect()
    yield database
    database.close()
