"""Tests for connecting to the service root."""

import base64

import httpx
import pytest

from neorest import database as database_module
from neorest.database import Database
from neorest.errors import BadResponse, InvalidDatabase, Unauthorized

from .conftest import BASE


class TestConnect:
    def test_connect_reads_service_root(self, db) -> None:
        """Advertised endpoints are available on the handle."""
        assert db.url == BASE
        assert db.info.relationship_types == BASE + "relationship/types"
        assert db.info.neo4j_version == "1.8.M01"
        assert db.nodes.db is db
        assert db.relationships.db is db

    def test_connect_tolerates_missing_entries(self, server) -> None:
        """Endpoints the server omits read as empty strings."""
        server.root = {"node": BASE + "node"}
        with server.connect() as db:
            assert db.info.relationship_types == ""
            assert db.info.cypher == ""

    def test_connect_sends_basic_auth(self, server) -> None:
        """Credentials are sent as HTTP basic auth."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization")
            return server.handler(request)

        db = Database.connect(
            BASE, username="neo4j", password="secret", transport=httpx.MockTransport(handler)
        )
        db.close()

        assert seen["auth"] == "Basic " + base64.b64encode(b"neo4j:secret").decode()

    @pytest.mark.parametrize(
        ("status", "exc"),
        [(401, Unauthorized), (404, InvalidDatabase), (500, BadResponse)],
    )
    def test_connect_failures(self, server, status, exc) -> None:
        """Service-root statuses map to dedicated errors."""
        server.root_status = status

        with pytest.raises(exc):
            server.connect()

    def test_transport_error_propagates(self) -> None:
        """Transport failures are not wrapped."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.UnsupportedProtocol("no scheme", request=request)

        with pytest.raises(httpx.UnsupportedProtocol):
            Database.connect(BASE, transport=httpx.MockTransport(handler))

    def test_transient_error_is_retried(self, server, monkeypatch) -> None:
        """A connection failure during discovery is retried."""
        monkeypatch.setattr(database_module._fetch_service_root.retry, "sleep", lambda _s: None)
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            if len(calls) == 1:
                raise httpx.ConnectError("connection refused", request=request)
            return server.handler(request)

        with Database.connect(BASE, transport=httpx.MockTransport(handler)) as db:
            assert db.info.relationship_types == BASE + "relationship/types"

        assert calls == [BASE, BASE]

    def test_non_transient_error_is_not_retried(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            raise httpx.UnsupportedProtocol("no scheme", request=request)

        with pytest.raises(httpx.UnsupportedProtocol):
            Database.connect(BASE, transport=httpx.MockTransport(handler))

        assert len(calls) == 1

    def test_service_root_of_wrong_shape(self, server) -> None:
        """A service root that is not an object raises BadResponse."""
        server.root = ["node"]

        with pytest.raises(BadResponse):
            server.connect()
