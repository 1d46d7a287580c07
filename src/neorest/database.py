"""Database handle: the entry point of the client.

`Database.connect` reads the service root, which lists the endpoints the
server offers, and wires up the node and relationship managers around a
single shared httpx client.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from .errors import BadResponse, InvalidDatabase, Unauthorized, log_pretty
from .http import HttpClientFactory, RestClient, RestResponse, transient_retry
from .models import ServiceRoot
from .nodes import NodeManager
from .relationships import RelationshipManager
from .settings import settings

logger = logging.getLogger(__name__)


@transient_retry(settings.connect_retries)
def _fetch_service_root(rc: RestClient, url: str) -> RestResponse:
    return rc.get(url)


class Database:
    """A connected graph database.

    Holds the REST transport, the service root URL and the capabilities the
    server advertised. Close it (or use it as a context manager) to release
    the underlying connection pool.
    """

    def __init__(self, rc: RestClient, url: str, info: ServiceRoot):
        self.rc = rc
        self.url = url
        self.info = info
        self.nodes = NodeManager(self)
        self.relationships = RelationshipManager(self)

    @classmethod
    def connect(
        cls,
        url: str | None = None,
        *,
        username: str | None = None,
        password: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> Database:
        url = url or settings.url
        username = username if username is not None else settings.username
        password = password if password is not None else settings.password
        auth = httpx.BasicAuth(username, password or "") if username else None

        rc = RestClient(HttpClientFactory.client(auth=auth, transport=transport))
        try:
            resp = _fetch_service_root(rc, url)
            if resp.status == 401:
                raise Unauthorized(f"credentials rejected by {url}")
            if resp.status == 404:
                raise InvalidDatabase(f"no database service root at {url}")
            if resp.status != 200:
                log_pretty(resp.error)
                raise BadResponse(resp.status, url, resp.error)
            try:
                info = ServiceRoot.model_validate(resp.body if resp.body is not None else {})
            except ValidationError as e:
                raise BadResponse(resp.status, url, reason="unexpected service root") from e
        except Exception:
            rc.close()
            raise

        logger.info(f"Connected to {url} (neo4j {info.neo4j_version or 'unknown'})")
        return cls(rc, url, info)

    def close(self) -> None:
        self.rc.close()
        logger.info(f"Disconnected from {self.url}")

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
