from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from .errors import BadResponse, NotFound, log_pretty
from .models import NeoError
from .settings import settings


def default_timeout() -> httpx.Timeout:
    return httpx.Timeout(
        connect=settings.connect_timeout_s, read=settings.read_timeout_s, write=20.0, pool=10.0
    )


def default_limits() -> httpx.Limits:
    return httpx.Limits(max_connections=100, max_keepalive_connections=20)


class HttpClientFactory:
    """Creates httpx clients with sane defaults.

    Keep one client per Database handle; do not create per-request.
    """

    @staticmethod
    def client(
        headers: dict | None = None,
        auth: httpx.Auth | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> httpx.Client:
        base_headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if headers:
            base_headers.update(headers)
        return httpx.Client(
            headers=base_headers,
            auth=auth,
            timeout=default_timeout(),
            limits=default_limits(),
            follow_redirects=True,
            transport=transport,
        )


TransientHttpError = (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)


def transient_retry(attempts: int = 5):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.5, max=10.0) + wait_random(0, 1),
        retry=retry_if_exception_type(TransientHttpError),
    )


def join_url(base: str, *parts: str) -> str:
    """Join path segments onto `base` with exactly one slash between each."""
    segments = [base.rstrip("/")] + [p.strip("/") for p in parts]
    return "/".join(segments)


@dataclass(frozen=True)
class RestResponse:
    url: str
    status: int
    body: Any = None
    error: NeoError | None = None

    @classmethod
    def from_httpx(cls, r: httpx.Response) -> RestResponse:
        url = str(r.request.url)
        if not r.is_success:
            return cls(url=url, status=r.status_code, error=NeoError.from_response(r))
        body = None
        if r.content:
            try:
                body = r.json()
            except ValueError as e:
                raise BadResponse(r.status_code, url, reason="body is not valid JSON") from e
        return cls(url=url, status=r.status_code, body=body)

    def raise_for_status(self, *, ok: tuple[int, ...] = (200,), not_found: bool = True) -> None:
        """Map the status to the client's errors.

        Statuses in `ok` pass. 404 raises NotFound when `not_found` is set;
        everything else logs the server's error payload and raises BadResponse.
        """
        if self.status in ok:
            return
        if self.status == 404 and not_found:
            raise NotFound(self.url)
        log_pretty(self.error)
        raise BadResponse(self.status, self.url, self.error)


class RestClient:
    """Issues single JSON requests and decodes the results.

    Transport errors raised by httpx propagate unchanged.
    """

    def __init__(self, client: httpx.Client):
        self._client = client

    def close(self) -> None:
        self._client.close()

    def get(self, url: str, params: dict | None = None) -> RestResponse:
        r = self._client.get(url, params=params)
        return RestResponse.from_httpx(r)
