"""Requests-backed implementation of :class:`ApiTransport`."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any
from urllib.parse import urlencode

import requests
from requests.auth import HTTPBasicAuth

from ..contracts.transport.interface import ApiTransport
from ..core.config import ApiConfig
from ..core.errors import ApiConnectionError, ApiError, AuthorizeError
from ..core.loggers import InfoLogger, coerce_logger
from ..models.http import Request, RequestBody, Response
from ..models.shared import HttpMethod
from .headers import parse_raw_headers

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 80.0
DEFAULT_CONNECTION_TIMEOUT = 30.0
DEFAULT_HEADERS: Mapping[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}
BODYLESS_METHODS = frozenset({HttpMethod.GET, HttpMethod.HEAD})
BODY_METHODS = frozenset(
    {HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH, HttpMethod.DELETE, HttpMethod.OPTIONS}
)

CONNECTIVITY_MESSAGE = (
    "Could not connect to Currency API. Please check your internet connection and try again."
)
CERTIFICATE_MESSAGE = "Could not verify SSL certificate."
UNEXPECTED_MESSAGE = "Unexpected error communicating."

_HTTP_VERSIONS = {10: "HTTP/1.0", 11: "HTTP/1.1", 20: "HTTP/2"}

SessionFactory = Callable[[], requests.Session]


class RequestsTransport(ApiTransport):
    """Executes one HTTP exchange per :meth:`call` on a ``requests.Session``.

    With ``keep_alive`` enabled the session (and its pooled connection) is kept
    between calls; otherwise a fresh session is opened for each call and closed
    afterwards, whatever the outcome. A session passed in by the caller is
    reused as-is and never closed here.

    An instance is not thread-safe: the kept session is shared mutable state.
    Give each thread its own transport.
    """

    def __init__(
        self,
        *,
        config: ApiConfig | Mapping[str, Any] | None = None,
        api_key: str | None = None,
        secret_key: str | None = None,
        session: requests.Session | None = None,
        session_factory: SessionFactory = requests.Session,
        timeout: float = DEFAULT_TIMEOUT,
        connection_timeout: float = DEFAULT_CONNECTION_TIMEOUT,
        keep_alive: bool = True,
        logger: Any = None,
    ) -> None:
        self._config: ApiConfig | None = None
        if config is not None:
            self.set_config(config)
        self._api_key = api_key
        self._secret_key = secret_key
        self._session = session
        self._owns_session = session is None
        self._session_factory = session_factory
        self._timeout = timeout
        self._connection_timeout = connection_timeout
        self._keep_alive = keep_alive
        self._logger: InfoLogger | None = coerce_logger(logger)

    # ------------------------------------------------------------------
    # Exchange
    def call(self, request: Request) -> Response:
        self._log_request(request)

        url = self._build_url(request)
        headers = self._prepare_headers(request.headers)
        data = self._prepare_body(request.method, request.body)
        auth = None if request.is_public else HTTPBasicAuth(self._api_key, self._secret_key)

        session = self._acquire_session()
        try:
            wire = self._send(session, request.method, url, headers=headers, data=data, auth=auth)
        finally:
            self._release_session(session)

        response = Response(
            status_code=wire.status_code,
            headers=parse_raw_headers(_raw_header_block(wire)),
            body="" if request.method is HttpMethod.HEAD else _decode_body(wire),
            elapsed=wire.elapsed.total_seconds() if wire.elapsed is not None else None,
        )
        self._log_response(response)
        return response

    def close(self) -> None:
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Configuration
    @property
    def config(self) -> ApiConfig | None:
        return self._config

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def connection_timeout(self) -> float:
        return self._connection_timeout

    @property
    def keep_alive(self) -> bool:
        return self._keep_alive

    def set_config(self, config: ApiConfig | Mapping[str, Any]) -> None:
        if not isinstance(config, ApiConfig):
            config = ApiConfig.from_mapping(config)
        self._config = config

    def set_api_key(self, api_key: str | None) -> None:
        self._api_key = api_key

    def set_secret_key(self, secret_key: str | None) -> None:
        self._secret_key = secret_key

    def set_timeout(self, timeout: float) -> None:
        self._timeout = timeout

    def set_connection_timeout(self, timeout: float) -> None:
        self._connection_timeout = timeout

    def set_keep_alive(self, keep_alive: bool) -> None:
        self._keep_alive = bool(keep_alive)
        if not self._keep_alive:
            self.close()

    def set_logger(self, logger: Any) -> None:
        self._logger = coerce_logger(logger)

    # ------------------------------------------------------------------
    # Internal helpers
    def _build_url(self, request: Request) -> str:
        if not request.is_public and not (self._api_key and self._secret_key):
            raise AuthorizeError("apiKey or secretKey not set")
        if self._config is None:
            raise ApiError("Transport is not configured with base URLs")
        url = self._config.resolve(is_public=request.is_public, is_demo=request.is_demo) + str(request.path)
        params = {key: value for key, value in request.params.items() if value is not None}
        if params:
            url = f"{url}?{urlencode(params, doseq=True)}"
        return url

    def _prepare_headers(self, headers: Mapping[str, str]) -> dict[str, str]:
        merged = dict(DEFAULT_HEADERS)
        merged.update(headers)
        return merged

    def _prepare_body(self, method: HttpMethod, body: RequestBody) -> bytes | None:
        if method in BODYLESS_METHODS:
            return None
        if method not in BODY_METHODS:
            raise ApiError(f"Invalid method verb: {method}")
        if body is None:
            return None
        if isinstance(body, bytes):
            return body
        if isinstance(body, str):
            return body.encode("utf-8")
        return json.dumps(body, separators=(",", ":"), default=str).encode("utf-8")

    def _acquire_session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = self._session_factory()
        if self._keep_alive:
            self._session = session
        return session

    def _release_session(self, session: requests.Session) -> None:
        if session is not self._session:
            session.close()

    def _send(
        self,
        session: requests.Session,
        method: HttpMethod,
        url: str,
        *,
        headers: Mapping[str, str],
        data: bytes | None,
        auth: HTTPBasicAuth | None,
    ) -> requests.Response:
        try:
            return session.request(
                method.value,
                url,
                headers=headers,
                data=data,
                auth=auth,
                timeout=(self._connection_timeout, self._timeout),
                allow_redirects=False,
            )
        except requests.exceptions.SSLError as exc:
            raise _connection_error(CERTIFICATE_MESSAGE, exc) from exc
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as exc:
            raise _connection_error(CONNECTIVITY_MESSAGE, exc) from exc
        except requests.RequestException as exc:
            raise _connection_error(UNEXPECTED_MESSAGE, exc) from exc

    def _log_request(self, request: Request) -> None:
        message = f"Send request: {request.method} {request.path}"
        if request.params:
            message += f" with query params: {json.dumps(request.params, default=str)}"
        if request.has_body and request.method in BODY_METHODS:
            message += f" with body: {_describe_body(request.body)}"
        if request.headers:
            message += f" with headers: {json.dumps(request.headers)}"
        self._emit(message)

    def _log_response(self, response: Response) -> None:
        message = (
            f"Response with code {response.status_code} received with headers: "
            f"{json.dumps(dict(response.headers))}"
        )
        if response.body:
            message += f" and body: {response.body}"
        self._emit(message)

    def _emit(self, message: str) -> None:
        if self._logger is not None:
            self._logger.info(message)
        else:
            logger.debug(message)


def _connection_error(message: str, exc: requests.RequestException) -> ApiConnectionError:
    return ApiConnectionError(
        f"{message}\n\n(Network error [{type(exc).__name__}]: {exc})",
        cause=exc,
    )


def _raw_header_block(wire: requests.Response) -> str:
    """Render the header block exactly as received, one line per header occurrence."""

    raw = wire.raw
    version = _HTTP_VERSIONS.get(getattr(raw, "version", 11), "HTTP/1.1")
    lines = [f"{version} {wire.status_code} {wire.reason or ''}".rstrip()]
    lines.extend(f"{name}: {value}" for name, value in _header_items(wire))
    return "\r\n".join(lines) + "\r\n\r\n"


def _header_items(wire: requests.Response) -> Iterable[tuple[str, str]]:
    # urllib3 keeps repeated headers apart; requests merges them.
    raw_headers = getattr(wire.raw, "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "iteritems"):
        return raw_headers.iteritems()
    return wire.headers.items()


def _decode_body(wire: requests.Response) -> str:
    content = wire.content or b""
    try:
        return content.decode(wire.encoding or "utf-8", errors="replace")
    except LookupError:
        return content.decode("utf-8", errors="replace")


def _describe_body(body: RequestBody) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        return body
    return json.dumps(body, default=str)
