"""Value objects describing one outbound request and the outcome of one exchange."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from ..core.errors import ApiError
from .shared import ApiPath, HttpMethod

RequestBody = Mapping[str, Any] | str | bytes | None


@dataclass(frozen=True, slots=True)
class Request:
    """Describes a single API call.

    ``body`` is either already serialized by the caller (``str``/``bytes``) or a
    mapping that the transport encodes as JSON. It is ignored for GET and HEAD.
    """

    path: ApiPath | str
    method: HttpMethod = HttpMethod.GET
    params: Mapping[str, Any] = field(default_factory=dict)
    body: RequestBody = None
    headers: Mapping[str, str] = field(default_factory=dict)
    is_public: bool = False
    is_demo: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.method, HttpMethod):
            try:
                method = HttpMethod(str(self.method).upper())
            except ValueError as exc:
                raise ApiError(f"Invalid method verb: {self.method}") from exc
            object.__setattr__(self, "method", method)
        object.__setattr__(self, "params", dict(self.params or {}))
        object.__setattr__(self, "headers", dict(self.headers or {}))

    def with_public(self, flag: bool = True) -> Request:
        """Return a copy flagged as (not) requiring authentication."""

        return replace(self, is_public=bool(flag))

    def with_demo(self, flag: bool = True) -> Request:
        """Return a copy targeting the demo (or live) base URL."""

        return replace(self, is_demo=bool(flag))

    @property
    def has_body(self) -> bool:
        return bool(self.body)


@dataclass(frozen=True, slots=True)
class Response:
    """Raw outcome of one HTTP exchange.

    Header names keep the case they were received with; when a name repeats,
    the last value wins.
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""
    elapsed: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers or {})))
