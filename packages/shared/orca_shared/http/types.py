"""Request and response typing for :class:`OrcaFetcher`."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import httpx
from typing_extensions import NotRequired, TypedDict

T = TypeVar("T")


class Unset:
    """Type of :data:`UNSET`, the "no body" marker.

    ``None`` cannot play this role because ``null`` is a valid JSON body.
    """

    _instance: Unset | None = None

    def __new__(cls) -> Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset()


class RequestOptions(TypedDict, total=False):
    """Transport options forwarded unchanged to the underlying request."""

    params: httpx.QueryParams | dict[str, Any] | list[tuple[str, Any]] | str
    timeout: httpx.Timeout | float | None
    follow_redirects: bool
    extensions: dict[str, Any]
    auth: httpx.Auth | tuple[str, str]


class RawEnvelope(TypedDict, Generic[T]):
    """Parsed, unvalidated response envelope.

    Validate with ``ResponseBody[Model].model_validate(raw)`` when a typed
    model is needed.
    """

    status: int
    message: str
    success: bool
    data: NotRequired[T]
