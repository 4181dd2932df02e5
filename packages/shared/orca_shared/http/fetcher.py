"""Typed HTTP client for the JSON REST API.

Every request is sent with the fetcher's cookie jar attached (credentials are
always included) and ``Content-Type: application/json`` by default. Bodies are
serialized to compact JSON; ``UNSET`` means "send no body", while ``None`` is a
real body and goes out as ``null``.

By default responses are typed as the standard envelope
(``{status, message, success, data}``). Pass ``unwrap=False`` when an endpoint
returns its payload bare. Either way the parsed JSON is returned exactly as
received: nothing is validated and the transport status code is not inspected.

Each call performs one round trip on its own ``httpx.AsyncClient``. There is no
retry, timeout or caching policy here; callers wrap the client for that.

Transport failures (``httpx.TransportError``) and undecodable bodies
(``json.JSONDecodeError``) propagate unchanged.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any, Literal, overload

import httpx
from pydantic_core import to_json
from typing_extensions import Unpack

from orca_shared.config.settings import ApiConfig
from orca_shared.http.types import UNSET, RawEnvelope, RequestOptions, Unset

logger = logging.getLogger(__name__)

# Options forwarded to httpx.AsyncClient.request() as-is.
_PASSTHROUGH_OPTIONS = frozenset(RequestOptions.__annotations__)

# Request content may only come from the dedicated ``body`` parameter.
_BODY_KEYS = ("body", "content", "json", "data", "files")


class OrcaFetcher:
    """Async JSON client bound to an immutable :class:`ApiConfig`.

    Parameters
    ----------
    config:
        API configuration. Relative URLs resolve against ``config.base_url``.
    cookies:
        Credential store sent with every request. Cookies set by responses are
        written back to it, so a login response's session cookie is carried by
        subsequent calls.
        Cookies given as a dict are scoped to the host of ``config.base_url``
        so the server can replace or expire them. Expired cookies are removed.
    transport:
        Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Example::

        fetcher = OrcaFetcher(ApiConfig(base_url="https://wallet.example.com"))

        wrapped = await fetcher.get("/api/v1/user")
        user = ResponseBody[User].model_validate(wrapped)

        raw = await fetcher.fetch("/api/v1/raw-data", unwrap=False)
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        cookies: httpx.Cookies | dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or ApiConfig()
        self._cookies = _seed_cookies(cookies, self._config)
        self._transport = transport

    @property
    def config(self) -> ApiConfig:
        return self._config

    @property
    def cookies(self) -> httpx.Cookies:
        return self._cookies

    @overload
    async def fetch(
        self,
        url: str,
        *,
        method: str = ...,
        body: Any = ...,
        headers: Mapping[str, str] | None = ...,
        unwrap: Literal[True] = ...,
        **options: Unpack[RequestOptions],
    ) -> RawEnvelope: ...

    @overload
    async def fetch(
        self,
        url: str,
        *,
        method: str = ...,
        body: Any = ...,
        headers: Mapping[str, str] | None = ...,
        unwrap: Literal[False],
        **options: Unpack[RequestOptions],
    ) -> Any: ...

    async def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        body: Any = UNSET,
        headers: Mapping[str, str] | None = None,
        unwrap: bool = True,
        **options: Any,
    ) -> Any:
        """Send one request and return its parsed JSON body.

        ``unwrap`` only selects the declared return shape: the envelope when
        True, the bare payload when False. The value itself is never reshaped.
        """
        request_headers = httpx.Headers({"Content-Type": "application/json"})
        if headers:
            request_headers.update(headers)

        content = None if isinstance(body, Unset) else to_json(body)

        async with httpx.AsyncClient(
            base_url=self._config.base_url,
            cookies=self._cookies,
            transport=self._transport,
            timeout=None,
        ) as client:
            logger.debug("%s %s", method, url, extra={"method": method, "url": url})
            started = time.monotonic()
            response = await client.request(
                method,
                url,
                content=content,
                headers=request_headers,
                **_passthrough(options),
            )
            # Redirect hops may set or expire cookies too
            for hop in (*response.history, response):
                self._cookies.extract_cookies(hop)
            logger.debug(
                "%s %s -> %d",
                method,
                url,
                response.status_code,
                extra={
                    "method": method,
                    "url": url,
                    "status_code": response.status_code,
                    "duration_ms": round((time.monotonic() - started) * 1000, 1),
                },
            )

            return response.json()

    async def get(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        **options: Unpack[RequestOptions],
    ) -> RawEnvelope:
        return await self.fetch(
            url, method="GET", headers=headers, **_without_body(options)
        )

    async def post(
        self,
        url: str,
        body: Any = UNSET,
        *,
        headers: Mapping[str, str] | None = None,
        **options: Unpack[RequestOptions],
    ) -> RawEnvelope:
        return await self.fetch(
            url, method="POST", body=body, headers=headers, **_without_body(options)
        )

    async def put(
        self,
        url: str,
        body: Any = UNSET,
        *,
        headers: Mapping[str, str] | None = None,
        **options: Unpack[RequestOptions],
    ) -> RawEnvelope:
        return await self.fetch(
            url, method="PUT", body=body, headers=headers, **_without_body(options)
        )

    async def patch(
        self,
        url: str,
        body: Any = UNSET,
        *,
        headers: Mapping[str, str] | None = None,
        **options: Unpack[RequestOptions],
    ) -> RawEnvelope:
        return await self.fetch(
            url, method="PATCH", body=body, headers=headers, **_without_body(options)
        )

    async def delete(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        **options: Unpack[RequestOptions],
    ) -> RawEnvelope:
        return await self.fetch(
            url, method="DELETE", headers=headers, **_without_body(options)
        )


def _without_body(options: Mapping[str, Any]) -> dict[str, Any]:
    """Drop method, unwrap and any body-carrying keys from verb-method options."""
    return {
        key: value
        for key, value in options.items()
        if key not in _BODY_KEYS and key not in ("method", "unwrap")
    }


def _passthrough(options: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the transport options httpx accepts per request.

    Credential overrides (``cookies``, ``credentials``) and unknown keys are
    discarded.
    """
    forwarded = {}
    for key, value in options.items():
        if key in _PASSTHROUGH_OPTIONS:
            forwarded[key] = value
        else:
            logger.debug("Ignoring unsupported request option %r", key)
    return forwarded


def _seed_cookies(
    cookies: httpx.Cookies | dict[str, str] | None, config: ApiConfig
) -> httpx.Cookies:
    """Build the fetcher's jar; plain name/value pairs get the API host as domain."""
    if not isinstance(cookies, dict):
        return httpx.Cookies(cookies)

    jar = httpx.Cookies()
    domain = httpx.URL(config.base_url).host
    for name, value in cookies.items():
        jar.set(name, value, domain=domain)
    return jar
