"""Test helpers and hypothesis strategies shared by the unit and property suites."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
from hypothesis import strategies as st

BASE_URL = "https://wallet.example.com"

OK_ENVELOPE = {
    "status": 200,
    "message": "ok",
    "success": True,
    "data": {"id": "x"},
}


# ---------------------------------------------------------------------------
# Recording transport
# ---------------------------------------------------------------------------


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_responder(payload: object, status_code: int = 200, **kwargs: object):
    """Handler replying with ``payload`` as JSON regardless of the request."""

    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload, **kwargs)

    return _handler


def sent_json(request: httpx.Request) -> object:
    """Decode the JSON body a request carried."""
    return json.loads(request.content)


# ---------------------------------------------------------------------------
# Hypothesis strategies
# ---------------------------------------------------------------------------

# JSON scalars; floats are left out since their text form may not round-trip
json_scalars = (
    st.none()
    | st.booleans()
    | st.integers(min_value=-(2**53), max_value=2**53)
    | st.text(max_size=20)
)

json_values = st.recursive(
    json_scalars,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=12,
)

json_records = st.dictionaries(st.text(min_size=1, max_size=8), json_values, max_size=4)

envelopes = st.fixed_dictionaries(
    {
        "status": st.integers(min_value=100, max_value=599),
        "message": st.text(max_size=30),
        "success": st.booleans(),
    },
    optional={"data": json_records | st.lists(json_records, max_size=3)},
)

header_names = st.from_regex(r"X-[A-Z][a-z]{2,8}", fullmatch=True)
header_values = st.from_regex(r"[a-z0-9]{1,12}", fullmatch=True)
