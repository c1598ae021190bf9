"""
Shared pytest fixtures for the iRacing client tests.

`FakeIRacingApi` stands in for members-ng behind an `httpx.MockTransport`:
`/auth` sets a session cookie, `/data/member/get/` answers with a link to a
second host, and that host serves the member payload for the requested ids.
"""

from __future__ import annotations

import json

import httpx
import pytest

from adapters.http_client import build_async_client
from adapters.iracing_client import IRacingSession
from core.config import AppSettings

BASE_URL = "https://members-ng.iracing.com/"
LINK_HOST = "scorpio-assets.example.com"

EMAIL = "Driver@Example.com"
PASSWORD = "hunter2"


def make_license(
    category: str = "road",
    irating: int | None = 1500,
    group_name: str = "Class B",
    safety_rating: float = 3.21,
) -> dict:
    data = {
        "category": category,
        "group_name": group_name,
        "safety_rating": safety_rating,
    }
    if irating is not None:
        data["irating"] = irating
    return data


def make_member(cust_id: int, display_name: str | None = None, licenses: list[dict] | None = None) -> dict:
    return {
        "cust_id": cust_id,
        "display_name": display_name or f"Driver {cust_id}",
        "licenses": [make_license()] if licenses is None else licenses,
    }


class FakeIRacingApi:
    """Routes requests the way the real API answers them."""

    def __init__(
        self,
        members: list[dict] | None = None,
        *,
        auth_status: int = 200,
        data_status: int = 200,
        link_status: int = 200,
        link_body: object | None = None,
        payload_body: object | None = None,
        raw_payload: bytes | None = None,
    ) -> None:
        self.members = {m["cust_id"]: m for m in members or []}
        self.auth_status = auth_status
        self.data_status = data_status
        self.link_status = link_status
        self.link_body = link_body
        self.payload_body = payload_body
        self.raw_payload = raw_payload
        self.requests: list[httpx.Request] = []

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def data_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/data/member/get/"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path == "/auth":
            if self.auth_status != 200:
                return httpx.Response(self.auth_status, text="<html>maintenance</html>")
            return httpx.Response(
                200,
                json={"authcode": "abc123", "email": json.loads(request.content)["email"]},
                headers={"set-cookie": "authtoken_members=session-token; Path=/"},
            )

        if request.url.path == "/data/member/get/":
            if self.data_status != 200:
                return httpx.Response(self.data_status, text="nope")
            if self.link_body is not None:
                return httpx.Response(200, json=self.link_body)
            ids = request.url.params["cust_ids"]
            return httpx.Response(
                200,
                json={"link": f"https://{LINK_HOST}/members.json?ids={ids}&sig=abc%2Fdef"},
            )

        if request.url.host == LINK_HOST:
            if self.link_status != 200:
                return httpx.Response(self.link_status, text="down")
            if self.raw_payload is not None:
                return httpx.Response(200, content=self.raw_payload)
            if self.payload_body is not None:
                return httpx.Response(200, json=self.payload_body)
            ids = [int(i) for i in request.url.params["ids"].split(",")]
            return httpx.Response(
                200,
                json={"success": True, "members": [self.members[i] for i in ids if i in self.members]},
            )

        return httpx.Response(404, text="not found")

    def client(self, settings: AppSettings) -> httpx.AsyncClient:
        return build_async_client(settings, transport=httpx.MockTransport(self.handler))


async def login(api: FakeIRacingApi, settings: AppSettings) -> IRacingSession:
    return await IRacingSession.login(EMAIL, PASSWORD, settings=settings, client=api.client(settings))


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(base_url=BASE_URL, http_timeout_seconds=5.0)


@pytest.fixture
def scenario_member() -> dict:
    return make_member(
        101,
        "A",
        [
            make_license("oval", 1350, "Class C", 2.5),
            make_license("road", 1500, "Class B", 3.21),
        ],
    )
