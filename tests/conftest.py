"""Shared test fixtures: a fake router behind httpx.MockTransport."""

from collections.abc import Callable

import httpx
import pytest

from netgear_soap.router.session import NetgearSession


def soap_response(body: str = "", code: str = "000") -> str:
    """Wrap a SOAP body fragment the way the router firmware does."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<soap-env:Envelope xmlns:soap-env="http://schemas.xmlsoap.org/soap/envelope/" '
        'soap-env:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">\n'
        "<soap-env:Body>\n"
        f"{body}\n"
        f"<ResponseCode>{code}</ResponseCode>\n"
        "</soap-env:Body>\n"
        "</soap-env:Envelope>\n"
    )


def attach_device_response(payload: str, code: str = "000") -> str:
    return soap_response(
        '<m:GetAttachDeviceResponse xmlns:m="urn:NETGEAR-ROUTER:service:DeviceInfo:1">\n'
        f"<NewAttachDevice>{payload}</NewAttachDevice>\n"
        "</m:GetAttachDeviceResponse>",
        code=code,
    )


LOGIN_OK = soap_response(
    '<m:AuthenticateResponse xmlns:m="urn:NETGEAR-ROUTER:service:ParentalControl:1">'
    "</m:AuthenticateResponse>"
)
LOGIN_REJECTED = soap_response(code="401")


class FakeRouter:
    """Replays queued responses and records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: list[httpx.Response | Exception] = []

    def reply(self, text: str, status_code: int = 200) -> None:
        self._replies.append(httpx.Response(status_code, text=text))

    def fail(self, exc: Exception) -> None:
        self._replies.append(exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._replies:
            raise httpx.ConnectError("no reply queued", request=request)
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def router() -> FakeRouter:
    return FakeRouter()


@pytest.fixture
def make_session(router: FakeRouter) -> Callable[..., NetgearSession]:
    def _make(**kwargs: object) -> NetgearSession:
        params: dict[str, object] = {
            "host": "192.168.1.1",
            "username": "admin",
            "password": "secret",
            "transport": router.transport,
        }
        params.update(kwargs)
        return NetgearSession(**params)  # type: ignore[arg-type]

    return _make
