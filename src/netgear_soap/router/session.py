"""Login session against a single Netgear router."""

import logging

import httpx

from netgear_soap.config import Settings
from netgear_soap.router.const import (
    DEFAULT_PORT,
    SESSION_ID,
    SOAP_ATTACHED_DEVICES,
    SOAP_ATTACHED_DEVICES_ACTION,
    SOAP_LOGIN,
    SOAP_LOGIN_ACTION,
    SUCCESS_MARKER,
)
from netgear_soap.router.models import AttachedDevice
from netgear_soap.router.parser import parse_attached_devices
from netgear_soap.router.transport import SoapTransport

logger = logging.getLogger(__name__)


class NetgearSession:
    """Credentials and login state for one router.

    Not thread-safe: concurrent calls on the same session race on
    ``authenticated``. Use one session per router.
    """

    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        *,
        port: int = DEFAULT_PORT,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.host = host
        self.username = username
        self.password = password
        self.authenticated = False
        self._soap = SoapTransport(host, port=port, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(
        cls, cfg: Settings, transport: httpx.BaseTransport | None = None
    ) -> "NetgearSession":
        return cls(
            host=cfg.host,
            username=cfg.username,
            password=cfg.password or "",
            port=cfg.port,
            timeout=cfg.timeout,
            transport=transport,
        )

    def __repr__(self) -> str:
        return (
            f"NetgearSession(host={self.host!r}, username={self.username!r}, "
            f"authenticated={self.authenticated})"
        )

    def is_logged_in(self) -> bool:
        return self.authenticated

    def login(self) -> bool:
        """Authenticate with the router.

        Returns True when the router answers with response code 000, False
        when it rejects the credentials. A transport failure also leaves the
        session unauthenticated, and the TransportError propagates.
        """
        message = SOAP_LOGIN.format(
            session_id=SESSION_ID,
            username=self.username,
            password=self.password,
        )
        self.authenticated = False
        resp = self._soap.send(SOAP_LOGIN_ACTION, message)

        self.authenticated = SUCCESS_MARKER in resp
        if self.authenticated:
            logger.info("Logged in to %s as %s", self.host, self.username)
        else:
            logger.info("Login to %s rejected for user %s", self.host, self.username)
        return self.authenticated

    def get_attached_devices(self) -> list[AttachedDevice]:
        """Fetch the devices currently attached to the router.

        A response without the success code yields an empty list rather than
        an error. The request always carries the fixed SESSION_ID, whatever
        the login state.

        Raises:
            TransportError: the request failed.
            ParseError: the success response carried no device payload.
        """
        message = SOAP_ATTACHED_DEVICES.format(session_id=SESSION_ID)
        resp = self._soap.send(SOAP_ATTACHED_DEVICES_ACTION, message)

        if SUCCESS_MARKER not in resp:
            logger.warning("GetAttachDevice on %s returned a non-success response code", self.host)
            return []

        devices = parse_attached_devices(resp)
        logger.info("%s reports %d attached device(s)", self.host, len(devices))
        return devices


def get_attached_devices(session: NetgearSession) -> list[AttachedDevice]:
    """Module-level alias for :meth:`NetgearSession.get_attached_devices`."""
    return session.get_attached_devices()
