"""Single-shot HTTP transport for the router's SOAP endpoint.

Every call opens its own ``httpx.Client``; nothing (connections, cookies)
is carried over between requests. The only session state the router sees
is what is embedded in the XML payload.
"""

import logging

import httpx

from netgear_soap.router.const import DEFAULT_PORT, SOAP_PATH
from netgear_soap.router.errors import TransportError

logger = logging.getLogger(__name__)


class SoapTransport:
    """POSTs SOAP envelopes to ``http://<host>:<port>/soap/server_sa/``."""

    def __init__(
        self,
        host: str,
        *,
        port: int = DEFAULT_PORT,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.host = host
        self.port = port
        # None disables httpx's default timeout entirely
        self.timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        host = self.host
        # IPv6 literals need brackets in a URL
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"http://{host}:{self.port}{SOAP_PATH}"

    def send(self, action: str, body: str) -> str:
        """Send one SOAP request and return the raw response body.

        Non-2xx responses are returned as-is; callers decide success from
        the response code embedded in the body.

        Raises:
            TransportError: the URL is invalid, the host name cannot be encoded,
                the connection failed, or the response body could not be read.
        """
        logger.debug("POST %s SOAPAction=%s", self.url, action)
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                resp = client.post(
                    self.url,
                    content=body.encode("utf-8"),
                    headers={
                        "SOAPAction": action,
                        "Content-Type": "text/xml; charset=utf-8",
                    },
                )
                text = resp.text
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            logger.warning("SOAP request to %s failed: %s", self.host, exc)
            raise TransportError(f"{action} request to {self.url} failed: {exc}") from exc

        logger.debug("Received %d bytes (HTTP %d) from %s", len(text), resp.status_code, self.host)
        return text
