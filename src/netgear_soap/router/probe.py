"""One-shot connectivity check for a Netgear router.

Used to validate host and credentials before committing them to
configuration.
"""

import logging
from dataclasses import dataclass

from netgear_soap.router.const import DEFAULT_PORT
from netgear_soap.router.errors import NetgearError
from netgear_soap.router.session import NetgearSession

logger = logging.getLogger(__name__)


@dataclass
class ConnectionResult:
    """Result of a connection test attempt."""

    success: bool
    message: str
    device_count: int | None = None


def probe_router(
    host: str,
    username: str,
    password: str,
    *,
    port: int = DEFAULT_PORT,
    timeout: float | None = 10.0,
    session: NetgearSession | None = None,
) -> ConnectionResult:
    """Log in to a router and count its attached devices.

    Args:
        host: Router hostname or IP (e.g., "192.168.1.1")
        username: Admin username
        password: Admin password
        session: Pre-built session to use instead of constructing one

    Returns:
        ConnectionResult with success status, message, and device count.
    """
    if session is None:
        session = NetgearSession(host, username, password, port=port, timeout=timeout)
    try:
        if not session.login():
            logger.warning("Netgear connection test: login rejected by %s", host)
            return ConnectionResult(success=False, message="Authentication failed")
        devices = session.get_attached_devices()
    except NetgearError as e:
        logger.warning("Netgear connection test failed: %s", e)
        return ConnectionResult(success=False, message=str(e))

    count = len(devices)
    logger.info("Netgear connection test successful: %d attached devices", count)
    return ConnectionResult(
        success=True,
        message=f"Connected, {count} attached devices",
        device_count=count,
    )
