"""Exceptions raised by the Netgear SOAP client."""


class NetgearError(Exception):
    """Base class for all client errors."""


class TransportError(NetgearError):
    """The request could not be built, sent, or its body read."""


class ParseError(NetgearError):
    """The router answered with success but the device payload is missing."""
