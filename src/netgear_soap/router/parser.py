"""Decoder for the flattened ``<NewAttachDevice>`` device list.

The router packs every attached device into one ``;``-separated string::

    <NewAttachDevice>10;192.168.1.2;Laptop;AA:BB:CC:DD:EE:FF;wireless;130;</NewAttachDevice>

Fields come in fixed groups of six (signal, ip, name, mac, type, link
rate). The payload ends with a trailing delimiter, so a list of ``k``
devices splits into ``6 * k + 1`` fields. Any incomplete trailing group
is dropped.
"""

import logging
import re

from netgear_soap.router.const import DEVICE_FIELD_COUNT
from netgear_soap.router.errors import ParseError
from netgear_soap.router.models import AttachedDevice

logger = logging.getLogger(__name__)

_ATTACH_DEVICE_RE = re.compile(r"<NewAttachDevice>(.*)</NewAttachDevice>")


def extract_attach_device(text: str) -> str:
    """Return the raw text inside ``<NewAttachDevice>``.

    Raises:
        ParseError: the element is not present in ``text``.
    """
    m = _ATTACH_DEVICE_RE.search(text)
    if not m:
        raise ParseError("Response has no <NewAttachDevice> payload")
    return m.group(1)


def split_fields(payload: str) -> list[str]:
    return payload.split(";")


def chunk_records(fields: list[str]) -> list[list[str]]:
    """Group fields into complete six-field records.

    The record count is ``(len(fields) - 1) // 6``: the last field is the
    empty string after the trailing ``;``, and a partial final group is
    discarded rather than reported.
    """
    count = max(len(fields) - 1, 0) // DEVICE_FIELD_COUNT
    if len(fields) - 1 > count * DEVICE_FIELD_COUNT:
        logger.debug(
            "Dropping %d trailing field(s) that do not form a complete device",
            len(fields) - 1 - count * DEVICE_FIELD_COUNT,
        )
    return [
        fields[i * DEVICE_FIELD_COUNT : (i + 1) * DEVICE_FIELD_COUNT]
        for i in range(count)
    ]


def parse_attached_devices(text: str) -> list[AttachedDevice]:
    """Decode a successful GetAttachDevice response into devices, in order."""
    fields = split_fields(extract_attach_device(text))
    return [
        AttachedDevice(
            signal=signal,
            ip=ip,
            name=name,
            mac=mac,
            type=link_type,
            link_rate=link_rate,
        )
        for signal, ip, name, mac, link_type, link_rate in chunk_records(fields)
    ]
