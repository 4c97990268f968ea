"""Attached device value type."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class AttachedDevice:
    """A single device reported by the router's attached-device list."""

    signal: str  # signal strength as reported, e.g. "10"
    ip: str
    name: str
    mac: str
    type: str  # "wired" / "wireless"
    link_rate: str  # Mbps as reported, e.g. "130"

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
