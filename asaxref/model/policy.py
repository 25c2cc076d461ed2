"""Access-list and NAT data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .objects import Reference


@dataclass(frozen=True)
class AccessListEntry:
    acl_name: str
    action: str                             # "permit" or "deny"
    protocol: str                           # "tcp", "ip", ... or "object-group" / "object"
    source: Reference
    destination: Optional[Reference] = None
    # Protocol slot naming a service object-group or service object
    protocol_group: Optional[str] = None
    source_service: Optional[str] = None    # "eq 1024" after the source
    service_group: Optional[str] = None     # trailing "object-group NAME"
    service: Optional[str] = None           # trailing "eq https", "range 1 2", ...
    user: Optional[str] = None
    log_enabled: bool = False
    inactive: bool = False
    line: int = 0

    @property
    def is_permit(self) -> bool:
        return self.action == "permit"

    @property
    def service_descriptor(self) -> str:
        """Best single-string description of what the entry allows."""
        return self.service_group or self.service or self.protocol_group or ""


class NatStyle(Enum):
    TWICE = "TwiceNAT"
    OBJECT = "ObjectNAT"


class NatCategory(Enum):
    IDENTITY = "Identity/NoNAT"
    SOURCE = "SourceNAT"
    DEST = "DestNAT"
    TWICE = "TwiceNAT"
    OBJECT = "ObjectNAT"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class NatRule:
    style: NatStyle
    source_zone: str = "any"
    dest_zone: str = "any"
    source_type: str = "static"             # "static" or "dynamic"
    real_source: Optional[str] = None
    mapped_source: Optional[str] = None
    dest_type: Optional[str] = None
    # ASA writes 'destination static MAPPED REAL'; stored here by meaning
    real_dest: Optional[str] = None
    mapped_dest: Optional[str] = None
    object_name: Optional[str] = None       # owning object (object NAT only)
    service: Optional[str] = None
    no_proxy_arp: bool = False
    route_lookup: bool = False
    inactive: bool = False
    description: str = ""
    section: str = "manual"                 # manual, auto, after-auto
    line: int = 0
    category: NatCategory = NatCategory.UNKNOWN

    @property
    def is_static(self) -> bool:
        return self.source_type == "static"

    @property
    def label(self) -> str:
        """Human-readable identity for reports."""
        if self.object_name:
            return self.object_name
        return f"nat@{self.line}" if self.line else "nat"
