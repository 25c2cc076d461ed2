"""Network/service object, group, and reference data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


# --- References ------------------------------------------------------------
#
# A reference is anything that can stand in an ACL address slot or a group
# member line. Each variant knows its literal token, which is what the
# resolver hands back when it cannot do better.


@dataclass(frozen=True)
class ObjectRef:
    name: str

    @property
    def token(self) -> str:
        return f"object:{self.name}"


@dataclass(frozen=True)
class GroupRef:
    name: str

    @property
    def token(self) -> str:
        return f"group:{self.name}"


@dataclass(frozen=True)
class HostRef:
    ip: str

    @property
    def token(self) -> str:
        return f"host:{self.ip}"


@dataclass(frozen=True)
class SubnetRef:
    ip: str
    mask: str

    @property
    def token(self) -> str:
        return f"{self.ip} {self.mask}"


@dataclass(frozen=True)
class RangeRef:
    low: str
    high: str

    @property
    def token(self) -> str:
        return f"{self.low}-{self.high}"


@dataclass(frozen=True)
class AnyRef:
    keyword: str = "any"                    # any, any4, any6

    @property
    def token(self) -> str:
        return self.keyword


@dataclass(frozen=True)
class InterfaceRef:
    name: str

    @property
    def token(self) -> str:
        return f"interface:{self.name}"


@dataclass(frozen=True)
class PortRef:
    spec: str                               # "eq 443", "range 1000 2000"

    @property
    def token(self) -> str:
        return self.spec


@dataclass(frozen=True)
class LiteralRef:
    text: str

    @property
    def token(self) -> str:
        return self.text


Reference = Union[
    ObjectRef, GroupRef, HostRef, SubnetRef, RangeRef,
    AnyRef, InterfaceRef, PortRef, LiteralRef,
]


# --- Objects ---------------------------------------------------------------


class ObjectKind(Enum):
    HOST = "host"
    SUBNET = "subnet"
    RANGE = "range"
    FQDN = "fqdn"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PortTranslation:
    protocol: str
    original_port: str
    translated_port: str


@dataclass(frozen=True)
class InlineNat:
    """The 'nat (...)' line inside an 'object network' block."""
    source_zone: str
    dest_zone: str
    nat_type: str                           # "static" or "dynamic"
    translated_value: str                   # IP, object name, "interface", ...
    pat: Optional[PortTranslation] = None
    no_proxy_arp: bool = False
    route_lookup: bool = False
    line: int = 0


@dataclass(frozen=True)
class NetworkObject:
    name: str
    kind: ObjectKind = ObjectKind.UNKNOWN
    value: str = ""                         # "10.1.1.10", "10.0.0.0 255.0.0.0", "10.0.0.1 10.0.0.9"
    description: str = ""
    nat: Optional[InlineNat] = None
    line: int = 0


@dataclass(frozen=True)
class ServiceObject:
    name: str
    protocol: str = ""
    source_port: Optional[str] = None       # "eq 1024", "range 1 1023"
    dest_port: Optional[str] = None
    description: str = ""
    line: int = 0


@dataclass(frozen=True)
class NetworkGroup:
    name: str
    members: Tuple[Reference, ...] = ()
    description: str = ""
    line: int = 0


@dataclass(frozen=True)
class ServiceGroup:
    name: str
    protocol: Optional[str] = None          # header protocol: tcp, udp, tcp-udp
    members: Tuple[Reference, ...] = ()
    description: str = ""
    line: int = 0


@dataclass(frozen=True)
class IcmpGroup:
    name: str
    members: Tuple[Reference, ...] = ()
    description: str = ""
    line: int = 0
