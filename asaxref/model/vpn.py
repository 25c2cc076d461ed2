"""VPN data models: crypto maps, tunnel groups, and derived Phase-2 views."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..defaults import IKE_UNKNOWN, SITE_TO_SITE_TYPE
from ..util import unique


@dataclass(frozen=True)
class CryptoMapEntry:
    """One 'crypto map NAME SEQ ...' sequence, merged across its lines."""
    map_name: str
    sequence: int
    peer: Optional[str] = None
    acl_name: Optional[str] = None          # 'match address'
    transform_set: Optional[str] = None     # ikev1 transform-set or ikev2 ipsec-proposal
    pfs_group: Optional[str] = None
    sa_lifetime_seconds: Optional[int] = None
    sa_lifetime_kb: Optional[int] = None
    nat_t_disabled: bool = False
    interface: Optional[str] = None
    ike_version: str = IKE_UNKNOWN          # hint from the transform-set line


@dataclass(frozen=True)
class TunnelGroup:
    peer_ip: str
    type: str = ""
    ike_version: str = IKE_UNKNOWN
    has_preshared_key: bool = False

    @property
    def is_site_to_site(self) -> bool:
        return self.type == SITE_TO_SITE_TYPE


@dataclass(frozen=True)
class IkePolicy:
    """'crypto ikev1|ikev2 policy N' block, carried opaquely."""
    ike_version: str
    priority: int
    attributes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TransformSet:
    """ikev1 transform-set or ikev2 ipsec-proposal, carried opaquely."""
    name: str
    ike_version: str
    transforms: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Phase2Selector:
    peer: str
    map_name: str
    sequence: int
    acl_name: str
    protocol: str
    local_ref: str                          # literal token of the ACL source
    remote_ref: str                         # literal token of the ACL destination
    local_nets: Tuple[str, ...] = ()
    remote_nets: Tuple[str, ...] = ()
    inactive: bool = False
    line: int = 0


@dataclass(frozen=True)
class VpnConfig:
    crypto_map: CryptoMapEntry
    tunnel_group: TunnelGroup
    selectors: Tuple[Phase2Selector, ...] = ()

    @property
    def peer(self) -> str:
        return self.tunnel_group.peer_ip

    @property
    def ike_version(self) -> str:
        if self.tunnel_group.ike_version != IKE_UNKNOWN:
            return self.tunnel_group.ike_version
        return self.crypto_map.ike_version

    @property
    def local_subnets(self) -> Tuple[str, ...]:
        return tuple(unique(n for s in self.selectors for n in s.local_nets))

    @property
    def remote_subnets(self) -> Tuple[str, ...]:
        return tuple(unique(n for s in self.selectors for n in s.remote_nets))
