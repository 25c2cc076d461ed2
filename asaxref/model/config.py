"""Top-level configuration container."""

from dataclasses import dataclass, field
from typing import List

from . import network, objects, policy, vpn


@dataclass
class AsaConfig:
    """Entity tables extracted from one ASA running-config."""

    # Objects
    network_objects: List[objects.NetworkObject] = field(default_factory=list)
    service_objects: List[objects.ServiceObject] = field(default_factory=list)
    network_groups: List[objects.NetworkGroup] = field(default_factory=list)
    service_groups: List[objects.ServiceGroup] = field(default_factory=list)
    icmp_groups: List[objects.IcmpGroup] = field(default_factory=list)

    # Policy
    access_list_entries: List[policy.AccessListEntry] = field(default_factory=list)
    access_groups: List[network.AccessGroup] = field(default_factory=list)
    nat_rules: List[policy.NatRule] = field(default_factory=list)

    # VPN
    crypto_maps: List[vpn.CryptoMapEntry] = field(default_factory=list)
    tunnel_groups: List[vpn.TunnelGroup] = field(default_factory=list)
    ike_policies: List[vpn.IkePolicy] = field(default_factory=list)
    transform_sets: List[vpn.TransformSet] = field(default_factory=list)

    # Metadata
    hostname: str = ""

    def acl_entries(self, acl_name: str) -> List[policy.AccessListEntry]:
        """Entries of one access-list in source order."""
        return [e for e in self.access_list_entries if e.acl_name == acl_name]

    def acl_names(self) -> List[str]:
        return list(dict.fromkeys(e.acl_name for e in self.access_list_entries))
