"""Run every analysis step over one extracted configuration."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..defaults import DEFAULT_INBOUND_ACL, DEFAULT_OUTSIDE_INTERFACE
from ..model.config import AsaConfig
from ..model.policy import NatRule
from ..model.vpn import Phase2Selector, VpnConfig
from ..util import InvalidInputError
from .correlator import ReachabilityRecord, correlate, unreachable
from .nat import classify_rules
from .resolver import ReferenceResolver
from .selectors import build_vpn_configs
from .services import ServiceResolver

log = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    config: AsaConfig
    resolver: ReferenceResolver
    services: ServiceResolver
    inbound_acl: str = DEFAULT_INBOUND_ACL
    nat_rules: List[NatRule] = field(default_factory=list)
    vpns: List[VpnConfig] = field(default_factory=list)
    reachability: List[ReachabilityRecord] = field(default_factory=list)

    @property
    def selectors(self) -> List[Phase2Selector]:
        return [s for vpn in self.vpns for s in vpn.selectors]

    @property
    def unreachable(self) -> List[NatRule]:
        return unreachable(self.nat_rules, self.reachability)


def pick_inbound_acl(config: AsaConfig, requested: Optional[str] = None,
                     outside_interface: str = DEFAULT_OUTSIDE_INTERFACE) -> str:
    """Explicit name, else the ACL applied inbound on the outside interface, else the default."""
    if requested:
        return requested
    for group in config.access_groups:
        if group.direction == "in" and group.interface.lower() == outside_interface.lower():
            log.debug(f"Using '{group.acl_name}' bound inbound on '{group.interface}'")
            return group.acl_name
    return DEFAULT_INBOUND_ACL


def run_analysis(config: AsaConfig, inbound_acl: Optional[str] = None,
                 outside_interface: str = DEFAULT_OUTSIDE_INTERFACE) -> AnalysisResult:
    if config is None:
        raise InvalidInputError("configuration is required")

    resolver = ReferenceResolver(config.network_objects, config.network_groups)
    services = ServiceResolver(config.service_objects, config.service_groups, config.icmp_groups)
    acl_name = pick_inbound_acl(config, inbound_acl, outside_interface)

    nat_rules = classify_rules(config.nat_rules)
    vpns = build_vpn_configs(config.crypto_maps, config.tunnel_groups,
                             config.access_list_entries, resolver)
    records = correlate(nat_rules, config.acl_entries(acl_name), config.network_groups, acl_name)

    log.info(
        f"Analysis: {len(nat_rules)} NAT rules, {len(vpns)} site-to-site VPNs, "
        f"{len(records)} reachability records via '{acl_name}'"
    )

    return AnalysisResult(
        config=config,
        resolver=resolver,
        services=services,
        inbound_acl=acl_name,
        nat_rules=nat_rules,
        vpns=vpns,
        reachability=records,
    )
