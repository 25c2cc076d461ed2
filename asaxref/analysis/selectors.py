"""Build Phase-2 traffic selectors for each site-to-site VPN peer."""

import logging
from typing import Iterable, List, Optional, Tuple

from ..model.objects import Reference
from ..model.policy import AccessListEntry
from ..model.vpn import CryptoMapEntry, Phase2Selector, TunnelGroup, VpnConfig
from ..util import InvalidInputError
from .resolver import ReferenceResolver

log = logging.getLogger(__name__)


def join_site_to_site(crypto_maps: Iterable[CryptoMapEntry],
                      tunnel_groups: Iterable[TunnelGroup]) -> List[Tuple[CryptoMapEntry, TunnelGroup]]:
    """Pair each crypto map entry with its site-to-site tunnel group by peer IP."""
    if crypto_maps is None or tunnel_groups is None:
        raise InvalidInputError("crypto map and tunnel group tables are required")

    by_peer = {tg.peer_ip: tg for tg in tunnel_groups}
    pairs = []
    for cm in crypto_maps:
        if not cm.peer:
            log.debug(f"Crypto map {cm.map_name} {cm.sequence}: no peer, skipping")
            continue
        tg = by_peer.get(cm.peer)
        if tg is None:
            log.debug(f"Crypto map {cm.map_name} {cm.sequence}: no tunnel-group for peer {cm.peer}")
            continue
        if not tg.is_site_to_site:
            log.debug(f"Tunnel-group {tg.peer_ip} is type '{tg.type}', not site-to-site")
            continue
        pairs.append((cm, tg))
    return pairs


def _resolve_side(resolver: ReferenceResolver, ref: Optional[Reference]) -> Tuple[str, Tuple[str, ...]]:
    if ref is None:
        return "", ()
    values = resolver.resolve(ref)
    # Keep the gap visible rather than dropping the row
    return ref.token, tuple(values or [ref.token])


def build_selectors(crypto_map: CryptoMapEntry, peer: str,
                    acl_entries: Iterable[AccessListEntry],
                    resolver: ReferenceResolver) -> List[Phase2Selector]:
    """One selector per permit entry of the crypto map's match-address ACL."""
    if not crypto_map.acl_name:
        return []

    selectors = []
    for entry in acl_entries:
        if entry.acl_name != crypto_map.acl_name or not entry.is_permit:
            continue
        local_ref, local_nets = _resolve_side(resolver, entry.source)
        remote_ref, remote_nets = _resolve_side(resolver, entry.destination)
        selectors.append(Phase2Selector(
            peer=peer,
            map_name=crypto_map.map_name,
            sequence=crypto_map.sequence,
            acl_name=crypto_map.acl_name,
            protocol=entry.protocol,
            local_ref=local_ref,
            remote_ref=remote_ref,
            local_nets=local_nets,
            remote_nets=remote_nets,
            inactive=entry.inactive,
            line=entry.line,
        ))
    return selectors


def build_vpn_configs(crypto_maps: Iterable[CryptoMapEntry],
                      tunnel_groups: Iterable[TunnelGroup],
                      acl_entries: Iterable[AccessListEntry],
                      resolver: ReferenceResolver) -> List[VpnConfig]:
    """Join crypto maps to site-to-site tunnel groups and attach their selectors."""
    if acl_entries is None or resolver is None:
        raise InvalidInputError("access-list table and resolver are required")
    acl_entries = list(acl_entries)

    vpns = []
    for cm, tg in join_site_to_site(crypto_maps, tunnel_groups):
        if not cm.acl_name:
            log.debug(f"Crypto map {cm.map_name} {cm.sequence} (peer {tg.peer_ip}) has no match address")
        selectors = build_selectors(cm, tg.peer_ip, acl_entries, resolver)
        vpns.append(VpnConfig(crypto_map=cm, tunnel_group=tg, selectors=tuple(selectors)))

    log.debug(f"Built {len(vpns)} site-to-site VPNs")
    return vpns
