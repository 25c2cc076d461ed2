"""Block-specific extractors that read the parsed tree and produce model objects."""

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Set, Tuple

from ..defaults import (
    ACL_ACTIONS, ACL_TRAILING_FLAGS, ANY_KEYWORDS, IKE_UNKNOWN, IKEV1, IKEV2,
    NAT_DYNAMIC, NAT_STATIC, PORT_OPERATORS,
)
from ..model.config import AsaConfig
from ..model.network import AccessGroup
from ..model.objects import (
    AnyRef, GroupRef, HostRef, IcmpGroup, InlineNat, InterfaceRef, LiteralRef,
    NetworkGroup, NetworkObject, ObjectKind, ObjectRef, PortRef, PortTranslation,
    RangeRef, Reference, ServiceGroup, ServiceObject, SubnetRef,
)
from ..model.policy import AccessListEntry, NatRule, NatStyle
from ..model.vpn import CryptoMapEntry, IkePolicy, TransformSet, TunnelGroup
from ..util import is_ipv4
from .tree import Node, get_blocks

log = logging.getLogger(__name__)


# --- Shared helpers --------------------------------------------------------


def _parse_zones(token: str) -> Tuple[str, str]:
    """'(inside,outside)' -> ('inside', 'outside')."""
    inner = token.strip("()")
    parts = [p.strip() for p in inner.split(",")]
    if len(parts) == 2:
        return parts[0] or "any", parts[1] or "any"
    return "any", "any"


def _take_port_clause(words: List[str], i: int) -> Tuple[Optional[str], int]:
    """Consume 'eq P', 'lt P', 'range A B', ... starting at words[i]."""
    if i >= len(words) or words[i].lower() not in PORT_OPERATORS:
        return None, i
    op = words[i].lower()
    width = 3 if op == "range" else 2
    if i + width > len(words):
        return None, i
    return " ".join([op] + words[i + 1:i + width]), i + width


def _take_address(words: List[str], i: int) -> Tuple[Optional[Reference], int]:
    """Consume one ACL address selector starting at words[i]."""
    if i >= len(words):
        return None, i
    kw = words[i].lower()

    if kw in ANY_KEYWORDS:
        return AnyRef(kw), i + 1
    if i + 1 >= len(words):
        return None, i

    if kw == "host":
        return HostRef(words[i + 1]), i + 2
    if kw == "object":
        return ObjectRef(words[i + 1]), i + 2
    if kw == "object-group":
        return GroupRef(words[i + 1]), i + 2
    if kw == "interface":
        return InterfaceRef(words[i + 1]), i + 2
    if is_ipv4(words[i]) and is_ipv4(words[i + 1]):
        return SubnetRef(words[i], words[i + 1]), i + 2
    return None, i


# --- Objects ---------------------------------------------------------------


def _parse_inline_nat(node: Node) -> Optional[InlineNat]:
    """'nat (inside,outside) static 81.144.153.67 [service tcp 443 8443] ...'."""
    words = node.words
    if len(words) < 4:
        log.warning(f"Line {node.line_num}: incomplete object NAT line, skipping")
        return None

    src_zone, dst_zone = _parse_zones(words[1])
    nat_type = words[2].lower()
    if nat_type not in (NAT_STATIC, NAT_DYNAMIC):
        log.warning(f"Line {node.line_num}: unknown NAT type '{words[2]}', skipping")
        return None

    i = 3
    if words[i].lower() == "pat-pool" and i + 1 < len(words):
        translated = f"pat-pool {words[i + 1]}"
        i += 2
    else:
        translated = words[i]
        i += 1

    pat = None
    no_proxy_arp = False
    route_lookup = False
    while i < len(words):
        kw = words[i].lower()
        if kw == "service" and i + 3 < len(words):
            pat = PortTranslation(
                protocol=words[i + 1].lower(),
                original_port=words[i + 2],
                translated_port=words[i + 3],
            )
            i += 4
            continue
        if kw == "no-proxy-arp":
            no_proxy_arp = True
        elif kw == "route-lookup":
            route_lookup = True
        i += 1

    return InlineNat(
        source_zone=src_zone,
        dest_zone=dst_zone,
        nat_type=nat_type,
        translated_value=translated,
        pat=pat,
        no_proxy_arp=no_proxy_arp,
        route_lookup=route_lookup,
        line=node.line_num,
    )


def extract_network_objects(tree: List[Node]) -> List[NetworkObject]:
    """Extract 'object network' blocks.

    A running-config usually shows each object twice: once with its address
    and again in the NAT section with its 'nat' line. Blocks are merged field
    by field in source order, so a later block only overrides the fields it
    actually sets.
    """
    merged: Dict[str, NetworkObject] = {}

    for node in get_blocks(tree, "object", "network"):
        if len(node.words) < 3:
            log.warning(f"Line {node.line_num}: 'object network' without a name, skipping")
            continue
        name = node.words[2]
        obj = merged.get(name) or NetworkObject(name=name, line=node.line_num)

        for child in node.children:
            kw = child.token.keyword
            words = child.words

            if kw == "host" and len(words) >= 2:
                obj = replace(obj, kind=ObjectKind.HOST, value=words[1])
            elif kw == "subnet" and len(words) >= 3:
                obj = replace(obj, kind=ObjectKind.SUBNET, value=f"{words[1]} {words[2]}")
            elif kw == "range" and len(words) >= 3:
                obj = replace(obj, kind=ObjectKind.RANGE, value=f"{words[1]} {words[2]}")
            elif kw == "fqdn" and len(words) >= 2:
                # 'fqdn [v4|v6] NAME'
                obj = replace(obj, kind=ObjectKind.FQDN, value=words[-1])
            elif kw == "description":
                obj = replace(obj, description=child.token.rest(1))
            elif kw == "nat":
                nat = _parse_inline_nat(child)
                if nat is not None:
                    obj = replace(obj, nat=nat)

        merged[name] = obj

    return list(merged.values())


def extract_service_objects(tree: List[Node]) -> List[ServiceObject]:
    """Extract 'object service' blocks.

    'service tcp source eq 1024 destination eq https'
    'service tcp destination range 8000 8100'
    'service icmp echo'
    """
    merged: Dict[str, ServiceObject] = {}

    for node in get_blocks(tree, "object", "service"):
        if len(node.words) < 3:
            log.warning(f"Line {node.line_num}: 'object service' without a name, skipping")
            continue
        name = node.words[2]
        svc = merged.get(name) or ServiceObject(name=name, line=node.line_num)

        for child in node.children:
            kw = child.token.keyword
            words = child.words

            if kw == "service" and len(words) >= 2:
                src_port = None
                dst_port = None
                i = 2
                while i < len(words):
                    sub = words[i].lower()
                    if sub == "source":
                        src_port, i = _take_port_clause(words, i + 1)
                        if src_port is None:
                            i += 1
                    elif sub == "destination":
                        dst_port, i = _take_port_clause(words, i + 1)
                        if dst_port is None:
                            i += 1
                    elif sub in PORT_OPERATORS:
                        dst_port, i = _take_port_clause(words, i)
                        if dst_port is None:
                            i += 1
                    else:
                        # icmp type or other protocol detail
                        dst_port = " ".join(words[i:])
                        break
                svc = replace(
                    svc,
                    protocol=words[1].lower(),
                    source_port=src_port,
                    dest_port=dst_port,
                )
            elif kw == "description":
                svc = replace(svc, description=child.token.rest(1))

        merged[name] = svc

    return list(merged.values())


def _parse_network_member(child: Node) -> Optional[Reference]:
    words = child.words
    kw = child.token.keyword

    if kw == "group-object" and len(words) >= 2:
        return GroupRef(words[1])
    if kw != "network-object" or len(words) < 2:
        return None

    sub = words[1].lower()
    if sub == "host" and len(words) >= 3:
        return HostRef(words[2])
    if sub == "object" and len(words) >= 3:
        return ObjectRef(words[2])
    if sub == "range" and len(words) >= 4:
        return RangeRef(words[2], words[3])
    if len(words) >= 3 and is_ipv4(words[1]) and is_ipv4(words[2]):
        return SubnetRef(words[1], words[2])
    return LiteralRef(child.token.rest(1))


def extract_network_groups(tree: List[Node]) -> List[NetworkGroup]:
    """Extract 'object-group network' blocks."""
    results = []
    for node in get_blocks(tree, "object-group", "network"):
        if len(node.words) < 3:
            log.warning(f"Line {node.line_num}: 'object-group network' without a name, skipping")
            continue
        members = []
        description = ""
        for child in node.children:
            if child.token.keyword == "description":
                description = child.token.rest(1)
                continue
            member = _parse_network_member(child)
            if member is not None:
                members.append(member)

        results.append(NetworkGroup(
            name=node.words[2],
            members=tuple(members),
            description=description,
            line=node.line_num,
        ))
    return results


def extract_service_groups(tree: List[Node]) -> List[ServiceGroup]:
    """Extract 'object-group service NAME [tcp|udp|tcp-udp]' blocks."""
    results = []
    for node in get_blocks(tree, "object-group", "service"):
        if len(node.words) < 3:
            log.warning(f"Line {node.line_num}: 'object-group service' without a name, skipping")
            continue
        protocol = node.words[3].lower() if len(node.words) >= 4 else None
        members: List[Reference] = []
        description = ""

        for child in node.children:
            kw = child.token.keyword
            words = child.words
            if kw == "description":
                description = child.token.rest(1)
            elif kw == "group-object" and len(words) >= 2:
                members.append(GroupRef(words[1]))
            elif kw == "port-object" and len(words) >= 2:
                members.append(PortRef(child.token.rest(1)))
            elif kw == "service-object" and len(words) >= 2:
                if words[1].lower() == "object" and len(words) >= 3:
                    members.append(ObjectRef(words[2]))
                else:
                    members.append(LiteralRef(child.token.rest(1)))

        results.append(ServiceGroup(
            name=node.words[2],
            protocol=protocol,
            members=tuple(members),
            description=description,
            line=node.line_num,
        ))
    return results


def extract_icmp_groups(tree: List[Node]) -> List[IcmpGroup]:
    """Extract 'object-group icmp-type' blocks."""
    results = []
    for node in get_blocks(tree, "object-group", "icmp-type"):
        if len(node.words) < 3:
            continue
        members: List[Reference] = []
        description = ""
        for child in node.children:
            kw = child.token.keyword
            if kw == "description":
                description = child.token.rest(1)
            elif kw == "icmp-object" and len(child.words) >= 2:
                members.append(LiteralRef(child.words[1]))
            elif kw == "group-object" and len(child.words) >= 2:
                members.append(GroupRef(child.words[1]))
        results.append(IcmpGroup(
            name=node.words[2],
            members=tuple(members),
            description=description,
            line=node.line_num,
        ))
    return results


# --- Access lists ----------------------------------------------------------


def _is_source_port_group(words: List[str], i: int,
                          service_groups: Optional[Set[str]]) -> bool:
    """True if 'object-group NAME' at words[i] is a source-port group.

    Both a destination network group and a source-port service group may
    follow the source. With the service group names known, the name decides.
    Without them, it counts as a source-port group when a non-group address
    selector comes after it.
    """
    if i + 2 >= len(words) or words[i].lower() != "object-group":
        return False
    if service_groups is not None:
        if words[i + 1].lower() not in service_groups:
            return False
        following, _ = _take_address(words, i + 2)
        return following is not None
    following, _ = _take_address(words, i + 2)
    return following is not None and not isinstance(following, GroupRef)


def parse_access_list_entry(node: Node,
                            service_groups: Optional[Set[str]] = None) -> Optional[AccessListEntry]:
    """Parse one 'access-list' line. Returns None for remarks and bad lines.

    service_groups holds the lowercase names of 'object-group service' blocks;
    it tells a source-port group apart from a destination group.
    """
    words = node.words
    if len(words) < 3:
        return None

    acl_name = words[1]
    kind = words[2].lower()
    if kind in ("remark", "webtype", "ethertype"):
        return None

    if kind in ("extended", "standard"):
        i = 3
    elif kind in ACL_ACTIONS:
        # pre-8.3 syntax without 'extended'
        kind = "extended"
        i = 2
    else:
        log.warning(f"Line {node.line_num}: unrecognised access-list type '{words[2]}', skipping")
        return None

    if i >= len(words) or words[i].lower() not in ACL_ACTIONS:
        log.warning(f"Line {node.line_num}: access-list '{acl_name}' entry has no action, skipping")
        return None
    action = words[i].lower()
    i += 1

    protocol = "ip"
    protocol_group = None
    if kind == "extended":
        if i >= len(words):
            log.warning(f"Line {node.line_num}: access-list '{acl_name}' entry has no protocol, skipping")
            return None
        proto_kw = words[i].lower()
        if proto_kw in ("object-group", "object") and i + 1 < len(words):
            protocol = proto_kw
            protocol_group = words[i + 1]
            i += 2
        else:
            protocol = proto_kw
            i += 1

    user = None
    if i + 1 < len(words) and words[i].lower() in ("user", "user-group", "object-group-user"):
        user = words[i + 1]
        i += 2

    source, i = _take_address(words, i)
    if source is None:
        log.warning(f"Line {node.line_num}: access-list '{acl_name}' entry has no source, skipping")
        return None

    source_service, i = _take_port_clause(words, i)
    if source_service is None and _is_source_port_group(words, i, service_groups):
        source_service = f"object-group {words[i + 1]}"
        i += 2
    destination, i = _take_address(words, i)

    service_group = None
    service = None
    if destination is None:
        # Whatever follows the source describes the service
        tail = [w for w in words[i:] if w.lower() not in ACL_TRAILING_FLAGS]
        service = " ".join(tail) or None
    elif i < len(words):
        kw = words[i].lower()
        if kw == "object-group" and i + 1 < len(words):
            service_group = words[i + 1]
            i += 2
        elif kw in PORT_OPERATORS:
            service, i = _take_port_clause(words, i)
            if service is None:
                service = " ".join(words[i:])
        elif kw not in ACL_TRAILING_FLAGS:
            # icmp type, e.g. 'echo-reply'
            service = words[i]
            i += 1

    lowered = [w.lower() for w in words[i:]]
    return AccessListEntry(
        acl_name=acl_name,
        action=action,
        protocol=protocol,
        source=source,
        destination=destination,
        protocol_group=protocol_group,
        source_service=source_service,
        service_group=service_group,
        service=service,
        user=user,
        log_enabled="log" in lowered,
        inactive="inactive" in lowered,
        line=node.line_num,
    )


def extract_access_lists(tree: List[Node]) -> List[AccessListEntry]:
    """Extract every 'access-list' entry in source order."""
    service_groups = {
        n.words[2].lower() for n in get_blocks(tree, "object-group", "service")
        if len(n.words) >= 3
    }
    results = []
    for node in get_blocks(tree, "access-list"):
        entry = parse_access_list_entry(node, service_groups)
        if entry is not None:
            results.append(entry)
    return results


def extract_access_groups(tree: List[Node]) -> List[AccessGroup]:
    """Extract 'access-group ACL in|out interface IF' and 'access-group ACL global'."""
    results = []
    for node in get_blocks(tree, "access-group"):
        words = node.words
        if len(words) >= 5 and words[3].lower() == "interface":
            results.append(AccessGroup(
                acl_name=words[1],
                direction=words[2].lower(),
                interface=words[4],
                line=node.line_num,
            ))
        elif len(words) >= 3 and words[2].lower() == "global":
            results.append(AccessGroup(acl_name=words[1], direction="global", line=node.line_num))
    return results


# --- NAT -------------------------------------------------------------------


def parse_twice_nat(node: Node) -> Optional[NatRule]:
    """Parse a top-level manual ('twice') NAT statement.

    nat (inside,outside) [after-auto] [LINE] source static|dynamic REAL MAPPED
        [destination static MAPPED_DST REAL_DST] [service REAL_SVC MAPPED_SVC]
        [no-proxy-arp] [route-lookup] [inactive] [description TEXT]
    """
    words = node.words
    if len(words) < 2 or not words[1].startswith("("):
        # legacy 'nat (inside) 1 ...' has no source keyword; not handled
        log.debug(f"Line {node.line_num}: unsupported NAT syntax, skipping")
        return None

    src_zone, dst_zone = _parse_zones(words[1])
    i = 2
    section = "manual"
    if i < len(words) and words[i].lower() == "after-auto":
        section = "after-auto"
        i += 1
    if i < len(words) and words[i].isdigit():
        i += 1

    if i + 3 > len(words):
        log.warning(f"Line {node.line_num}: incomplete NAT statement, skipping")
        return None
    if words[i].lower() != "source":
        log.debug(f"Line {node.line_num}: NAT statement without 'source', skipping")
        return None

    source_type = words[i + 1].lower()
    real_source = words[i + 2]
    i += 3
    if i < len(words) and words[i].lower() == "pat-pool" and i + 1 < len(words):
        mapped_source = f"pat-pool {words[i + 1]}"
        i += 2
    elif i < len(words):
        mapped_source = words[i]
        i += 1
    else:
        log.warning(f"Line {node.line_num}: NAT statement has no mapped source, skipping")
        return None

    rule = NatRule(
        style=NatStyle.TWICE,
        source_zone=src_zone,
        dest_zone=dst_zone,
        source_type=source_type,
        real_source=real_source,
        mapped_source=mapped_source,
        section=section,
        line=node.line_num,
    )

    while i < len(words):
        kw = words[i].lower()
        if kw == "destination" and i + 3 < len(words):
            rule = replace(
                rule,
                dest_type=words[i + 1].lower(),
                mapped_dest=words[i + 2],
                real_dest=words[i + 3],
            )
            i += 4
        elif kw == "service" and i + 2 < len(words):
            rule = replace(rule, service=f"{words[i + 1]} {words[i + 2]}")
            i += 3
        elif kw == "description":
            rule = replace(rule, description=node.token.rest(i + 1))
            break
        else:
            if kw == "no-proxy-arp":
                rule = replace(rule, no_proxy_arp=True)
            elif kw == "route-lookup":
                rule = replace(rule, route_lookup=True)
            elif kw == "inactive":
                rule = replace(rule, inactive=True)
            i += 1

    return rule


def object_nat_rules(objects: List[NetworkObject]) -> List[NatRule]:
    """Turn inline object NAT into NatRule records (single source pair)."""
    results = []
    for obj in objects:
        nat = obj.nat
        if nat is None:
            continue
        service = None
        if nat.pat is not None:
            service = f"{nat.pat.protocol} {nat.pat.original_port} {nat.pat.translated_port}"
        results.append(NatRule(
            style=NatStyle.OBJECT,
            source_zone=nat.source_zone,
            dest_zone=nat.dest_zone,
            source_type=nat.nat_type,
            real_source=obj.value or obj.name,
            mapped_source=nat.translated_value,
            object_name=obj.name,
            service=service,
            no_proxy_arp=nat.no_proxy_arp,
            route_lookup=nat.route_lookup,
            section="auto",
            line=nat.line,
        ))
    return results


def extract_nat_rules(tree: List[Node], objects: List[NetworkObject]) -> List[NatRule]:
    """Return NAT rules in ASA evaluation order: manual, object (auto), after-auto."""
    twice = []
    for node in get_blocks(tree, "nat"):
        rule = parse_twice_nat(node)
        if rule is not None:
            twice.append(rule)

    manual = [r for r in twice if r.section == "manual"]
    after_auto = [r for r in twice if r.section == "after-auto"]
    return manual + object_nat_rules(objects) + after_auto


# --- VPN -------------------------------------------------------------------


def _to_int(value: str) -> Optional[int]:
    try:
        return int(value)
    except ValueError:
        return None


def extract_crypto_maps(tree: List[Node]) -> List[CryptoMapEntry]:
    """Merge 'crypto map NAME SEQ ...' lines into one entry per (map, sequence)."""
    entries: Dict[Tuple[str, int], CryptoMapEntry] = {}
    bindings: Dict[str, str] = {}

    for node in get_blocks(tree, "crypto", "map"):
        words = node.words
        if len(words) < 5:
            continue
        map_name = words[2]

        if words[3].lower() == "interface":
            bindings[map_name] = words[4]
            continue

        seq = _to_int(words[3])
        if seq is None:
            continue
        key = (map_name, seq)
        entry = entries.get(key) or CryptoMapEntry(map_name=map_name, sequence=seq)
        lowered = [w.lower() for w in words]

        if lowered[4:6] == ["match", "address"] and len(words) >= 7:
            entry = replace(entry, acl_name=words[6])
        elif lowered[4:6] == ["set", "peer"] and len(words) >= 7:
            entry = replace(entry, peer=words[6])
        elif lowered[4:7] == ["set", "ikev1", "transform-set"] and len(words) >= 8:
            entry = replace(entry, transform_set=words[7], ike_version=IKEV1)
        elif lowered[4:7] == ["set", "ikev2", "ipsec-proposal"] and len(words) >= 8:
            entry = replace(entry, transform_set=words[7], ike_version=IKEV2)
        elif lowered[4:6] == ["set", "transform-set"] and len(words) >= 7:
            entry = replace(entry, transform_set=words[6], ike_version=IKEV1)
        elif lowered[4:6] == ["set", "pfs"]:
            entry = replace(entry, pfs_group=words[6] if len(words) >= 7 else "group2")
        elif lowered[4:8] == ["set", "security-association", "lifetime", "seconds"] and len(words) >= 9:
            entry = replace(entry, sa_lifetime_seconds=_to_int(words[8]))
        elif lowered[4:8] == ["set", "security-association", "lifetime", "kilobytes"] and len(words) >= 9:
            entry = replace(entry, sa_lifetime_kb=_to_int(words[8]))
        elif lowered[4:6] == ["set", "nat-t-disable"]:
            entry = replace(entry, nat_t_disabled=True)

        entries[key] = entry

    return [
        replace(e, interface=bindings.get(e.map_name, e.interface))
        for e in entries.values()
    ]


def extract_tunnel_groups(tree: List[Node]) -> List[TunnelGroup]:
    """Merge 'tunnel-group PEER type ...' and its ipsec-attributes block."""
    groups: Dict[str, TunnelGroup] = {}

    for node in get_blocks(tree, "tunnel-group"):
        words = node.words
        if len(words) < 3:
            continue
        peer = words[1]
        group = groups.get(peer) or TunnelGroup(peer_ip=peer)
        sub = words[2].lower()

        if sub == "type" and len(words) >= 4:
            group = replace(group, type=words[3].lower())
        elif sub == "ipsec-attributes":
            versions = set()
            for child in node.children:
                kw = child.token.keyword
                if kw in (IKEV1, IKEV2):
                    versions.add(kw)
                if "pre-shared-key" in [w.lower() for w in child.words]:
                    group = replace(group, has_preshared_key=True)
                    if kw == "pre-shared-key":
                        versions.add(IKEV1)
            if IKEV2 in versions:
                group = replace(group, ike_version=IKEV2)
            elif IKEV1 in versions:
                group = replace(group, ike_version=IKEV1)

        groups[peer] = group

    return list(groups.values())


def extract_ike_policies(tree: List[Node]) -> List[IkePolicy]:
    """Extract 'crypto ikev1|ikev2 policy N' blocks as opaque attribute lists."""
    results = []
    for version in (IKEV1, IKEV2):
        for node in get_blocks(tree, "crypto", version, "policy"):
            if len(node.words) < 4:
                continue
            priority = _to_int(node.words[3])
            if priority is None:
                continue
            results.append(IkePolicy(
                ike_version=version,
                priority=priority,
                attributes=tuple(c.token.text for c in node.children),
            ))
    return results


def extract_transform_sets(tree: List[Node]) -> List[TransformSet]:
    """Extract ikev1 transform-sets and ikev2 ipsec-proposals."""
    results = []
    for node in get_blocks(tree, "crypto", "ipsec"):
        words = node.words
        lowered = [w.lower() for w in words]
        if lowered[2:4] == [IKEV1, "transform-set"] and len(words) >= 5:
            results.append(TransformSet(name=words[4], ike_version=IKEV1, transforms=tuple(words[5:])))
        elif lowered[2:3] == ["transform-set"] and len(words) >= 4:
            results.append(TransformSet(name=words[3], ike_version=IKEV1, transforms=tuple(words[4:])))
        elif lowered[2:4] == [IKEV2, "ipsec-proposal"] and len(words) >= 5:
            results.append(TransformSet(
                name=words[4],
                ike_version=IKEV2,
                transforms=tuple(c.token.text for c in node.children),
            ))
    return results


def extract_hostname(tree: List[Node]) -> str:
    for node in get_blocks(tree, "hostname"):
        if len(node.words) >= 2:
            return node.words[1]
    return ""


def extract_all(tree: List[Node]) -> AsaConfig:
    """Run all extractors and return a populated AsaConfig."""
    config = AsaConfig()

    config.hostname = extract_hostname(tree)
    config.network_objects = extract_network_objects(tree)
    config.service_objects = extract_service_objects(tree)
    config.network_groups = extract_network_groups(tree)
    config.service_groups = extract_service_groups(tree)
    config.icmp_groups = extract_icmp_groups(tree)
    config.access_list_entries = extract_access_lists(tree)
    config.access_groups = extract_access_groups(tree)
    config.nat_rules = extract_nat_rules(tree, config.network_objects)
    config.crypto_maps = extract_crypto_maps(tree)
    config.tunnel_groups = extract_tunnel_groups(tree)
    config.ike_policies = extract_ike_policies(tree)
    config.transform_sets = extract_transform_sets(tree)

    log.info(
        f"Extracted: {len(config.network_objects)} network objects, "
        f"{len(config.service_objects)} service objects, "
        f"{len(config.network_groups)} network groups, "
        f"{len(config.service_groups)} service groups, "
        f"{len(config.icmp_groups)} icmp groups, "
        f"{len(config.access_list_entries)} ACL entries, "
        f"{len(config.nat_rules)} NAT rules, "
        f"{len(config.crypto_maps)} crypto map entries, "
        f"{len(config.tunnel_groups)} tunnel groups"
    )

    return config
