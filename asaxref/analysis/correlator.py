"""Correlate static NAT rules with inbound ACL permits to find reachable hosts."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..defaults import DEFAULT_INBOUND_ACL
from ..model.objects import GroupRef, HostRef, NetworkGroup, ObjectRef
from ..model.policy import AccessListEntry, NatRule
from ..util import InvalidInputError
from .nat import static_rules

log = logging.getLogger(__name__)

OBJECT_REFERENCE = "object-reference"
DIRECT_IP = "direct-ip"
GROUP_MEMBER = "group-member"


@dataclass(frozen=True)
class ReachabilityRecord:
    nat_rule: NatRule
    entry: AccessListEntry
    match_type: str

    @property
    def name(self) -> str:
        return self.nat_rule.label

    @property
    def real_address(self) -> str:
        return self.nat_rule.real_source or ""

    @property
    def public_address(self) -> str:
        return self.nat_rule.mapped_source or ""

    @property
    def protocol(self) -> str:
        return self.entry.protocol_group or self.entry.protocol

    @property
    def service(self) -> str:
        return self.entry.service_descriptor

    @property
    def source(self) -> str:
        return self.entry.source.token

    @property
    def inactive(self) -> bool:
        return self.entry.inactive


def _group_contains(group: Optional[NetworkGroup], rule: NatRule) -> bool:
    """Direct members only. Nested group-objects are not expanded."""
    if group is None:
        return False
    for member in group.members:
        if (isinstance(member, ObjectRef) and rule.object_name
                and member.name.lower() == rule.object_name.lower()):
            return True
        if isinstance(member, HostRef) and member.ip == rule.mapped_source:
            return True
    return False


def match_entry(rule: NatRule, entry: AccessListEntry,
                groups: Dict[str, NetworkGroup]) -> Optional[str]:
    """Return the match type linking an ACL entry to a NAT rule, or None.

    Checked in order: object-reference, direct-ip, group-member.
    """
    dest = entry.destination
    if (isinstance(dest, ObjectRef) and rule.object_name
            and dest.name.lower() == rule.object_name.lower()):
        return OBJECT_REFERENCE
    if isinstance(dest, HostRef) and rule.mapped_source and dest.ip == rule.mapped_source:
        return DIRECT_IP
    if isinstance(dest, GroupRef) and _group_contains(groups.get(dest.name.lower()), rule):
        return GROUP_MEMBER
    return None


def correlate(nat_rules: Iterable[NatRule], acl_entries: Iterable[AccessListEntry],
              groups: Iterable[NetworkGroup],
              acl_name: str = DEFAULT_INBOUND_ACL) -> List[ReachabilityRecord]:
    """One record per (static NAT rule, permit entry of acl_name) that match."""
    if nat_rules is None or acl_entries is None or groups is None:
        raise InvalidInputError("NAT, access-list and group tables are required")

    group_index = {g.name.lower(): g for g in groups}
    permits = [e for e in acl_entries if e.acl_name == acl_name and e.is_permit]
    if not permits:
        log.warning(f"Access-list '{acl_name}' has no permit entries")

    records = []
    for rule in static_rules(nat_rules):
        for entry in permits:
            match_type = match_entry(rule, entry, group_index)
            if match_type is not None:
                records.append(ReachabilityRecord(nat_rule=rule, entry=entry, match_type=match_type))

    log.debug(f"Correlated {len(records)} reachability records against '{acl_name}'")
    return records


def unreachable(nat_rules: Iterable[NatRule], records: Iterable[ReachabilityRecord]) -> List[NatRule]:
    """Static NAT rules that no record covers."""
    covered = {r.nat_rule for r in records}
    return [r for r in static_rules(nat_rules) if r not in covered]
