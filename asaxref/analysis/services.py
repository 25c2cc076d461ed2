"""Resolve service objects, service groups, and ICMP groups to flat service strings."""

import logging
from typing import FrozenSet, Iterable, List

from ..defaults import PORT_OPERATORS
from ..mappings.ports import annotate_port_spec
from ..model.objects import (
    GroupRef, IcmpGroup, LiteralRef, ObjectRef, PortRef, Reference,
    ServiceGroup, ServiceObject,
)
from ..model.policy import AccessListEntry
from ..util import InvalidInputError

log = logging.getLogger(__name__)


def _join(protocol: str, port: str) -> str:
    return f"{protocol}/{port}" if port else protocol


def _port_text(spec: str) -> str:
    # Only port clauses carry port names; icmp types such as 'echo' stay as written
    words = spec.split()
    if words and words[0].lower() in PORT_OPERATORS:
        return annotate_port_spec(spec)
    return spec


def service_object_value(svc: ServiceObject) -> str:
    """'tcp/eq https(443)', 'tcp/src range 1 1023 dst eq 80', 'icmp/echo'."""
    if svc.source_port and svc.dest_port:
        port = f"src {_port_text(svc.source_port)} dst {_port_text(svc.dest_port)}"
    elif svc.source_port:
        port = f"src {_port_text(svc.source_port)}"
    else:
        port = _port_text(svc.dest_port or "")
    return _join(svc.protocol or "ip", port)


def service_line_value(text: str) -> str:
    """Render a 'service-object' line body.

    'tcp destination eq 443' -> 'tcp/eq 443'
    'udp eq domain'          -> 'udp/eq domain(53)'
    'icmp echo'              -> 'icmp/echo'
    'esp'                    -> 'esp'
    """
    words = text.split()
    if not words:
        return text
    protocol = words[0].lower()
    rest = words[1:]
    if "destination" in [w.lower() for w in rest]:
        idx = [w.lower() for w in rest].index("destination")
        rest = rest[idx + 1:]
    elif rest and rest[0].lower() == "source":
        return _join(protocol, "src " + annotate_port_spec(" ".join(rest[1:])))
    if rest and rest[0].lower() in PORT_OPERATORS:
        return _join(protocol, annotate_port_spec(" ".join(rest)))
    return _join(protocol, " ".join(rest))


class ServiceResolver:
    """Flatten service definitions the same best-effort way as addresses.

    Unknown names come back unchanged; nested group-objects carry the same
    call-chain guard as the address resolver.
    """

    def __init__(self, service_objects: Iterable[ServiceObject],
                 service_groups: Iterable[ServiceGroup],
                 icmp_groups: Iterable[IcmpGroup]):
        if service_objects is None or service_groups is None or icmp_groups is None:
            raise InvalidInputError("service object and group tables are required")
        self._objects = {s.name.lower(): s for s in service_objects}
        self._groups = {g.name.lower(): g for g in service_groups}
        self._icmp = {g.name.lower(): g for g in icmp_groups}

    def resolve(self, name: str) -> List[str]:
        if name is None:
            raise InvalidInputError("service name is required")
        return self._resolve_name(name, frozenset())

    def resolve_entry(self, entry: AccessListEntry) -> List[str]:
        """Every service an access-list entry allows."""
        if entry.service_group:
            return self.resolve(entry.service_group)
        if entry.protocol_group:
            return self.resolve(entry.protocol_group)
        if entry.service:
            if entry.service.split()[0].lower() in PORT_OPERATORS:
                return [_join(entry.protocol, annotate_port_spec(entry.service))]
            return [_join(entry.protocol, entry.service)]
        return [entry.protocol]

    def _resolve_name(self, name: str, chain: FrozenSet[str]) -> List[str]:
        key = name.lower()
        if key in chain:
            log.debug(f"Service group '{name}' references itself, not expanding")
            return [f"group:{name}"]

        if key in self._groups:
            group = self._groups[key]
            inner = chain | {key}
            values: List[str] = []
            for member in group.members:
                values.extend(self._resolve_member(member, group.protocol, inner))
            return values

        if key in self._icmp:
            inner = chain | {key}
            values = []
            for member in self._icmp[key].members:
                if isinstance(member, GroupRef):
                    values.extend(self._resolve_name(member.name, inner))
                else:
                    values.append(_join("icmp", member.token))
            return values

        if key in self._objects:
            return [service_object_value(self._objects[key])]

        return [name]

    def _resolve_member(self, member: Reference, protocol, chain: FrozenSet[str]) -> List[str]:
        if isinstance(member, GroupRef):
            return self._resolve_name(member.name, chain)
        if isinstance(member, ObjectRef):
            svc = self._objects.get(member.name.lower())
            return [service_object_value(svc)] if svc else [member.token]
        if isinstance(member, PortRef):
            return [_join(protocol or "tcp-udp", annotate_port_spec(member.spec))]
        if isinstance(member, LiteralRef):
            return [service_line_value(member.text)]
        return [member.token]
