"""Resolve object, group, and literal references to concrete address values."""

import logging
from typing import FrozenSet, Iterable, List

from ..model.objects import (
    GroupRef, HostRef, NetworkGroup, NetworkObject, ObjectKind, ObjectRef,
    RangeRef, Reference, SubnetRef,
)
from ..util import InvalidInputError, host_value, range_value, subnet_value

log = logging.getLogger(__name__)


def object_value(obj: NetworkObject) -> str:
    """Display value of a network object's own definition.

    Falls back to the raw value field, then to the object name, when the
    object has no recognisable address line.
    """
    if obj.kind == ObjectKind.HOST and obj.value:
        return host_value(obj.value)
    if obj.kind == ObjectKind.SUBNET and obj.value:
        ip, _, mask = obj.value.partition(" ")
        return subnet_value(ip, mask) if mask else obj.value
    if obj.kind == ObjectKind.RANGE and obj.value:
        low, _, high = obj.value.partition(" ")
        return range_value(low, high) if high else obj.value
    return obj.value or obj.name


class ReferenceResolver:
    """Best-effort resolver over one configuration's objects and groups.

    Lookups are case-insensitive. Anything that cannot be resolved comes back
    as its literal token, never as an error. Group recursion carries the set
    of group names on the current call chain; re-entering one of them yields
    the literal 'group:NAME' token for that branch, so self- and
    mutually-referencing groups terminate.
    """

    def __init__(self, objects: Iterable[NetworkObject], groups: Iterable[NetworkGroup]):
        if objects is None or groups is None:
            raise InvalidInputError("object and group tables are required")
        self._objects = {o.name.lower(): o for o in objects}
        self._groups = {g.name.lower(): g for g in groups}

    def resolve(self, reference: Reference) -> List[str]:
        if reference is None:
            raise InvalidInputError("reference is required")
        return self._resolve(reference, frozenset())

    def _resolve(self, ref: Reference, chain: FrozenSet[str]) -> List[str]:
        if isinstance(ref, HostRef):
            return [host_value(ref.ip)]
        if isinstance(ref, SubnetRef):
            return [subnet_value(ref.ip, ref.mask)]
        if isinstance(ref, RangeRef):
            return [range_value(ref.low, ref.high)]
        if isinstance(ref, ObjectRef):
            obj = self._objects.get(ref.name.lower())
            if obj is None:
                return [ref.token]
            return [object_value(obj)]
        if isinstance(ref, GroupRef):
            return self._resolve_group(ref, chain)
        # any/any4/any6, interface, port and opaque literals
        return [ref.token]

    def _resolve_group(self, ref: GroupRef, chain: FrozenSet[str]) -> List[str]:
        key = ref.name.lower()
        if key in chain:
            log.debug(f"Group '{ref.name}' references itself through {sorted(chain)}, not expanding")
            return [ref.token]

        group = self._groups.get(key)
        if group is None:
            return [ref.token]

        inner = chain | {key}
        values: List[str] = []
        for member in group.members:
            values.extend(self._resolve(member, inner))
        return values


def resolve(reference: Reference, objects: Iterable[NetworkObject],
            groups: Iterable[NetworkGroup]) -> List[str]:
    """One-shot resolution of a single reference."""
    return ReferenceResolver(objects, groups).resolve(reference)
