"""Tests for NAT / inbound ACL reachability correlation."""

import pytest

from asaxref.analysis.correlator import (
    DIRECT_IP, GROUP_MEMBER, OBJECT_REFERENCE, correlate, match_entry, unreachable,
)
from asaxref.analysis.engine import run_analysis
from asaxref.model.objects import AnyRef, GroupRef, HostRef, NetworkGroup, ObjectRef
from asaxref.model.policy import AccessListEntry, NatRule, NatStyle
from asaxref.parser import parse_config
from asaxref.util import InvalidInputError

ACL = "outside_access_in"

SRV1 = NatRule(
    style=NatStyle.OBJECT,
    source_zone="inside",
    dest_zone="outside",
    real_source="10.1.1.50",
    mapped_source="81.144.153.67",
    object_name="Srv1",
    line=40,
)

GROUPS = [
    NetworkGroup("G", (ObjectRef("Srv1"),)),
    NetworkGroup("Inner", (ObjectRef("Srv1"),)),
    NetworkGroup("H", (GroupRef("Inner"),)),
]


def _permit(destination, line, acl=ACL, action="permit"):
    return AccessListEntry(acl_name=acl, action=action, protocol="tcp",
                           source=AnyRef(), destination=destination,
                           service="eq https", line=line)


class TestMatchPriority:
    def test_each_match_type(self):
        entries = [
            _permit(ObjectRef("Srv1"), 1),
            _permit(HostRef("81.144.153.67"), 2),
            _permit(GroupRef("G"), 3),
            _permit(GroupRef("H"), 4),
        ]
        records = correlate([SRV1], entries, GROUPS)
        assert [(r.entry.line, r.match_type) for r in records] == [
            (1, OBJECT_REFERENCE), (2, DIRECT_IP), (3, GROUP_MEMBER),
        ]

    def test_nested_group_is_not_expanded(self):
        index = {g.name.lower(): g for g in GROUPS}
        assert match_entry(SRV1, _permit(GroupRef("H"), 1), index) is None

    def test_object_name_match_ignores_case(self):
        assert match_entry(SRV1, _permit(ObjectRef("srv1"), 1), {}) == OBJECT_REFERENCE

    def test_group_with_host_member(self):
        groups = {"pub": NetworkGroup("PUB", (HostRef("81.144.153.67"),))}
        assert match_entry(SRV1, _permit(GroupRef("PUB"), 1), groups) == GROUP_MEMBER

    def test_denies_and_other_acls_ignored(self):
        entries = [
            _permit(ObjectRef("Srv1"), 1, action="deny"),
            _permit(ObjectRef("Srv1"), 2, acl="dmz_access_in"),
        ]
        assert correlate([SRV1], entries, GROUPS) == []

    def test_dynamic_rules_ignored(self):
        dynamic = NatRule(style=NatStyle.OBJECT, source_type="dynamic",
                          mapped_source="interface", object_name="Srv1")
        assert correlate([dynamic], [_permit(ObjectRef("Srv1"), 1)], GROUPS) == []

    def test_other_acl_name(self):
        entries = [_permit(ObjectRef("Srv1"), 1, acl="custom_in")]
        assert len(correlate([SRV1], entries, GROUPS, acl_name="custom_in")) == 1

    def test_none_input(self):
        with pytest.raises(InvalidInputError):
            correlate(None, [], [])


class TestRecord:
    def test_record_fields(self):
        record = correlate([SRV1], [_permit(ObjectRef("Srv1"), 7)], GROUPS)[0]
        assert record.name == "Srv1"
        assert record.real_address == "10.1.1.50"
        assert record.public_address == "81.144.153.67"
        assert record.protocol == "tcp"
        assert record.service == "eq https"
        assert record.source == "any"


class TestSampleConfig:
    def test_web01_reachable_via_object_reference(self, result):
        web = [r for r in result.reachability if r.name == "Web01"]
        first = web[0]
        assert first.match_type == OBJECT_REFERENCE
        assert first.protocol == "tcp"
        assert first.service == "eq https"
        assert first.public_address == "81.144.153.67"
        assert first.real_address == "10.1.1.10"

    def test_all_records(self, result):
        assert [(r.name, r.match_type) for r in result.reachability] == [
            ("Web01", OBJECT_REFERENCE),
            ("Web01", GROUP_MEMBER),
            ("Mail02", DIRECT_IP),
        ]

    def test_source_port_group_entry_still_matches(self):
        config = parse_config(
            "object network Web01\n"
            " host 10.1.1.10\n"
            " nat (inside,outside) static 81.144.153.67\n"
            "object-group service SRC tcp\n"
            " port-object range 1024 65535\n"
            "access-list outside_access_in extended permit tcp any object-group SRC object Web01 eq https\n"
        )
        records = run_analysis(config).reachability
        assert [(r.name, r.match_type, r.service) for r in records] == [
            ("Web01", OBJECT_REFERENCE, "eq https"),
        ]

    def test_unreachable(self, result):
        assert [r.label for r in result.unreachable] == ["nat@61", "nat@62"]

    def test_unreachable_helper(self):
        other = NatRule(style=NatStyle.TWICE, real_source="A", mapped_source="B", line=9)
        records = correlate([SRV1, other], [_permit(ObjectRef("Srv1"), 1)], GROUPS)
        assert unreachable([SRV1, other], records) == [other]
