"""Tests for service resolution and port name annotation."""

import pytest

from asaxref.analysis.services import ServiceResolver, service_line_value, service_object_value
from asaxref.mappings.ports import annotate_port_spec, port_number
from asaxref.model.objects import GroupRef, LiteralRef, ObjectRef, PortRef, ServiceGroup, ServiceObject
from asaxref.parser import parse_config
from asaxref.util import InvalidInputError


class TestPorts:
    def test_port_number(self):
        assert port_number("https") == "443"
        assert port_number("WWW") == "80"
        assert port_number("8443") is None

    def test_annotate(self):
        assert annotate_port_spec("eq https") == "eq https(443)"
        assert annotate_port_spec("range ftp-data ftp") == "range ftp-data(20) ftp(21)"
        assert annotate_port_spec("eq 8443") == "eq 8443"


class TestValues:
    def test_service_object_value(self):
        assert service_object_value(ServiceObject("S", "tcp", dest_port="eq https")) == "tcp/eq https(443)"
        assert service_object_value(ServiceObject("S", "udp", source_port="eq 123")) == "udp/src eq 123"
        assert service_object_value(ServiceObject("S", "icmp", dest_port="echo")) == "icmp/echo"
        assert service_object_value(ServiceObject("S")) == "ip"

    def test_icmp_type_named_like_a_port_is_not_annotated(self):
        config = parse_config("object service PING\n service icmp echo\n")
        assert service_object_value(config.service_objects[0]) == "icmp/echo"
        assert service_object_value(ServiceObject("S", "udp", dest_port="eq echo")) == "udp/eq echo(7)"

    def test_service_line_value(self):
        assert service_line_value("tcp destination eq 443") == "tcp/eq 443"
        assert service_line_value("udp eq domain") == "udp/eq domain(53)"
        assert service_line_value("icmp echo") == "icmp/echo"
        assert service_line_value("esp") == "esp"


class TestServiceResolver:
    def test_sample_groups(self, result):
        assert result.services.resolve("WEB-PORTS") == ["tcp/eq www(80)", "tcp/eq https(443)"]
        assert result.services.resolve("PING") == ["icmp/echo", "icmp/echo-reply"]
        assert result.services.resolve("HTTPS-8443") == ["tcp/eq 8443"]

    def test_unknown_name_unchanged(self, result):
        assert result.services.resolve("NOPE") == ["NOPE"]

    def test_acl_entries(self, result):
        entries = result.config.acl_entries("outside_access_in")
        assert result.services.resolve_entry(entries[0]) == ["tcp/eq https(443)"]
        assert result.services.resolve_entry(entries[2]) == ["tcp/eq www(80)", "tcp/eq https(443)"]
        assert result.services.resolve_entry(entries[3]) == ["ip"]

    def test_nested_and_cyclic_groups(self):
        resolver = ServiceResolver(
            [ServiceObject("ALT", "tcp", dest_port="eq 8080")],
            [
                ServiceGroup("OUTER", "udp", (PortRef("eq 53"), GroupRef("INNER"))),
                ServiceGroup("INNER", None, (ObjectRef("ALT"), LiteralRef("esp"), GroupRef("OUTER"))),
            ],
            [],
        )
        assert resolver.resolve("OUTER") == ["udp/eq 53", "tcp/eq 8080", "esp", "group:OUTER"]

    def test_port_without_group_protocol(self):
        resolver = ServiceResolver([], [ServiceGroup("P", None, (PortRef("eq 53"),))], [])
        assert resolver.resolve("P") == ["tcp-udp/eq 53"]

    def test_invalid_input(self):
        with pytest.raises(InvalidInputError):
            ServiceResolver(None, [], [])
        with pytest.raises(InvalidInputError):
            ServiceResolver([], [], []).resolve(None)
