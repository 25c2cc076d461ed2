"""Tests for report rows and renderers."""

import csv
import io

import pytest
import yaml

from asaxref.analysis.engine import pick_inbound_acl, run_analysis
from asaxref.defaults import REPORTS
from asaxref.emitters.report import build_rows, render, render_csv, render_table, render_yaml
from asaxref.parser import parse_config
from asaxref.util import InvalidInputError


class TestEngine:
    def test_inbound_acl_from_access_group(self, config):
        assert pick_inbound_acl(config) == "outside_access_in"

    def test_explicit_inbound_acl_wins(self, config):
        assert pick_inbound_acl(config, "dmz_in") == "dmz_in"

    def test_access_group_on_other_interface(self):
        config = parse_config("access-group internet_in in interface wan\n")
        assert pick_inbound_acl(config) == "outside_access_in"
        assert pick_inbound_acl(config, outside_interface="WAN") == "internet_in"

    def test_only_inbound_acl_entries_correlated(self, config):
        assert len(config.acl_entries("outside_cryptomap_10")) == 3
        assert run_analysis(config, "outside_cryptomap_10").reachability == []
        assert len(run_analysis(config).reachability) == 3

    def test_missing_config(self):
        with pytest.raises(InvalidInputError):
            run_analysis(None)

    def test_empty_config(self):
        result = run_analysis(parse_config(""))
        assert result.nat_rules == []
        assert result.vpns == []
        assert result.reachability == []


class TestRows:
    @pytest.mark.parametrize("report", REPORTS)
    def test_every_report_builds(self, result, report):
        assert isinstance(build_rows(result, report), list)

    def test_unknown_report(self, result):
        with pytest.raises(ValueError):
            build_rows(result, "everything")

    def test_summary(self, result):
        summary = {r["item"]: r["value"] for r in build_rows(result, "summary")}
        assert summary["hostname"] == "edge-fw01"
        assert summary["network objects"] == 8
        assert summary["NAT rules"] == 6
        assert summary["IKE policies"] == 1
        assert summary["transform sets"] == 2
        assert summary["site-to-site VPNs"] == 2
        assert summary["phase-2 selectors"] == 3
        assert summary["reachable via NAT"] == 3
        assert summary["static NAT not permitted"] == 2

    def test_reachability_row(self, result):
        row = build_rows(result, "reachability")[0]
        assert row == {
            "name": "Web01",
            "real_address": "10.1.1.10",
            "public_address": "81.144.153.67",
            "source_zone": "inside",
            "dest_zone": "outside",
            "acl": "outside_access_in",
            "line": 52,
            "protocol": "tcp",
            "service": "eq https",
            "source": "group:Anywhere",
            "match_type": "object-reference",
            "inactive": False,
        }

    def test_inactive_permit_is_flagged(self):
        config = parse_config(
            "object network Web01\n"
            " host 10.1.1.10\n"
            " nat (inside,outside) static 81.144.153.67\n"
            "access-list outside_access_in extended permit tcp any object Web01 eq https inactive\n"
        )
        rows = build_rows(run_analysis(config), "reachability")
        assert [(r["name"], r["match_type"], r["inactive"]) for r in rows] == [
            ("Web01", "object-reference", True),
        ]

    def test_object_rows_include_nat(self, result):
        rows = {r["name"]: r for r in build_rows(result, "objects")}
        assert rows["Web01"]["value"] == "10.1.1.10/32"
        assert rows["Web01"]["nat"] == "static 81.144.153.67 (inside,outside)"
        assert rows["HTTPS-8443"]["kind"] == "service"

    def test_group_rows(self, result):
        rows = {r["name"]: r for r in build_rows(result, "groups")}
        assert rows["DMZ-Hosts"]["members"] == ["host:10.2.2.5", "group:Core-Hosts"]
        assert rows["DMZ-Hosts"]["resolved"] == ["10.2.2.5/32", "10.2.2.9/32"]
        assert rows["WEB-PORTS"]["type"] == "service tcp"


class TestRenderers:
    ROWS = [
        {"name": "Web01", "flags": ["a", "b"], "log": True},
        {"name": "Mail02", "flags": [], "log": False},
    ]

    def test_table(self):
        text = render_table(self.ROWS, title="demo")
        lines = text.splitlines()
        assert lines[1] == "  demo"
        assert lines[3].split() == ["NAME", "FLAGS", "LOG"]
        assert "a, b" in lines[5]
        assert lines[5].endswith("yes")

    def test_empty_table(self):
        assert render_table([]) == "(no rows)\n"

    def test_csv(self):
        reader = csv.DictReader(io.StringIO(render_csv(self.ROWS)))
        rows = list(reader)
        assert rows[0] == {"name": "Web01", "flags": "a, b", "log": "yes"}
        assert rows[1]["log"] == ""

    def test_empty_csv(self):
        assert render_csv([]) == ""

    def test_yaml(self):
        data = yaml.safe_load(render_yaml(self.ROWS, "demo"))
        assert data["report"] == "demo"
        assert data["rows"][0]["flags"] == ["a", "b"]

    def test_render_dispatch(self, result):
        rows = build_rows(result, "vpn")
        assert render(rows, "vpn", "yaml").startswith("report: vpn")
        assert render(rows, "vpn", "csv").startswith("name,map,sequence")
        assert render(rows, "vpn", "table").splitlines()[1] == "  vpn"
