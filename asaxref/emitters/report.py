"""Report row builders and table/CSV/YAML renderers."""

import csv
import io
from typing import Any, Callable, Dict, List

import yaml

from ..analysis.engine import AnalysisResult
from ..analysis.resolver import object_value
from ..model.objects import GroupRef
from ..model.policy import NatRule

Row = Dict[str, Any]


# --- Row builders ----------------------------------------------------------


def object_rows(result: AnalysisResult) -> List[Row]:
    rows = []
    for obj in result.config.network_objects:
        nat = ""
        if obj.nat is not None:
            nat = f"{obj.nat.nat_type} {obj.nat.translated_value} ({obj.nat.source_zone},{obj.nat.dest_zone})"
            if obj.nat.pat is not None:
                pat = obj.nat.pat
                nat += f" service {pat.protocol} {pat.original_port} {pat.translated_port}"
        rows.append({
            "name": obj.name,
            "kind": obj.kind.value,
            "value": object_value(obj),
            "nat": nat,
            "description": obj.description,
        })
    for svc in result.config.service_objects:
        rows.append({
            "name": svc.name,
            "kind": "service",
            "value": result.services.resolve(svc.name)[0],
            "nat": "",
            "description": svc.description,
        })
    return rows


def group_rows(result: AnalysisResult) -> List[Row]:
    config = result.config
    rows = []
    for grp in config.network_groups:
        rows.append({
            "name": grp.name,
            "type": "network",
            "members": [m.token for m in grp.members],
            "resolved": result.resolver.resolve(GroupRef(grp.name)),
        })
    for grp in config.service_groups:
        rows.append({
            "name": grp.name,
            "type": f"service {grp.protocol}" if grp.protocol else "service",
            "members": [m.token for m in grp.members],
            "resolved": result.services.resolve(grp.name),
        })
    for grp in config.icmp_groups:
        rows.append({
            "name": grp.name,
            "type": "icmp-type",
            "members": [m.token for m in grp.members],
            "resolved": result.services.resolve(grp.name),
        })
    return rows


def acl_rows(result: AnalysisResult) -> List[Row]:
    rows = []
    for entry in result.config.access_list_entries:
        dest = entry.destination
        rows.append({
            "name": entry.acl_name,
            "line": entry.line,
            "action": entry.action,
            "protocol": entry.protocol_group or entry.protocol,
            "source": entry.source.token,
            "source_resolved": result.resolver.resolve(entry.source),
            "destination": dest.token if dest is not None else "",
            "destination_resolved": result.resolver.resolve(dest) if dest is not None else [],
            "services": result.services.resolve_entry(entry),
            "user": entry.user or "",
            "log": entry.log_enabled,
            "inactive": entry.inactive,
        })
    return rows


def _nat_flags(rule: NatRule) -> List[str]:
    flags = []
    if rule.no_proxy_arp:
        flags.append("no-proxy-arp")
    if rule.route_lookup:
        flags.append("route-lookup")
    if rule.inactive:
        flags.append("inactive")
    return flags


def nat_rows(result: AnalysisResult) -> List[Row]:
    rows = []
    for rule in result.nat_rules:
        rows.append({
            "name": rule.label,
            "line": rule.line,
            "section": rule.section,
            "style": rule.style.value,
            "category": rule.category.value,
            "source_zone": rule.source_zone,
            "dest_zone": rule.dest_zone,
            "source_type": rule.source_type,
            "real_source": rule.real_source or "",
            "mapped_source": rule.mapped_source or "",
            "real_dest": rule.real_dest or "",
            "mapped_dest": rule.mapped_dest or "",
            "service": rule.service or "",
            "flags": _nat_flags(rule),
        })
    return rows


def vpn_rows(result: AnalysisResult) -> List[Row]:
    rows = []
    for vpn in result.vpns:
        cm = vpn.crypto_map
        rows.append({
            "name": vpn.peer,
            "map": cm.map_name,
            "sequence": cm.sequence,
            "interface": cm.interface or "",
            "ike_version": vpn.ike_version,
            "acl": cm.acl_name or "",
            "transform_set": cm.transform_set or "",
            "pfs": cm.pfs_group or "",
            "lifetime_seconds": cm.sa_lifetime_seconds,
            "lifetime_kb": cm.sa_lifetime_kb,
            "nat_t_disabled": cm.nat_t_disabled,
            "psk": vpn.tunnel_group.has_preshared_key,
            "local_subnets": list(vpn.local_subnets),
            "remote_subnets": list(vpn.remote_subnets),
            "selectors": len(vpn.selectors),
        })
    return rows


def selector_rows(result: AnalysisResult) -> List[Row]:
    rows = []
    for sel in result.selectors:
        rows.append({
            "name": sel.peer,
            "map": sel.map_name,
            "sequence": sel.sequence,
            "acl": sel.acl_name,
            "line": sel.line,
            "protocol": sel.protocol,
            "local": sel.local_ref,
            "local_nets": list(sel.local_nets),
            "remote": sel.remote_ref,
            "remote_nets": list(sel.remote_nets),
            "inactive": sel.inactive,
        })
    return rows


def reachability_rows(result: AnalysisResult) -> List[Row]:
    rows = []
    for rec in result.reachability:
        rows.append({
            "name": rec.name,
            "real_address": rec.real_address,
            "public_address": rec.public_address,
            "source_zone": rec.nat_rule.source_zone,
            "dest_zone": rec.nat_rule.dest_zone,
            "acl": rec.entry.acl_name,
            "line": rec.entry.line,
            "protocol": rec.protocol,
            "service": rec.service,
            "source": rec.source,
            "match_type": rec.match_type,
            "inactive": rec.inactive,
        })
    return rows


def unreachable_rows(result: AnalysisResult) -> List[Row]:
    return [
        {
            "name": rule.label,
            "real_address": rule.real_source or "",
            "public_address": rule.mapped_source or "",
            "source_zone": rule.source_zone,
            "dest_zone": rule.dest_zone,
            "category": rule.category.value,
        }
        for rule in result.unreachable
    ]


def summary_rows(result: AnalysisResult) -> List[Row]:
    config = result.config
    counts = [
        ("hostname", config.hostname or "-"),
        ("network objects", len(config.network_objects)),
        ("service objects", len(config.service_objects)),
        ("network groups", len(config.network_groups)),
        ("service groups", len(config.service_groups)),
        ("icmp groups", len(config.icmp_groups)),
        ("access-lists", len(config.acl_names())),
        ("ACL entries", len(config.access_list_entries)),
        ("NAT rules", len(result.nat_rules)),
        ("IKE policies", len(config.ike_policies)),
        ("transform sets", len(config.transform_sets)),
        ("site-to-site VPNs", len(result.vpns)),
        ("phase-2 selectors", len(result.selectors)),
        ("inbound ACL", result.inbound_acl),
        ("reachable via NAT", len(result.reachability)),
        ("static NAT not permitted", len(result.unreachable)),
    ]
    return [{"item": k, "value": v} for k, v in counts]


ROW_BUILDERS: Dict[str, Callable[[AnalysisResult], List[Row]]] = {
    "summary": summary_rows,
    "objects": object_rows,
    "groups": group_rows,
    "acl": acl_rows,
    "nat": nat_rows,
    "vpn": vpn_rows,
    "selectors": selector_rows,
    "reachability": reachability_rows,
    "unreachable": unreachable_rows,
}


def build_rows(result: AnalysisResult, report: str) -> List[Row]:
    builder = ROW_BUILDERS.get(report)
    if builder is None:
        raise ValueError(f"unknown report '{report}'")
    return builder(result)


# --- Renderers -------------------------------------------------------------


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def render_table(rows: List[Row], title: str = "") -> str:
    """Fixed-width text table."""
    lines = []
    if title:
        lines.append("=" * 60)
        lines.append(f"  {title}")
        lines.append("=" * 60)
    if not rows:
        lines.append("(no rows)")
        return "\n".join(lines) + "\n"

    columns = list(rows[0].keys())
    cells = [[_cell(r.get(c)) for c in columns] for r in rows]
    widths = [
        max(len(c), *(len(row[i]) for row in cells))
        for i, c in enumerate(columns)
    ]

    lines.append("  ".join(c.upper().ljust(w) for c, w in zip(columns, widths)).rstrip())
    lines.append("  ".join("-" * w for w in widths))
    for row in cells:
        lines.append("  ".join(v.ljust(w) for v, w in zip(row, widths)).rstrip())
    return "\n".join(lines) + "\n"


def render_csv(rows: List[Row]) -> str:
    if not rows:
        return ""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=list(rows[0].keys()), lineterminator="\n")
    writer.writeheader()
    for row in rows:
        writer.writerow({k: _cell(v) for k, v in row.items()})
    return buf.getvalue()


def render_yaml(rows: List[Row], report: str) -> str:
    return yaml.safe_dump(
        {"report": report, "rows": rows},
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=120,
    )


def render(rows: List[Row], report: str, fmt: str = "table") -> str:
    if fmt == "csv":
        return render_csv(rows)
    if fmt == "yaml":
        return render_yaml(rows, report)
    return render_table(rows, title=report)
