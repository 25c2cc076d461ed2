"""Analysis options file schema and serialization."""

import datetime
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional

import yaml

from .defaults import DEFAULT_OUTSIDE_INTERFACE, FORMATS, REPORTS
from .filters import RowFilter
from .util import OptionsError

YAML_HEADER = """\
# asaxref analysis options
# Generated: {generated_at}
#
# Keys:
#   inbound_acl        ACL checked for NAT reachability. Empty: the ACL bound
#                      'in' on outside_interface, else outside_access_in.
#   outside_interface  nameif whose inbound access-group is used.
#   report             one of: {reports}
#   format             one of: {formats}
#   name_filter        wildcard on the row name, e.g. 'web*'
#   zone_filter        wildcard on NAT zones / crypto map interface
#   category_filter    wildcard on NAT category, match type or object kind
#
#   Command-line flags override values from this file.
#
"""


@dataclass
class AnalysisOptions:
    inbound_acl: Optional[str] = None
    outside_interface: str = DEFAULT_OUTSIDE_INTERFACE
    report: str = "summary"
    format: str = "table"
    name_filter: Optional[str] = None
    zone_filter: Optional[str] = None
    category_filter: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []
        if self.report not in REPORTS:
            errors.append(f"report '{self.report}' is not one of {', '.join(REPORTS)}")
        if self.format not in FORMATS:
            errors.append(f"format '{self.format}' is not one of {', '.join(FORMATS)}")
        if not self.outside_interface:
            errors.append("outside_interface must not be empty")
        return errors

    def row_filter(self) -> RowFilter:
        return RowFilter(
            name=self.name_filter,
            zone=self.zone_filter,
            category=self.category_filter,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "AnalysisOptions":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise OptionsError([f"unknown option '{k}'" for k in unknown])
        opts = cls(**{k: v for k, v in d.items() if v is not None})
        errors = opts.validate()
        if errors:
            raise OptionsError(errors)
        return opts

    def to_yaml(self) -> str:
        """Serialize to YAML for user editing."""
        header = YAML_HEADER.format(
            generated_at=datetime.datetime.now().isoformat(timespec="seconds"),
            reports=", ".join(REPORTS),
            formats=", ".join(FORMATS),
        )
        body = yaml.dump(
            self.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            width=120,
        )
        return header + body

    @classmethod
    def from_yaml(cls, yaml_text: str) -> "AnalysisOptions":
        """Load from a user-edited YAML file."""
        try:
            data = yaml.safe_load(yaml_text)
        except yaml.YAMLError as e:
            raise OptionsError([f"invalid YAML: {e}"]) from e
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise OptionsError(["top level must be a mapping"])
        return cls.from_dict(data)
