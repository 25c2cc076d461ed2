"""Interface-level data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccessGroup:
    """'access-group ACL in|out interface NAME' or 'access-group ACL global'."""
    acl_name: str
    direction: str = "in"                   # in, out, global
    interface: str = ""
    line: int = 0
