"""asaxref: cross-reference objects, NAT, ACLs and VPNs in Cisco ASA configs."""

__version__ = "0.1.0"
