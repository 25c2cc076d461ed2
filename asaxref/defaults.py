"""Default values and constants for ASA configuration analysis."""

# Inbound ACL used by the reachability correlator when nothing else names one
DEFAULT_INBOUND_ACL = "outside_access_in"

# Interface whose inbound access-group selects the ACL automatically
DEFAULT_OUTSIDE_INTERFACE = "outside"

# Tunnel-group type marking a site-to-site peer
SITE_TO_SITE_TYPE = "ipsec-l2l"

# Address keywords that match everything
ANY_KEYWORDS = {"any", "any4", "any6"}

# Port operators accepted after a protocol, source or destination
PORT_OPERATORS = {"eq", "neq", "lt", "gt", "range"}

# Tokens that terminate the address part of an access-list entry
ACL_TRAILING_FLAGS = {"log", "inactive", "time-range"}

# ACL action keywords
ACL_ACTIONS = {"permit", "deny"}

# NAT translation types
NAT_STATIC = "static"
NAT_DYNAMIC = "dynamic"

# IKE version tags
IKEV1 = "ikev1"
IKEV2 = "ikev2"
IKE_UNKNOWN = "unknown"

# Report names accepted by the CLI
REPORTS = (
    "summary",
    "objects",
    "groups",
    "acl",
    "nat",
    "vpn",
    "selectors",
    "reachability",
    "unreachable",
)

# Output formats accepted by the CLI
FORMATS = ("table", "csv", "yaml")
