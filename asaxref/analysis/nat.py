"""NAT rule classification by translation direction."""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from ..model.policy import NatCategory, NatRule, NatStyle
from ..util import InvalidInputError

log = logging.getLogger(__name__)


def classify(real_source: Optional[str], mapped_source: Optional[str],
             real_dest: Optional[str], mapped_dest: Optional[str]) -> NatCategory:
    """Classify a twice-NAT rule from its address pairs.

    Plain string equality, case-sensitive. A missing destination pair counts
    as untranslated.

        src same, dst same  -> Identity/NoNAT
        src diff, dst same  -> SourceNAT
        src same, dst diff  -> DestNAT
        src diff, dst diff  -> TwiceNAT
    """
    source_same = real_source == mapped_source
    dest_same = real_dest == mapped_dest
    if source_same and dest_same:
        return NatCategory.IDENTITY
    if dest_same:
        return NatCategory.SOURCE
    if source_same:
        return NatCategory.DEST
    return NatCategory.TWICE


def categorize(rule: NatRule) -> NatCategory:
    # Object NAT is a style tag, not a computed category
    if rule.style == NatStyle.OBJECT:
        return NatCategory.OBJECT
    return classify(rule.real_source, rule.mapped_source, rule.real_dest, rule.mapped_dest)


def classify_rules(rules: Iterable[NatRule]) -> List[NatRule]:
    """Return copies of the rules with their category filled in."""
    if rules is None:
        raise InvalidInputError("NAT rule table is required")
    results = [replace(r, category=categorize(r)) for r in rules]
    log.debug(f"Classified {len(results)} NAT rules")
    return results


def static_rules(rules: Iterable[NatRule]) -> List[NatRule]:
    """NAT rules that can make an inside address reachable from outside.

    Dynamic and PAT-only rules never are. Object NAT only counts when it
    belongs to an object.
    """
    if rules is None:
        raise InvalidInputError("NAT rule table is required")
    return [
        r for r in rules
        if r.is_static and (r.style == NatStyle.TWICE or r.object_name)
    ]
