"""Region code domain model."""

from enum import StrEnum


class RegionCode(StrEnum):
    """Canonical code for an Australian state or territory."""

    VIC = "VIC"
    NSW = "NSW"
    QLD = "QLD"
    WA = "WA"
    SA = "SA"
    ACT = "ACT"
    TAS = "TAS"
    NT = "NT"
    UNKNOWN = "Unknown"


# Canonical code -> accepted lowercase spellings, abbreviations and known misspellings.
# The "unknown" row maps an already-normalized Unknown region back onto itself.
REGION_VARIANTS: dict[RegionCode, frozenset[str]] = {
    RegionCode.VIC: frozenset({"vic", "victoria"}),
    RegionCode.NSW: frozenset({"nsw", "new south wales", "new south wells"}),
    RegionCode.QLD: frozenset({"qld", "queensland"}),
    RegionCode.WA: frozenset({"wa", "western australia", "western autralia"}),
    RegionCode.SA: frozenset({"sa", "south australia"}),
    RegionCode.ACT: frozenset({"act", "australian capital territory"}),
    RegionCode.TAS: frozenset({"tas", "tasmania"}),
    RegionCode.NT: frozenset({"nt", "northern territory"}),
    RegionCode.UNKNOWN: frozenset({"unknown"}),
}
