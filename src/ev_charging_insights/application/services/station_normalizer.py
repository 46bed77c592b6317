"""Region normalization for raw station records."""

import logging
from collections.abc import Iterable

from ev_charging_insights.domain.models.region_code import REGION_VARIANTS, RegionCode
from ev_charging_insights.domain.models.station_record import StationRecord

logger = logging.getLogger(__name__)

_VARIANT_TO_CODE: dict[str, RegionCode] = {
    variant: code for code, variants in REGION_VARIANTS.items() for variant in variants
}


class StationNormalizer:
    """Canonicalizes free-text region fields into region codes."""

    def __init__(self, variants: dict[RegionCode, frozenset[str]] | None = None) -> None:
        """Initialize with a region variant table (defaults to REGION_VARIANTS)."""
        if variants is None:
            self._variant_to_code = _VARIANT_TO_CODE
        else:
            self._variant_to_code = {
                variant: code for code, group in variants.items() for variant in group
            }

    def canonicalize_region(self, raw: str | None) -> RegionCode | None:
        """Look up the region code for a raw region string.

        Returns:
            The matching code, or None if the string is not a known variant.
        """
        if raw is None:
            return None
        return self._variant_to_code.get(raw.strip().lower())

    def normalize(self, records: Iterable[StationRecord]) -> None:
        """Normalize the address group of every record in place.

        Running this again over already-normalized records changes nothing.
        """
        salvaged = 0
        unknown = 0
        for record in records:
            if self.normalize_record(record):
                salvaged += 1
            if record.address_info is not None and record.region == RegionCode.UNKNOWN:
                unknown += 1
        logger.debug(
            f"Normalized regions: {unknown} unknown, {salvaged} moved into locality"
        )

    def normalize_record(self, record: StationRecord) -> bool:
        """Normalize one record in place.

        An unrecognized, non-empty region string is most likely a misfiled town
        name. It is moved into the locality when that field is empty or
        "unknown", and the region becomes Unknown either way.

        Returns:
            True if the raw region string was moved into the locality field.
        """
        address = record.address_info
        if address is None:
            return False

        raw = (address.state_or_province or "").strip()
        code = self.canonicalize_region(raw)
        salvaged = False

        if code is None:
            code = RegionCode.UNKNOWN
            town = address.town or ""
            if raw and (not town or town.lower() == "unknown"):
                logger.debug(f"Unrecognized region '{raw}' moved into empty locality")
                address.town = raw
                salvaged = True

        address.state_or_province = code.value
        return salvaged
