from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

BOS = "BOS"
LGA = "LGA"
DCA = "DCA"
ORD = "ORD"

LOCATION_LIST: tuple[str, ...] = (BOS, LGA, DCA, ORD)

LOCATION_NAMES: dict[str, str] = {
    BOS: "12 Main Lower Level",
    LGA: "12 Main Upper Level",
    DCA: "The Spouter Inn",
    ORD: "Waterfront",
}


@dataclass(frozen=True)
class LocationRegion:
    name: str
    locations: tuple[str, ...]


LOCATION_REGIONS: tuple[LocationRegion, ...] = (
    LocationRegion(name="Lenox Mall", locations=(BOS, LGA)),
    LocationRegion(name="New Bedford, MA", locations=(DCA, ORD)),
)


def get_location_name(code: str) -> str:
    return LOCATION_NAMES.get(code, code)


def get_location_region(code: str) -> Optional[str]:
    for region in LOCATION_REGIONS:
        if code in region.locations:
            return region.name
    return None


def is_complete_region(codes: Iterable[str]) -> Optional[LocationRegion]:
    """Return the region whose locations are exactly ``codes``, if any."""
    wanted = set(codes)
    for region in LOCATION_REGIONS:
        if set(region.locations) == wanted:
            return region
    return None


def format_locations(codes: Iterable[str], show_individual_names: bool = True) -> str:
    """
    Display label for a set of locations.

    Complete regions collapse to the region name (optionally followed by the
    names of its locations); leftovers are listed by display name.
    """
    selected = list(codes)
    if not selected:
        return ""

    parts: list[str] = []
    used: set[str] = set()
    for region in LOCATION_REGIONS:
        if all(loc in selected for loc in region.locations):
            if show_individual_names:
                names = ", ".join(get_location_name(loc) for loc in region.locations)
                parts.append(f"{region.name} ({names})")
            else:
                parts.append(region.name)
            used.update(region.locations)

    for loc in selected:
        if loc not in used:
            parts.append(get_location_name(loc))
    return ", ".join(parts)
