from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .latlon import LatLon


class NavaidType(Enum):
    """Navaid kinds extracted from the AIXM navaid file."""

    VORTAC = "VORTAC"
    VORDME = "VOR_DME"

    @classmethod
    def from_aixm(cls, value: str) -> Optional['NavaidType']:
        """Map an AIXM CodeNavaidService literal, None if not extracted."""
        for member in cls:
            if member.value == value:
                return member
        return None


@dataclass(frozen=True)
class Navaid:
    """
    A VOR based navaid.

    ``low_altitude_region_id`` is the ARTCC responsible for the navaid at low
    altitude and is compared directly with the caller's ARTCC ids.
    """

    designator: str
    kind: NavaidType
    coordinate: LatLon
    low_altitude_region_id: str
