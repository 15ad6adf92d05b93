from dataclasses import dataclass

from .latlon import LatLon


@dataclass(frozen=True)
class Fix:
    """A named fix from the legacy FIX.txt file."""

    ident: str
    coordinate: LatLon
    artcc_id: str
