from dataclasses import dataclass

from .latlon import LatLon


@dataclass(frozen=True)
class Airport:
    """
    An AirportHeliport feature.

    ``id`` is the element's gml:id and is the key Units refer to. The
    designator may be empty when the source omits it.
    """

    id: str
    designator: str
    coordinate: LatLon
