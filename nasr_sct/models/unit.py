from dataclasses import dataclass

# Facility type of an Air Route Traffic Control Center
ARTCC = "ARTCC"


@dataclass(frozen=True)
class Unit:
    """
    An air traffic facility from the AIXM airport file.

    ``airport_location`` is the gml:id of the AirportHeliport the unit is
    located at, already resolved from its xlink reference.
    """

    designator: str
    facility_type: str
    airport_location: str

    @property
    def is_artcc(self) -> bool:
        return self.facility_type == ARTCC
