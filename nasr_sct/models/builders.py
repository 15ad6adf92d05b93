"""
Builders for entities extracted from AIXM documents.

AIXM elements are read one event at a time and any child may be missing, so
each entity is accumulated in a builder holding optional fields. ``build()``
returns the finished record, or None when a required field was never set;
a partially initialised record is never produced.

Examples:
    >>> builder = UnitBuilder().with_designator("ZHU").with_type("ARTCC")
    >>> builder.build() is None
    True
    >>> builder.with_airport_location("AH_0000001").build()
    Unit(designator='ZHU', facility_type='ARTCC', airport_location='AH_0000001')
"""

from typing import Optional
import logging

from .validation import ValidationResult
from .latlon import LatLon
from .unit import Unit
from .airport import Airport
from .navaid import Navaid, NavaidType

logger = logging.getLogger(__name__)


class UnitBuilder:
    """Accumulates the fields of a Unit."""

    def __init__(self):
        self.designator: Optional[str] = None
        self.facility_type: Optional[str] = None
        self.airport_location: Optional[str] = None

    def with_designator(self, designator: str) -> 'UnitBuilder':
        self.designator = designator
        return self

    def with_type(self, facility_type: str) -> 'UnitBuilder':
        self.facility_type = facility_type
        return self

    def with_airport_location(self, airport_location: str) -> 'UnitBuilder':
        self.airport_location = airport_location
        return self

    def validate(self) -> ValidationResult:
        result = ValidationResult()
        result.require("designator", self.designator)
        result.require("type", self.facility_type)
        result.require("airport_location", self.airport_location)
        return result

    def build(self) -> Optional[Unit]:
        """Build the Unit, or None if a required field is missing."""
        result = self.validate()
        if not result.is_valid:
            logger.debug(f"Skipping Unit {self.designator}: missing {', '.join(result.missing_fields)}")
            return None
        return Unit(
            designator=self.designator,
            facility_type=self.facility_type,
            airport_location=self.airport_location,
        )


class AirportBuilder:
    """Accumulates the fields of an Airport. The designator is optional."""

    def __init__(self):
        self.id: Optional[str] = None
        self.designator: Optional[str] = None
        self.coordinate: Optional[LatLon] = None

    def with_id(self, gml_id: str) -> 'AirportBuilder':
        self.id = gml_id
        return self

    def with_designator(self, designator: str) -> 'AirportBuilder':
        self.designator = designator
        return self

    def with_coordinate(self, coordinate: LatLon) -> 'AirportBuilder':
        self.coordinate = coordinate
        return self

    def validate(self) -> ValidationResult:
        result = ValidationResult()
        result.require("id", self.id)
        result.require("coordinate", self.coordinate)
        return result

    def build(self) -> Optional[Airport]:
        """Build the Airport, or None if the id or coordinate is missing."""
        result = self.validate()
        if not result.is_valid:
            logger.debug(f"Skipping AirportHeliport {self.id}: missing {', '.join(result.missing_fields)}")
            return None
        return Airport(
            id=self.id,
            designator=self.designator or "",
            coordinate=self.coordinate,
        )


class NavaidBuilder:
    """Accumulates the fields of a Navaid."""

    def __init__(self):
        self.designator: Optional[str] = None
        self.kind: Optional[NavaidType] = None
        self.coordinate: Optional[LatLon] = None
        self.low_altitude_region_id: Optional[str] = None

    def with_designator(self, designator: str) -> 'NavaidBuilder':
        self.designator = designator
        return self

    def with_kind(self, kind: NavaidType) -> 'NavaidBuilder':
        self.kind = kind
        return self

    def with_coordinate(self, coordinate: LatLon) -> 'NavaidBuilder':
        self.coordinate = coordinate
        return self

    def with_low_altitude_region_id(self, region_id: str) -> 'NavaidBuilder':
        self.low_altitude_region_id = region_id
        return self

    def validate(self) -> ValidationResult:
        result = ValidationResult()
        result.require("designator", self.designator)
        result.require("type", self.kind)
        result.require("coordinate", self.coordinate)
        result.require("low_altitude_region_id", self.low_altitude_region_id)
        return result

    def build(self) -> Optional[Navaid]:
        """Build the Navaid, or None if a required field is missing."""
        result = self.validate()
        if not result.is_valid:
            logger.debug(f"Skipping Navaid {self.designator}: missing {', '.join(result.missing_fields)}")
            return None
        return Navaid(
            designator=self.designator,
            kind=self.kind,
            coordinate=self.coordinate,
            low_altitude_region_id=self.low_altitude_region_id,
        )
