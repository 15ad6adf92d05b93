"""
Data models for the nasr_sct library.

This package contains the immutable records extracted from NASR data
(units, airports, navaids, fixes), the LatLon coordinate codec, and the
builders used to assemble records from partially specified elements.
"""

from .latlon import LatLon
from .unit import Unit, ARTCC
from .airport import Airport
from .navaid import Navaid, NavaidType
from .fix import Fix
from .airspace import AirspaceClass
from .validation import ValidationResult, ValidationError
from .builders import UnitBuilder, AirportBuilder, NavaidBuilder

__all__ = [
    # Core models
    'LatLon',
    'Unit',
    'ARTCC',
    'Airport',
    'Navaid',
    'NavaidType',
    'Fix',
    'AirspaceClass',
    # Builder API
    'ValidationResult',
    'ValidationError',
    'UnitBuilder',
    'AirportBuilder',
    'NavaidBuilder',
]
