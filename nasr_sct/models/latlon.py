#!/usr/bin/env python3

import math
import re
from typing import Optional, Tuple
from dataclasses import dataclass

from ..exceptions import CoordinateError

# Legacy NASR text coordinate, e.g. 31-53-00.510N
_DMS_PATTERN = re.compile(r"(\d+)-(\d+)-(\d+\.\d+)([A-Z])")


@dataclass(frozen=True)
class LatLon:
    """
    A geodetic coordinate in decimal degrees.

    - Latitude: -90 to +90 degrees (negative for South, positive for North)
    - Longitude: -180 to +180 degrees (negative for West, positive for East)

    Three text representations are supported:
    - AIXM ``gml:pos`` text: ``"<longitude> <latitude>"`` in decimal degrees
    - NASR legacy text: ``"DD-MM-SS.sssH"`` per component
    - VRC output text: ``"N031.53.00.510 W081.23.18.000"``
    """

    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not -90 <= self.latitude <= 90:
            raise CoordinateError(f"Latitude must be between -90 and 90 degrees, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise CoordinateError(f"Longitude must be between -180 and 180 degrees, got {self.longitude}")

    @classmethod
    def from_aixm(cls, text: str) -> 'LatLon':
        """
        Decode an AIXM position.

        AIXM writes positions longitude first, so the two tokens are swapped.

        Args:
            text: Two whitespace separated decimal numbers, ``"lon lat"``

        Returns:
            The decoded coordinate

        Raises:
            CoordinateError: If the text does not hold exactly two numbers
        """
        tokens = text.split()
        if len(tokens) != 2:
            raise CoordinateError(f"Expected two coordinate values, got {text!r}")
        try:
            longitude, latitude = (float(token) for token in tokens)
        except ValueError:
            raise CoordinateError(f"Invalid coordinate value in {text!r}")
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise CoordinateError(f"Invalid coordinate value in {text!r}")
        return cls(latitude, longitude)

    @classmethod
    def from_fix_txt(cls, lat: str, lon: str) -> Optional['LatLon']:
        """
        Decode a legacy NASR coordinate pair.

        Args:
            lat: Latitude text, e.g. ``"31-53-00.510N"``
            lon: Longitude text, e.g. ``"081-23-18.000W"``

        Returns:
            The decoded coordinate, or None if either component is malformed
        """
        latitude = _parse_dms(lat, "NS")
        longitude = _parse_dms(lon, "EW")
        if latitude is None or longitude is None:
            return None
        try:
            return cls(latitude, longitude)
        except CoordinateError:
            return None

    def to_dms(self) -> Tuple[str, str]:
        """
        Format both components as VRC degrees.minutes.seconds.

        Seconds are not truncated and are printed zero padded with three
        decimals, e.g. ``N031.53.00.510``.

        Returns:
            Tuple of (latitude string, longitude string)
        """
        return (
            _format_dms(self.latitude, "N" if self.latitude >= 0 else "S"),
            _format_dms(self.longitude, "E" if self.longitude >= 0 else "W"),
        )

    def to_vrc(self) -> str:
        """Format as a VRC coordinate pair, latitude first."""
        return " ".join(self.to_dms())

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


def _parse_dms(text: str, hemispheres: str) -> Optional[float]:
    match = _DMS_PATTERN.fullmatch(text.strip())
    if match is None:
        return None
    degrees, minutes, seconds, hemisphere = match.groups()
    if hemisphere not in hemispheres:
        return None
    value = int(degrees) + int(minutes) / 60.0 + float(seconds) / 3600.0
    if hemisphere in ("S", "W"):
        value = -value
    return value


def _format_dms(value: float, hemisphere: str) -> str:
    # Split a single rounded count of milliseconds so seconds never reach 60
    total_seconds, millis = divmod(round(abs(value) * 3600 * 1000), 1000)
    total_minutes, seconds = divmod(total_seconds, 60)
    degrees, minutes = divmod(total_minutes, 60)
    return f"{hemisphere}{degrees:03d}.{minutes:02d}.{seconds:02d}.{millis:03d}"
