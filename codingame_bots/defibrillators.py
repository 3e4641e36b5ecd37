"""Find the defibrillator closest to a user's position."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterable

EARTH_RADIUS_KM = 6371.0


def parse_degrees(text: str) -> float:
    """Parse an angle in degrees with a comma or a dot as decimal mark, in radians."""
    return math.radians(float(text.strip().replace(",", ".")))


@dataclass(frozen=True)
class Defibrillator:
    """A named defibrillator at a longitude and latitude, both in radians."""

    name: str
    lon: float
    lat: float

    @classmethod
    def from_line(cls, line: str) -> "Defibrillator":
        """Parse a ``id;name;address;phone;longitude;latitude`` record."""
        fields = line.rstrip("\r\n").split(";")
        if len(fields) < 6:
            raise ValueError(f"malformed defibrillator record: {line!r}")
        return cls(fields[1], parse_degrees(fields[4]), parse_degrees(fields[5]))

    def distance(self, lon: float, lat: float) -> float:
        """Equirectangular distance in kilometres to a position in radians."""
        x = (lon - self.lon) * math.cos((lat + self.lat) / 2.0)
        y = lat - self.lat
        return math.hypot(x, y) * EARTH_RADIUS_KM


def nearest(defibrillators: Iterable[Defibrillator], lon: float, lat: float) -> Defibrillator:
    """Return the closest defibrillator; the first one wins a tie."""
    best = min(defibrillators, key=lambda d: d.distance(lon, lat), default=None)
    if best is None:
        raise ValueError("no defibrillators given")
    return best


def main(argv=None) -> None:
    """Read the position and defibrillators from standard input, print the nearest."""
    lines = sys.stdin.read().splitlines()
    lon = parse_degrees(lines[0])
    lat = parse_degrees(lines[1])
    count = int(lines[2])
    defibrillators = [Defibrillator.from_line(line) for line in lines[3 : 3 + count]]
    print(nearest(defibrillators, lon, lat).name)


if __name__ == "__main__":
    main()