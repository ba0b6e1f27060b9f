"""Vehicle records as returned by the API."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Position:
    latitude: Number
    longitude: Number


@dataclass(frozen=True)
class Vehicle:
    """A vehicle owned by the remote server. Never mutated locally."""

    id: int
    shortcode: str
    battery: Number
    position: Position

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Vehicle":
        position = payload["position"]
        return cls(
            id=payload["id"],
            shortcode=payload["shortcode"],
            battery=payload["battery"],
            position=Position(
                latitude=position["latitude"],
                longitude=position["longitude"],
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary_line(self) -> str:
        return (
            f"ID: {self.id} | Shortcode: {self.shortcode} | Battery: {self.battery} "
            f"| Lat: {self.position.latitude} | Lon: {self.position.longitude}"
        )
