"""
Value objects shared by the store, the remote adapters and the factories.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class Breed:
    breed: str
    id: int = 0
    weight_low_lbs: int = 0
    weight_high_lbs: int = 0
    average_weight: int = 0
    lifespan: int = 0
    details: str = ""
    alternate_names: str = ""
    geographic_origin: str = ""

    def as_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Breed":
        """
        Build a Breed from a loosely typed mapping (JSON body, XML element
        text, seed file). Unknown keys are ignored and missing ones take
        their defaults.
        """
        if not data.get("breed"):
            raise ValueError("breed record has no name")
        values: dict[str, Any] = {}
        for f in fields(cls):
            raw = data.get(f.name)
            if raw is None or raw == "":
                continue
            text = str(raw).strip()
            values[f.name] = int(text) if f.type == "int" else text
        return cls(**values)


@dataclass(frozen=True)
class Pet:
    species: str
    breed: str
    min_weight: int = 0
    max_weight: int = 0
    average_weight: int = 0
    weight: int = 0
    description: str = ""
    lifespan: int = 0
    geographic_origin: str = ""
    color: str = ""
    age: int = 0
    age_estimated: bool = False

    def as_dict(self) -> dict:
        """Wire form: species and breed always, other attributes only when set."""
        payload = {"species": self.species, "breed": self.breed}
        for key, value in asdict(self).items():
            if key in payload or not value:
                continue
            payload[key] = value
        return payload

    @classmethod
    def from_breed(cls, species: str, breed: Breed) -> "Pet":
        return cls(
            species=species,
            breed=breed.breed,
            min_weight=breed.weight_low_lbs,
            max_weight=breed.weight_high_lbs,
            average_weight=breed.average_weight,
            lifespan=breed.lifespan,
            description=breed.details,
            geographic_origin=breed.geographic_origin,
        )
