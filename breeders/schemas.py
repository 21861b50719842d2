"""
Pydantic schemas for the breeders API.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class BreedResponse(BaseModel):
    id: int = 0
    breed: str
    weight_low_lbs: int = 0
    weight_high_lbs: int = 0
    average_weight: int = 0
    lifespan: int = 0
    details: str = ""
    alternate_names: str = ""
    geographic_origin: str = ""


class AnimalResponse(BaseModel):
    pet: dict[str, Any]
    breed: Optional[BreedResponse] = None
    description: str
