"""
Simple pet factory and the fluent PetBuilder.
"""

from __future__ import annotations

from typing import Any

from breeders.errors import BuilderReusedError, MissingRequiredFieldError
from breeders.models import Pet

DEFAULT_DESCRIPTION = "no description entered yet"


def new_pet(species: str) -> Pet:
    """Return a bare pet of the given species with no breed data."""
    return Pet(species=species, breed="", description=DEFAULT_DESCRIPTION)


class PetBuilder:
    """
    Assemble a Pet one attribute at a time::

        pet = (
            PetBuilder()
            .set_species("dog")
            .set_breed("mixed breed")
            .set_weight(15)
            .build()
        )

    ``build()`` checks species first, then breed, and raises
    ``MissingRequiredFieldError`` for the first one that is empty. Fields are
    otherwise independent; no cross-field validation happens.

    A builder is single use: once ``build()`` has run, calling it again or
    calling any setter raises ``BuilderReusedError``.
    """

    def __init__(self):
        self._values: dict[str, Any] = {}
        self._built = False

    def _set(self, name: str, value: Any) -> "PetBuilder":
        if self._built:
            raise BuilderReusedError()
        self._values[name] = value
        return self

    def set_species(self, species: str) -> "PetBuilder":
        return self._set("species", species)

    def set_breed(self, breed: str) -> "PetBuilder":
        return self._set("breed", breed)

    def set_weight(self, weight: int) -> "PetBuilder":
        return self._set("weight", weight)

    def set_min_weight(self, weight: int) -> "PetBuilder":
        return self._set("min_weight", weight)

    def set_max_weight(self, weight: int) -> "PetBuilder":
        return self._set("max_weight", weight)

    def set_average_weight(self, weight: int) -> "PetBuilder":
        return self._set("average_weight", weight)

    def set_description(self, description: str) -> "PetBuilder":
        return self._set("description", description)

    def set_lifespan(self, lifespan: int) -> "PetBuilder":
        return self._set("lifespan", lifespan)

    def set_geographic_origin(self, origin: str) -> "PetBuilder":
        return self._set("geographic_origin", origin)

    def set_color(self, color: str) -> "PetBuilder":
        return self._set("color", color)

    def set_age(self, age: int) -> "PetBuilder":
        return self._set("age", age)

    def set_age_estimated(self, estimated: bool) -> "PetBuilder":
        return self._set("age_estimated", estimated)

    def build(self) -> Pet:
        if self._built:
            raise BuilderReusedError()
        self._built = True
        for required in ("species", "breed"):
            if not self._values.get(required):
                raise MissingRequiredFieldError(required)
        return Pet(**self._values)
