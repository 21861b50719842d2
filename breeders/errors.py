"""
Error taxonomy for pet construction and breed lookup.
"""

from __future__ import annotations


class PetError(Exception):
    """Base class for every failure raised by the pet-creation layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": True, "message": self.message}


class InvalidSpeciesError(PetError):
    """Species tag outside the supported set."""

    def __init__(self, species: str):
        super().__init__(f"invalid species supplied: {species!r}")
        self.species = species


class BreedNotFoundError(PetError):
    def __init__(self, breed: str):
        super().__init__(f"breed not found: {breed!r}")
        self.breed = breed


class LookupUnavailableError(PetError):
    """The breed store (or remote service) could not be reached."""


class RemoteUnavailableError(LookupUnavailableError):
    """Transport or decoding failure talking to the remote breed service."""


class MissingRequiredFieldError(PetError):
    def __init__(self, field: str):
        super().__init__(f"{field} is required")
        self.field = field


class BuilderReusedError(PetError):
    """A PetBuilder was touched again after build() already ran."""

    def __init__(self):
        super().__init__("builder has already been used; create a new one")
