"""
Abstract factories for the supported species.

Dogs get their breed from the local store, cats from the remote breed service.
Both factories return a species wrapper that can describe itself, so callers
that only need text never care which path produced the pet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from breeders.context import SharedContext
from breeders.errors import InvalidSpeciesError
from breeders.models import Breed, Pet
from breeders.pets import new_pet

logger = logging.getLogger(__name__)


class AnimalFromFactory(Protocol):
    pet: Pet
    breed: Optional[Breed]

    def describe(self) -> str:
        ...

    def as_dict(self) -> dict:
        ...


@dataclass(frozen=True)
class _FromFactory:
    pet: Pet
    breed: Optional[Breed] = None

    def describe(self) -> str:
        return f"This animal is a {self.pet.breed}"

    def as_dict(self) -> dict:
        return {
            "pet": self.pet.as_dict(),
            "breed": self.breed.as_dict() if self.breed else None,
            "description": self.describe(),
        }


class DogFromFactory(_FromFactory):
    pass


class CatFromFactory(_FromFactory):
    pass


class PetFactory(Protocol):
    def new_pet(self) -> AnimalFromFactory:
        ...

    def new_pet_with_breed(self, breed: str) -> AnimalFromFactory:
        ...


class DogFactory:
    species = "dog"

    def __init__(self, context: Optional[SharedContext] = None):
        self.context = context

    def new_pet(self) -> DogFromFactory:
        return DogFromFactory(pet=new_pet(self.species))

    def new_pet_with_breed(self, breed: str) -> DogFromFactory:
        # Dog breeds live in the local store.
        record = _require(self.context).store.get_breed_by_name(breed)
        return DogFromFactory(pet=Pet.from_breed(self.species, record), breed=record)


class CatFactory:
    species = "cat"

    def __init__(self, context: Optional[SharedContext] = None):
        self.context = context

    def new_pet(self) -> CatFromFactory:
        return CatFromFactory(pet=new_pet(self.species))

    def new_pet_with_breed(self, breed: str) -> CatFromFactory:
        # Cat breeds come from the remote service; lookup errors propagate.
        record = _require(self.context).remote.get_breed_by_name(breed)
        return CatFromFactory(pet=Pet.from_breed(self.species, record), breed=record)


FACTORIES: dict[str, type] = {
    DogFactory.species: DogFactory,
    CatFactory.species: CatFactory,
}

SUPPORTED_SPECIES = tuple(FACTORIES)


def _require(context: Optional[SharedContext]) -> SharedContext:
    if context is None:
        raise RuntimeError("breed lookup needs a shared context")
    return context


def _factory_for(species: str, context: Optional[SharedContext]) -> PetFactory:
    factory_cls = FACTORIES.get(species)
    if factory_cls is None:
        raise InvalidSpeciesError(species)
    return factory_cls(context)


def create_from_factory(
    species: str, context: Optional[SharedContext] = None
) -> AnimalFromFactory:
    animal = _factory_for(species, context).new_pet()
    logger.debug("Created bare %s: %s", species, animal.describe())
    return animal


def create_with_breed_from_factory(
    species: str, breed_name: str, context: SharedContext
) -> AnimalFromFactory:
    animal = _factory_for(species, context).new_pet_with_breed(breed_name)
    logger.debug("Created %s with breed %r", species, breed_name)
    return animal
