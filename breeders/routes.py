"""
HTTP routes for the breeders API.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from breeders.context import SharedContext
from breeders.dependencies import get_context
from breeders.factories import create_from_factory, create_with_breed_from_factory
from breeders.pets import PetBuilder, new_pet
from breeders.schemas import AnimalResponse, BreedResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/dog-from-factory")
def dog_from_factory():
    return new_pet("dog").as_dict()


@router.get("/cat-from-factory")
def cat_from_factory():
    return new_pet("cat").as_dict()


@router.get("/dog-from-abstract-factory", response_model=AnimalResponse)
def dog_from_abstract_factory():
    return create_from_factory("dog").as_dict()


@router.get("/cat-from-abstract-factory", response_model=AnimalResponse)
def cat_from_abstract_factory():
    return create_from_factory("cat").as_dict()


@router.get(
    "/animal-from-abstract-factory/{species}/{breed}", response_model=AnimalResponse
)
def animal_from_abstract_factory(
    species: str, breed: str, context: SharedContext = Depends(get_context)
):
    return create_with_breed_from_factory(species, breed, context).as_dict()


@router.get("/dog-from-builder")
def dog_from_builder():
    pet = (
        PetBuilder()
        .set_species("dog")
        .set_breed("mixed breed")
        .set_weight(15)
        .set_description(
            "A mixed breed of unknown origin. Probably has some German Shepherd heritage."
        )
        .set_color("Black and White")
        .set_age(3)
        .set_age_estimated(True)
        .build()
    )
    return pet.as_dict()


@router.get("/cat-from-builder")
def cat_from_builder():
    pet = (
        PetBuilder()
        .set_species("cat")
        .set_breed("mixed breed")
        .set_weight(15)
        .set_description("A mixed breed of unknown origin. Probably has some lion.")
        .set_color("Black and White")
        .set_age(3)
        .set_age_estimated(True)
        .build()
    )
    return pet.as_dict()


@router.get("/dog-breeds", response_model=list[BreedResponse])
def dog_breeds(context: SharedContext = Depends(get_context)):
    return [breed.as_dict() for breed in context.store.all()]


@router.get("/cat-breeds", response_model=list[BreedResponse])
def cat_breeds(context: SharedContext = Depends(get_context)):
    return [breed.as_dict() for breed in context.remote.get_all_breeds()]
