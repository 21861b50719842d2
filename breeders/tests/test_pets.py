import unittest

from breeders.errors import BuilderReusedError, MissingRequiredFieldError
from breeders.models import Pet
from breeders.pets import DEFAULT_DESCRIPTION, PetBuilder, new_pet


class NewPetTests(unittest.TestCase):
    def test_new_pet_has_species_and_default_description(self):
        pet = new_pet("dog")
        self.assertEqual(pet.species, "dog")
        self.assertEqual(pet.breed, "")
        self.assertEqual(pet.description, DEFAULT_DESCRIPTION)


class PetBuilderTests(unittest.TestCase):
    def test_build_with_required_fields_and_weight(self):
        pet = (
            PetBuilder()
            .set_species("dog")
            .set_breed("mixed breed")
            .set_weight(15)
            .build()
        )
        self.assertEqual(pet, Pet(species="dog", breed="mixed breed", weight=15))
        self.assertEqual(pet.color, "")
        self.assertEqual(pet.age, 0)
        self.assertFalse(pet.age_estimated)
        self.assertEqual(
            pet.as_dict(), {"species": "dog", "breed": "mixed breed", "weight": 15}
        )

    def test_build_all_fields(self):
        pet = (
            PetBuilder()
            .set_species("cat")
            .set_breed("mixed breed")
            .set_weight(9)
            .set_min_weight(5)
            .set_max_weight(12)
            .set_average_weight(8)
            .set_description("Probably has some lion.")
            .set_lifespan(15)
            .set_geographic_origin("Unknown")
            .set_color("Black and White")
            .set_age(3)
            .set_age_estimated(True)
            .build()
        )
        self.assertEqual(pet.max_weight, 12)
        self.assertEqual(pet.geographic_origin, "Unknown")
        self.assertTrue(pet.as_dict()["age_estimated"])

    def test_missing_species_is_reported(self):
        builder = PetBuilder().set_breed("mixed breed").set_weight(15)
        with self.assertRaises(MissingRequiredFieldError) as ctx:
            builder.build()
        self.assertEqual(ctx.exception.field, "species")

    def test_species_checked_before_breed(self):
        with self.assertRaises(MissingRequiredFieldError) as ctx:
            PetBuilder().build()
        self.assertEqual(ctx.exception.field, "species")

    def test_missing_breed_is_reported(self):
        with self.assertRaises(MissingRequiredFieldError) as ctx:
            PetBuilder().set_species("dog").set_breed("").build()
        self.assertEqual(ctx.exception.field, "breed")

    def test_weight_bounds_are_not_cross_checked(self):
        pet = (
            PetBuilder()
            .set_species("dog")
            .set_breed("mixed breed")
            .set_weight(100)
            .set_max_weight(10)
            .build()
        )
        self.assertEqual(pet.weight, 100)

    def test_builder_cannot_be_reused(self):
        builder = PetBuilder().set_species("dog").set_breed("mixed breed")
        builder.build()
        with self.assertRaises(BuilderReusedError):
            builder.build()
        with self.assertRaises(BuilderReusedError):
            builder.set_color("brown")


if __name__ == "__main__":
    unittest.main()
