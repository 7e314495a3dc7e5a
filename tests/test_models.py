import pytest

from petshelter.models import Cat, Dog, InterestedAdopter, Pet


def _adopter():
    return InterestedAdopter("Alice", "phone-a")


def test_pet_defaults():
    pet = Pet()
    assert pet.name == "N/A"
    assert pet.id == -1
    assert pet.days_in_shelter == -1
    assert pet.color == "N/A"
    assert pet.animal_type == "N/A"
    assert pet.adopter is None


def test_pet_positional_construction():
    pet = Pet("Milo", 7, 3, "Brown", "Rabbit")
    assert (pet.name, pet.id, pet.days_in_shelter, pet.color, pet.animal_type) == (
        "Milo",
        7,
        3,
        "Brown",
        "Rabbit",
    )


def test_increment_days_in_shelter():
    pet = Pet("Milo", 7, 3, "Brown", "Rabbit")
    pet.increment_days_in_shelter()
    pet.increment_days_in_shelter()
    assert pet.days_in_shelter == 5


def test_increment_from_default():
    pet = Pet()
    pet.increment_days_in_shelter()
    assert pet.days_in_shelter == 0


def test_clear_adopter():
    pet = Pet("Milo", 7, 3, "Brown", "Rabbit", adopter=_adopter())
    assert pet.adopter.name == "Alice"
    pet.clear_adopter()
    assert pet.adopter is None


def test_adopter_fields_are_mutable():
    adopter = _adopter()
    adopter.name = "Bob"
    adopter.phone_number = "phone-b"
    assert adopter == InterestedAdopter("Bob", "phone-b")


def test_pet_info_without_adopter():
    text = Pet("Milo", 7, 3, "Brown", "Rabbit").info()
    assert text.startswith("\n\nName: Milo\n")
    assert "ID: 7\n" in text
    assert "Days in Shelter: 3\n" in text
    assert "Color: Brown\n" in text
    assert "Animal Type: Rabbit\n" in text
    assert text.endswith("No Adopter Assigned\n")


def test_pet_info_with_adopter():
    text = Pet("Milo", 7, 3, "Brown", "Rabbit", adopter=_adopter()).info()
    assert "Adopter Name: Alice\n" in text
    assert text.endswith("Adopter Phone: phone-a\n")
    assert "No Adopter Assigned" not in text


def test_pet_info_field_order():
    text = Pet("Milo", 7, 3, "Brown", "Rabbit").info()
    keys = ["Name: ", "ID: ", "Days in Shelter: ", "Color: ", "Animal Type: "]
    positions = [text.index(key) for key in keys]
    assert positions == sorted(positions)


def test_cat_defaults_and_fields():
    cat = Cat(name="Tom", id=2, days_in_shelter=4, color="Grey", animal_type="Cat",
              breed="Siamese", coat_pattern="Tabby")
    assert cat.breed == "Siamese"
    assert cat.coat_pattern == "Tabby"
    assert Cat().breed == ""
    assert Cat().name == "N/A"


def test_cat_info_extends_pet_info():
    cat = Cat("Tom", 2, 4, "Grey", "Cat", breed="Siamese", coat_pattern="Tabby")
    base = Pet("Tom", 2, 4, "Grey", "Cat").info()
    text = cat.info()
    assert text.startswith(base)
    assert text[len(base):] == "Breed: Siamese\n, Coat Pattern: Tabby\n"


def test_dog_info_extends_pet_info():
    dog = Dog("Rex", 1, 10, "Black", "Dog", adopter=_adopter(),
              breed="Beagle", hair_length="Short")
    base = Pet("Rex", 1, 10, "Black", "Dog", adopter=_adopter()).info()
    text = dog.info()
    assert text.startswith(base)
    assert text[len(base):] == "Breed: Beagle\nHair Length: Short\n"


def test_dog_is_pet_and_keeps_own_fields():
    dog = Dog(breed="Beagle", hair_length="Long")
    dog.increment_days_in_shelter()
    assert isinstance(dog, Pet)
    assert dog.days_in_shelter == 0
    assert dog.hair_length == "Long"


@pytest.mark.parametrize("kind", [Pet, Cat, Dog])
def test_clear_adopter_changes_info(kind):
    pet = kind(name="Ann", adopter=_adopter())
    assert "Adopter Name: Alice" in pet.info()
    pet.clear_adopter()
    assert "No Adopter Assigned\n" in pet.info()