"""Interactive menu for managing the shelter."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .models import Cat, Dog, InterestedAdopter, Pet
from .shelter import find_oldest, format_shelter
from .storage import load_shelter, save_shelter

_MENU = (
    "\n"
    "Menu Options:\n"
    "1. Print Shelter\n"
    "2. Add Pet\n"
    "3. Find Oldest Resident\n"
    "4. Save Shelter\n"
    "5. Exit Program\n"
    "Enter your choice: "
)


class TokenReader:
    """Reads whitespace-separated words from a text stream after a prompt."""

    def __init__(self, stream: Iterable[str], out: TextIO) -> None:
        self._out = out
        self._tokens = self._split(stream)

    @staticmethod
    def _split(stream: Iterable[str]) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def read(self, prompt: str = "") -> str:
        """Show ``prompt`` and return the next word; ``EOFError`` when input ends."""
        self._out.write(prompt)
        self._out.flush()
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("input exhausted") from None


def _read_int(reader: TokenReader, prompt: str) -> int:
    token = reader.read(prompt)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected a whole number, got {token!r}") from None


def read_pet(reader: TokenReader) -> Pet:
    """Ask for a new pet's details, including an optional interested adopter."""
    kind = reader.read("Enter type of pet (Dog/Cat/Other): ")
    name = reader.read("Enter name: ")
    pet_id = _read_int(reader, "Enter ID: ")
    days = _read_int(reader, "Enter days in shelter: ")
    color = reader.read("Enter color: ")
    animal_type = reader.read("Enter animal type: ")
    common = {
        "name": name,
        "id": pet_id,
        "days_in_shelter": days,
        "color": color,
        "animal_type": animal_type,
    }

    pet: Pet
    if kind == "Dog":
        breed = reader.read("Enter breed: ")
        hair_length = reader.read("Enter hair length: ")
        pet = Dog(**common, breed=breed, hair_length=hair_length)
    elif kind == "Cat":
        breed = reader.read("Enter breed: ")
        coat_pattern = reader.read("Enter coat pattern: ")
        pet = Cat(**common, breed=breed, coat_pattern=coat_pattern)
    else:
        pet = Pet(**common)

    if reader.read("Is there an interested adopter? (yes/no): ") == "yes":
        adopter_name = reader.read("Enter adopter name: ")
        adopter_phone = reader.read("Enter adopter phone number: ")
        pet.adopter = InterestedAdopter(adopter_name, adopter_phone)
    return pet


def _load(reader: TokenReader, out: TextIO) -> list[Pet]:
    path = reader.read("Enter the file name to load: ")
    try:
        pets = load_shelter(path)
    except OSError:
        print("Failed to open file.", file=out)
        return []
    except ValueError as exc:
        print(f"Failed to read file: {exc}", file=out)
        return []
    print("Shelter data successfully loaded!", file=out)
    return pets


def _menu(reader: TokenReader, out: TextIO, pets: list[Pet]) -> None:
    while True:
        answer = reader.read(_MENU)
        if answer == "1":
            out.write(format_shelter(pets))
        elif answer == "2":
            try:
                pets.append(read_pet(reader))
            except ValueError as exc:
                print(f"Invalid input: {exc}. Pet not added.", file=out)
        elif answer == "3":
            try:
                oldest = find_oldest(pets)
            except ValueError as exc:
                print(exc, file=out)
            else:
                print(
                    f"The oldest resident is {oldest.name} with "
                    f"{oldest.days_in_shelter} days in shelter.",
                    file=out,
                )
        elif answer == "4":
            path = reader.read("Enter the file name to save: ")
            try:
                save_shelter(path, pets)
            except OSError:
                print("Failed to open file.", file=out)
            else:
                print("Shelter data successfully saved!", file=out)
        elif answer == "5":
            print("Thank you for using the program!", file=out)
            return
        else:
            print("Invalid option. Please try again!", file=out)


def _run(reader: TokenReader, out: TextIO) -> None:
    use_program = reader.read(
        "Welcome!\n"
        "This is a program that manages and stores pet shelter information!\n"
        "Would you like to use the program? (yes/no): "
    )
    if use_program != "yes":
        print("Goodbye!", file=out)
        return

    file_choice = reader.read(
        "Would you like to load an existing file or start without a file? "
        "Enter: yes/no: "
    )
    if file_choice == "yes":
        pets = _load(reader, out)
    elif file_choice == "no":
        print("Starting with an empty shelter.", file=out)
        pets = []
    else:
        print("Invalid option. Exiting program.", file=out)
        return
    _menu(reader, out, pets)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive shelter manager on standard input and output.

    ``argv`` is accepted for the command entry point; no options are defined.
    """
    out = sys.stdout
    reader = TokenReader(sys.stdin, out)
    try:
        _run(reader, out)
    except EOFError:
        out.write("\n")
    return 0