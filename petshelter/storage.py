"""Reading and writing the shelter's comma-separated data file."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from .models import Cat, Dog, InterestedAdopter, Pet

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Read the whole number at the start of ``text``, ignoring what follows."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return int(match.group(1))


def _adopter_from(name: str, phone: str) -> InterestedAdopter | None:
    if name and name != "None" and phone and phone != "None":
        return InterestedAdopter(name, phone)
    return None


def parse_line(line: str) -> Pet:
    """Build a pet from one line of the data file.

    Missing trailing fields are read as empty strings. The ID and the days
    in shelter must start with a whole number, otherwise ``ValueError``.
    """
    fields = line.rstrip("\n").split(",")

    def field_at(index: int) -> str:
        return fields[index] if index < len(fields) else ""

    kind, name = field_at(0), field_at(1)
    pet_id = _to_int(field_at(2))
    days = _to_int(field_at(3))
    common = {
        "name": name,
        "id": pet_id,
        "days_in_shelter": days,
        "color": field_at(4),
        "animal_type": field_at(5),
    }

    if kind == "Dog":
        return Dog(
            **common,
            breed=field_at(6),
            hair_length=field_at(7),
            adopter=_adopter_from(field_at(8), field_at(9)),
        )
    if kind == "Cat":
        return Cat(
            **common,
            breed=field_at(6),
            coat_pattern=field_at(7),
            adopter=_adopter_from(field_at(8), field_at(9)),
        )
    return Pet(**common, adopter=_adopter_from(field_at(6), field_at(7)))


def format_line(pet: Pet) -> str:
    """Render a pet as one line of the data file, without adopter details."""
    common = [
        pet.name,
        str(pet.id),
        str(pet.days_in_shelter),
        pet.color,
        pet.animal_type,
    ]
    if type(pet) is Dog:
        return ",".join(["Dog", *common, pet.breed, pet.hair_length])
    if type(pet) is Cat:
        return ",".join(["Cat", *common, pet.breed, pet.coat_pattern])
    return ",".join(["Pet", *common])


def load_shelter(path: str | Path) -> list[Pet]:
    """Load every pet listed in the file at ``path``.

    Raises ``OSError`` if the file cannot be opened and ``ValueError`` if a
    line cannot be read.
    """
    pets: list[Pet] = []
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            try:
                pets.append(parse_line(line))
            except ValueError as exc:
                raise ValueError(f"line {number}: {exc}") from exc
    return pets


def save_shelter(path: str | Path, pets: Iterable[Pet]) -> None:
    """Write the pets to ``path``, counting one more day for each of them.

    Raises ``OSError`` if the file cannot be opened; the pets are then left
    untouched.
    """
    with open(path, "w", encoding="utf-8") as handle:
        for pet in pets:
            pet.increment_days_in_shelter()
            handle.write(format_line(pet) + "\n")