"""Queries and reports over the pets in the shelter."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import Pet


def find_oldest(pets: Sequence[Pet]) -> Pet:
    """Return the pet with the most days in the shelter; the first on ties.

    Raises ``ValueError`` when there are no pets.
    """
    if not pets:
        raise ValueError("No pets available to find the oldest resident.")
    oldest = pets[0]
    for pet in pets[1:]:
        if pet.days_in_shelter > oldest.days_in_shelter:
            oldest = pet
    return oldest


def format_shelter(pets: Iterable[Pet]) -> str:
    """Return the printable listing of every pet in the shelter."""
    return "Animals in shelter:\n\n" + "".join(pet.info() for pet in pets)