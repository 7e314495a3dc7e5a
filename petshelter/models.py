"""Shelter residents and the people interested in adopting them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InterestedAdopter:
    """A person who has shown interest in adopting a pet."""

    name: str
    phone_number: str


@dataclass
class Pet:
    """An animal living in the shelter."""

    name: str = "N/A"
    id: int = -1
    days_in_shelter: int = -1
    color: str = "N/A"
    animal_type: str = "N/A"
    adopter: InterestedAdopter | None = field(default=None)

    def increment_days_in_shelter(self) -> None:
        """Count one more day spent in the shelter."""
        self.days_in_shelter += 1

    def clear_adopter(self) -> None:
        """Forget any interested adopter."""
        self.adopter = None

    def info(self) -> str:
        """Return the printable description of this pet."""
        lines = [
            "",
            "",
            f"Name: {self.name}",
            f"ID: {self.id}",
            f"Days in Shelter: {self.days_in_shelter}",
            f"Color: {self.color}",
            f"Animal Type: {self.animal_type}",
        ]
        if self.adopter is not None:
            lines.append(f"Adopter Name: {self.adopter.name}")
            lines.append(f"Adopter Phone: {self.adopter.phone_number}")
        else:
            lines.append("No Adopter Assigned")
        return "\n".join(lines) + "\n"


@dataclass
class Cat(Pet):
    """A cat, with its breed and coat pattern."""

    breed: str = ""
    coat_pattern: str = ""

    def info(self) -> str:
        """Return the printable description of this cat."""
        return (
            super().info()
            + f"Breed: {self.breed}\n"
            + f", Coat Pattern: {self.coat_pattern}\n"
        )


@dataclass
class Dog(Pet):
    """A dog, with its breed and hair length."""

    breed: str = ""
    hair_length: str = ""

    def info(self) -> str:
        """Return the printable description of this dog."""
        return (
            super().info()
            + f"Breed: {self.breed}\n"
            + f"Hair Length: {self.hair_length}\n"
        )