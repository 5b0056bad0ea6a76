"""
Core Data Models

Pydantic models representing people in the social network and the
friendships between them.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Person(BaseModel):
    """A person in the social network, identified solely by name."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Unique, case-sensitive identifier")

    @property
    def display_name(self) -> str:
        """Human-readable name for display."""
        return self.name

    def __str__(self) -> str:
        return self.name


class Friendship(BaseModel):
    """An undirected friendship between two people.

    Equality and hashing ignore endpoint order, so Friendship(a, b) and
    Friendship(b, a) describe the same relationship.
    """
    model_config = ConfigDict(frozen=True)

    first: Person
    second: Person

    @property
    def names(self) -> tuple[str, str]:
        """Endpoint names in stored order."""
        return (self.first.name, self.second.name)

    def connects(self, x: Person, y: Person) -> bool:
        """Check whether this friendship joins x and y, in either order."""
        return (self.first == x and self.second == y) or (
            self.first == y and self.second == x
        )

    def involves(self, person: Person) -> bool:
        """Check whether person is one of the endpoints."""
        return self.first == person or self.second == person

    def other(self, person: Person) -> Optional[Person]:
        """Get the endpoint opposite to person, or None if not involved."""
        if self.first == person:
            return self.second
        if self.second == person:
            return self.first
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Friendship):
            return NotImplemented
        return self.connects(other.first, other.second)

    def __hash__(self) -> int:
        return hash(frozenset(self.names))

    def __str__(self) -> str:
        return f"{self.first.name} - {self.second.name}"
