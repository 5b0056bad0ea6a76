"""
Social Graph Store

In-memory store of people and the undirected friendships between them.
"""

import itertools
import logging
from typing import Iterator, Optional, Union

from friendgraph.models.entities import Friendship, Person

logger = logging.getLogger(__name__)


class SocialGraph:
    """Owns the people and friendships of one social network.

    People keep their insertion order, which drives deterministic
    iteration, saved output, and tie-breaking in searches and rankings.
    Every mutator is total over arbitrary string input: unknown names,
    duplicates and no-op removals are reported through the return value,
    never raised.
    """

    def __init__(self):
        self._people: dict[str, Person] = {}
        self._sequence: dict[str, int] = {}
        self._adjacency: dict[str, set[str]] = {}
        self._friendships: dict[frozenset[str], Friendship] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._people)

    def __contains__(self, name: object) -> bool:
        return name in self._people

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._people.values()))

    @property
    def people(self) -> list[Person]:
        """All people in insertion order."""
        return list(self._people.values())

    @property
    def friendships(self) -> list[Friendship]:
        """All friendships in insertion order."""
        return list(self._friendships.values())

    @property
    def friend_count(self) -> int:
        """Number of friendships in the network."""
        return len(self._friendships)

    def has_person(self, name: str) -> bool:
        """Check whether a person with this exact name exists."""
        return name in self._people

    def get_person(self, name: str) -> Optional[Person]:
        """Get a person by name."""
        return self._people.get(name)

    def sequence_of(self, name: str) -> int:
        """Insertion sequence number of a person, used for ordering."""
        return self._sequence[name]

    def add_person(self, name: str) -> bool:
        """Add a person unless one with the same name already exists.

        Returns:
            True if a new person was inserted
        """
        if name in self._people:
            return False

        self._people[name] = Person(name=name)
        self._sequence[name] = next(self._counter)
        self._adjacency[name] = set()
        logger.debug(f"Added person {name!r}")
        return True

    def remove_person(self, name: str) -> bool:
        """Remove a person together with every friendship touching them.

        Returns:
            False if no such person exists
        """
        if name not in self._people:
            return False

        neighbors = self._adjacency.pop(name)
        for neighbor in neighbors:
            self._adjacency[neighbor].discard(name)
            del self._friendships[frozenset((name, neighbor))]

        del self._people[name]
        del self._sequence[name]
        logger.debug(f"Removed person {name!r} and {len(neighbors)} friendships")
        return True

    def add_friend(self, name1: str, name2: str) -> bool:
        """Create a friendship between two existing, distinct people.

        Returns:
            True if a new friendship was created
        """
        if name1 == name2:
            return False
        if name1 not in self._people or name2 not in self._people:
            return False

        key = frozenset((name1, name2))
        if key in self._friendships:
            return False

        self._friendships[key] = Friendship(
            first=self._people[name1],
            second=self._people[name2],
        )
        self._adjacency[name1].add(name2)
        self._adjacency[name2].add(name1)
        logger.debug(f"Added friendship {name1!r} - {name2!r}")
        return True

    def remove_friend(self, name1: str, name2: str) -> bool:
        """Remove the friendship between two people if there is one.

        Returns:
            True if a friendship was removed
        """
        friendship = self._friendships.pop(frozenset((name1, name2)), None)
        if friendship is None:
            return False

        self._adjacency[name1].discard(name2)
        self._adjacency[name2].discard(name1)
        logger.debug(f"Removed friendship {name1!r} - {name2!r}")
        return True

    def are_connected(self, name1: str, name2: str) -> bool:
        """Check whether two people are friends."""
        return name2 in self._adjacency.get(name1, ())

    def get_friends(self, person: Union[Person, str]) -> set[Person]:
        """Get everyone directly connected to person."""
        name = person.name if isinstance(person, Person) else person
        return {self._people[n] for n in self._adjacency.get(name, ())}

    def neighbor_names(self, name: str) -> set[str]:
        """Names of direct friends; empty for unknown names."""
        return set(self._adjacency.get(name, ()))

    def friends_in_order(self, person: Union[Person, str]) -> list[Person]:
        """Get direct friends ordered by insertion order of the people."""
        name = person.name if isinstance(person, Person) else person
        ordered = sorted(self._adjacency.get(name, ()), key=self._sequence.__getitem__)
        return [self._people[n] for n in ordered]

    def clear(self) -> None:
        """Remove all people and friendships."""
        self._people.clear()
        self._sequence.clear()
        self._adjacency.clear()
        self._friendships.clear()
        logger.debug("Cleared social graph")

    def __repr__(self) -> str:
        return f"SocialGraph(people={len(self._people)}, friendships={len(self._friendships)})"
