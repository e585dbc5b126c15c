"""
Abstract interfaces for crew and crew membership storage.

Crews and their members live in two repositories. Deleting a crew does not
remove its memberships.
"""

import uuid
from abc import ABC, abstractmethod

from workforce.domain.entities import Crew, CrewMember


class CrewRepository(ABC):
    """Abstract interface for crew persistence operations."""

    @abstractmethod
    async def create(self, crew: Crew) -> None:
        """Persist a new crew (members are ignored)."""
        pass

    @abstractmethod
    async def find_by_id(self, crew_id: uuid.UUID) -> Crew | None:
        """
        Retrieve a crew by identifier.

        Returns:
            Crew with its members (and each member's user) if found,
            None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Crew]:
        """List all crews with their members, in creation order."""
        pass

    @abstractmethod
    async def update(self, crew: Crew) -> None:
        """Overwrite a stored crew (members are ignored)."""
        pass

    @abstractmethod
    async def delete(self, crew_id: uuid.UUID) -> None:
        """Delete a crew."""
        pass


class CrewMemberRepository(ABC):
    """
    Abstract interface for crew membership operations.

    A user should appear at most once per crew, but this is not a stored
    constraint.
    """

    @abstractmethod
    async def create(self, member: CrewMember) -> None:
        """Persist a new membership."""
        pass

    @abstractmethod
    async def find_by_id(self, member_id: uuid.UUID) -> CrewMember | None:
        """Retrieve a membership by identifier, or None."""
        pass

    @abstractmethod
    async def find_by_crew_id(self, crew_id: uuid.UUID) -> list[CrewMember]:
        """List the members of a crew, each with its user attached."""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: uuid.UUID) -> list[CrewMember]:
        """List the crew memberships of a user."""
        pass

    @abstractmethod
    async def delete(self, member_id: uuid.UUID) -> None:
        """Delete a membership."""
        pass

    @abstractmethod
    async def delete_by_crew_and_user(
        self, crew_id: uuid.UUID, user_id: uuid.UUID
    ) -> int:
        """
        Remove a user from a crew.

        Args:
            crew_id: Crew identifier
            user_id: Member user identifier

        Returns:
            Number of memberships removed (0 when the user was not a member)
        """
        pass
