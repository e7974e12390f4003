"""Generic CRUD capability shared by every entity store."""

from typing import List, Optional, Protocol, TypeVar

# Generic type for domain entities
T = TypeVar("T")


class CrudOperations(Protocol[T]):
    """
    Standard CRUD operations keyed by a numeric identity.

    This is a structural interface: adapters satisfy it by providing the
    methods below, they do not subclass it.

    Type Parameters:
        T: The domain entity type the store manages
    """

    async def add(self, entity: T) -> T:
        """
        Persist a new entity.

        Args:
            entity: The entity to add, without an identity

        Returns:
            The stored entity with generated fields (ID, timestamps)
        """
        ...

    async def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve an entity by its ID.

        Returns:
            The entity if found, None otherwise
        """
        ...

    async def get_all(self, skip: int = 0, limit: int = 100) -> List[T]:
        """
        Retrieve entities ordered by ID, with pagination.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return
        """
        ...

    async def update(self, entity: T) -> T:
        """
        Replace the stored attributes of an existing entity.

        Raises:
            InvalidEntityStateException: If the entity has no ID
            EntityNotFoundException: If no entity has that ID
        """
        ...

    async def delete(self, id: int) -> bool:
        """
        Delete an entity by ID.

        Returns:
            True if deleted, False if not found
        """
        ...

    async def exists(self, id: int) -> bool:
        """Check if an entity with this ID exists."""
        ...
