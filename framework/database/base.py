from abc import ABC, abstractmethod

class BaseDatabaseDriver(ABC):
    """Lifecycle contract for storage drivers managed by DatabaseManager."""

    @abstractmethod
    async def connect(self):
        pass

    @abstractmethod
    async def disconnect(self):
        pass

    @abstractmethod
    async def get_session(self):
        """Async generator yielding one session per unit of work."""
        pass
