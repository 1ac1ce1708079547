from abc import ABC, abstractmethod

class BaseDatabaseDriver(ABC):
    """Lifecycle of a pooled database client."""

    @abstractmethod
    async def connect(self):
        pass

    @abstractmethod
    async def disconnect(self):
        pass
