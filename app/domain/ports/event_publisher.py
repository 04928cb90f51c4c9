from abc import ABC, abstractmethod

from pydantic import BaseModel


class EventPublisherPort(ABC):
    @abstractmethod
    def publish(self, topic: str, event: BaseModel) -> None:
        """Fire-and-forget; no acknowledgment is returned."""
        raise NotImplementedError
