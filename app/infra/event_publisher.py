import logging
import requests
from pydantic import BaseModel
from app.domain.ports.event_publisher import EventPublisherPort

logger = logging.getLogger(__name__)


class HttpEventPublisher(EventPublisherPort):
    """POSTs each event as JSON to `{base_url}/{topic}`."""

    def __init__(self, base_url: str, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def publish(self, topic: str, event: BaseModel) -> None:
        payload = event.model_dump(mode="json", by_alias=True)
        r = requests.post(f"{self.base_url}/{topic}", json=payload, timeout=self.timeout)
        if r.status_code >= 300:
            logger.warning("Event sink answered %s for topic %s: %s", r.status_code, topic, r.text)
        else:
            logger.debug("📤 Published to %s: %s", topic, payload)


class LoggingEventPublisher(EventPublisherPort):
    def publish(self, topic: str, event: BaseModel) -> None:
        logger.info("📤 [%s] %s", topic, event.model_dump(mode="json", by_alias=True))


def create_event_publisher(settings) -> EventPublisherPort:
    """HTTP publisher when a sink URL is configured, otherwise log-only."""
    if settings.EVENT_SINK_URL:
        return HttpEventPublisher(settings.EVENT_SINK_URL, timeout=settings.EVENT_SINK_TIMEOUT)
    return LoggingEventPublisher()
