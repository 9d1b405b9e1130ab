# Append-only registry notifications, published to subscribers after commit.
import logging

from django.db import transaction
from django.dispatch import Signal

from .models import EventKind, Registry, RegistryEvent

logger = logging.getLogger(__name__)

institution_authorized = Signal()
institution_revoked = Signal()
certificate_issued = Signal()
certificate_revoked = Signal()

SIGNALS = {
    EventKind.INSTITUTION_AUTHORIZED: institution_authorized,
    EventKind.INSTITUTION_REVOKED: institution_revoked,
    EventKind.CERTIFICATE_ISSUED: certificate_issued,
    EventKind.CERTIFICATE_REVOKED: certificate_revoked,
}


def _publish(event: RegistryEvent) -> None:
    signal = SIGNALS[event.kind]
    for receiver, result in signal.send_robust(sender=RegistryEvent, event=event):
        if isinstance(result, Exception):
            logger.error("Receiver %r failed on %s #%s: %s", receiver, event.kind, event.sequence, result)


def record_event(registry: Registry, kind: str, payload: dict) -> RegistryEvent:
    """Append an event. ``registry`` must already be locked by the caller."""
    registry.event_count += 1
    registry.save(update_fields=["event_count"])
    event = RegistryEvent.objects.create(
        registry=registry,
        sequence=registry.event_count,
        kind=kind,
        payload=payload,
    )
    transaction.on_commit(lambda: _publish(event))
    return event
