import pytest

from Records import events
from Records.exceptions import AuthorizationError
from Records.models import EventKind, RegistryEvent
from Records.selectors import registry_events
from Records.services import certificate_issue, certificate_revoke, institution_authorize, institution_revoke

from .conftest import ADMIN, INST_A, JOHN_DOE, STRANGER


def test_every_mutation_appends_one_event_in_order(registry, certificate):
    certificate_revoke(caller=INST_A, registry=registry, certificate_id=certificate.certificate_id, reason="r")
    institution_revoke(caller=ADMIN, registry=registry, address="InstA")

    log = list(registry_events(registry=registry))
    assert [e.kind for e in log] == [
        EventKind.INSTITUTION_AUTHORIZED,
        EventKind.CERTIFICATE_ISSUED,
        EventKind.CERTIFICATE_REVOKED,
        EventKind.INSTITUTION_REVOKED,
    ]
    assert [e.sequence for e in log] == [1, 2, 3, 4]


def test_event_payloads(registry, certificate):
    certificate_revoke(caller=INST_A, registry=registry, certificate_id=certificate.certificate_id, reason="r")
    authorized, issued, revoked = registry_events(registry=registry)

    assert authorized.payload == {"institution_id": "InstA", "name": "Hong Kong University"}
    assert issued.payload["certificate_id"] == certificate.certificate_id
    assert issued.payload["issuer_id"] == "InstA"
    assert issued.payload["grade"] == 385
    assert revoked.payload == {"certificate_id": certificate.certificate_id, "issuer_id": "InstA", "reason": "r"}


def test_filtering_by_cursor_and_kind(registry, hku):
    for _ in range(2):
        certificate_issue(caller=INST_A, registry=registry, **JOHN_DOE)

    assert [e.sequence for e in registry_events(registry=registry, after=1)] == [2, 3]
    issued = registry_events(registry=registry, kind=EventKind.CERTIFICATE_ISSUED)
    assert issued.count() == 2


def test_rejected_operation_leaves_no_event(registry, hku):
    with pytest.raises(AuthorizationError):
        certificate_issue(caller=STRANGER, registry=registry, **JOHN_DOE)
    assert RegistryEvent.objects.filter(registry=registry).count() == 1


def test_signals_fire_after_commit(registry, django_capture_on_commit_callbacks):
    received = []

    def on_authorized(sender, event, **kwargs):
        received.append((event.kind, event.payload["institution_id"]))

    events.institution_authorized.connect(on_authorized)
    try:
        with django_capture_on_commit_callbacks(execute=True):
            institution_authorize(caller=ADMIN, registry=registry, address="InstA", name="Hong Kong University")
    finally:
        events.institution_authorized.disconnect(on_authorized)

    assert received == [(EventKind.INSTITUTION_AUTHORIZED, "InstA")]


def test_failing_receiver_does_not_reach_caller(registry, django_capture_on_commit_callbacks):
    def broken(sender, event, **kwargs):
        raise RuntimeError("indexer down")

    events.certificate_issued.connect(broken)
    try:
        with django_capture_on_commit_callbacks(execute=True):
            institution_authorize(caller=ADMIN, registry=registry, address="InstA", name="Hong Kong University")
            cert = certificate_issue(caller=INST_A, registry=registry, **JOHN_DOE)
    finally:
        events.certificate_issued.disconnect(broken)

    assert cert.certificate_id


def test_no_signal_for_rejected_operation(registry, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks() as callbacks:
        with pytest.raises(AuthorizationError):
            institution_authorize(caller=STRANGER, registry=registry, address="InstA", name="x")
    assert callbacks == []
