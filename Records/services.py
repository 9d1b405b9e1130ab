import logging

from django.db import transaction
from django.utils import timezone

from .access import CallerIdentity, require_administrator, require_authorized_institution, require_recorded_issuer
from .events import record_event
from .exceptions import RegistryError, StateError
from .helper import certificate_identifier
from .models import Certificate, EventKind, Institution, Registry
from .selectors import certificate_get

logger = logging.getLogger(__name__)


def _lock(registry: Registry) -> Registry:
    # every mutation on a registry is serialized behind this row lock
    return Registry.objects.select_for_update().get(pk=registry.pk)


@transaction.atomic
def registry_create(*, administrator: str) -> Registry:
    registry = Registry.objects.create(administrator=administrator)
    logger.info("Registry %s created, administrator %s", registry.id, administrator)
    return registry


@transaction.atomic
def institution_authorize(*, caller: CallerIdentity, registry: Registry, address: str, name: str) -> Institution:
    """Trust ``address`` under ``name``. Re-authorizing just replaces the name."""
    registry = _lock(registry)
    try:
        require_administrator(registry, caller)
    except RegistryError as e:
        logger.warning("authorize %s rejected for %s: %s", address, caller, e.message)
        raise

    institution, _ = Institution.objects.get_or_create(registry=registry, address=address)
    institution.name = name
    institution.authorized = True
    institution.save(update_fields=["name", "authorized", "updated_at"])

    record_event(registry, EventKind.INSTITUTION_AUTHORIZED, {"institution_id": address, "name": name})
    logger.info("Institution %s authorized as %r in registry %s", address, name, registry.id)
    return institution


@transaction.atomic
def institution_revoke(*, caller: CallerIdentity, registry: Registry, address: str) -> None:
    registry = _lock(registry)
    try:
        require_administrator(registry, caller)
    except RegistryError as e:
        logger.warning("revoke %s rejected for %s: %s", address, caller, e.message)
        raise

    # never-authorized identities already read as unauthorized, nothing to store
    Institution.objects.filter(registry=registry, address=address).update(authorized=False, updated_at=timezone.now())

    record_event(registry, EventKind.INSTITUTION_REVOKED, {"institution_id": address})
    logger.info("Institution %s revoked in registry %s", address, registry.id)


@transaction.atomic
def certificate_issue(
    *,
    caller: CallerIdentity,
    registry: Registry,
    student_name: str,
    student_id: str,
    degree: str,
    major: str,
    issue_date: str,
    graduation_date: str,
    grade: int,
) -> Certificate:
    registry = _lock(registry)
    try:
        institution = require_authorized_institution(registry, caller)
    except RegistryError as e:
        logger.warning("issue rejected for %s: %s", caller, e.message)
        raise

    fields = {
        "student_name": student_name,
        "student_id": student_id,
        "degree": degree,
        "major": major,
        "issue_date": issue_date,
        "graduation_date": graduation_date,
        "grade": grade,
    }
    registry.certificate_count += 1
    registry.save(update_fields=["certificate_count"])

    certificate = Certificate.objects.create(
        registry=registry,
        certificate_id=certificate_identifier(registry.id, registry.certificate_count, caller.address, fields),
        sequence=registry.certificate_count,
        issuer=institution,
        institution_name=institution.name,
        **fields,
    )

    record_event(
        registry,
        EventKind.CERTIFICATE_ISSUED,
        {
            "certificate_id": certificate.certificate_id,
            "issuer_id": caller.address,
            "institution_name": certificate.institution_name,
            **fields,
        },
    )
    logger.info("Certificate %s issued by %s in registry %s", certificate.certificate_id, caller, registry.id)
    return certificate


@transaction.atomic
def certificate_revoke(*, caller: CallerIdentity, registry: Registry, certificate_id: str, reason: str) -> Certificate:
    registry = _lock(registry)
    try:
        certificate = certificate_get(registry=registry, certificate_id=certificate_id)
        require_recorded_issuer(certificate, caller)
        if not certificate.issuer.authorized:
            raise StateError("Issuer must currently be authorized to revoke")
    except RegistryError as e:
        logger.warning("revoke certificate %s rejected for %s: %s", certificate_id, caller, e.message)
        raise

    certificate.is_revoked = True
    certificate.revocation_reason = reason
    certificate.revoked_at = timezone.now()
    certificate.save(update_fields=["is_revoked", "revocation_reason", "revoked_at"])

    record_event(
        registry,
        EventKind.CERTIFICATE_REVOKED,
        {"certificate_id": certificate_id, "issuer_id": caller.address, "reason": reason},
    )
    logger.info("Certificate %s revoked by %s: %s", certificate_id, caller, reason)
    return certificate
