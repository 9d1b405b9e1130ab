from dataclasses import dataclass

from django.db.models import QuerySet

from .exceptions import NotFoundError
from .models import Certificate, Institution, Registry, RegistryEvent


@dataclass(frozen=True)
class InstitutionStatus:
    address: str
    name: str
    authorized: bool


def registry_get(*, registry_id) -> Registry:
    try:
        return Registry.objects.get(pk=registry_id)
    except Registry.DoesNotExist:
        raise NotFoundError("Registry does not exist", extra={"registry_id": str(registry_id)})


def institution_query(*, registry: Registry, address: str) -> InstitutionStatus:
    institution = Institution.objects.filter(registry=registry, address=address).first()
    if institution is None:
        return InstitutionStatus(address=address, name="", authorized=False)
    return InstitutionStatus(address=address, name=institution.name, authorized=institution.authorized)


def certificate_get(*, registry: Registry, certificate_id: str) -> Certificate:
    try:
        return Certificate.objects.select_related("issuer").get(registry=registry, certificate_id=certificate_id)
    except Certificate.DoesNotExist:
        raise NotFoundError("Certificate does not exist", extra={"certificate_id": certificate_id})


def registry_events(*, registry: Registry, after: int = 0, kind: str | None = None) -> QuerySet:
    qs = RegistryEvent.objects.filter(registry=registry, sequence__gt=after)
    if kind:
        qs = qs.filter(kind=kind)
    return qs.order_by("sequence")
