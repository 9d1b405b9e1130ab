from dataclasses import dataclass

from .exceptions import AuthorizationError
from .models import Certificate, Institution, Registry


@dataclass(frozen=True)
class CallerIdentity:
    """An already-authenticated principal, as handed over by the host."""

    address: str

    # lets DRF treat the identity as request.user
    @property
    def is_authenticated(self) -> bool:
        return True

    def __str__(self):
        return self.address


def require_administrator(registry: Registry, caller: CallerIdentity) -> None:
    if caller.address != registry.administrator:
        raise AuthorizationError("Only the administrator can manage institutions")


def require_authorized_institution(registry: Registry, caller: CallerIdentity) -> Institution:
    institution = Institution.objects.filter(registry=registry, address=caller.address).first()
    if institution is None or not institution.authorized:
        raise AuthorizationError("Only authorized institutions can issue certificates")
    return institution


def require_recorded_issuer(certificate: Certificate, caller: CallerIdentity) -> None:
    if caller.address != certificate.issuer.address:
        raise AuthorizationError("Only the issuing institution can revoke this certificate")
