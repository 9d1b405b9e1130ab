from dataclasses import dataclass

from .models import Registry
from .selectors import certificate_get


@dataclass(frozen=True)
class Verification:
    certificate_id: str
    is_valid: bool
    institution_id: str
    institution_name: str
    is_revoked: bool
    issuer_authorized: bool


def certificate_verify(*, registry: Registry, certificate_id: str) -> Verification:
    # both flags are read fresh on every call; the name is the issuance snapshot
    certificate = certificate_get(registry=registry, certificate_id=certificate_id)
    issuer_authorized = certificate.issuer.authorized
    return Verification(
        certificate_id=certificate.certificate_id,
        is_valid=not certificate.is_revoked and issuer_authorized,
        institution_id=certificate.issuer.address,
        institution_name=certificate.institution_name,
        is_revoked=certificate.is_revoked,
        issuer_authorized=issuer_authorized,
    )
