import pytest

from Records.access import (
    CallerIdentity,
    require_administrator,
    require_authorized_institution,
    require_recorded_issuer,
)
from Records.exceptions import AuthorizationError

from .conftest import ADMIN, INST_A, INST_B


def test_administrator_guard(registry):
    require_administrator(registry, ADMIN)
    with pytest.raises(AuthorizationError, match="Only the administrator can manage institutions"):
        require_administrator(registry, CallerIdentity("0xadmin"))


def test_authorized_institution_guard_returns_record(registry, hku):
    assert require_authorized_institution(registry, INST_A).pk == hku.pk
    with pytest.raises(AuthorizationError, match="Only authorized institutions can issue certificates"):
        require_authorized_institution(registry, INST_B)


def test_recorded_issuer_guard(certificate):
    require_recorded_issuer(certificate, INST_A)
    with pytest.raises(AuthorizationError, match="Only the issuing institution can revoke this certificate"):
        require_recorded_issuer(certificate, INST_B)
