import pytest
from rest_framework.test import APIClient

from Records.access import CallerIdentity
from Records.services import certificate_issue, institution_authorize, registry_create

ADMIN = CallerIdentity("0xAdmin")
INST_A = CallerIdentity("InstA")
INST_B = CallerIdentity("InstB")
STRANGER = CallerIdentity("0xStranger")

JOHN_DOE = dict(
    student_name="John Doe",
    student_id="S123456",
    degree="Bachelor of Science",
    major="Computer Science",
    issue_date="2023-06-15",
    graduation_date="2023-06-30",
    grade=385,
)


@pytest.fixture
def registry(db):
    return registry_create(administrator=ADMIN.address)


@pytest.fixture
def hku(registry):
    return institution_authorize(caller=ADMIN, registry=registry, address=INST_A.address, name="Hong Kong University")


@pytest.fixture
def certificate(registry, hku):
    return certificate_issue(caller=INST_A, registry=registry, **JOHN_DOE)


@pytest.fixture
def api_client():
    return APIClient()


def as_caller(client, caller):
    client.credentials(HTTP_X_CALLER_IDENTITY=caller.address)
    return client
