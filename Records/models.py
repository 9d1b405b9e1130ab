import uuid

from django.db import models

# largest value a BigIntegerField column holds
MAX_GRADE = 2**63 - 1


class Registry(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    administrator = models.CharField(max_length=255)
    certificate_count = models.PositiveBigIntegerField(default=0)
    event_count = models.PositiveBigIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"Registry {self.id} (admin {self.administrator})"


class Institution(models.Model):
    registry = models.ForeignKey(Registry, on_delete=models.PROTECT, related_name="institutions")
    address = models.CharField(max_length=255)
    name = models.CharField(max_length=255, blank=True, default="")
    authorized = models.BooleanField(default=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["registry", "address"], name="institution_registry_address_unique"),
        ]

    def __str__(self):
        return self.name or self.address


class Certificate(models.Model):
    registry = models.ForeignKey(Registry, on_delete=models.PROTECT, related_name="certificates")
    certificate_id = models.CharField(max_length=66, unique=True, editable=False)
    sequence = models.PositiveBigIntegerField(editable=False)

    student_name = models.CharField(max_length=255)
    student_id = models.CharField(max_length=100)
    degree = models.CharField(max_length=255)
    major = models.CharField(max_length=255)
    # dates are stored exactly as submitted
    issue_date = models.CharField(max_length=64)
    graduation_date = models.CharField(max_length=64)
    grade = models.BigIntegerField()

    issuer = models.ForeignKey(Institution, on_delete=models.PROTECT, related_name="certificates")
    institution_name = models.CharField(max_length=255)
    issued_at = models.DateTimeField(auto_now_add=True)

    is_revoked = models.BooleanField(default=False)
    revocation_reason = models.TextField(blank=True, default="")
    revoked_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["registry", "sequence"], name="certificate_registry_sequence_unique"),
        ]

    @property
    def issuer_address(self):
        return self.issuer.address

    def __str__(self):
        return f"{self.student_name} - {self.degree} in {self.major} ({self.certificate_id})"


class EventKind(models.TextChoices):
    INSTITUTION_AUTHORIZED = "InstitutionAuthorized"
    INSTITUTION_REVOKED = "InstitutionRevoked"
    CERTIFICATE_ISSUED = "CertificateIssued"
    CERTIFICATE_REVOKED = "CertificateRevoked"


class RegistryEvent(models.Model):
    registry = models.ForeignKey(Registry, on_delete=models.PROTECT, related_name="events")
    sequence = models.PositiveBigIntegerField()
    kind = models.CharField(max_length=32, choices=EventKind.choices)
    payload = models.JSONField(default=dict)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["sequence"]
        constraints = [
            models.UniqueConstraint(fields=["registry", "sequence"], name="event_registry_sequence_unique"),
        ]

    def __str__(self):
        return f"#{self.sequence} {self.kind}"
