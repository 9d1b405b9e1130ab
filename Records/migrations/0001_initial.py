import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Registry",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("administrator", models.CharField(max_length=255)),
                ("certificate_count", models.PositiveBigIntegerField(default=0)),
                ("event_count", models.PositiveBigIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
        ),
        migrations.CreateModel(
            name="Institution",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("address", models.CharField(max_length=255)),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                ("authorized", models.BooleanField(default=False)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "registry",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="institutions",
                        to="Records.registry",
                    ),
                ),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("registry", "address"), name="institution_registry_address_unique"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Certificate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("certificate_id", models.CharField(editable=False, max_length=66, unique=True)),
                ("sequence", models.PositiveBigIntegerField(editable=False)),
                ("student_name", models.CharField(max_length=255)),
                ("student_id", models.CharField(max_length=100)),
                ("degree", models.CharField(max_length=255)),
                ("major", models.CharField(max_length=255)),
                ("issue_date", models.CharField(max_length=64)),
                ("graduation_date", models.CharField(max_length=64)),
                ("grade", models.BigIntegerField()),
                ("institution_name", models.CharField(max_length=255)),
                ("issued_at", models.DateTimeField(auto_now_add=True)),
                ("is_revoked", models.BooleanField(default=False)),
                ("revocation_reason", models.TextField(blank=True, default="")),
                ("revoked_at", models.DateTimeField(blank=True, null=True)),
                (
                    "issuer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="certificates",
                        to="Records.institution",
                    ),
                ),
                (
                    "registry",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="certificates",
                        to="Records.registry",
                    ),
                ),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("registry", "sequence"), name="certificate_registry_sequence_unique"),
                ],
            },
        ),
        migrations.CreateModel(
            name="RegistryEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("sequence", models.PositiveBigIntegerField()),
                (
                    "kind",
                    models.CharField(
                        choices=[
                            ("InstitutionAuthorized", "Institution Authorized"),
                            ("InstitutionRevoked", "Institution Revoked"),
                            ("CertificateIssued", "Certificate Issued"),
                            ("CertificateRevoked", "Certificate Revoked"),
                        ],
                        max_length=32,
                    ),
                ),
                ("payload", models.JSONField(default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "registry",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="events",
                        to="Records.registry",
                    ),
                ),
            ],
            options={
                "ordering": ["sequence"],
                "constraints": [
                    models.UniqueConstraint(fields=("registry", "sequence"), name="event_registry_sequence_unique"),
                ],
            },
        ),
    ]
