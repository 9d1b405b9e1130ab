from rest_framework import serializers

from .models import MAX_GRADE, Certificate, EventKind, Registry, RegistryEvent


class RegistrySerializer(serializers.ModelSerializer):
    class Meta:
        model = Registry
        fields = ["id", "administrator", "certificate_count", "event_count", "created_at"]


class InstitutionStatusSerializer(serializers.Serializer):
    address = serializers.CharField()
    name = serializers.CharField(allow_blank=True)
    authorized = serializers.BooleanField()


class AuthorizeInstitutionSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)


class CertificateIssueSerializer(serializers.Serializer):
    student_name = serializers.CharField(max_length=255)
    student_id = serializers.CharField(max_length=100)
    degree = serializers.CharField(max_length=255)
    major = serializers.CharField(max_length=255)
    issue_date = serializers.CharField(max_length=64)
    graduation_date = serializers.CharField(max_length=64)
    grade = serializers.IntegerField(min_value=0, max_value=MAX_GRADE)


class CertificateRevokeSerializer(serializers.Serializer):
    reason = serializers.CharField(allow_blank=True)


class CertificateSerializer(serializers.ModelSerializer):
    issuing_institution = serializers.CharField(source="issuer.address", read_only=True)

    class Meta:
        model = Certificate
        fields = [
            "certificate_id",
            "student_name",
            "student_id",
            "degree",
            "major",
            "issue_date",
            "graduation_date",
            "grade",
            "issuing_institution",
            "institution_name",
            "is_revoked",
            "revocation_reason",
            "issued_at",
            "revoked_at",
        ]


class VerificationSerializer(serializers.Serializer):
    certificate_id = serializers.CharField()
    is_valid = serializers.BooleanField()
    institution_id = serializers.CharField()
    institution_name = serializers.CharField()
    is_revoked = serializers.BooleanField()
    issuer_authorized = serializers.BooleanField()


class RegistryEventSerializer(serializers.ModelSerializer):
    class Meta:
        model = RegistryEvent
        fields = ["sequence", "kind", "payload", "created_at"]


class EventFilterSerializer(serializers.Serializer):
    after = serializers.IntegerField(min_value=0, required=False, default=0)
    kind = serializers.ChoiceField(choices=EventKind.choices, required=False)
