from django.conf import settings
from django.http import HttpResponse
from django.urls import reverse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from . import services
from .helper import render_certificate_pdf
from .selectors import certificate_get, institution_query, registry_events, registry_get
from .serializers import (
    AuthorizeInstitutionSerializer,
    CertificateIssueSerializer,
    CertificateRevokeSerializer,
    CertificateSerializer,
    EventFilterSerializer,
    InstitutionStatusSerializer,
    RegistryEventSerializer,
    RegistrySerializer,
    VerificationSerializer,
)
from .verification import certificate_verify


@api_view(["GET"])
def registry_detail(request, registry_id):
    registry = registry_get(registry_id=registry_id)
    return Response(RegistrySerializer(registry).data)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def authorize_institution(request, registry_id, address):
    registry = registry_get(registry_id=registry_id)
    serializer = AuthorizeInstitutionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    services.institution_authorize(
        caller=request.user,
        registry=registry,
        address=address,
        name=serializer.validated_data["name"],
    )
    status_ = institution_query(registry=registry, address=address)
    return Response(InstitutionStatusSerializer(status_).data, status=status.HTTP_200_OK)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def revoke_institution(request, registry_id, address):
    registry = registry_get(registry_id=registry_id)
    services.institution_revoke(caller=request.user, registry=registry, address=address)
    status_ = institution_query(registry=registry, address=address)
    return Response(InstitutionStatusSerializer(status_).data, status=status.HTTP_200_OK)


@api_view(["GET"])
def institution_detail(request, registry_id, address):
    registry = registry_get(registry_id=registry_id)
    status_ = institution_query(registry=registry, address=address)
    return Response(InstitutionStatusSerializer(status_).data)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def issue_certificate(request, registry_id):
    registry = registry_get(registry_id=registry_id)
    serializer = CertificateIssueSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    certificate = services.certificate_issue(caller=request.user, registry=registry, **serializer.validated_data)
    return Response(CertificateSerializer(certificate).data, status=status.HTTP_201_CREATED)


@api_view(["GET"])
def certificate_detail(request, registry_id, certificate_id):
    registry = registry_get(registry_id=registry_id)
    certificate = certificate_get(registry=registry, certificate_id=certificate_id)
    return Response(CertificateSerializer(certificate).data)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def revoke_certificate(request, registry_id, certificate_id):
    registry = registry_get(registry_id=registry_id)
    serializer = CertificateRevokeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    certificate = services.certificate_revoke(
        caller=request.user,
        registry=registry,
        certificate_id=certificate_id,
        reason=serializer.validated_data["reason"],
    )
    return Response(CertificateSerializer(certificate).data, status=status.HTTP_200_OK)


@api_view(["GET"])
def verify_certificate(request, registry_id, certificate_id):
    registry = registry_get(registry_id=registry_id)
    verification = certificate_verify(registry=registry, certificate_id=certificate_id)
    return Response(VerificationSerializer(verification).data)


@api_view(["GET"])
def certificate_document(request, registry_id, certificate_id):
    registry = registry_get(registry_id=registry_id)
    certificate = certificate_get(registry=registry, certificate_id=certificate_id)

    verify_path = reverse("verify-certificate", args=[registry.id, certificate.certificate_id])
    base_url = getattr(settings, "RECORDS_VERIFY_BASE_URL", "")
    verification_url = base_url.rstrip("/") + verify_path if base_url else request.build_absolute_uri(verify_path)

    response = HttpResponse(render_certificate_pdf(certificate, verification_url), content_type="application/pdf")
    response["Content-Disposition"] = f'attachment; filename="certificate_{certificate.certificate_id}.pdf"'
    return response


@api_view(["GET"])
def event_log(request, registry_id):
    registry = registry_get(registry_id=registry_id)
    filters = EventFilterSerializer(data=request.query_params)
    filters.is_valid(raise_exception=True)

    events = registry_events(registry=registry, **filters.validated_data)
    return Response(RegistryEventSerializer(events, many=True).data)
