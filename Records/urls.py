from django.urls import path

from . import views

urlpatterns = [
    path('registries/<uuid:registry_id>/', views.registry_detail, name='registry-detail'),
    # identities may contain "/", so the action routes must come before the detail route
    path('registries/<uuid:registry_id>/institutions/<path:address>/authorize/', views.authorize_institution, name='authorize-institution'),
    path('registries/<uuid:registry_id>/institutions/<path:address>/revoke/', views.revoke_institution, name='revoke-institution'),
    path('registries/<uuid:registry_id>/institutions/<path:address>/', views.institution_detail, name='institution-detail'),
    path('registries/<uuid:registry_id>/certificates/', views.issue_certificate, name='issue-certificate'),
    path('registries/<uuid:registry_id>/certificates/<str:certificate_id>/', views.certificate_detail, name='certificate-detail'),
    path('registries/<uuid:registry_id>/certificates/<str:certificate_id>/revoke/', views.revoke_certificate, name='revoke-certificate'),
    path('registries/<uuid:registry_id>/certificates/<str:certificate_id>/verify/', views.verify_certificate, name='verify-certificate'),
    path('registries/<uuid:registry_id>/certificates/<str:certificate_id>/document/', views.certificate_document, name='certificate-document'),
    path('registries/<uuid:registry_id>/events/', views.event_log, name='event-log'),
]
