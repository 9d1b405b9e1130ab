from django.conf import settings
from rest_framework.authentication import BaseAuthentication

from .access import CallerIdentity


class CallerIdentityAuthentication(BaseAuthentication):
    # the upstream gateway has already authenticated the caller

    def _header(self):
        return getattr(settings, "RECORDS_CALLER_HEADER", "X-Caller-Identity")

    def authenticate(self, request):
        address = request.headers.get(self._header(), "").strip()
        if not address:
            return None
        return CallerIdentity(address=address), None

    def authenticate_header(self, request):
        return self._header()
