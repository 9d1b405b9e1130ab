from rest_framework.response import Response
from rest_framework.views import exception_handler

from .exceptions import RegistryError


def registry_exception_handler(exc, context):
    if isinstance(exc, RegistryError):
        body = {"error": exc.message, "code": exc.code}
        if exc.extra:
            body["extra"] = exc.extra
        return Response(body, status=exc.status)
    return exception_handler(exc, context)
