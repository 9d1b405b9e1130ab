class RegistryError(Exception):
    status = 400
    code = "REGISTRY_ERROR"

    def __init__(self, message, extra=None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}


class AuthorizationError(RegistryError):
    """Caller lacks the role the operation requires"""
    status = 403
    code = "NOT_AUTHORIZED"


class NotFoundError(RegistryError):
    """Unknown registry, institution or certificate"""
    status = 404
    code = "NOT_FOUND"


class StateError(RegistryError):
    """Right caller, but the current state forbids the operation"""
    status = 409
    code = "INVALID_STATE"
