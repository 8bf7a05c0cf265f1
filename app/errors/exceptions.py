class AppError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        if status_code:
            self.status_code = status_code
        self.message = message

    def to_dict(self):
        return {'success': False, 'message': self.message}


class ValidationError(AppError):
    status_code = 400

    INVALID_AMOUNT = 'INVALID_AMOUNT'
    INVALID_PHONE = 'INVALID_PHONE'
    INVALID_REQUEST = 'INVALID_REQUEST'

    def __init__(self, message, code=None, field=None):
        super().__init__(message)
        self.code = code
        self.field = field


class AuthError(AppError):
    """Raised when the client-credentials exchange fails"""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details if details is not None else message


class ProviderError(AppError):
    """Raised when a call to the payment provider fails or returns non-2xx"""

    def __init__(self, message, details=None, upstream_status=None):
        super().__init__(message)
        self.details = details if details is not None else message
        self.upstream_status = upstream_status
