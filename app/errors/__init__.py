from app.errors.exceptions import AppError, ValidationError, AuthError, ProviderError

__all__= [
    'AppError',
    'ValidationError',
    'AuthError',
    'ProviderError',
]
