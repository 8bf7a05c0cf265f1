from typing import Dict, Type
from app.providers.base import PaymentProvider
from app.providers.mvola_provider import MVolaProvider
from flask import current_app

# Provider registry
PROVIDERS: Dict[str, Type[PaymentProvider]] = {
    'mvola': MVolaProvider,
}


def get_provider(provider_name: str, app_config=None) -> PaymentProvider:
    """
    Build a provider instance by name.

    Args:
        provider_name: Name of the provider ('mvola')
        app_config: Flask config mapping; defaults to the current app's config

    Returns:
        Initialized provider instance

    Raises:
        ValueError: If provider not found
    """
    provider_class = PROVIDERS.get(provider_name.lower())

    if not provider_class:
        raise ValueError(f'Unknown provider: {provider_name}')

    if app_config is None:
        app_config = current_app.config

    config = _get_provider_config(provider_name.lower(), app_config)
    return provider_class(config)


def _get_provider_config(provider_name: str, app_config) -> dict:
    """Get provider configuration from Flask app config."""

    if provider_name == 'mvola':
        return {
            # Required
            'consumer_key':     app_config.get('MVOLA_CONSUMER_KEY'),
            'consumer_secret':  app_config.get('MVOLA_CONSUMER_SECRET'),
            'partner_msisdn':   app_config.get('MVOLA_PARTNER_MSISDN'),
            'partner_name':     app_config.get('MVOLA_PARTNER_NAME'),
            # Environment
            'environment':      app_config.get('MVOLA_ENV', 'sandbox'),
            'base_url':         app_config.get('MVOLA_BASE_URL'),
            # Optional
            'callback_url':     app_config.get('MVOLA_CALLBACK_URL', ''),
            'timeout':          app_config.get('MVOLA_HTTP_TIMEOUT', 30),
            'description':      app_config.get('MVOLA_DESCRIPTION'),
            'reference_prefix': app_config.get('MVOLA_REFERENCE_PREFIX'),
        }

    return {}


def list_available_providers():
    """List all available providers."""
    return list(PROVIDERS.keys())


__all__ = ['get_provider', 'list_available_providers', 'PROVIDERS']
