from flask import current_app
from flask_cors import CORS

cors = CORS()


class MVolaClient:
    """Builds one MVola provider per app; the provider owns the token cache"""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        from app.providers import get_provider
        app.extensions['mvola'] = get_provider('mvola', app.config)

    @property
    def provider(self):
        return current_app.extensions['mvola']


mvola_client = MVolaClient()
