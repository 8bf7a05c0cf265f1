import os
from app import create_app
from app.utils.logger import get_logger

app = create_app(os.getenv('FLASK_ENV') or os.getenv('NODE_ENV') or 'development')
logger = get_logger('mvola-middleware')

if __name__ == '__main__':
    port = app.config['PORT']
    logger.info(f'MVola Middleware started on port {port}')
    logger.info(f"Environment: {app.config['ENVIRONMENT']}")
    logger.info(f"MVola API: {app.config['MVOLA_BASE_URL']}")
    app.run(host='0.0.0.0', port=port, debug=app.config.get('DEBUG', False))
