"""
ASGI config for the task manager project.

Serves traditional ASGI servers (Daphne, Uvicorn) and, through Mangum,
AWS Lambda behind API Gateway.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django at module load time (container startup)
application = get_asgi_application()


def get_lambda_handler():
    """
    Returns a Mangum-wrapped handler for AWS Lambda.

    Mangum is imported lazily so local development does not need it.
    """
    try:
        from mangum import Mangum
        return Mangum(application, lifespan="off")
    except ImportError:
        raise ImportError(
            "Mangum is required for Lambda deployment. "
            "Install with: pip install taskmanager[lambda]"
        )


_lambda_handler = None

def lambda_handler(event, context):
    """AWS Lambda entry point for HTTP requests."""
    global _lambda_handler
    if _lambda_handler is None:
        _lambda_handler = get_lambda_handler()
    return _lambda_handler(event, context)
