"""AWS Lambda entry point.

Mangum translates API Gateway events into ASGI and the FastAPI response
back into `{statusCode, headers, body}`. Lifespan is off on Lambda, so
logging is configured at import time (once per cold start).
"""

from mangum import Mangum

from src.config.settings import get_settings
from src.logging.request_log import setup_logging
from src.main import app

setup_logging(get_settings())

handler = Mangum(app, lifespan="off")
