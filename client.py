import logging
import os

from containers import Container
from transports.rest import DEFAULT_BASE_URL


def create_client(token_id: str | None = None, token_secret: str | None = None) -> Container:
    if os.getenv('ENABLE_DEBUG_LOGGING') == '1':  # pragma: no cover
        logging.basicConfig(level=logging.DEBUG)

    container = Container()

    container.config.api.url.from_env('MUX_BASE_URL', DEFAULT_BASE_URL)
    container.config.api.timeout.from_env('MUX_TIMEOUT', '10')

    if token_id is None:
        container.config.api.token_id.from_env('MUX_TOKEN_ID')
    else:
        container.config.api.token_id.from_value(token_id)

    if token_secret is None:
        container.config.api.token_secret.from_env('MUX_TOKEN_SECRET')
    else:
        container.config.api.token_secret.from_value(token_secret)

    return container
