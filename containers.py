from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from resources import Incidents
from transports.rest import RestTransport


class Container(DeclarativeContainer):
    config = providers.Configuration()

    transport = providers.ThreadSafeSingleton(
        RestTransport,
        base_url=config.api.url,
        token_id=config.api.token_id,
        token_secret=config.api.token_secret,
        timeout=config.api.timeout.as_float(),
    )

    incidents = providers.ThreadSafeSingleton(Incidents, transport=transport)
