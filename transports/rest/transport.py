import logging
from types import TracebackType
from typing import Any, Self

import requests
from requests.auth import HTTPBasicAuth

from transports import QueryParams, Transport
from version import __version__

DEFAULT_BASE_URL = 'https://api.mux.com'
DEFAULT_USER_AGENT = f'mux-data-incidents/{__version__}'


class RestTransport(Transport):
    def __init__(
        self,
        base_url: str | None,
        token_id: str | None,
        token_secret: str | None,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        if not token_id or not token_secret:
            raise ValueError('API access token id and secret must be provided.')

        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.auth = HTTPBasicAuth(token_id, token_secret)
        self.session.headers.update({'User-Agent': user_agent, 'Accept': 'application/json'})
        self.logger = logging.getLogger(self.__class__.__name__)

    def authenticated_get(self, url: str, params: QueryParams | None = None) -> requests.Response:
        return self.session.get(url, params=params, timeout=self.timeout)

    def get(self, path: str, params: QueryParams | None = None) -> Any:
        url = f'{self.base_url}{path}'
        self.logger.debug('GET %s params=%s', url, params)

        try:
            resp = self.authenticated_get(url, params=params)
        except requests.RequestException as err:
            self.logger.warning('Request to %s failed: %s', url, err)
            raise

        if resp.status_code == requests.codes.ok:
            return resp.json()

        self.logger.warning('Unexpected response from %s: %d', url, resp.status_code)
        resp.raise_for_status()
        raise requests.HTTPError(f'Unexpected status code: {resp.status_code}', response=resp)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
