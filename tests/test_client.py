import os
from unittest.mock import Mock, patch

import responses
from faker import Faker
from unittest_parametrize import ParametrizedTestCase

from client import create_client
from resources import Incidents
from transports import Transport
from transports.rest import RestTransport


class TestClient(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.base_url = self.faker.url().rstrip('/')

    def test_explicit_credentials(self) -> None:
        container = create_client('token-id', 'token-secret')

        transport = container.transport()

        self.assertIsInstance(transport, RestTransport)
        self.assertEqual(transport.timeout, 10.0)
        self.assertIs(container.incidents().transport, transport)

    def test_credentials_from_env(self) -> None:
        env = {
            'MUX_TOKEN_ID': 'token-id',
            'MUX_TOKEN_SECRET': 'token-secret',
            'MUX_BASE_URL': self.base_url,
            'MUX_TIMEOUT': '2.5',
        }

        with patch.dict(os.environ, env):
            container = create_client()
            transport = container.transport()

        self.assertEqual(transport.base_url, self.base_url)
        self.assertEqual(transport.timeout, 2.5)

    def test_missing_credentials(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            container = create_client()

            with self.assertRaises(ValueError):
                container.incidents()

    def test_incidents_singleton(self) -> None:
        container = create_client('token-id', 'token-secret')

        self.assertIs(container.incidents(), container.incidents())

    def test_override_transport(self) -> None:
        container = create_client()
        transport_mock = Mock(Transport)
        transport_mock.get.return_value = {'data': []}

        with container.transport.override(transport_mock):
            incidents = container.incidents()
            result = incidents.list({'status': 'open'})  # type: ignore[arg-type]

        self.assertIsInstance(incidents, Incidents)
        self.assertEqual(result, {'data': []})
        transport_mock.get.assert_called_once_with('/data/v1/incidents', params={'status': 'open'})

    def test_end_to_end_get(self) -> None:
        with patch.dict(os.environ, {'MUX_BASE_URL': self.base_url}):
            container = create_client('token-id', 'token-secret')

        with responses.RequestsMock() as rsps:
            rsps.get(f'{self.base_url}/data/v1/incidents/ABCD1234', json={'data': {'id': 'ABCD1234'}}, status=200)

            result = container.incidents().get('ABCD1234')

        self.assertEqual(result, {'data': {'id': 'ABCD1234'}})
