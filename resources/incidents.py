from dataclasses import dataclass
from typing import Any

from errors import InvalidArgumentError
from models import IncidentsQueryParams, IncidentsRelatedQueryParams
from transports import Transport

PATH = '/data/v1/incidents'


@dataclass(frozen=True)
class Incidents:
    """Read-only access to the Data Incidents API.

    Every call builds a path under ``/data/v1/incidents`` and hands it to the
    transport; whatever the transport returns (or raises) reaches the caller as is.
    """

    transport: Transport

    def list(self, params: IncidentsQueryParams | None = None) -> Any:
        """List incidents, e.g. ``list({'status': 'open', 'severity': 'warning'})``."""
        return self.transport.get(PATH, params=params)

    def get(self, incident_id: str) -> Any:
        """Details for a single incident."""
        if not incident_id:
            raise InvalidArgumentError('incident details', 'incident_id')

        return self.transport.get(f'{PATH}/{incident_id}')

    def related(self, incident_id: str, params: IncidentsRelatedQueryParams | None = None) -> Any:
        """Incidents that seem related to ``incident_id``, e.g. ``related(id, {'measurement': 'median'})``."""
        if not incident_id:
            raise InvalidArgumentError('related incidents', 'incident_id')

        return self.transport.get(f'{PATH}/{incident_id}/related', params=params)
