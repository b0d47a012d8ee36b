from .ordering import IncidentOrderBy, OrderDirection
from .query_params import IncidentsQueryParams, IncidentsRelatedQueryParams
from .severity import IncidentSeverity
from .status import IncidentStatus

__all__ = [
    'IncidentStatus',
    'IncidentSeverity',
    'IncidentOrderBy',
    'OrderDirection',
    'IncidentsQueryParams',
    'IncidentsRelatedQueryParams',
]
