from typing import TypedDict

from .ordering import IncidentOrderBy, OrderDirection
from .severity import IncidentSeverity
from .status import IncidentStatus


class IncidentsQueryParams(TypedDict, total=False):
    limit: int
    page: int
    order_by: IncidentOrderBy
    order_direction: OrderDirection
    status: IncidentStatus
    severity: IncidentSeverity


class IncidentsRelatedQueryParams(TypedDict, total=False):
    limit: int
    page: int
    order_by: IncidentOrderBy
    order_direction: OrderDirection
    # Measurement used to group related incidents, e.g. 'median' or '95th'
    measurement: str
