from enum import StrEnum


class IncidentOrderBy(StrEnum):
    NEGATIVE_IMPACT = 'negative_impact'
    VALUE = 'value'
    ERROR_RATE = 'error_rate'
    THRESHOLD = 'threshold'


class OrderDirection(StrEnum):
    ASC = 'asc'
    DESC = 'desc'
