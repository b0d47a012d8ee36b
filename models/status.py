from enum import StrEnum


class IncidentStatus(StrEnum):
    OPEN = 'open'
    CLOSED = 'closed'
    EXPIRED = 'expired'
