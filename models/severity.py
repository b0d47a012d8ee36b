from enum import StrEnum


class IncidentSeverity(StrEnum):
    WARNING = 'warning'
    ALERT = 'alert'
