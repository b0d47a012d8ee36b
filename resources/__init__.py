from .incidents import Incidents

__all__ = ['Incidents']
