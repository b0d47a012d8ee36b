from .transport import QueryParams, Transport

__all__ = ['QueryParams', 'Transport']
