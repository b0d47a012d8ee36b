from .transport import DEFAULT_BASE_URL, RestTransport

__all__ = ['DEFAULT_BASE_URL', 'RestTransport']
