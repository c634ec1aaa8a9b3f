from .request_session import RequestSessionInteractor

__all__ = ['RequestSessionInteractor']
