from .jwt_service import JWTService
from .middleware import get_requester_id, security

__all__ = ['JWTService', 'get_requester_id', 'security']
