from meeting_access.shared.ioc.providers import SharedInfrastructureProvider

__all__ = ['SharedInfrastructureProvider']
