from registry.services.event_service import EventService
from registry.services.user_service import UserService

__all__ = ["EventService", "UserService"]
