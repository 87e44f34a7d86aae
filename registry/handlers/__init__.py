from registry.handlers.views import (
    BookingListView,
    EventDetailView,
    EventListView,
    UserDetailView,
    UserEventsView,
    UserListView,
    UserRegisteredView,
)

__all__ = [
    "BookingListView",
    "EventDetailView",
    "EventListView",
    "UserDetailView",
    "UserEventsView",
    "UserListView",
    "UserRegisteredView",
]
