from django.urls import path

from registry.handlers import (
    BookingListView,
    EventDetailView,
    EventListView,
    UserDetailView,
    UserEventsView,
    UserListView,
    UserRegisteredView,
)

urlpatterns = [
    path("users", UserListView.as_view(), name="user-list"),
    path("users/<str:username>", UserDetailView.as_view(), name="user-detail"),
    path(
        "users/<str:username>/registered",
        UserRegisteredView.as_view(),
        name="user-registered",
    ),
    path("users/<str:username>/events", UserEventsView.as_view(), name="user-events"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:name_of_event>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:name_of_event>/bookings",
        BookingListView.as_view(),
        name="booking-list",
    ),
]
