"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class UserRecord(models.Model):
    """Persistence model for registered users, keyed by username."""

    username = models.CharField(max_length=255, unique=True)
    user_id = models.UUIDField(default=uuid.uuid4, editable=False)
    events_created = models.JSONField(default=list, blank=True)
    role = models.CharField(max_length=50, default="user")
    created_at = models.DateTimeField()

    class Meta:
        ordering = ["username"]

    def __str__(self) -> str:
        return self.username


class EventRecord(models.Model):
    """Persistence model for events, keyed by event name."""

    name_of_event = models.CharField(max_length=255, unique=True)
    event_id = models.UUIDField(default=uuid.uuid4, editable=False)
    owner = models.CharField(max_length=255, db_index=True)
    event_poster = models.CharField(max_length=500)
    location_of_event = models.CharField(max_length=255)
    requirements = models.TextField()
    date = models.CharField(max_length=100)
    capacity = models.PositiveIntegerField()
    is_public = models.BooleanField(default=True)
    attendance = models.JSONField(default=list, blank=True)
    version = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField()

    class Meta:
        ordering = ["name_of_event"]

    def __str__(self) -> str:
        return self.name_of_event
