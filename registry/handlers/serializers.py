"""Serializers for request payloads and domain-model responses."""

from rest_framework import serializers

from registry.domain import EventDraft


class UserSerializer(serializers.Serializer):
    """Serializer for User domain model."""

    id = serializers.CharField(source="id.value")
    username = serializers.CharField()
    created_at = serializers.DateTimeField()
    events_created = serializers.ListField(child=serializers.CharField())
    role = serializers.CharField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    name_of_event = serializers.CharField()
    owner = serializers.CharField()
    event_poster = serializers.CharField()
    location_of_event = serializers.CharField()
    requirements = serializers.CharField()
    date = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    is_public = serializers.BooleanField()
    attendance = serializers.ListField(child=serializers.CharField())
    version = serializers.IntegerField()
    created_at = serializers.DateTimeField()


class RegisterUserSerializer(serializers.Serializer):
    username = serializers.CharField(allow_blank=True)


class UpdateUserProfileSerializer(serializers.Serializer):
    new_username = serializers.CharField(allow_blank=True)


class CreateEventSerializer(serializers.Serializer):
    """Payload for creating an event. Blank text is left for the service to judge."""

    event_poster = serializers.CharField(allow_blank=True)
    name_of_event = serializers.CharField(allow_blank=True)
    location_of_event = serializers.CharField(allow_blank=True)
    requirements = serializers.CharField(allow_blank=True)
    date = serializers.CharField(allow_blank=True)
    owner = serializers.CharField(allow_blank=True)
    capacity = serializers.IntegerField()
    is_public = serializers.BooleanField(default=True)

    def validate_name_of_event(self, value: str) -> str:
        # Event names are addressed as a single URL path segment.
        if "/" in value:
            raise serializers.ValidationError("Event name cannot contain '/'.")
        return value

    def to_draft(self) -> EventDraft:
        data = self.validated_data
        return EventDraft(
            event_poster=data["event_poster"],
            name_of_event=data["name_of_event"],
            location_of_event=data["location_of_event"],
            requirements=data["requirements"],
            date=data["date"],
            capacity=data["capacity"],
            is_public=data["is_public"],
        )


class ModifyEventSerializer(serializers.Serializer):
    """Omitted or null fields are left unchanged."""

    new_location = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    new_date = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    new_capacity = serializers.IntegerField(required=False, allow_null=True)


class DeleteEventSerializer(serializers.Serializer):
    owner = serializers.CharField(allow_blank=True)


class BookEventSerializer(serializers.Serializer):
    user = serializers.CharField(allow_blank=True)
