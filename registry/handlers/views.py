"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details

Mutating calls run inside transaction.atomic(), which only groups writes on
the "django" store backend. The "memory" backend applies them directly.
"""

from django.db import transaction
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from registry.container import get_container
from registry.domain import Failure, Result, Success
from registry.domain.errors import DomainError, ErrorCode
from registry.handlers.serializers import (
    BookEventSerializer,
    CreateEventSerializer,
    DeleteEventSerializer,
    EventSerializer,
    ModifyEventSerializer,
    RegisterUserSerializer,
    UpdateUserProfileSerializer,
    UserSerializer,
)

ERROR_STATUS = {
    ErrorCode.EVENT_DOES_NOT_EXIST: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_DOES_NOT_EXIST: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_DETAILS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NAME_IS_REQUIRED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MUST_BE_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCode.EVENT_FULL: status.HTTP_409_CONFLICT,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=ERROR_STATUS[error.code],
    )


def invalid_payload_response(serializer: serializers.Serializer) -> Response:
    return Response(
        {
            "error": {
                "code": ErrorCode.INVALID_DETAILS.value,
                "message": "Malformed request payload",
                "fields": sorted(serializer.errors),
            }
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def message_response(
    result: Result[str, DomainError], success_status: int = status.HTTP_200_OK
) -> Response:
    match result:
        case Success(value=message):
            return Response({"message": message}, status=success_status)
        case Failure(error=error):
            return error_response(error)


class UserListView(APIView):
    """Handler for POST /api/users"""

    def post(self, request: Request) -> Response:
        serializer = RegisterUserSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_payload_response(serializer)
        with transaction.atomic():
            result = get_container().users.register(serializer.validated_data["username"])
        return message_response(result, status.HTTP_201_CREATED)


class UserDetailView(APIView):
    """Handler for GET/PATCH/DELETE /api/users/{username}"""

    def get(self, request: Request, username: str) -> Response:
        match get_container().users.get_profile(username):
            case Success(value=user):
                return Response(UserSerializer(user).data)
            case Failure(error=error):
                return error_response(error)

    def patch(self, request: Request, username: str) -> Response:
        serializer = UpdateUserProfileSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_payload_response(serializer)
        with transaction.atomic():
            result = get_container().users.update_profile(
                username, serializer.validated_data["new_username"]
            )
        return message_response(result)

    def delete(self, request: Request, username: str) -> Response:
        with transaction.atomic():
            result = get_container().users.delete(username)
        return message_response(result)


class UserRegisteredView(APIView):
    """Handler for GET /api/users/{username}/registered"""

    def get(self, request: Request, username: str) -> Response:
        return Response({"registered": get_container().users.exists(username)})


class UserEventsView(APIView):
    """Handler for GET /api/users/{username}/events"""

    def get(self, request: Request, username: str) -> Response:
        match get_container().users.list_created_events(username):
            case Success(value=names):
                return Response({"events": list(names)})
            case Failure(error=error):
                return error_response(error)


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = get_container().events
        public_only = request.query_params.get("public", "").lower() in {"1", "true"}
        found = events.list_public() if public_only else events.list_all()
        return Response(EventSerializer(found, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = CreateEventSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_payload_response(serializer)
        with transaction.atomic():
            result = get_container().events.create(
                serializer.to_draft(), serializer.validated_data["owner"]
            )
        return message_response(result, status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PATCH/DELETE /api/events/{name_of_event}"""

    def get(self, request: Request, name_of_event: str) -> Response:
        match get_container().events.get(name_of_event):
            case Success(value=event):
                return Response(EventSerializer(event).data)
            case Failure(error=error):
                return error_response(error)

    def patch(self, request: Request, name_of_event: str) -> Response:
        serializer = ModifyEventSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_payload_response(serializer)
        data = serializer.validated_data
        with transaction.atomic():
            result = get_container().events.modify(
                name_of_event,
                new_location=data.get("new_location"),
                new_date=data.get("new_date"),
                new_capacity=data.get("new_capacity"),
            )
        return message_response(result)

    def delete(self, request: Request, name_of_event: str) -> Response:
        serializer = DeleteEventSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_payload_response(serializer)
        with transaction.atomic():
            result = get_container().events.delete(
                name_of_event, serializer.validated_data["owner"]
            )
        return message_response(result)


class BookingListView(APIView):
    """Handler for GET/POST /api/events/{name_of_event}/bookings"""

    def get(self, request: Request, name_of_event: str) -> Response:
        match get_container().events.list_attendance(name_of_event):
            case Success(value=attendance):
                return Response({"attendance": list(attendance)})
            case Failure(error=error):
                return error_response(error)

    def post(self, request: Request, name_of_event: str) -> Response:
        serializer = BookEventSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_payload_response(serializer)
        with transaction.atomic():
            result = get_container().events.book(
                name_of_event, serializer.validated_data["user"]
            )
        return message_response(result, status.HTTP_201_CREATED)
