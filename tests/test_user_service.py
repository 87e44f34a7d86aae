"""Unit tests for UserService.

These test validation order, error mapping and the rename semantics.
Run with: pytest tests/test_user_service.py -v
"""

import uuid

from registry.domain import Failure, Success
from registry.domain.errors import ErrorCode
from tests.conftest import EPOCH


class TestRegister:
    """Tests for UserService.register."""

    def test_register_creates_user_with_defaults(self, user_service, user_store):
        """Given a free username, stores a fresh user with role 'user'."""
        result = user_service.register("alice")

        assert result == Success("alice registered successfully")
        user = user_store.get("alice")
        assert user.username == "alice"
        assert user.id.value == uuid.UUID(int=1)
        assert user.created_at == EPOCH
        assert user.events_created == ()
        assert user.role == "user"

    def test_register_empty_username_fails(self, user_service, user_store):
        """Given an empty username, fails with InvalidDetails and stores nothing."""
        result = user_service.register("")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.INVALID_DETAILS
        assert len(user_store) == 0

    def test_register_twice_fails_with_invalid_details(self, user_service):
        """A second registration of the same name is rejected."""
        user_service.register("alice")

        result = user_service.register("alice")

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.INVALID_DETAILS
        assert "already taken" in result.error.message


class TestGetProfile:
    """Tests for UserService.get_profile."""

    def test_returns_stored_user(self, user_service):
        """Given a registered user, returns the stored record."""
        user_service.register("alice")

        result = user_service.get_profile("alice")

        assert isinstance(result, Success)
        assert result.value.username == "alice"

    def test_empty_name_fails_with_invalid_details(self, user_service):
        """Given an empty name, fails with InvalidDetails."""
        result = user_service.get_profile("")

        assert result.error.code is ErrorCode.INVALID_DETAILS

    def test_unknown_user_fails(self, user_service):
        """Given an unknown name, fails with UserDoesNotExist."""
        result = user_service.get_profile("ghost")

        assert result.error.code is ErrorCode.USER_DOES_NOT_EXIST


class TestUpdateProfile:
    """Tests for UserService.update_profile."""

    def test_rename_keeps_identity(self, user_service):
        """Rename moves the record and keeps id, created_at and role."""
        user_service.register("alice")
        original = user_service.get_profile("alice").value

        result = user_service.update_profile("alice", "bob")

        assert result == Success("Successfully updated profile from alice to bob")
        renamed = user_service.get_profile("bob").value
        assert renamed.username == "bob"
        assert renamed.id == original.id
        assert renamed.created_at == original.created_at
        assert renamed.role == original.role
        assert user_service.get_profile("alice").error.code is ErrorCode.USER_DOES_NOT_EXIST

    def test_rename_carries_created_events(self, user_service):
        """The created-events list moves with the user."""
        user_service.register("alice")
        user_service.link_created_event("alice", "Launch")

        user_service.update_profile("alice", "bob")

        assert user_service.list_created_events("bob") == Success(("Launch",))

    def test_empty_argument_fails(self, user_service):
        """Given an empty old or new name, fails with InvalidDetails."""
        assert user_service.update_profile("", "bob").error.code is ErrorCode.INVALID_DETAILS
        assert user_service.update_profile("alice", "").error.code is ErrorCode.INVALID_DETAILS

    def test_taken_new_name_fails_before_existence_check(self, user_service):
        """A taken target name is reported even when the source is unknown."""
        user_service.register("bob")

        result = user_service.update_profile("ghost", "bob")

        assert result.error.code is ErrorCode.INVALID_DETAILS

    def test_unknown_old_name_fails(self, user_service):
        """Given an unknown source name, fails and creates nothing."""
        result = user_service.update_profile("ghost", "bob")

        assert result.error.code is ErrorCode.USER_DOES_NOT_EXIST
        assert not user_service.exists("bob")


class TestDelete:
    """Tests for UserService.delete."""

    def test_delete_removes_user(self, user_service):
        """Given a registered user, removes the record."""
        user_service.register("alice")

        result = user_service.delete("alice")

        assert result == Success("User alice has been deleted successfully")
        assert not user_service.exists("alice")

    def test_delete_unknown_user_fails(self, user_service):
        """Given an unknown user, fails with UserDoesNotExist."""
        assert user_service.delete("ghost").error.code is ErrorCode.USER_DOES_NOT_EXIST


class TestCreatedEventLinks:
    """Tests for the created-events bookkeeping used by EventService."""

    def test_link_appends_in_order(self, user_service):
        """Linked event names keep insertion order."""
        user_service.register("alice")

        user_service.link_created_event("alice", "Launch")
        user_service.link_created_event("alice", "Retro")

        assert user_service.list_created_events("alice") == Success(("Launch", "Retro"))

    def test_link_to_missing_user_is_noop(self, user_service, user_store):
        """Linking to an unknown user writes nothing."""
        user_service.link_created_event("ghost", "Launch")

        assert len(user_store) == 0

    def test_unlink_removes_first_match_only(self, user_service):
        """Only the first matching entry is dropped."""
        user_service.register("alice")
        for name in ("Launch", "Retro", "Launch"):
            user_service.link_created_event("alice", name)

        user_service.unlink_created_event("alice", "Launch")

        assert user_service.list_created_events("alice") == Success(("Retro", "Launch"))

    def test_unlink_is_idempotent(self, user_service):
        """Repeated or dangling unlinks leave the list unchanged."""
        user_service.register("alice")
        user_service.link_created_event("alice", "Launch")

        user_service.unlink_created_event("alice", "Launch")
        user_service.unlink_created_event("alice", "Launch")
        user_service.unlink_created_event("ghost", "Launch")

        assert user_service.list_created_events("alice") == Success(())

    def test_list_created_events_unknown_user_fails(self, user_service):
        """Given an unknown user, fails with UserDoesNotExist."""
        result = user_service.list_created_events("ghost")

        assert result.error.code is ErrorCode.USER_DOES_NOT_EXIST


class TestExists:
    """Tests for UserService.exists."""

    def test_exists_reflects_registration(self, user_service):
        """Returns True only after registration."""
        assert not user_service.exists("alice")
        user_service.register("alice")
        assert user_service.exists("alice")

    def test_empty_name_never_exists(self, user_service):
        """An empty name is never registered."""
        assert user_service.exists("") is False
