"""Tests for the sharing and invite workflow."""

import pytest
from unittest.mock import MagicMock

from modules.access import (
    AccessControlEvaluator,
    AccessLevel,
    InviteStatus,
    ListAccessDeniedError,
    NotAuthenticatedError,
)
from modules.auth.exceptions import UserNotFoundError
from modules.auth.models import UserRecord
from modules.lists.exceptions import ListNotFoundError
from modules.sharing.exceptions import InviteNotFoundError
from modules.sharing.service import SharingService
from tests.conftest import make_list, make_share


@pytest.fixture
def shares():
    repo = MagicMock()
    repo.list_for_list.return_value = []
    return repo


@pytest.fixture
def lists():
    repo = MagicMock()
    repo.get_by_id.return_value = make_list(owner_id="owner-1")
    return repo


@pytest.fixture
def users():
    repo = MagicMock()
    repo.get_by_email.return_value = UserRecord(id="user-b", email="b@example.com")
    return repo


@pytest.fixture
def service(shares, lists, users):
    return SharingService(shares=shares, lists=lists, users=users, access=AccessControlEvaluator(shares))


class TestShareList:
    @pytest.mark.asyncio
    async def test_creates_pending_share(self, service, shares):
        shares.get_for_target.return_value = None
        shares.create.side_effect = lambda data: make_share(
            user_id=data["shared_with_user_id"],
            level=AccessLevel(data["access_level"]),
            status=InviteStatus(data["invite_status"]),
        )

        share = await service.share_list("owner-1", "list-1", "b@example.com", AccessLevel.EDIT)

        assert share.invite_status == InviteStatus.PENDING
        assert share.access_level == AccessLevel.EDIT
        data = shares.create.call_args.args[0]
        assert data["shared_by_user_id"] == "owner-1"
        assert data["shared_with_user_id"] == "user-b"

    @pytest.mark.asyncio
    async def test_reshare_overwrites_and_resets(self, service, shares):
        """Sharing again keeps one row, with the new level, back to pending."""
        existing = make_share(user_id="user-b", level=AccessLevel.VIEW, status=InviteStatus.ACCEPTED)
        shares.get_for_target.return_value = existing

        share = await service.share_list("owner-1", "list-1", "b@example.com", AccessLevel.EDIT)

        shares.create.assert_not_called()
        shares.reinvite.assert_called_once_with(existing.id, AccessLevel.EDIT)
        assert share.id == existing.id
        assert share.access_level == AccessLevel.EDIT
        assert share.invite_status == InviteStatus.PENDING

    @pytest.mark.asyncio
    async def test_unknown_email(self, service, users, shares):
        users.get_by_email.return_value = None
        with pytest.raises(UserNotFoundError):
            await service.share_list("owner-1", "list-1", "ghost@example.com", AccessLevel.VIEW)
        shares.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_editor_cannot_share(self, service, shares):
        shares.list_for_list.return_value = [make_share(user_id="user-e", level=AccessLevel.EDIT)]
        with pytest.raises(ListAccessDeniedError):
            await service.share_list("user-e", "list-1", "b@example.com", AccessLevel.VIEW)

    @pytest.mark.asyncio
    async def test_admin_share_can_share(self, service, shares):
        shares.list_for_list.return_value = [make_share(user_id="user-x", level=AccessLevel.ADMIN)]
        shares.get_for_target.return_value = None
        shares.create.return_value = make_share(status=InviteStatus.PENDING)

        await service.share_list("user-x", "list-1", "b@example.com", AccessLevel.VIEW)

        assert shares.create.call_args.args[0]["shared_by_user_id"] == "user-x"

    @pytest.mark.asyncio
    async def test_missing_list(self, service, lists):
        lists.get_by_id.return_value = None
        with pytest.raises(ListNotFoundError):
            await service.share_list("owner-1", "nope", "b@example.com", AccessLevel.VIEW)

    @pytest.mark.asyncio
    async def test_anonymous(self, service):
        with pytest.raises(NotAuthenticatedError):
            await service.share_list(None, "list-1", "b@example.com", AccessLevel.VIEW)


class TestGetListShares:
    @pytest.mark.asyncio
    async def test_admin_sees_shares_with_users(self, service, shares, users):
        shares.list_for_list.return_value = [
            make_share(user_id="user-b", status=InviteStatus.PENDING),
            make_share(user_id="user-z", status=InviteStatus.ACCEPTED),
        ]
        users.get_many.return_value = {"user-b": UserRecord(id="user-b", email="b@example.com")}

        result = await service.get_list_shares("owner-1", "list-1")

        assert [s.shared_with_user_id for s in result] == ["user-b", "user-z"]
        assert result[0].user.email == "b@example.com"
        assert result[1].user is None

    @pytest.mark.asyncio
    async def test_non_admin_gets_empty(self, service, shares):
        shares.list_for_list.return_value = [make_share(user_id="user-b", level=AccessLevel.EDIT)]
        assert await service.get_list_shares("user-b", "list-1") == []

    @pytest.mark.asyncio
    async def test_anonymous_gets_empty(self, service):
        assert await service.get_list_shares(None, "list-1") == []


class TestPendingInvites:
    @pytest.mark.asyncio
    async def test_joins_list_and_inviter(self, service, shares, lists, users):
        shares.list_for_user.return_value = [make_share(user_id="user-b", status=InviteStatus.PENDING)]
        lists.get_many.return_value = {"list-1": make_list(owner_id="owner-1", title="Churrasco")}
        users.get_many.return_value = {"owner-1": UserRecord(id="owner-1", email="a@example.com")}

        invites = await service.get_pending_invites("user-b")

        assert len(invites) == 1
        assert invites[0].list.title == "Churrasco"
        assert invites[0].shared_by.email == "a@example.com"
        shares.list_for_user.assert_called_once_with("user-b", status=InviteStatus.PENDING)

    @pytest.mark.asyncio
    async def test_anonymous_gets_empty(self, service, shares):
        assert await service.get_pending_invites(None) == []
        shares.list_for_user.assert_not_called()


class TestRespondToInvite:
    @pytest.mark.asyncio
    async def test_accept_flips_status(self, service, shares):
        pending = make_share(user_id="user-b", status=InviteStatus.PENDING)
        shares.get_for_target.return_value = pending

        await service.respond_to_invite("user-b", "list-1", "accepted")

        shares.get_for_target.assert_called_once_with("list-1", "user-b", status=InviteStatus.PENDING)
        shares.set_status.assert_called_once_with(pending.id, InviteStatus.ACCEPTED)
        shares.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_decline_deletes_row(self, service, shares):
        pending = make_share(user_id="user-b", status=InviteStatus.PENDING)
        shares.get_for_target.return_value = pending

        await service.respond_to_invite("user-b", "list-1", "declined")

        shares.delete.assert_called_once_with(pending.id)
        shares.set_status.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_pending_invite(self, service, shares):
        shares.get_for_target.return_value = None
        with pytest.raises(InviteNotFoundError):
            await service.respond_to_invite("user-b", "list-1", "accepted")


class TestRemoveShare:
    @pytest.mark.asyncio
    async def test_owner_removes(self, service, shares):
        existing = make_share(user_id="user-b")
        shares.get_for_target.return_value = existing

        await service.remove_share("owner-1", "list-1", "user-b")

        shares.delete.assert_called_once_with(existing.id)

    @pytest.mark.asyncio
    async def test_absent_share_is_noop(self, service, shares):
        shares.get_for_target.return_value = None
        await service.remove_share("owner-1", "list-1", "user-b")
        shares.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_viewer_cannot_remove(self, service, shares):
        shares.list_for_list.return_value = [make_share(user_id="user-c", level=AccessLevel.VIEW)]
        with pytest.raises(ListAccessDeniedError):
            await service.remove_share("user-c", "list-1", "user-b")
