from contenthub.core.permissions import Capability, can_modify, is_allowed
from contenthub.models import User


def test_admin_holds_every_capability():
    admin = User(id="a", is_admin=True)
    for capability in Capability:
        assert is_allowed(admin, capability)


def test_regular_user_and_anonymous_hold_none():
    user = User(id="u", is_admin=False)
    for capability in Capability:
        assert not is_allowed(user, capability)
        assert not is_allowed(None, capability)


def test_can_modify_owner_or_moderator():
    owner = User(id="owner", is_admin=False)
    other = User(id="other", is_admin=False)
    admin = User(id="admin", is_admin=True)

    assert can_modify(owner, "owner")
    assert not can_modify(other, "owner")
    assert can_modify(admin, "owner")
    assert not can_modify(None, "owner")
