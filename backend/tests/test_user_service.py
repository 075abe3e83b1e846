import pytest

from app.exceptions import NotFoundError, ValidationError


pytestmark = pytest.mark.unit


@pytest.fixture
async def user_id(identity_service):
    user = await identity_service.resolve_external_identity("1098", "ana@example.com", "Ana")
    return user.id


async def test_get_user(user_service, user_id):
    user = await user_service.get_user(user_id)
    assert user.email == "ana@example.com"


async def test_get_unknown_user(user_service):
    with pytest.raises(NotFoundError):
        await user_service.get_user("nobody")


async def test_update_profile_sets_all_fields(user_service, user_id):
    user = await user_service.update_profile(
        user_id, height=175, age=34, gender="female", activity_level="active"
    )

    assert user.height == 175
    assert user.age == 34
    assert user.gender == "female"
    assert user.activity_level == "active"
    assert user.is_profile_complete


async def test_update_profile_replaces_previous_values(user_service, user_id):
    await user_service.update_profile(user_id, height=175, age=34, gender="female")
    user = await user_service.update_profile(user_id, height=176)

    assert user.height == 176
    assert user.age is None
    assert user.gender is None


async def test_update_profile_of_unknown_user(user_service):
    with pytest.raises(NotFoundError):
        await user_service.update_profile("nobody", height=170)


@pytest.mark.parametrize("fields", [
    {"height": 0},
    {"height": -170},
    {"height": float("nan")},
    {"age": -1},
    {"gender": "other"},
    {"activity_level": "extreme"},
])
async def test_update_profile_rejects_invalid_fields(user_service, user_id, fields):
    with pytest.raises(ValidationError):
        await user_service.update_profile(user_id, **fields)

    user = await user_service.get_user(user_id)
    assert user.height is None
