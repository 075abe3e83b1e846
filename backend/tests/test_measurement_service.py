import asyncio
import datetime as dt
import math

import pytest

from app.exceptions import NotFoundError, ProfileIncompleteError, ValidationError
from app.services.bmi_service import categorize
from app.utils.enums import BMICategory


pytestmark = pytest.mark.unit


@pytest.fixture
async def profiled_user(identity_service, user_service):
    user = await identity_service.resolve_external_identity("1098", "ana@example.com", "Ana")
    await user_service.update_profile(user.id, height=175)
    return user.id


async def test_upsert_computes_bmi_from_height(measurement_service, profiled_user):
    log = await measurement_service.upsert(profiled_user, 70, "2024-01-01")

    assert log.bmi == 22.9
    assert log.weight == 70.0
    assert log.date == dt.date(2024, 1, 1)
    assert categorize(log.bmi) == BMICategory.normal


async def test_obese_scenario(measurement_service, profiled_user):
    log = await measurement_service.upsert(profiled_user, 100, dt.date(2024, 1, 1))

    assert log.bmi == 32.7
    assert categorize(log.bmi) == BMICategory.obese


async def test_resubmission_for_same_day_replaces_weight(measurement_service, profiled_user, store):
    first = await measurement_service.upsert(profiled_user, 70, "2024-01-01")
    second = await measurement_service.upsert(profiled_user, 72.5, "2024-01-01")

    logs = await measurement_service.list_for_user(profiled_user)
    assert len(logs) == 1
    assert second.id == first.id
    assert logs[0].weight == 72.5
    assert logs[0].bmi == 23.7


async def test_concurrent_upserts_leave_one_row(measurement_service, profiled_user):
    weights = [60.0 + i for i in range(12)]
    await asyncio.gather(*[
        measurement_service.upsert(profiled_user, w, "2024-03-10") for w in weights
    ])

    logs = await measurement_service.list_for_user(profiled_user)
    assert len(logs) == 1
    assert logs[0].weight in weights


async def test_list_is_sorted_by_date_for_any_insertion_order(measurement_service, profiled_user):
    for day in ["2024-01-05", "2024-01-01", "2024-02-01", "2024-01-03"]:
        await measurement_service.upsert(profiled_user, 70, day)

    logs = await measurement_service.list_for_user(profiled_user)
    assert [log.date.isoformat() for log in logs] == [
        "2024-01-01", "2024-01-03", "2024-01-05", "2024-02-01",
    ]


async def test_list_for_unknown_user_is_empty(measurement_service):
    assert await measurement_service.list_for_user("nobody") == []


async def test_guest_must_complete_profile_first(identity_service, user_service, measurement_service):
    guest = await identity_service.resolve_guest_identity("guest_abc", "guest_abc@vitaltrack.local", "Guest User")

    with pytest.raises(ProfileIncompleteError):
        await measurement_service.upsert(guest.id, 70, "2024-01-01")

    await user_service.update_profile(guest.id, height=170)
    log = await measurement_service.upsert(guest.id, 70, "2024-01-01")
    assert log.bmi == 24.2


async def test_unknown_user_is_not_found(measurement_service):
    with pytest.raises(NotFoundError):
        await measurement_service.upsert("nobody", 70, "2024-01-01")


@pytest.mark.parametrize("weight", [0, -1, math.inf, math.nan, "heavy", None, True])
async def test_invalid_weight_leaves_store_untouched(measurement_service, profiled_user, store, weight):
    with pytest.raises(ValidationError):
        await measurement_service.upsert(profiled_user, weight, "2024-01-01")
    assert store.logs == {}


@pytest.mark.parametrize("day", ["2024-02-30", "yesterday", "", 20240101, None])
async def test_invalid_date_leaves_store_untouched(measurement_service, profiled_user, store, day):
    with pytest.raises(ValidationError):
        await measurement_service.upsert(profiled_user, 70, day)
    assert store.logs == {}


async def test_validation_runs_before_user_lookup(measurement_service):
    with pytest.raises(ValidationError):
        await measurement_service.upsert("nobody", -5, "2024-01-01")


async def test_datetime_is_truncated_to_its_day(measurement_service, profiled_user):
    log = await measurement_service.upsert(profiled_user, 70, dt.datetime(2024, 1, 1, 23, 59))
    assert log.date == dt.date(2024, 1, 1)


async def test_delete_removes_only_that_log(measurement_service, profiled_user):
    keep = await measurement_service.upsert(profiled_user, 70, "2024-01-01")
    drop = await measurement_service.upsert(profiled_user, 71, "2024-01-02")

    await measurement_service.delete(drop.id)

    assert [log.id for log in await measurement_service.list_for_user(profiled_user)] == [keep.id]


async def test_delete_unknown_id_is_a_noop(measurement_service, profiled_user):
    await measurement_service.upsert(profiled_user, 70, "2024-01-01")

    await measurement_service.delete(9999)
    await measurement_service.delete(9999)

    assert len(await measurement_service.list_for_user(profiled_user)) == 1
