import pytest

from task_api.errors import PersistenceError


async def test_get_profile(profile_service):
    profile = await profile_service.get_profile("o1")

    assert profile.owner_id == "o1"
    assert profile.display_name == "Owner One"
    assert "create_date" not in profile.model_dump()


async def test_missing_profile_is_none(profile_service):
    assert await profile_service.get_profile("nobody") is None


async def test_get_profile_store_failure(profile_service, profile_store):
    profile_store.fail_with = PersistenceError("find one error")

    with pytest.raises(PersistenceError):
        await profile_service.get_profile("o1")


async def test_profile_list_omits_unknown_ids(profile_service, profile_store):
    profiles = await profile_service.get_profile_list(["o1", "b"])

    assert [p.owner_id for p in profiles] == ["o1"]
    assert profile_store.calls[-1] == ("find", ({"owner_id": {"$in": ["o1", "b"]}}, 0, 0))


async def test_profile_list_no_match(profile_service):
    assert await profile_service.get_profile_list(["x", "y"]) == []


async def test_null_fields_decode_to_defaults(profile_service, profile_store):
    profile_store.seed(
        {
            "owner_id": "o9",
            "display_name": None,
            "email": None,
            "display_pic": None,
            "create_date": None,
            "update_date": None,
        }
    )

    profile = await profile_service.get_profile("o9")

    assert profile.owner_id == "o9"
    assert profile.display_name == ""
    assert profile.email == ""
    assert profile.display_pic == ""
    assert profile.create_date == 0
