import pytest

from task_api.errors import IdentifierDecodeError, PersistenceError

from .conftest import NOW


async def test_create_comment(comment_service, comment_store):
    comment = await comment_service.create_comment("o1", "task-1", "hello")

    assert comment.id == str(comment_store.documents[0]["_id"])
    assert comment.owner_id == "o1"
    assert comment.task_id == "task-1"
    assert comment.content == "hello"
    assert comment.create_date == NOW
    assert comment.update_date is None


async def test_create_comment_does_not_look_up_task(comment_service, comment_store):
    await comment_service.create_comment("o1", "missing-task", "hello")

    assert [name for name, _ in comment_store.calls] == ["insert_one"]


async def test_create_comment_insert_failure(comment_service, comment_store):
    comment_store.fail_with = PersistenceError("insert one error")

    with pytest.raises(PersistenceError):
        await comment_service.create_comment("o1", "task-1", "hello")


async def test_create_comment_bad_acknowledgment(comment_service, comment_store):
    comment_store.inserted_id = 42

    with pytest.raises(IdentifierDecodeError):
        await comment_service.create_comment("o1", "task-1", "hello")


async def test_topic_comments_are_scoped_and_paginated(comment_service, comment_store):
    for i in range(3):
        comment_store.seed({"owner_id": "o1", "task_id": "a", "content": f"a{i}", "create_date": NOW})
    comment_store.seed({"owner_id": "o1", "task_id": "b", "content": "b0", "create_date": NOW})

    first = await comment_service.get_topic_comments("a", 1, 2)
    second = await comment_service.get_topic_comments("a", 2, 2)

    assert [c.content for c in first] == ["a0", "a1"]
    assert [c.content for c in second] == ["a2"]
    assert comment_store.calls[-1] == ("find", ({"task_id": "a"}, 2, 2))


async def test_topic_comments_empty(comment_service):
    assert await comment_service.get_topic_comments("nothing", 1, 10) == []


async def test_topic_comments_store_failure(comment_service, comment_store):
    comment_store.fail_with = PersistenceError("find error")

    with pytest.raises(PersistenceError):
        await comment_service.get_topic_comments("a", 1, 10)
