import asyncio

import pytest

from homehelp import worker
from homehelp.config import AUTO_REPLY_TEXT
from homehelp.domain.messages import auto_reply as auto_reply_module
from homehelp.domain.messages.auto_reply import AutoReplyScheduler
from homehelp.domain.messages.repository import MessageRepository
from homehelp.shared.timeutils import utc_now


def send(client, headers, provider_id, content):
    return client.post("/api/messages", json={"providerId": provider_id, "content": content}, headers=headers)


def test_thread_keeps_send_order(client, seeded, alice):
    _, headers = alice
    assert send(client, headers, 1, "A").status_code == 201
    assert send(client, headers, 1, "B").status_code == 201

    thread = client.get("/api/messages/provider/1", headers=headers).json()
    assert [m["content"] for m in thread] == ["A", "B"]
    assert all(m["fromUser"] for m in thread)


def test_send_queues_auto_reply(client, seeded, alice, auto_reply):
    user_id, headers = alice
    send(client, headers, 2, "Hello")
    assert auto_reply.calls == [(user_id, 2)]


def test_empty_message_rejected(client, seeded, alice, auto_reply):
    _, headers = alice
    assert send(client, headers, 1, "   ").status_code == 422
    assert auto_reply.calls == []


def test_message_content_is_sanitized(client, seeded, alice):
    _, headers = alice
    body = send(client, headers, 1, "<script>x</script>").json()
    assert body["content"] == "&lt;script&gt;x&lt;/script&gt;"


def test_threads_are_per_user(client, seeded, alice, bob):
    _, alice_headers = alice
    _, bob_headers = bob
    send(client, alice_headers, 1, "from alice")

    assert client.get("/api/messages/provider/1", headers=bob_headers).json() == []


def test_messaged_providers_in_first_contact_order(client, seeded, alice):
    _, headers = alice
    send(client, headers, 3, "hi")
    send(client, headers, 1, "hi")
    send(client, headers, 3, "again")
    client.post("/api/user/favorites", json={"providerId": 1}, headers=headers)

    providers = client.get("/api/messages/providers", headers=headers).json()
    assert [p["id"] for p in providers] == [3, 1]
    assert [p["isFavorite"] for p in providers] == [False, True]


def test_messages_require_auth(client):
    assert client.get("/api/messages/providers").status_code == 401


def test_worker_appends_provider_reply(session_factory, db_session, monkeypatch):
    monkeypatch.setattr(worker, "SessionLocal", session_factory)
    MessageRepository.create_message(
        db_session, user_id=1, provider_id=2, content="Hello", from_user=True, timestamp=utc_now()
    )

    result = asyncio.run(worker.send_provider_auto_reply_task({"job_id": "test"}, 1, 2))

    db_session.expire_all()
    thread = MessageRepository.get_messages(db_session, 1, 2)
    assert result == {"message_id": thread[-1].id}
    assert [m.from_user for m in thread] == [True, False]
    assert thread[-1].content == AUTO_REPLY_TEXT


def test_scheduler_disabled_does_nothing():
    assert asyncio.run(AutoReplyScheduler(enabled=False).schedule(1, 2)) is None


def test_scheduler_swallows_queue_failures(monkeypatch):
    async def unreachable(*args, **kwargs):
        raise ConnectionError("redis down")

    monkeypatch.setattr(auto_reply_module, "create_pool", unreachable)
    assert asyncio.run(AutoReplyScheduler(enabled=True, delay_seconds=10).schedule(1, 2)) is None


def test_scheduler_defers_job(monkeypatch):
    enqueued = {}

    class FakeJob:
        job_id = "job-1"

    class FakePool:
        async def enqueue_job(self, name, *args, **kwargs):
            enqueued.update(name=name, args=args, kwargs=kwargs)
            return FakeJob()

        async def close(self):
            enqueued["closed"] = True

    async def fake_create_pool(settings):
        return FakePool()

    monkeypatch.setattr(auto_reply_module, "create_pool", fake_create_pool)

    job_id = asyncio.run(AutoReplyScheduler(enabled=True, delay_seconds=10).schedule(1, 2))

    assert job_id == "job-1"
    assert enqueued["name"] == "send_provider_auto_reply_task"
    assert enqueued["args"] == (1, 2)
    assert enqueued["kwargs"]["_defer_by"].total_seconds() == pytest.approx(10)
    assert enqueued["closed"] is True
