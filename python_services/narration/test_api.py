import time

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from shared.voice_client import GTTSSynthesizer

from narration.api import get_router
from narration.state import NarrationRegistry


@pytest.fixture
def registry(fake_synthesizer):
    return NarrationRegistry(synthesizer_factory=lambda session_id: fake_synthesizer(hold=True))


@pytest.fixture
def client(registry):
    app = FastAPI()
    app.include_router(get_router(registry))
    with TestClient(app) as client:
        yield client


def load(client, session_id="abc"):
    return client.post(
        f"/narration/{session_id}/load",
        json={"content": "The water cycle moves water around.", "subject": "science", "classLevel": "3"},
    )


def test_load_returns_idle_status(client, registry):
    resp = load(client)

    assert resp.status_code == 200
    body = resp.json()
    assert body["session_id"] == "abc"
    assert body["state"] == "idle"
    assert body["phase"] == "intro"
    assert body["is_playing"] is False
    assert body["headline"] == "Ready to Explain Your Upload!"
    assert len(registry) == 1


def test_start_stop_cycle(client):
    load(client)

    started = client.post("/narration/abc/start").json()
    assert started["is_playing"] is True
    assert started["state"] == "intro"

    stopped = client.post("/narration/abc/stop").json()
    assert stopped["is_playing"] is False
    assert stopped["state"] == "idle"
    assert stopped["phase"] == "intro"


def test_start_twice_toggles_off(client):
    load(client)

    client.post("/narration/abc/start")
    second = client.post("/narration/abc/start").json()

    assert second["is_playing"] is False
    assert second["phase"] == "intro"


def test_mute_toggles(client):
    load(client)

    assert client.post("/narration/abc/mute").json()["is_muted"] is True
    assert client.post("/narration/abc/mute").json()["is_muted"] is False


def test_reload_replaces_script_and_stops(client, registry):
    load(client)
    client.post("/narration/abc/start")

    resp = client.post(
        "/narration/abc/load",
        json={"content": "Fractions", "subject": "mathematics", "classLevel": "5"},
    )

    assert resp.json()["is_playing"] is False
    assert "mathematics" in registry.get("abc").script.intro
    assert len(registry) == 1


def test_unknown_session_is_404(client):
    assert client.post("/narration/missing/start").status_code == 404
    assert client.get("/narration/missing/status").status_code == 404
    assert client.delete("/narration/missing").status_code == 404


def test_discard(client, registry):
    load(client)

    resp = client.delete("/narration/abc")

    assert resp.status_code == 200
    assert len(registry) == 0
    assert client.get("/narration/abc/status").status_code == 404


def test_audio_is_404_when_idle(client):
    load(client)

    assert client.get("/narration/abc/audio").status_code == 404
    assert client.get("/narration/missing/audio").status_code == 404


@pytest.fixture
def audio_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(GTTSSynthesizer, "_render", staticmethod(lambda utterance: b"ID3narration"))
    return tmp_path


@pytest.fixture
def gtts_client(audio_dir):
    registry = NarrationRegistry(
        synthesizer_factory=lambda session_id: GTTSSynthesizer(
            audio_dir=str(audio_dir), filename_prefix=f"narration_{session_id}"
        )
    )
    app = FastAPI()
    app.include_router(get_router(registry))
    with TestClient(app) as client:
        yield client


def wait_for_audio_id(client, session_id="abc"):
    for _ in range(200):
        status = client.get(f"/narration/{session_id}/status").json()
        if status["audio_id"]:
            return status
        time.sleep(0.01)
    raise AssertionError("narration audio was never rendered")


def test_current_audio_is_served_and_discarded(gtts_client, audio_dir):
    load(gtts_client)
    gtts_client.post("/narration/abc/start")

    status = wait_for_audio_id(gtts_client)
    assert status["state"] == "intro"
    assert status["current_text"].startswith("Hello my dear Class 3 students!")

    resp = gtts_client.get("/narration/abc/audio")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "audio/mpeg"
    assert resp.content == b"ID3narration"
    assert list(audio_dir.glob("*.mp3"))

    gtts_client.delete("/narration/abc")
    assert list(audio_dir.glob("*.mp3")) == []


def test_reload_removes_old_audio(gtts_client, audio_dir):
    load(gtts_client)
    gtts_client.post("/narration/abc/start")
    wait_for_audio_id(gtts_client)

    load(gtts_client)

    assert list(audio_dir.glob("*.mp3")) == []
    assert gtts_client.get("/narration/abc/audio").status_code == 404
