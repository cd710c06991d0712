"""Narration controller: phase ordering, cancellation and mute behaviour."""

import asyncio

from shared.models import NarrationPhase

from narration.controller import PHASE_SEQUENCE, NarrationController
from narration.scripts import HEADLINES, IDLE_CAPTION, PLAYING_CAPTION, build_script


def make_controller(synth, phase_delay=0.0):
    script = build_script("Plants make food from sunlight.", "science", "4")
    return NarrationController(
        synth,
        script,
        session_id="s1",
        phase_delay=phase_delay,
        rate=0.8,
        pitch=1.1,
        volume=1.0,
        lang="en-IN",
    )


def record_states(controller):
    """Distinct consecutive states reported to listeners."""
    seen = []

    def listener(status):
        if not seen or seen[-1] != status.state:
            seen.append(status.state)

    controller.subscribe(listener)
    return seen


async def test_full_run_speaks_every_phase_in_order(fake_synthesizer):
    synth = fake_synthesizer()
    controller = make_controller(synth)
    seen = record_states(controller)

    controller.start()
    await controller.join()

    script = controller.script
    assert synth.texts == [script.intro, script.explaining, script.conclusion]
    assert seen == [
        NarrationPhase.INTRO,
        NarrationPhase.EXPLAINING,
        NarrationPhase.CONCLUSION,
        NarrationPhase.IDLE,
    ]
    assert controller.state == NarrationPhase.IDLE
    assert controller.phase == NarrationPhase.INTRO
    assert not controller.is_playing


async def test_utterances_carry_voice_settings(fake_synthesizer):
    synth = fake_synthesizer()
    controller = make_controller(synth)

    controller.start()
    await controller.join()

    for utterance in synth.spoken:
        assert utterance.rate == 0.8
        assert utterance.pitch == 1.1
        assert utterance.volume == 1.0
        assert utterance.lang == "en-IN"


async def test_phases_are_separated_by_delay(fake_synthesizer):
    synth = fake_synthesizer()
    controller = make_controller(synth, phase_delay=0.05)
    loop = asyncio.get_running_loop()

    started = loop.time()
    controller.start()
    await controller.join()

    assert len(synth.spoken) == len(PHASE_SEQUENCE)
    assert loop.time() - started >= 0.09


async def test_start_while_playing_cancels(fake_synthesizer):
    synth = fake_synthesizer(hold=True)
    controller = make_controller(synth)

    controller.start()
    controller.start()

    assert not controller.is_playing
    assert controller.phase == NarrationPhase.INTRO
    assert controller.state == NarrationPhase.IDLE

    await controller.join()
    assert not controller.is_playing
    assert controller.phase == NarrationPhase.INTRO
    assert synth.spoken == []


async def test_stop_during_speech_interrupts_and_resets(fake_synthesizer, until):
    synth = fake_synthesizer(hold=True)
    controller = make_controller(synth)

    controller.start()
    await until(lambda: len(synth.spoken) == 1)
    controller.stop()
    await controller.join()

    assert synth.cancel_calls >= 1
    assert len(synth.spoken) == 1
    assert controller.state == NarrationPhase.IDLE
    assert controller.phase == NarrationPhase.INTRO


async def test_stop_during_delay_never_reaches_next_phase(fake_synthesizer):
    synth = fake_synthesizer()
    controller = make_controller(synth, phase_delay=5.0)
    seen = record_states(controller)

    controller.start()
    for _ in range(5):
        await asyncio.sleep(0)
    assert synth.texts == [controller.script.intro]

    controller.stop()
    await asyncio.wait_for(controller.join(), timeout=1.0)

    assert NarrationPhase.EXPLAINING not in seen
    assert len(synth.spoken) == 1


async def test_synthesis_error_mid_run_goes_idle(fake_synthesizer):
    synth = fake_synthesizer(fail_at=1)
    controller = make_controller(synth)
    seen = record_states(controller)

    controller.start()
    await controller.join()

    assert synth.texts == [controller.script.intro, controller.script.explaining]
    assert NarrationPhase.CONCLUSION not in seen
    assert seen[-1] == NarrationPhase.IDLE
    assert not controller.is_playing


async def test_cancelled_session_cannot_overwrite_newer_one(fake_synthesizer, until):
    synth = fake_synthesizer(hold=True)
    controller = make_controller(synth)

    controller.start()
    await until(lambda: len(synth.spoken) == 1)
    controller.start()  # cancels
    controller.start()  # new session
    await until(lambda: len(synth.spoken) == 2)

    # the first session has wound down by now; its idle request was dropped
    assert controller.is_playing
    assert controller.state == NarrationPhase.INTRO

    controller.stop()
    await controller.join()
    assert not controller.is_playing


async def test_held_utterances_advance_when_finished(fake_synthesizer, until):
    synth = fake_synthesizer(hold=True)
    controller = make_controller(synth)

    controller.start()
    for expected, phase in enumerate(PHASE_SEQUENCE, start=1):
        await until(lambda: len(synth.spoken) == expected)
        assert controller.state == phase
        synth.finish()

    await controller.join()
    assert controller.state == NarrationPhase.IDLE


async def test_mute_interrupts_and_ends_session(fake_synthesizer, until):
    synth = fake_synthesizer(hold=True)
    controller = make_controller(synth)

    controller.start()
    await until(lambda: len(synth.spoken) == 1)
    assert controller.toggle_mute() is True
    await controller.join()

    assert controller.is_muted
    assert not controller.is_playing
    assert len(synth.spoken) == 1

    # unmuting does not resume anything
    assert controller.toggle_mute() is False
    await asyncio.sleep(0.01)
    assert len(synth.spoken) == 1
    assert not controller.is_playing


async def test_mute_and_unmute_during_pause_ends_session(fake_synthesizer):
    synth = fake_synthesizer()
    controller = make_controller(synth, phase_delay=0.2)
    seen = record_states(controller)

    controller.start()
    for _ in range(5):
        await asyncio.sleep(0)
    assert synth.texts == [controller.script.intro]

    controller.toggle_mute()
    assert not controller.is_playing
    controller.toggle_mute()
    await asyncio.wait_for(controller.join(), timeout=1.0)

    assert synth.texts == [controller.script.intro]
    assert NarrationPhase.EXPLAINING not in seen
    assert not controller.is_muted
    assert controller.state == NarrationPhase.IDLE


async def test_start_while_muted_speaks_nothing(fake_synthesizer):
    synth = fake_synthesizer()
    controller = make_controller(synth)
    controller.toggle_mute()

    controller.start()
    await controller.join()

    assert synth.spoken == []
    assert controller.state == NarrationPhase.IDLE


async def test_mute_when_idle_does_not_cancel(fake_synthesizer):
    synth = fake_synthesizer()
    controller = make_controller(synth)

    controller.toggle_mute()

    assert synth.cancel_calls == 0
    assert controller.is_muted


async def test_status_presentation(fake_synthesizer, until):
    synth = fake_synthesizer(hold=True)
    controller = make_controller(synth)

    idle = controller.status()
    assert idle.headline == HEADLINES[NarrationPhase.IDLE]
    assert idle.caption == IDLE_CAPTION
    assert idle.expression == "😊"
    assert idle.current_text is None
    assert idle.audio_id is None

    controller.start()
    await until(lambda: len(synth.spoken) == 1)
    synth.finish()
    await until(lambda: len(synth.spoken) == 2)

    playing = controller.status()
    assert playing.session_id == "s1"
    assert playing.state == NarrationPhase.EXPLAINING
    assert playing.headline == "Explaining Every Detail..."
    assert playing.expression == "🤔"
    assert playing.caption == PLAYING_CAPTION
    assert playing.current_text == controller.script.explaining
    assert playing.audio_id is None

    controller.stop()
    await controller.join()


async def test_failing_listener_does_not_break_narration(fake_synthesizer):
    synth = fake_synthesizer()
    controller = make_controller(synth)

    def broken(status):
        raise RuntimeError("listener bug")

    controller.subscribe(broken)
    controller.start()
    await controller.join()

    assert len(synth.spoken) == 3
