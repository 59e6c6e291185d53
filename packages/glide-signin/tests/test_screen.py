"""Integration tests for SigninScreen: submit flow, decor polling, teardown."""

import pytest
from glide_form import Accepted, Rejected, Rejection
from glide_signin import DecorFrame, ScreenConfig, ScreenDisposedError, SigninScreen

# 50 fps -> 20ms frames: 200 frames per leg, 100 frames per pulse half.
CONFIG = ScreenConfig(fps=50)
VIEWPORT = (400, 800)


def _screen(notes=None, **kwargs):
    notes = notes if notes is not None else []
    return SigninScreen(
        VIEWPORT, lambda title, message: notes.append((title, message)),
        config=kwargs.pop("config", CONFIG), **kwargs,
    )


def _fill(screen, username="alice", password="abc12345", email="a@b.com", age="30"):
    screen.set_field("username", username)
    screen.set_field("password", password)
    screen.set_field("name_or_email", email)
    screen.set_field("age", age)


class TestSubmit:
    """Exactly one notification per submit."""

    def test_success(self):
        notes = []
        screen = _screen(notes)
        _fill(screen)
        result = screen.submit()
        assert result == Accepted(username="alice", email="a@b.com", age="30")
        assert notes == [
            ("Success", "Signed in with:\nUsername: alice\nEmail: a@b.com\nAge: 30"),
        ]

    def test_failure(self):
        notes = []
        screen = _screen(notes)
        _fill(screen, email="not-an-email")
        assert screen.submit() == Rejected(Rejection.EMAIL_INVALID)
        assert notes == [("Invalid Email", "Please enter a valid email address.")]

    def test_resubmit_after_fixing(self):
        """Rejections are recoverable; fields are not cleared on submit."""
        notes = []
        screen = _screen(notes)
        _fill(screen, age="0")
        screen.submit()
        assert screen.inputs.age == "0"
        screen.on_change("age")("1")
        assert isinstance(screen.submit(), Accepted)
        assert [title for title, _ in notes] == ["Invalid Age", "Success"]

    def test_submit_does_not_need_mount(self):
        notes = []
        screen = _screen(notes)
        assert screen.submit() == Rejected(Rejection.USERNAME_EMPTY)
        assert len(notes) == 1

    def test_submit_before_mount_queues_nothing(self):
        screen = _screen()
        seen = []
        screen.bus.subscribe("submitted", lambda name, data: seen.append(data))
        for _ in range(3):
            screen.submit()
        assert screen.bus.pending == 0
        screen.mount()
        screen.frame()
        assert seen == []

    def test_submitted_signal(self):
        screen = _screen()
        seen = []
        screen.bus.subscribe("submitted", lambda name, data: seen.append(data))
        screen.mount()
        screen.submit()
        screen.frame()
        assert seen == [{"accepted": False, "reason": "username_empty"}]


class TestFields:

    def test_unknown_field(self):
        screen = _screen()
        with pytest.raises(KeyError):
            screen.set_field("email", "a@b.com")
        with pytest.raises(KeyError):
            screen.on_change("nameEmail")

    def test_on_change_replaces_full_value(self):
        screen = _screen()
        change = screen.on_change("username")
        change("a")
        change("al")
        change("alice")
        assert screen.inputs.username == "alice"


class TestDecor:
    """Renderer-facing values."""

    def test_initial_decor(self):
        screen = _screen()
        decor = screen.decor()
        assert decor == DecorFrame(position=(50.0, 50.0), rotation=0.0, scale=1.0, opacity=0.6)
        assert decor.rotation_css == "0deg"

    def test_frames_before_mount_do_nothing(self):
        screen = _screen()
        assert screen.frame() == 0
        assert screen.frame(1000.0) == 0
        assert screen.decor().rotation == 0.0

    def test_decor_after_one_leg(self):
        screen = _screen()
        screen.mount()
        for _ in range(200):
            screen.frame()
        decor = screen.decor()
        assert decor.position == (250.0, 50.0)
        assert decor.rotation == 360.0
        assert decor.rotation_css == "360deg"
        # Two pulse halves done: back at rest.
        assert decor.scale == 1.0
        assert decor.opacity == pytest.approx(0.6)

    def test_real_time_feed(self):
        screen = _screen()
        screen.mount()
        assert screen.frame(2000.0) == 100
        decor = screen.decor()
        assert decor.position == (150.0, 50.0)
        assert decor.scale == 1.25
        assert decor.opacity == 0.0

    def test_leg_complete_signals(self):
        screen = _screen()
        seen = []
        screen.bus.subscribe("leg_complete", lambda name, data: seen.append(data["index"]))
        screen.mount()
        for _ in range(200 * 5):
            screen.frame()
        assert seen == [1, 2, 3, 0, 1]

    def test_degenerate_viewport(self):
        screen = SigninScreen((0, 0), lambda t, m: None, config=CONFIG)
        screen.mount()
        screen.frame(1000.0)
        assert screen.decor().position == (50.0, 50.0)
        assert screen.decor().rotation > 0.0


class TestTeardown:
    """No state change is observable after teardown."""

    def test_no_updates_after_teardown(self):
        screen = _screen()
        screen.mount()
        screen.frame(1234.0)
        screen.teardown()
        frozen = screen.decor()
        motion = (screen.motion_state.position, screen.motion_state.rotation)
        phase = screen.pulse_state.phase
        assert screen.frame() == 0
        assert screen.frame(60_000.0) == 0
        assert screen.decor() == frozen
        assert (screen.motion_state.position, screen.motion_state.rotation) == motion
        assert screen.pulse_state.phase == phase
        assert screen.corner.stopped
        assert screen.pulse.stopped

    def test_pending_signals_dropped_and_teardown_published(self):
        screen = _screen()
        seen = []
        screen.bus.subscribe("submitted", lambda name, data: seen.append(name))
        screen.bus.subscribe("teardown", lambda name, data: seen.append(name))
        screen.mount()
        screen.submit()
        screen.teardown()
        assert seen == ["teardown"]
        assert screen.bus.pending == 0

    def test_teardown_from_signal_handler_stops_same_frame(self):
        """A teardown requested mid-frame leaves the rest of that frame undone."""
        screen = _screen()
        screen.bus.subscribe("leg_complete", lambda name, data: screen.teardown())
        screen.mount()
        screen.frame(200 * 20.0 * 3)
        assert screen.disposed
        assert screen.motion_state.legs_completed == 1
        assert screen.motion_state.position == (250.0, 50.0)

    def test_teardown_is_last_signal_when_signals_share_a_frame(self):
        """Signals queued alongside the one that tore the screen down are dropped."""
        screen = _screen()
        seen = []
        screen.bus.subscribe("leg_complete", lambda name, data: screen.teardown())
        screen.bus.subscribe("leg_complete", lambda name, data: seen.append(name))
        screen.bus.subscribe("pulse_turn", lambda name, data: seen.append(name))
        screen.bus.subscribe("teardown", lambda name, data: seen.append(name))
        screen.mount()
        # Frame 200 ends a leg and a pulse half together.
        for _ in range(200):
            screen.frame()
        assert screen.disposed
        assert seen == ["pulse_turn", "teardown"]
        assert screen.bus.closed
        assert screen.bus.pending == 0

    def test_disposed_screen_rejects_use(self):
        screen = _screen()
        screen.mount()
        screen.teardown()
        screen.teardown()
        with pytest.raises(ScreenDisposedError):
            screen.mount()
        with pytest.raises(ScreenDisposedError):
            screen.set_field("username", "alice")
        with pytest.raises(ScreenDisposedError):
            screen.submit()
