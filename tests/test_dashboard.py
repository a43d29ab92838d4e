from pathlib import Path

from streamlit.testing.v1 import AppTest

DASHBOARD = str(Path(__file__).resolve().parent.parent / "dashboard.py")


def run_dashboard():
    at = AppTest.from_file(DASHBOARD, default_timeout=60)
    at.run()
    assert not at.exception
    return at


def button(at, label):
    return next(b for b in at.button if b.label == label)


def test_playback_controls():
    at = run_dashboard()
    assert [b.label for b in at.button] == ["Play", "Pause", "Reset"]


def test_pause_keeps_current_step():
    at = run_dashboard()
    for playback in at.session_state["playbacks"].values():
        for _ in range(5):
            playback.step()

    button(at, "Pause").click().run()
    assert not at.exception
    assert [p.current_step for p in at.session_state["playbacks"].values()] == [5, 5]

    button(at, "Reset").click().run()
    assert [p.current_step for p in at.session_state["playbacks"].values()] == [0, 0]
