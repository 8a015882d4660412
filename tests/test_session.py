from __future__ import annotations

import asyncio

from boxsort.buffer import LineBuffer
from boxsort.config import SettingsStore, load_config
from boxsort.session import ReorderSession


def test_session_reorders_active_buffer_after_debounce(tmp_path, scheduler):
    buffer = LineBuffer(["- [x] b", "- [ ] a"])
    session = ReorderSession(
        store=SettingsStore(tmp_path / "settings.yaml"),
        scheduler=scheduler,
        active_buffer=lambda: buffer,
    )

    session.on_checkbox_toggled()
    session.on_checkbox_toggled()
    assert buffer.writes == 0

    scheduler.advance(0.3)
    assert buffer.get_all_lines() == ["- [ ] a", "- [x] b"]
    assert buffer.writes == 1
    assert session.last_result is not None
    assert session.last_result.groups_found == 1


def test_session_without_active_buffer_is_noop(tmp_path, scheduler):
    session = ReorderSession(
        store=SettingsStore(tmp_path / "settings.yaml"),
        scheduler=scheduler,
        active_buffer=lambda: None,
    )
    session.on_checkbox_toggled()
    scheduler.advance(1)
    assert session.last_result is None


def test_session_settings_update_disables_trigger_and_persists(tmp_path, scheduler):
    config_path = tmp_path / "settings.yaml"
    buffer = LineBuffer(["- [x] b", "- [ ] a"])
    session = ReorderSession(
        store=SettingsStore(config_path),
        scheduler=scheduler,
        active_buffer=lambda: buffer,
    )

    session.update_settings(enable_auto_reorder=False)
    assert load_config(config_path).enable_auto_reorder is False

    session.on_checkbox_toggled()
    scheduler.advance(1)
    assert buffer.writes == 0


def test_session_close_cancels_pending_pass(tmp_path, scheduler):
    buffer = LineBuffer(["- [x] b", "- [ ] a"])
    session = ReorderSession(
        store=SettingsStore(tmp_path / "settings.yaml"),
        scheduler=scheduler,
        active_buffer=lambda: buffer,
    )
    session.on_checkbox_toggled()
    session.close()
    scheduler.advance(1)
    assert buffer.writes == 0


def test_session_runs_on_asyncio_loop(tmp_path):
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("reorder_delay_ms: 100\n", encoding="utf-8")
    buffer = LineBuffer(["- [x] b", "- [ ] a", "- [x] c"])

    async def _scenario() -> None:
        session = ReorderSession(
            store=SettingsStore(config_path),
            scheduler=asyncio.get_running_loop(),
            active_buffer=lambda: buffer,
        )
        session.on_checkbox_toggled()
        await asyncio.sleep(0.05)
        session.on_checkbox_toggled()
        await asyncio.sleep(0.3)
        session.close()

    asyncio.run(_scenario())
    assert buffer.get_all_lines() == ["- [ ] a", "- [x] b", "- [x] c"]
    assert buffer.writes == 1
