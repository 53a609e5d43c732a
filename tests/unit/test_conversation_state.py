"""
Tests for the chat page state transitions.
"""

from datetime import datetime

import pytest
import pytz
from pydantic import ValidationError

from agents.composer import build_opening_message
from agents.conversation_state import (
    CONNECTION_ERROR_MESSAGE,
    DEFAULT_SETTINGS,
    QUICK_PROMPTS,
    apply_prompt,
    fail_reply,
    format_timestamp,
    initial_state,
    receive_reply,
    send_message,
    set_draft,
    update_setting,
)
from config.settings import settings as app_settings
from core import InvalidPayloadError


@pytest.fixture
def state():
    return initial_state(now=1_000)


class TestInitialState:

    def test_starts_with_opening_message(self, state):
        assert len(state.messages) == 1
        assert state.messages[0].role == "assistant"
        assert state.messages[0].content == build_opening_message(DEFAULT_SETTINGS)
        assert state.messages[0].timestamp == 1_000

    def test_starts_idle(self, state):
        assert state.draft == ""
        assert not state.is_loading
        assert state.error is None


class TestUpdateSetting:

    def test_opening_follows_settings(self, state):
        updated = update_setting(state, "userName", "Sam", now=2_000)

        assert updated.settings.user_name == "Sam"
        assert updated.messages[0].content.startswith("Hi Sam!")
        assert updated.messages[0].timestamp == 2_000

    def test_snake_case_name_works(self, state):
        updated = update_setting(state, "custom_flair", "Yours", now=2_000)

        assert updated.settings.custom_flair == "Yours"

    def test_opening_kept_once_conversation_started(self, state):
        state = send_message(set_draft(state, "hi"), now=2_000)
        state = receive_reply(state, "hello", now=3_000)

        updated = update_setting(state, "aiName", "Nova", now=4_000)

        assert updated.messages == state.messages
        assert updated.settings.ai_name == "Nova"

    def test_unknown_setting_is_rejected(self, state):
        with pytest.raises(InvalidPayloadError):
            update_setting(state, "mood", "happy")

    def test_energy_out_of_range_is_rejected(self, state):
        with pytest.raises(ValidationError):
            update_setting(state, "energy", 5)

    def test_original_state_is_unchanged(self, state):
        update_setting(state, "userName", "Sam", now=2_000)

        assert state.settings.user_name == "Alex"


class TestDraft:

    def test_apply_prompt_to_empty_draft(self, state):
        assert apply_prompt(state, QUICK_PROMPTS[0]).draft == QUICK_PROMPTS[0]

    def test_apply_prompt_appends_on_new_line(self, state):
        state = set_draft(state, "hey")

        assert apply_prompt(state, QUICK_PROMPTS[1]).draft == f"hey\n{QUICK_PROMPTS[1]}"


class TestSendAndReceive:

    def test_blank_draft_does_nothing(self, state):
        state = set_draft(state, "   ")

        assert send_message(state, now=2_000) is state

    def test_send_appends_trimmed_user_message(self, state):
        sent = send_message(set_draft(state, "  I miss you  "), now=2_000)

        assert sent.messages[-1].role == "user"
        assert sent.messages[-1].content == "I miss you"
        assert sent.draft == ""
        assert sent.is_loading
        assert sent.error is None

    def test_cannot_send_while_waiting(self, state):
        sent = send_message(set_draft(state, "one"), now=2_000)
        again = send_message(set_draft(sent, "two"), now=3_000)

        assert again.messages == sent.messages

    def test_send_clears_previous_error(self, state):
        failed = fail_reply(send_message(set_draft(state, "one"), now=2_000))

        retried = send_message(set_draft(failed, "one again"), now=3_000)

        assert retried.error is None

    def test_receive_reply_appends_and_stops_loading(self, state):
        sent = send_message(set_draft(state, "hi"), now=2_000)

        done = receive_reply(sent, "hello you", now=3_000)

        assert done.messages[-1].role == "assistant"
        assert done.messages[-1].content == "hello you"
        assert not done.is_loading

    def test_empty_reply_is_a_failure(self, state):
        sent = send_message(set_draft(state, "hi"), now=2_000)

        done = receive_reply(sent, "", now=3_000)

        assert done.error == CONNECTION_ERROR_MESSAGE
        assert done.messages == sent.messages

    def test_failure_keeps_history(self, state):
        sent = send_message(set_draft(state, "hi"), now=2_000)

        failed = fail_reply(sent)

        assert failed.messages == sent.messages
        assert failed.error == CONNECTION_ERROR_MESSAGE
        assert not failed.is_loading

    def test_timestamps_never_go_backwards(self, state):
        sent = send_message(set_draft(state, "hi"), now=500)
        done = receive_reply(sent, "hello", now=400)

        stamps = [message.timestamp for message in done.messages]
        assert stamps == sorted(stamps)


class TestFormatTimestamp:

    def test_missing_timestamp_is_blank(self):
        assert format_timestamp(None) == ""

    def test_formats_in_timezone(self):
        moment = pytz.utc.localize(datetime(2026, 2, 5, 19, 30))
        ms = int(moment.timestamp() * 1000)

        assert format_timestamp(ms, "America/Toronto") == "14:30"
        assert format_timestamp(ms, "UTC") == "19:30"

    def test_defaults_to_configured_timezone(self, monkeypatch):
        monkeypatch.setattr(app_settings, "TIMEZONE", "Asia/Tokyo")
        moment = pytz.utc.localize(datetime(2026, 2, 5, 19, 30))

        assert format_timestamp(int(moment.timestamp() * 1000)) == "04:30"
