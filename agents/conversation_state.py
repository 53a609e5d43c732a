"""
Conversation state for the chat page.

The page's state (messages, settings, draft input, loading and error flags)
lives in one immutable ConversationState. Each user action has a transition
function that returns the next state; nothing is mutated in place.

History is only appended to after a reply arrives, so a failed request
leaves the conversation exactly as it was.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional, Tuple

import pytz

from agents.composer import build_opening_message
from config.settings import settings as app_settings
from core import InvalidPayloadError, get_logger
from schemas import ChatMessage, ConversationSettings

logger = get_logger(__name__)

DEFAULT_SETTINGS = ConversationSettings(
    user_name="Alex",
    ai_name="Luna",
    persona="romantic",
    energy=68,
    scenario="cozy late-night whispers over a glowing skyline",
    custom_flair="I am here, heart open and glowing just for you.",
)

QUICK_PROMPTS: Tuple[str, ...] = (
    "Tell me what you admire most about me tonight.",
    "Help me calm down after a stressful day.",
    "Let us plan a dreamy weekend getaway.",
    "Remind me why you chose me.",
)

CONNECTION_ERROR_MESSAGE = "I lost the connection for a moment. Try again and I will be right here."


def now_ms() -> int:
    """Current UTC time in epoch milliseconds."""
    return int(datetime.now(pytz.utc).timestamp() * 1000)


def format_timestamp(timestamp: Optional[int], tz_name: Optional[str] = None) -> str:
    """Render an epoch-millisecond timestamp as HH:MM, in the configured timezone by default."""
    if not timestamp:
        return ""
    moment = datetime.fromtimestamp(timestamp / 1000, tz=pytz.utc)
    return moment.astimezone(pytz.timezone(tz_name or app_settings.TIMEZONE)).strftime("%H:%M")


@dataclass(frozen=True)
class ConversationState:
    """Everything the chat page renders."""

    settings: ConversationSettings = DEFAULT_SETTINGS
    messages: Tuple[ChatMessage, ...] = field(default_factory=tuple)
    draft: str = ""
    is_loading: bool = False
    error: Optional[str] = None

    @property
    def last_timestamp(self) -> Optional[int]:
        for message in reversed(self.messages):
            if message.timestamp is not None:
                return message.timestamp
        return None

    @property
    def can_send(self) -> bool:
        return bool(self.draft.strip()) and not self.is_loading


def _stamp(state: ConversationState, now: Optional[int]) -> int:
    # Keep timestamps non-decreasing even if the clock steps back
    current = now if now is not None else now_ms()
    last = state.last_timestamp
    return current if last is None else max(current, last)


def initial_state(
    settings: ConversationSettings = DEFAULT_SETTINGS,
    now: Optional[int] = None,
) -> ConversationState:
    """A fresh conversation holding only the opening message."""
    opening = ChatMessage(
        role="assistant",
        content=build_opening_message(settings),
        timestamp=now if now is not None else now_ms(),
    )
    return ConversationState(settings=settings, messages=(opening,))


def _resolve_setting_name(name: str) -> str:
    for field_name, info in ConversationSettings.model_fields.items():
        if name in (field_name, info.alias):
            return field_name
    raise InvalidPayloadError(field=name, reason="unknown setting")


def update_setting(
    state: ConversationState,
    name: str,
    value: Any,
    now: Optional[int] = None,
) -> ConversationState:
    """
    Change one setting.

    While the conversation holds only the opening message, the greeting is
    rewritten to match the new settings.

    Args:
        state: Current state
        name: Setting name, either snake_case or the camelCase wire name
        value: New value (validated)
        now: Epoch-millisecond clock reading

    Raises:
        InvalidPayloadError: If the setting name is unknown
        pydantic.ValidationError: If the value is out of range
    """
    field_name = _resolve_setting_name(name)
    settings = ConversationSettings.model_validate(
        {**state.settings.model_dump(), field_name: value}
    )

    messages = state.messages
    if len(messages) == 1 and messages[0].role == "assistant":
        messages = (
            ChatMessage(
                role="assistant",
                content=build_opening_message(settings),
                timestamp=_stamp(state, now),
            ),
        )
    return replace(state, settings=settings, messages=messages)


def set_draft(state: ConversationState, text: str) -> ConversationState:
    return replace(state, draft=text)


def apply_prompt(state: ConversationState, prompt: str) -> ConversationState:
    """Add a quick prompt to the draft, on its own line if the draft has text."""
    draft = f"{state.draft}\n{prompt}" if state.draft else prompt
    return replace(state, draft=draft)


def send_message(state: ConversationState, now: Optional[int] = None) -> ConversationState:
    """
    Move the draft into the history as a user message and wait for a reply.

    Does nothing when the draft is blank or a reply is already pending.
    """
    if not state.can_send:
        return state

    message = ChatMessage(role="user", content=state.draft.strip(), timestamp=_stamp(state, now))
    return replace(
        state,
        messages=state.messages + (message,),
        draft="",
        is_loading=True,
        error=None,
    )


def receive_reply(
    state: ConversationState,
    text: str,
    now: Optional[int] = None,
) -> ConversationState:
    """Append the companion's reply. An empty reply counts as a failure."""
    if not text:
        logger.warning("Empty reply received")
        return fail_reply(state)

    message = ChatMessage(role="assistant", content=text, timestamp=_stamp(state, now))
    return replace(state, messages=state.messages + (message,), is_loading=False)


def fail_reply(state: ConversationState) -> ConversationState:
    """Show the connection error; history is left untouched so the user can retry."""
    return replace(state, is_loading=False, error=CONNECTION_ERROR_MESSAGE)
