"""
Shared pytest fixtures for companion tests.
"""

import pytest

from agents.composer import ResponseComposer
from schemas import ChatMessage, ConversationSettings


# --- Settings fixtures ---

@pytest.fixture
def companion_settings():
    """Supportive persona at mid energy with no flair, so replies are raw template renders."""
    return ConversationSettings(
        user_name="Alex",
        ai_name="Luna",
        persona="supportive",
        energy=50,
        scenario="a quiet rooftop at dusk",
        custom_flair="",
    )


@pytest.fixture
def settings_with(companion_settings):
    """Factory fixture: companion_settings with some fields replaced (validated)."""

    def _with(**changes):
        return ConversationSettings.model_validate(
            {**companion_settings.model_dump(), **changes}
        )

    return _with


# --- History fixtures ---

@pytest.fixture
def make_history():
    """
    Factory fixture for conversation histories.

    Usage:
        make_history(("user", "hi"), ("assistant", "hello"), ("user", "how are you"))
    """

    def _make(*turns):
        return [
            ChatMessage(role=role, content=content, timestamp=1_000 * (i + 1))
            for i, (role, content) in enumerate(turns)
        ]

    return _make


@pytest.fixture
def composer():
    """Composer with the default repetition window and flair cadence."""
    return ResponseComposer()


# --- Template rendering ---

def render(template, settings, persona):
    """Mid-energy rendering of a template, which is plain interpolation."""
    return template.format(
        userName=settings.user_name,
        aiName=settings.ai_name,
        scenario=settings.scenario,
        tone=persona.tone,
    )


@pytest.fixture
def render_bucket():
    """Factory fixture: all mid-energy renders of a persona's intent bucket."""

    def _render(persona, intent, settings):
        return [render(template, settings, persona) for template in persona.bucket(intent)]

    return _render
