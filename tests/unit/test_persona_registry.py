"""
Tests for the persona registry and its load-time checks.
"""

from dataclasses import replace

import pytest

from core import ConfigurationError
from prompts.personas import (
    DEFAULT_PERSONA,
    PERSONAS,
    Intent,
    PersonaKey,
    get_persona,
    persona_list,
    validate_registry,
)


class TestRegistry:

    def test_every_key_has_a_persona(self):
        assert set(PERSONAS) == set(PersonaKey)

    @pytest.mark.parametrize("key", list(PersonaKey))
    def test_every_intent_has_alternatives(self, key):
        persona = PERSONAS[key]
        for intent in Intent:
            assert len(persona.bucket(intent)) >= 2, f"{key.value}/{intent.value}"

    def test_default_is_first_registered(self):
        assert DEFAULT_PERSONA is persona_list()[0]
        assert DEFAULT_PERSONA.key is PersonaKey.ROMANTIC

    def test_persona_list_keeps_registry_order(self):
        assert [persona.key for persona in persona_list()] == list(PersonaKey)


class TestGetPersona:

    @pytest.mark.parametrize("key", [key.value for key in PersonaKey])
    def test_known_keys_resolve(self, key):
        assert get_persona(key).key.value == key

    @pytest.mark.parametrize("key", ["unknown-key", "", None, "ROMANTIC"])
    def test_unknown_keys_fall_back(self, key):
        assert get_persona(key) is DEFAULT_PERSONA


class TestValidateRegistry:

    def test_current_registry_is_valid(self):
        validate_registry(PERSONAS)

    def test_missing_persona_is_rejected(self):
        registry = {key: persona for key, persona in PERSONAS.items() if key is not PersonaKey.DREAMY}

        with pytest.raises(ConfigurationError, match="dreamy"):
            validate_registry(registry)

    def test_empty_bucket_is_rejected(self):
        romantic = PERSONAS[PersonaKey.ROMANTIC]
        broken = replace(romantic, templates={**romantic.templates, Intent.GRATITUDE: ()})

        with pytest.raises(ConfigurationError, match="gratitude"):
            validate_registry({**PERSONAS, PersonaKey.ROMANTIC: broken})

    def test_unknown_placeholder_is_rejected(self):
        playful = PERSONAS[PersonaKey.PLAYFUL]
        broken = replace(
            playful,
            templates={**playful.templates, Intent.GENERAL: ("Hey {mood}", "Hi {userName}")},
        )

        with pytest.raises(ConfigurationError, match="mood"):
            validate_registry({**PERSONAS, PersonaKey.PLAYFUL: broken})

    def test_persona_under_wrong_key_is_rejected(self):
        with pytest.raises(ConfigurationError):
            validate_registry({**PERSONAS, PersonaKey.PLAYFUL: PERSONAS[PersonaKey.DREAMY]})

    def test_error_carries_context(self):
        registry = {key: persona for key, persona in PERSONAS.items() if key is not PersonaKey.PLAYFUL}

        with pytest.raises(ConfigurationError) as exc_info:
            validate_registry(registry)

        assert exc_info.value.to_dict()["error"] == "CONFIGURATION_ERROR"
        assert exc_info.value.context["setting"] == "PERSONAS"

    def test_template_without_tone_is_rejected(self):
        supportive = PERSONAS[PersonaKey.SUPPORTIVE]
        broken = replace(
            supportive,
            templates={**supportive.templates, Intent.COMFORT: ("I am here, {userName}.", "Breathe, {tone}.")},
        )

        with pytest.raises(ConfigurationError, match="supportive/comfort"):
            validate_registry({**PERSONAS, PersonaKey.SUPPORTIVE: broken})

    @pytest.mark.parametrize("key", list(PersonaKey))
    def test_every_template_mentions_tone(self, key):
        for intent in Intent:
            for template in PERSONAS[key].bucket(intent):
                assert "{tone}" in template, f"{key.value}/{intent.value}: {template}"
