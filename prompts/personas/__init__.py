"""
Persona registry.

Each persona is a static record (label, tone, description, reply templates
per intent). The registry is a closed mapping from PersonaKey to Persona and
is checked for exhaustiveness when this package is imported.

Usage:
    from prompts.personas import get_persona, persona_list
"""

from string import Formatter
from typing import Dict, List, Optional

from core.exceptions import ConfigurationError
from prompts.personas.base import TEMPLATE_FIELDS, Intent, Persona, PersonaKey
from prompts.personas.romantic import ROMANTIC_PERSONA
from prompts.personas.supportive import SUPPORTIVE_PERSONA
from prompts.personas.playful import PLAYFUL_PERSONA
from prompts.personas.dreamy import DREAMY_PERSONA

PERSONAS: Dict[PersonaKey, Persona] = {
    PersonaKey.ROMANTIC: ROMANTIC_PERSONA,
    PersonaKey.SUPPORTIVE: SUPPORTIVE_PERSONA,
    PersonaKey.PLAYFUL: PLAYFUL_PERSONA,
    PersonaKey.DREAMY: DREAMY_PERSONA,
}


def validate_registry(registry: Dict[PersonaKey, Persona]) -> None:
    """
    Check that every key has a persona and every persona covers every intent.

    Raises:
        ConfigurationError: On a missing record, empty bucket, unknown placeholder
            or a template without {tone}
    """
    missing = [key.value for key in PersonaKey if key not in registry]
    if missing:
        raise ConfigurationError("PERSONAS", f"missing personas: {', '.join(missing)}")

    for key, persona in registry.items():
        if persona.key is not key:
            raise ConfigurationError("PERSONAS", f"{key.value} is registered under the wrong key")
        for intent in Intent:
            bucket = persona.templates.get(intent)
            if not bucket:
                raise ConfigurationError(
                    "PERSONAS", f"{key.value} has no templates for {intent.value}"
                )
            for template in bucket:
                names = {name for _, name, _, _ in Formatter().parse(template) if name is not None}
                unknown = names - set(TEMPLATE_FIELDS)
                if unknown:
                    raise ConfigurationError(
                        "PERSONAS", f"{key.value} uses unknown placeholder {{{sorted(unknown)[0]}}}"
                    )
                if "tone" not in names:
                    raise ConfigurationError(
                        "PERSONAS", f"{key.value}/{intent.value} template never mentions {{tone}}: {template!r}"
                    )


validate_registry(PERSONAS)

DEFAULT_PERSONA: Persona = next(iter(PERSONAS.values()))


def get_persona(key: Optional[str]) -> Persona:
    """Resolve a persona key, falling back to the first registered persona."""
    try:
        return PERSONAS[PersonaKey(key)]
    except ValueError:
        return DEFAULT_PERSONA


def persona_list() -> List[Persona]:
    """All personas in registry order."""
    return list(PERSONAS.values())


__all__ = [
    "Intent",
    "Persona",
    "PersonaKey",
    "PERSONAS",
    "DEFAULT_PERSONA",
    "get_persona",
    "persona_list",
    "validate_registry",
]
