"""
Prompts module - static reply material organized by feature.

Import directly:
    from prompts.personas import get_persona, persona_list
    from prompts.intents import INTENT_RULES
"""
