#!/usr/bin/env python3
"""
Chat with the companion in the terminal, without running the API.

Usage:
    uv run python scripts/chat.py
    uv run python scripts/chat.py --persona playful --energy 90 --name Sam

Commands while chatting:
    /prompts          list quick prompts
    /prompt <n>       add quick prompt n to the draft and send it
    /set <name> <v>   change a setting (userName, aiName, persona, energy, scenario, customFlair)
    /quit             leave
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Fix Windows encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")

from pydantic import ValidationError

from agents.composer import ResponseComposer
from agents.conversation_state import (
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
from config.settings import settings
from core import InvalidPayloadError, configure_logging
from schemas import ConversationSettings


def show(message):
    stamp = format_timestamp(message.timestamp, settings.TIMEZONE)
    who = "you" if message.role == "user" else "them"
    print(f"[{stamp}] {who}: {message.content}")


def converse(state, composer):
    state = send_message(state)
    if not state.is_loading:
        return state
    show(state.messages[-1])
    try:
        reply = composer.compose(state.messages, state.settings)
    except Exception as e:
        print(f"❌ {e}")
        state = fail_reply(state)
        print(state.error)
        return state
    state = receive_reply(state, reply)
    show(state.messages[-1])
    return state


def main():
    parser = argparse.ArgumentParser(description="Chat with the companion in the terminal")
    parser.add_argument("--name", default=DEFAULT_SETTINGS.user_name, help="Your name")
    parser.add_argument("--ai-name", default=DEFAULT_SETTINGS.ai_name, help="Companion name")
    parser.add_argument("--persona", default=DEFAULT_SETTINGS.persona, help="Persona key")
    parser.add_argument("--energy", type=int, default=DEFAULT_SETTINGS.energy, help="Energy 10-100")
    parser.add_argument("--scenario", default=DEFAULT_SETTINGS.scenario, help="Shared vibe")
    parser.add_argument("--flair", default=DEFAULT_SETTINGS.custom_flair, help="Signature phrase")
    args = parser.parse_args()

    configure_logging(log_level="WARNING")
    composer = ResponseComposer(settings.REPETITION_WINDOW, settings.FLAIR_INTERVAL)

    try:
        state = initial_state(
            ConversationSettings(
                user_name=args.name,
                ai_name=args.ai_name,
                persona=args.persona,
                energy=args.energy,
                scenario=args.scenario,
                custom_flair=args.flair,
            )
        )
    except ValidationError as e:
        print(f"❌ Invalid settings: {e}")
        sys.exit(1)

    show(state.messages[0])

    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if line == "/quit":
            break
        if line == "/prompts":
            for i, prompt in enumerate(QUICK_PROMPTS, 1):
                print(f"  {i}. {prompt}")
            continue
        if line.startswith("/prompt "):
            try:
                prompt = QUICK_PROMPTS[int(line.split()[1]) - 1]
            except (ValueError, IndexError):
                print("❌ Unknown prompt number")
                continue
            state = converse(apply_prompt(state, prompt), composer)
            continue
        if line.startswith("/set "):
            parts = line.split(maxsplit=2)
            if len(parts) < 3:
                print("❌ Usage: /set <name> <value>")
                continue
            try:
                state = update_setting(state, parts[1], parts[2])
                print(f"✅ {parts[1]} updated")
            except (InvalidPayloadError, ValidationError) as e:
                print(f"❌ {e}")
            continue

        state = converse(set_draft(state, line), composer)


if __name__ == "__main__":
    main()
