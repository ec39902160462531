# src/suitediff/telemetry/logger/processors.py

"""
Custom structlog processors for suitediff log output.
"""

import logging

from structlog.typing import EventDict, WrappedLogger

LOG_EMOJIS = {
    logging.DEBUG: "🐛",
    logging.INFO: "ℹ️",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "💥",
    "parse": "🌳",
    "extract": "🔎",
    "snapshot": "📸",
    "diff": "⚖️",
    "git": "🔀",
    "config": "📄",
    "general": "➡️",
}

# Logger name prefixes mapped to the emoji of their area.
_AREA_EMOJI_KEYS = {
    "syntax": "parse",
    "extraction": "extract",
    "snapshot": "snapshot",
    "decorator": "snapshot",
    "differ": "diff",
    "engines": "git",
    "config": "config",
}

# Bookkeeping keys that only add noise to rendered lines.
_EXTRA_KEYS = ("engine_id", "provider_id", "emoji_key")


def add_emoji_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefixes the event with an emoji for its area, or for its level on problems."""
    level = logging._nameToLevel.get(str(event_dict.get("level", "")).upper(), logging.INFO)
    if level >= logging.WARNING:
        emoji = LOG_EMOJIS[level]
    else:
        area = str(event_dict.get("logger", "")).split(".", 1)[0]
        key = event_dict.get("emoji_key") or _AREA_EMOJI_KEYS.get(area, "general")
        emoji = LOG_EMOJIS.get(key, LOG_EMOJIS["general"])
    event = event_dict.get("event")
    if isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Drops bookkeeping keys before rendering."""
    for key in _EXTRA_KEYS:
        event_dict.pop(key, None)
    return event_dict

# 🧪⚙️
