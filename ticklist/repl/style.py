"""
FILE: ticklist/repl/style.py
PURPOSE: Small celebration messages for REPL feedback
EXPORTS:
  - celebrate_add() -> str
  - celebrate_done() -> str
  - celebrate_delete() -> str
  - celebrate_bulk(count: int, action: str) -> str
DEPENDENCIES:
  - random (for variety)
NOTES:
  - Subtle on purpose: one short line, dim in the REPL
"""

import random


DONE_CELEBRATIONS = [
    "✨ *sparkle* ✨",
    "🎉 *pop* 🎉",
    "⭐ *shine* ⭐",
    "💫 *twinkle* 💫",
]

ADD_CELEBRATIONS = [
    "✓ *noted* ✓",
    "+ *added* +",
    "📝 *captured* 📝",
]

DELETE_ANIMATIONS = [
    "💨 *poof* 💨",
    "× *removed* ×",
    "∅ *gone* ∅",
]

BULK_CELEBRATIONS = [
    "🎯 *efficient* 🎯",
    "⚡ *zippy* ⚡",
    "💪 *productive* 💪",
]


def celebrate_done() -> str:
    """Return a random celebration for completing a task."""
    return random.choice(DONE_CELEBRATIONS)


def celebrate_add() -> str:
    """Return a random celebration for creating a task."""
    return random.choice(ADD_CELEBRATIONS)


def celebrate_delete() -> str:
    """Return a random animation for deleting a task."""
    return random.choice(DELETE_ANIMATIONS)


def celebrate_bulk(count: int, action: str) -> str:
    """
    Return a celebration for a bulk operation.

    Example:
        celebrate_bulk(3, "completed") -> "⚡ *zippy* ⚡ 3 tasks completed"
    """
    return f"{random.choice(BULK_CELEBRATIONS)} {count} tasks {action}"
