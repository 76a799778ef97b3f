"""
FILE: ticklist/core/models.py
PURPOSE: Domain model for a single task
EXPORTS:
  - Task (dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - json (stdlib)
NOTES:
  - Ids are positional: the store assigns and renumbers them
  - to_json() is used by the CLI --json output
"""

from dataclasses import dataclass, asdict
import json


@dataclass
class Task:
    """A to-do item: position-derived id, free text, completion flag."""

    id: int
    description: str
    done: bool = False

    def to_dict(self) -> dict:
        """Convert task to a plain dict."""
        return asdict(self)

    def to_json(self) -> str:
        """Serialize task to JSON string."""
        return json.dumps(self.to_dict(), indent=2)
