"""
FILE: ticklist/repl/parser.py
PURPOSE: Parse user input into commands and arguments for REPL
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
  - typing (type hints)
NOTES:
  - Handles quoted strings: add "task with spaces"
  - Supports flags: --json, --file path
  - Case-insensitive command names
  - ParseResult.text_after() returns the raw rest of the line so task text
    keeps characters shlex would eat (quotes, "|", repeated spaces)
"""

import shlex
from dataclasses import dataclass, field
from typing import List, Dict


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command name (e.g., "add", "ls", "done")
        args: Positional arguments (e.g., ["buy milk"], ["1,2"])
        flags: Flag arguments as dict (e.g., {"json": True})
        raw_input: Original input string (stripped)
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, str | bool] = field(default_factory=dict)
    raw_input: str = ""

    def text_after(self, count: int = 0) -> str:
        """
        Raw text following the command and `count` more tokens.

        Examples:
            "add buy a|b milk".text_after()    -> "buy a|b milk"
            "edit 2 call 'mum'".text_after(1)  -> "call 'mum'"
            'add "quoted task"'.text_after()   -> "quoted task"

        Only whitespace splitting is used, so the text comes back verbatim
        except that one pair of quotes wrapping the whole remainder is removed.
        """
        parts = self.raw_input.split(None, count + 1)
        if len(parts) <= count + 1:
            return ""
        return _unquote(parts[count + 1].strip())


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
        inner = text[1:-1]
        if text[0] not in inner:
            return inner
    return text


def parse_command(input_str: str) -> ParseResult:
    """
    Parse REPL input into command, args, and flags.

    Examples:
        >>> parse_command("add Buy milk")
        ParseResult(command="add", args=["Buy", "milk"], flags={})

        >>> parse_command('add "Task with spaces"')
        ParseResult(command="add", args=["Task with spaces"], flags={})

        >>> parse_command("done 1,2")
        ParseResult(command="done", args=["1,2"], flags={})

        >>> parse_command("ls --json")
        ParseResult(command="ls", args=[], flags={"json": True})

    Args:
        input_str: Raw user input from REPL prompt

    Returns:
        ParseResult with command, args, and flags extracted

    Notes:
        - Command is always the first token (case-insensitive)
        - Flags start with -- (e.g., --json)
        - Boolean flags don't need values (--json sets json=True)
        - Value flags expect next token as value (--file tasks.txt)
        - Remaining tokens are positional args
        - Quoted strings are treated as single args
        - Empty input returns command="" with no args/flags
    """
    input_str = input_str.strip()
    if not input_str:
        return ParseResult(command="", args=[], flags={}, raw_input=input_str)

    try:
        tokens = shlex.split(input_str)
    except ValueError:
        # Unclosed quote: fall back to plain split
        tokens = input_str.split()

    if not tokens:
        return ParseResult(command="", args=[], flags={}, raw_input=input_str)

    command = tokens[0].lower()

    args = []
    flags = {}
    i = 1

    while i < len(tokens):
        token = tokens[i]

        if token.startswith("--") and len(token) > 2:
            flag_name = token[2:]

            if i + 1 < len(tokens) and not tokens[i + 1].startswith("--"):
                flags[flag_name] = tokens[i + 1]
                i += 2
            else:
                flags[flag_name] = True
                i += 1
        else:
            args.append(token)
            i += 1

    return ParseResult(
        command=command,
        args=args,
        flags=flags,
        raw_input=input_str
    )
