"""Tests for REPL command parsing."""

from ticklist.repl.parser import parse_command, ParseResult


def test_empty_input():
    result = parse_command("   ")
    assert result == ParseResult(command="", args=[], flags={}, raw_input="")


def test_command_is_lowercased():
    assert parse_command("LS").command == "ls"


def test_args_and_quotes():
    result = parse_command('add "Task with spaces"')
    assert result.command == "add"
    assert result.args == ["Task with spaces"]


def test_flags():
    result = parse_command("ls --done --file tasks.txt")
    assert result.args == []
    assert result.flags == {"done": True, "file": "tasks.txt"}


def test_unclosed_quote_falls_back_to_split():
    result = parse_command('add "broken quote')
    assert result.command == "add"
    assert result.args == ['"broken', "quote"]


def test_comma_separated_ids_stay_one_arg():
    assert parse_command("done 1,2,3").args == ["1,2,3"]


def test_text_after_keeps_raw_text():
    result = parse_command("add  call plumber |  landlord's  ")
    assert result.text_after() == "call plumber |  landlord's"


def test_text_after_skips_tokens():
    result = parse_command("edit 2   new   text")
    assert result.text_after(1) == "new   text"
    assert parse_command("edit 2").text_after(1) == ""


def test_text_after_strips_wrapping_quotes():
    assert parse_command('add "buy milk"').text_after() == "buy milk"
    assert parse_command("add 'buy milk'").text_after() == "buy milk"
    # Quotes that are part of the text are left alone
    assert parse_command('add "a" and "b"').text_after() == '"a" and "b"'
