"""
FILE: ticklist/cli/__init__.py
PURPOSE: Typer-based one-shot commands
"""
