"""
FILE: ticklist/core/__init__.py
PURPOSE: Task store, file codec and persistence
"""
