"""Pomotask CLI - a terminal Pomodoro timer with a to-do list."""

__version__ = "0.1.0"
