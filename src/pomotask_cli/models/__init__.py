"""Data models for Pomotask CLI."""

from .task import Task

__all__ = ["Task"]
