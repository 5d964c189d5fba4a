"""Taskify user interface."""
