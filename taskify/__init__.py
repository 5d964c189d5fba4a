"""Taskify - a priority-bucketed task tracker."""

__version__ = "0.1.0"
