"""Taskify UI components - Reusable widgets."""

from taskify.ui.components.priority_column import PriorityColumn

__all__ = ["PriorityColumn"]
