"""
Pydantic models for Taskify application.

Defines the priority levels and the task entity stored in the master sequence.
"""

from enum import Enum
from typing import List, Union

from pydantic import BaseModel, Field, computed_field, field_validator


class Priority(str, Enum):
    """Closed set of priority levels a task can carry."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def ordered(cls) -> List["Priority"]:
        """
        Get priority levels in display order.

        Returns:
            List of levels from High to Low
        """
        return [cls.HIGH, cls.MEDIUM, cls.LOW]

    @classmethod
    def parse(cls, value: Union["Priority", str, None]) -> "Priority":
        """
        Convert a label or member into a Priority.

        Labels are matched case-insensitively, ignoring surrounding whitespace.

        Args:
            value: Priority member or its label ("High", "medium", ...)

        Returns:
            The matching Priority member

        Raises:
            ValueError: If value is not a recognized priority
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            label = value.strip().lower()
            for member in cls:
                if member.value.lower() == label:
                    return member
        raise ValueError(f"Unrecognized priority: {value!r}")

    def __str__(self) -> str:
        return self.value


class Task(BaseModel):
    """
    Represents a single task in the master sequence.

    A task's identity is its slot in the store, not its fields: two tasks
    with the same name and priority are still distinct entities.
    """

    name: str = Field(..., description="Task label shown in the priority columns")
    priority: Priority = Field(..., description="Priority bucket the task belongs to")

    class Config:
        """Pydantic configuration."""
        validate_assignment = True
        json_schema_extra = {
            "example": {
                "name": "Write report",
                "priority": "High",
            }
        }

    @field_validator("priority", mode="before")
    @classmethod
    def coerce_priority(cls, v):
        """
        Accept priority labels in any case.

        Args:
            v: Raw priority value

        Returns:
            Priority member, or the raw value when it cannot be parsed so
            pydantic reports the enum error
        """
        try:
            return Priority.parse(v)
        except ValueError:
            return v

    @computed_field
    @property
    def display_text(self) -> str:
        """
        Text shown for this task in its priority column.

        Returns:
            The task name
        """
        return self.name

    def rename(self, name: str) -> None:
        """Replace the task name."""
        self.name = name

    def set_priority(self, priority: Union[Priority, str]) -> None:
        """
        Move the task to another priority level.

        Args:
            priority: New priority member or label

        Raises:
            pydantic.ValidationError: If priority is not recognized
        """
        self.priority = priority

    def __str__(self) -> str:
        return self.name
