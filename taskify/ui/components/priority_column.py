"""Column widget showing the tasks of one priority bucket.

The column only renders display strings and reports which row the user
picked. Translating that row into a master index is left to the TaskManager.
"""

from typing import List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Label, ListItem, ListView

from taskify.logging_config import get_logger
from taskify.models import Priority
from taskify.ui.theme import (
    BORDER,
    FOREGROUND,
    SELECTION,
    HOVER_OPACITY,
    get_priority_color,
    with_alpha,
)

logger = get_logger(__name__)


def _priority_css() -> str:
    return "".join(
        f"""
    PriorityColumn.{level.value.lower()} .column-header {{
        color: {get_priority_color(level)};
    }}

    PriorityColumn.{level.value.lower()}:focus-within {{
        border: round {get_priority_color(level)};
    }}
    """
        for level in Priority.ordered()
    )


class PriorityColumn(Widget):
    """A column listing the task names of one priority level.

    Messages:
        TaskSelected: Emitted when the user selects a row in the list
    """

    DEFAULT_CSS = f"""
    PriorityColumn {{
        width: 1fr;
        height: 100%;
        border: round {BORDER};
        padding: 0 1;
    }}

    PriorityColumn .column-header {{
        width: 100%;
        height: 1;
        text-style: bold;
    }}

    PriorityColumn ListView {{
        height: 1fr;
        background: transparent;
    }}

    PriorityColumn ListItem {{
        color: {FOREGROUND};
        background: transparent;
    }}

    PriorityColumn ListItem:hover {{
        background: {with_alpha(SELECTION, HOVER_OPACITY)};
    }}
    """ + _priority_css()

    def __init__(
        self,
        priority: Priority,
        names: Optional[List[str]] = None,
        show_counts: bool = True,
        **kwargs
    ) -> None:
        """Initialize a PriorityColumn widget.

        Args:
            priority: Priority level this column displays
            names: Initial display strings, rendered on mount
            show_counts: Whether the header shows the number of tasks
            **kwargs: Additional keyword arguments for Widget
        """
        super().__init__(**kwargs)
        self.priority = Priority.parse(priority)
        self.show_counts = show_counts
        self._names: List[str] = list(names) if names else []
        self.add_class(self.priority.value.lower())

    def compose(self) -> ComposeResult:
        yield Label(self.header_text, classes="column-header")
        yield ListView()

    @property
    def header_text(self) -> str:
        """Header label, e.g. 'High Priority (2)'."""
        title = f"{self.priority.value} Priority"
        if self.show_counts:
            return f"{title} ({len(self._names)})"
        return title

    @property
    def task_names(self) -> List[str]:
        """Names currently shown, in display order."""
        return list(self._names)

    async def set_tasks(self, names: List[str]) -> None:
        """Replace the rows of the column.

        Args:
            names: Display strings of the bucket, in bucket order
        """
        logger.debug(f"{self.priority.value} column: showing {len(names)} tasks")
        self._names = list(names)
        await self._render_rows()

    async def on_mount(self) -> None:
        await self._render_rows()

    async def _render_rows(self) -> None:
        try:
            list_view = self.query_one(ListView)
        except NoMatches:
            # Not composed yet; on_mount renders the stored names
            logger.debug(f"{self.priority.value} column: list not ready")
            return
        await list_view.clear()
        await list_view.extend(ListItem(Label(Text(name))) for name in self._names)
        self.query_one(".column-header", Label).update(self.header_text)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Forward a row selection as a bucket-local index."""
        event.stop()
        local_index = event.list_view.index
        if local_index is None:
            return
        logger.debug(f"{self.priority.value} column: row {local_index} selected")
        self.post_message(self.TaskSelected(self.priority, local_index))

    class TaskSelected(Message):
        """Message emitted when a row is selected in the column."""

        def __init__(self, priority: Priority, local_index: int) -> None:
            """Initialize the TaskSelected message.

            Args:
                priority: Priority level of the column
                local_index: Row index inside the column
            """
            super().__init__()
            self.priority = priority
            self.local_index = local_index
