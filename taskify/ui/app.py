"""Main Textual application for Taskify.

Layout, top to bottom:
- Form row: task name input and priority select
- Button row: Add / Update / Delete
- Three priority columns: High, Medium, Low

All state lives in the TaskManager. The app forwards user intent to it,
redraws the columns on its refresh signal and shows its error signal as a
notification.
"""

from typing import Optional

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, Footer, Header, Input, Select

from taskify.config import Config
from taskify.logging_config import get_logger
from taskify.models import Priority
from taskify.services.task_manager import TaskManager
from taskify.services.task_store import UserFacingError
from taskify.ui.components.priority_column import PriorityColumn
from taskify.ui.constants import (
    ADD_BUTTON_ID,
    DELETE_BUTTON_ID,
    NOTIFICATION_TIMEOUT_MEDIUM,
    PRIORITY_SELECT_ID,
    TASK_NAME_INPUT_ID,
    UPDATE_BUTTON_ID,
)
from taskify.ui.keybindings import get_all_bindings, get_column_id
from taskify.ui.theme import (
    BACKGROUND,
    BORDER,
    CYAN,
    FOREGROUND,
    PINK,
    PURPLE,
    SELECTION,
)

logger = get_logger(__name__)


class TaskifyApp(App):
    """Main Taskify application with three priority columns."""

    CSS = f"""
    Screen {{
        background: {BACKGROUND};
        layout: vertical;
    }}

    #form-container {{
        width: 100%;
        height: auto;
        padding: 0 1;
    }}

    #input-row, #button-row {{
        width: 100%;
        height: 3;
    }}

    #{TASK_NAME_INPUT_ID} {{
        width: 1fr;
    }}

    #{PRIORITY_SELECT_ID} {{
        width: 24;
    }}

    Button {{
        background: {SELECTION};
        color: {FOREGROUND};
        border: solid {BORDER};
        margin: 0 1;
        min-width: 15;
        height: 3;
    }}

    #{ADD_BUTTON_ID} {{
        border: solid {CYAN};
    }}

    #{UPDATE_BUTTON_ID} {{
        border: solid {PURPLE};
    }}

    #{DELETE_BUTTON_ID} {{
        border: solid {PINK};
    }}

    #columns-container {{
        width: 100%;
        height: 1fr;
        layout: horizontal;
    }}

    Footer {{
        background: {SELECTION};
    }}
    """

    BINDINGS = get_all_bindings()

    def __init__(
        self,
        manager: Optional[TaskManager] = None,
        config: Optional[Config] = None,
        **kwargs
    ) -> None:
        """Initialize the Taskify application.

        Args:
            manager: Task manager to drive, a new empty one by default
            config: Configuration, loaded from the default path if omitted
            **kwargs: Additional keyword arguments for App
        """
        super().__init__(**kwargs)
        display_config = (config or Config()).get_display_config()
        self.title = display_config['title']
        self._show_counts: bool = display_config['show_counts']
        self._default_priority: Optional[Priority] = display_config['default_priority']

        self.manager = manager or TaskManager()
        self.manager.subscribe(
            on_refresh=self._on_tasks_changed,
            on_error=self._on_task_error,
        )

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header()

        with Container(id="form-container"):
            with Horizontal(id="input-row"):
                yield Input(placeholder="Task name", id=TASK_NAME_INPUT_ID)
                yield self._priority_select()
            with Horizontal(id="button-row"):
                yield Button("Add Task", id=ADD_BUTTON_ID)
                yield Button("Update Task", id=UPDATE_BUTTON_ID)
                yield Button("Delete Task", id=DELETE_BUTTON_ID)

        buckets = self.manager.get_display_buckets()
        with Horizontal(id="columns-container"):
            for level in Priority.ordered():
                yield PriorityColumn(
                    level,
                    names=buckets[level.value],
                    show_counts=self._show_counts,
                    id=get_column_id(level),
                )

        yield Footer()

    def on_mount(self) -> None:
        logger.info(f"Taskify application mounted with {self.manager.store.size()} tasks")

    # ==============================================================================
    # HELPERS
    # ==============================================================================

    def get_column(self, priority: Priority) -> PriorityColumn:
        """Get the column widget for a priority level."""
        return self.query_one(f"#{get_column_id(priority)}", PriorityColumn)

    def _priority_select(self) -> Select:
        options = [(level.value, level) for level in Priority.ordered()]
        # Omitting value leaves the widget on its own no-selection sentinel
        if self._default_priority is None:
            return Select(options, prompt="Priority", id=PRIORITY_SELECT_ID)
        return Select(
            options,
            prompt="Priority",
            value=self._default_priority,
            id=PRIORITY_SELECT_ID,
        )

    def _form_values(self) -> tuple[str, Optional[Priority]]:
        name = self.query_one(f"#{TASK_NAME_INPUT_ID}", Input).value
        select = self.query_one(f"#{PRIORITY_SELECT_ID}", Select)
        priority = None if select.is_blank() else select.value
        return name, priority

    def _clear_form(self) -> None:
        self.query_one(f"#{TASK_NAME_INPUT_ID}", Input).value = ""
        select = self.query_one(f"#{PRIORITY_SELECT_ID}", Select)
        if self._default_priority is not None:
            select.value = self._default_priority
        else:
            select.clear()

    async def refresh_columns(self) -> None:
        """Re-project the store and redraw every column."""
        buckets = self.manager.get_display_buckets()
        for level in Priority.ordered():
            await self.get_column(level).set_tasks(buckets[level.value])

    # ==============================================================================
    # MANAGER SIGNALS
    # ==============================================================================

    def _on_tasks_changed(self) -> None:
        self._clear_form()
        self.call_later(self.refresh_columns)

    def _on_task_error(self, title: str, message: str) -> None:
        self.notify(message, title=title, severity="error", timeout=NOTIFICATION_TIMEOUT_MEDIUM)

    # ==============================================================================
    # EVENT HANDLERS
    # ==============================================================================

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Dispatch the Add / Update / Delete buttons."""
        actions = {
            ADD_BUTTON_ID: self.action_add_task,
            UPDATE_BUTTON_ID: self.action_update_task,
            DELETE_BUTTON_ID: self.action_delete_task,
        }
        action = actions.get(event.button.id)
        if action is not None:
            event.stop()
            action()

    def on_priority_column_task_selected(self, message: PriorityColumn.TaskSelected) -> None:
        """Select the picked task and load it into the form."""
        task = self.manager.select(message.priority, message.local_index)
        if task is None:
            return
        self.query_one(f"#{TASK_NAME_INPUT_ID}", Input).value = task.name
        self.query_one(f"#{PRIORITY_SELECT_ID}", Select).value = task.priority

    # ==============================================================================
    # ACTIONS
    # ==============================================================================

    def action_add_task(self) -> None:
        name, priority = self._form_values()
        try:
            self.manager.add_task(name, priority)
        except UserFacingError as e:
            # Already shown to the user through the error signal
            logger.debug(f"Add rejected: {e.message}")

    def action_update_task(self) -> None:
        name, priority = self._form_values()
        try:
            self.manager.update_task(name, priority)
        except UserFacingError as e:
            logger.debug(f"Update rejected: {e.message}")

    def action_delete_task(self) -> None:
        try:
            self.manager.delete_task()
        except UserFacingError as e:
            logger.debug(f"Delete rejected: {e.message}")

    def action_clear_selection(self) -> None:
        """Drop the selection and reset the form."""
        self.manager.clear_selection()
        self._clear_form()
