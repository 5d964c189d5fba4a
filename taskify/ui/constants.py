"""UI constants for Taskify application."""

# Notification settings
NOTIFICATION_TIMEOUT_MEDIUM = 3

# Widget ids
TASK_NAME_INPUT_ID = "task-name"
PRIORITY_SELECT_ID = "priority"
ADD_BUTTON_ID = "add-task"
UPDATE_BUTTON_ID = "update-task"
DELETE_BUTTON_ID = "delete-task"
