"""
Response Formatting

Turns Snaptask backend results into the text shown to the user. Only
backend-supplied fields and fixed literals are used, so identical results
always format to identical text.
"""

from typing import Any, Dict, List, Sequence

DONE_GLYPH = "✅"
NOT_DONE_GLYPH = "⬜️"

NO_TASKS_TODAY = "You have no tasks scheduled for today."
NO_TASKS_THIS_WEEK = "No tasks scheduled for this week."
NO_TASKS_CREATED = "No tasks were created."
NO_SUGGESTIONS = "No suggestions available right now."


def _due_suffix(task: Dict[str, Any]) -> str:
    due_date = task.get("dueDate")
    return f" (due {due_date})" if due_date else ""


def format_task_line(task: Dict[str, Any]) -> str:
    """Format a task as '<glyph> <title> (due X)'."""
    status = DONE_GLYPH if task.get("isCompleted") else NOT_DONE_GLYPH
    return f"{status} {task.get('title')}{_due_suffix(task)}"


def format_task_list(tasks: Sequence[Dict[str, Any]], empty_message: str) -> str:
    """
    Format a task list, one line per task

    Args:
        tasks: Task records from the backend
        empty_message: Line returned when there are no tasks

    Returns:
        Newline-joined task lines
    """
    if not tasks:
        return empty_message
    return "\n".join(format_task_line(task) for task in tasks)


def format_created_summary(response: str, tasks: Sequence[Dict[str, Any]]) -> str:
    """Backend reply, a blank line, then the created tasks."""
    if not tasks:
        created_summary = NO_TASKS_CREATED
    else:
        lines: List[str] = [f"• {task.get('title')}{_due_suffix(task)}" for task in tasks]
        created_summary = f"Created {len(tasks)} task(s):\n" + "\n".join(lines)
    return f"{response}\n\n{created_summary}"


def format_updated_count(updated_count: Any) -> str:
    return f"Updated {updated_count} task(s) in Snaptask."


def format_suggestion_line(index: int, suggestion: Dict[str, Any]) -> str:
    """Format a suggestion as 'N. title (action) — day startTime'."""
    when_parts = [part for part in (suggestion.get("day"), suggestion.get("startTime")) if part]
    when = f" — {' '.join(when_parts)}" if when_parts else ""
    action = f" ({suggestion['action']})" if suggestion.get("action") else ""
    return f"{index + 1}. {suggestion.get('title')}{action}{when}"


def format_suggestions(suggestions: Sequence[Dict[str, Any]]) -> str:
    if not suggestions:
        return NO_SUGGESTIONS
    return "\n".join(format_suggestion_line(i, s) for i, s in enumerate(suggestions))
