"""Tests for Snaptask response formatting."""

from snaptask_mcp.mcp.formatting import (
    NO_TASKS_TODAY,
    format_created_summary,
    format_suggestion_line,
    format_suggestions,
    format_task_line,
    format_task_list,
    format_updated_count,
)


class TestTaskLines:
    def test_completed_task_with_due_date(self) -> None:
        task = {"title": "Buy milk", "isCompleted": True, "dueDate": "2024-01-05"}
        assert format_task_line(task) == "✅ Buy milk (due 2024-01-05)"

    def test_open_task_without_due_date(self) -> None:
        task = {"title": "Call mom", "isCompleted": False, "dueDate": None}
        assert format_task_line(task) == "⬜️ Call mom"

    def test_empty_list_uses_sentinel(self) -> None:
        assert format_task_list([], NO_TASKS_TODAY) == "You have no tasks scheduled for today."

    def test_lines_are_newline_joined_in_order(self) -> None:
        tasks = [
            {"title": "A", "isCompleted": False, "dueDate": None},
            {"title": "B", "isCompleted": True, "dueDate": None},
        ]
        assert format_task_list(tasks, NO_TASKS_TODAY) == "⬜️ A\n✅ B"


class TestCreatedSummary:
    def test_no_tasks(self) -> None:
        assert format_created_summary("Got it", []) == "Got it\n\nNo tasks were created."

    def test_with_tasks(self) -> None:
        tasks = [
            {"title": "X", "dueDate": None},
            {"title": "Y", "dueDate": "2024-02-01"},
        ]
        assert format_created_summary("Done", tasks) == (
            "Done\n\nCreated 2 task(s):\n• X\n• Y (due 2024-02-01)"
        )


def test_updated_count() -> None:
    assert format_updated_count(3) == "Updated 3 task(s) in Snaptask."


class TestSuggestions:
    def test_action_and_day(self) -> None:
        suggestion = {"title": "Write report", "action": "focus", "day": "Mon", "startTime": None}
        assert format_suggestion_line(0, suggestion) == "1. Write report (focus) — Mon"

    def test_day_and_start_time(self) -> None:
        suggestion = {"title": "Gym", "action": None, "day": "Tue", "startTime": "18:00"}
        assert format_suggestion_line(1, suggestion) == "2. Gym — Tue 18:00"

    def test_title_only(self) -> None:
        suggestion = {"title": "Inbox zero", "action": None, "day": None, "startTime": None}
        assert format_suggestion_line(2, suggestion) == "3. Inbox zero"

    def test_empty(self) -> None:
        assert format_suggestions([]) == "No suggestions available right now."
