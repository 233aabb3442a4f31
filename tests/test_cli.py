import pytest

from cli import CLI, MENU_ERROR
from manager import TaskManager


def _run(feed_input, capsys, answers, manager=None):
    manager = manager or TaskManager()
    prompts = feed_input(answers)
    CLI(manager).run()
    return manager, capsys.readouterr().out, prompts


def test_exit_choice(feed_input, capsys):
    _, out, _ = _run(feed_input, capsys, ["0"])
    assert "===== TO-DO LIST MANAGER =====" in out
    assert out.rstrip().endswith("Exiting the program. Goodbye!")


def test_eof_exits_cleanly(feed_input, capsys):
    _, out, _ = _run(feed_input, capsys, [])
    assert out.rstrip().endswith("Interrupted. Goodbye.")


def test_add_task_with_due_date_and_tags(feed_input, capsys):
    m, out, prompts = _run(feed_input, capsys, ["1", "Buy milk", "2024-01-01", "home, shop", "0"])
    assert "Task added successfully!" in out
    assert "Enter due date (or leave empty): " in prompts
    task = m.tasks[0]
    assert (task.description, task.due_date, task.tags) == ("Buy milk", "2024-01-01", ["home", "shop"])


@pytest.mark.parametrize("bad", ["abc", "\u00b2", "", "1.5"])
def test_invalid_menu_choice_redisplays_menu(feed_input, capsys, bad):
    _, out, _ = _run(feed_input, capsys, ["9", bad, "0"])
    assert out.count(MENU_ERROR) == 2
    assert out.count("===== TO-DO LIST MANAGER =====") == 3


def test_complete_on_empty_list_does_not_prompt(feed_input, capsys):
    _, out, prompts = _run(feed_input, capsys, ["2", "0"])
    assert "No tasks to mark as completed. Task list is empty." in out
    assert "Enter the task number to mark as completed: " not in prompts


def test_complete_shows_numbered_list(feed_input, capsys):
    answers = ["1", "A", "", "", "1", "B", "", "", "2", "2", "0"]
    m, out, _ = _run(feed_input, capsys, answers)
    assert "Select a task to mark as completed:\n1. A\n2. B\n" in out
    assert "Task 'B' marked as completed successfully!" in out
    assert m.tasks[1].completed


@pytest.mark.parametrize("bad", ["five", "\u00b2", "", "1.5"])
def test_complete_rejects_bad_number(feed_input, capsys, bad):
    m, out, _ = _run(feed_input, capsys, ["1", "A", "", "", "2", bad, "0"])
    assert "Invalid task number. No task marked as completed." in out
    assert not m.tasks[0].completed


def test_buy_milk_scenario_deletes_both(feed_input, capsys):
    answers = [
        "1", "Buy milk", "", "",
        "1", "Buy milk", "2024-01-01", "",
        "3", "1",
        "0",
    ]
    m, out, _ = _run(feed_input, capsys, answers)
    assert "Task 'Buy milk' deleted successfully!" in out
    assert m.tasks == []


def test_undo_redo_messages(feed_input, capsys):
    m, out, _ = _run(feed_input, capsys, ["4", "1", "A", "", "", "4", "5", "0"])
    assert out.count("Undo successful!") == 2
    assert "Redo successful!" in out
    assert [t.description for t in m.tasks] == ["A"]


def test_view_with_filter_and_pause(feed_input, capsys):
    answers = ["1", "A", "", "", "6", "3", "", "0"]
    _, out, prompts = _run(feed_input, capsys, answers)
    assert "Task List:\nA - Pending\n" in out
    assert "\nPress any key to continue..." in prompts


def test_view_invalid_filter(feed_input, capsys):
    _, out, prompts = _run(feed_input, capsys, ["6", "4", "0"])
    assert "Invalid choice!\n" in out
    assert "Task List:" not in out
    assert "\nPress any key to continue..." not in prompts


def test_view_empty_list(feed_input, capsys):
    _, out, _ = _run(feed_input, capsys, ["6", "1", "", "0"])
    assert "Task List:\nEMPTY\n" in out


def test_delete_rejects_superscript_digit(feed_input, capsys):
    m, out, _ = _run(feed_input, capsys, ["1", "A", "", "", "3", "\u00b2", "0"])
    assert "Invalid task number. No task deleted." in out
    assert [t.description for t in m.tasks] == ["A"]
    assert out.rstrip().endswith("Exiting the program. Goodbye!")


def test_view_rejects_superscript_digit(feed_input, capsys):
    _, out, _ = _run(feed_input, capsys, ["6", "\u00b2", "0"])
    assert "Invalid choice!\n" in out
    assert out.rstrip().endswith("Exiting the program. Goodbye!")


@pytest.mark.parametrize("raw", [" 1 ", "+1", "01"])
def test_task_number_accepts_padded_and_signed_input(feed_input, capsys, raw):
    m, out, _ = _run(feed_input, capsys, ["1", "A", "", "", "2", raw, "0"])
    assert "Task 'A' marked as completed successfully!" in out
    assert m.tasks[0].completed
