import json
import runpy
import sys

import pytest

from todolist import TaskStore
from todolist.cli import main


@pytest.fixture
def run(storage_dir, capsys):
    def _run(*args):
        code = main([*args, "--dir", str(storage_dir)])
        captured = capsys.readouterr()
        return code, captured.out, captured.err
    return _run


class TestCli:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out

    def test_list_seeds_on_first_run(self, run):
        code, out, _ = run("list")
        assert code == 0
        assert "Welcome to your ToDo app!" in out
        assert "3 tasks left" in out

    def test_add_joins_words(self, run, storage_dir):
        code, out, _ = run("add", "Buy", "milk")
        assert code == 0
        assert "➕ Added: [4] Buy milk" in out

        store = TaskStore.open(storage_dir=str(storage_dir))
        assert store.tasks[0].text == "Buy milk"

    def test_add_blank_fails(self, run, storage_dir):
        code, _, err = run("add", "   ")
        assert code == 1
        assert "Please enter a task!" in err
        assert len(TaskStore.open(storage_dir=str(storage_dir))) == 3

    def test_toggle_then_filter(self, run):
        run("toggle", "1")
        code, out, _ = run("list", "--filter", "completed")
        assert code == 0
        assert "Welcome to your ToDo app!" in out
        assert "Double-click" not in out

    def test_toggle_unknown_id(self, run):
        code, out, _ = run("toggle", "99")
        assert code == 1
        assert "Task not found: 99" in out

    def test_edit(self, run):
        code, out, _ = run("edit", "2", "  Renamed", "task ")
        assert code == 0
        assert "✏️ Edited: [2] Renamed task" in out

    def test_edit_blank_fails(self, run):
        code, _, err = run("edit", "2", " ")
        assert code == 1
        assert err

    def test_delete_and_clear_completed(self, run, storage_dir):
        assert run("delete", "3")[0] == 0
        assert run("delete", "3")[0] == 1

        run("toggle", "1")
        code, out, _ = run("clear-completed")
        assert code == 0
        assert "Cleared 1 completed task" in out

        store = TaskStore.open(storage_dir=str(storage_dir))
        assert [task.id for task in store.tasks] == [2]

    def test_json_output(self, run):
        code, out, _ = run("list", "--json", "-f", "active")
        assert code == 0
        payload = json.loads(out)
        assert payload["filter"] == "active"
        assert payload["active_count"] == 3

    def test_html_output_escapes(self, run):
        run("add", "<b>bold</b>")
        code, out, _ = run("list", "--html")
        assert code == 0
        assert "&lt;b&gt;bold&lt;/b&gt;" in out
        assert "<b>" not in out

    def test_non_utf8_snapshot_reseeds(self, run, storage_dir):
        storage_dir.mkdir(parents=True, exist_ok=True)
        (storage_dir / "tasks.json").write_bytes(b"\x80garbage")
        code, out, _ = run("list")
        assert code == 0
        assert "3 tasks left" in out

    def test_module_entry_point(self, storage_dir, capsys, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["todolist", "list", "--dir", str(storage_dir)])
        with pytest.raises(SystemExit) as exc:
            runpy.run_module("todolist", run_name="__main__")
        assert exc.value.code == 0
        assert "Welcome to your ToDo app!" in capsys.readouterr().out

    def test_bad_filter_rejected_by_parser(self, run):
        with pytest.raises(SystemExit):
            run("list", "--filter", "done")
