#!/usr/bin/env python3
"""
TODOLIST - CLI Interface
========================
Command-line view for the task store. Each run applies one change,
then prints the list under the chosen filter.

Usage:
    todolist list
    todolist add "Buy milk"
    todolist toggle 4
    todolist edit 4 "Buy oat milk"
    todolist delete 4
    todolist clear-completed
    todolist list --filter completed --html
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import TodoError, TaskValidationError
from .manager import TaskStore
from .schema import TaskFilter
from .view import render_html, render_json, render_text


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--dir", default=".todo", help="Storage directory")
    common.add_argument(
        "-f", "--filter",
        default=TaskFilter.ALL.value,
        choices=[f.value for f in TaskFilter],
        help="Which tasks to show afterwards"
    )
    output = common.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Output as JSON")
    output.add_argument("--html", action="store_true", help="Output as an HTML fragment")
    common.add_argument("-v", "--verbose", action="store_true", help="Log store activity")

    parser = argparse.ArgumentParser(
        prog="todolist",
        description="Single-list to-do manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todolist add Buy milk             Add a task at the top of the list
  todolist toggle 4                 Mark task 4 done (or not done)
  todolist edit 4 Buy oat milk      Change the text of task 4
  todolist delete 4                 Remove task 4
  todolist clear-completed          Remove every completed task
  todolist list -f active           Show tasks still to do
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", parents=[common], help="Add a task")
    add_parser.add_argument("text", nargs="+", help="Task text")

    # TOGGLE command
    toggle_parser = subparsers.add_parser("toggle", parents=[common], help="Toggle a task's completed state")
    toggle_parser.add_argument("task_id", type=int, help="Task ID")

    # DELETE command
    delete_parser = subparsers.add_parser("delete", parents=[common], help="Delete a task")
    delete_parser.add_argument("task_id", type=int, help="Task ID")

    # EDIT command
    edit_parser = subparsers.add_parser("edit", parents=[common], help="Edit a task's text")
    edit_parser.add_argument("task_id", type=int, help="Task ID")
    edit_parser.add_argument("text", nargs="+", help="New task text")

    # CLEAR-COMPLETED command
    subparsers.add_parser("clear-completed", parents=[common], help="Remove completed tasks")

    # LIST command
    subparsers.add_parser("list", parents=[common], help="Show tasks")

    return parser


def render(store: TaskStore, args: argparse.Namespace) -> str:
    if args.json:
        return render_json(store)
    if args.html:
        return render_html(store)
    return render_text(store)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        store = TaskStore.open(storage_dir=args.dir)
        store.set_filter(args.filter)

        # Execute command
        if args.command == "add":
            task = store.add(" ".join(args.text))
            print(f"➕ Added: [{task.id}] {task.text}")

        elif args.command == "toggle":
            task = store.toggle(args.task_id)
            if task is None:
                print(f"❌ Task not found: {args.task_id}")
                return 1
            state = "done" if task.completed else "not done"
            print(f"🔁 [{task.id}] {task.text} is {state}")

        elif args.command == "delete":
            if not store.delete(args.task_id):
                print(f"❌ Task not found: {args.task_id}")
                return 1
            print(f"🗑️ Deleted: {args.task_id}")

        elif args.command == "edit":
            task = store.edit(args.task_id, " ".join(args.text))
            if task is None:
                print(f"❌ Task not found: {args.task_id}")
                return 1
            print(f"✏️ Edited: [{task.id}] {task.text}")

        elif args.command == "clear-completed":
            removed = store.clear_completed()
            print(f"🧹 Cleared {removed} completed {'task' if removed == 1 else 'tasks'}")

    except TaskValidationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except TodoError as e:
        print(f"❌ Storage error: {e}", file=sys.stderr)
        return 2

    print(render(store, args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
