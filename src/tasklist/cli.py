from __future__ import annotations

import argparse
import logging
import re
from typing import NoReturn

from .render import EMPTY_MESSAGE, Listing
from .store import Store, StoreError, tasks_file
from .tasks import TaskError, add_task, complete_task

_INT_RE = re.compile(r"[+-]?[0-9]+")

USAGE = """Usage:
  add <task>       - Add a new task
  list             - List all tasks
  done <task_id>   - Mark task as completed"""


class CommandError(RuntimeError):
    pass


class UsageError(CommandError):
    pass


class UnknownCommand(UsageError):
    pass


class MissingArgument(UsageError):
    pass


class InvalidId(UsageError):
    pass


class CommandParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _store(args: argparse.Namespace) -> Store:
    return Store(tasks_file(args.file))


def cmd_add(args: argparse.Namespace) -> int:
    if args.name is None or not args.name.strip():
        raise MissingArgument("Please provide a task description.")

    store = _store(args)
    state = store.load()
    add_task(state, args.name)
    store.save(state)
    print("✅ Task added successfully!")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    state = _store(args).load()
    listing = Listing(state.tasks)
    if not listing:
        print(EMPTY_MESSAGE)
        return 0
    for line in listing:
        print(line)
    return 0


def cmd_done(args: argparse.Namespace) -> int:
    if args.task_id is None:
        raise MissingArgument("Please provide a task ID.")
    if not _INT_RE.fullmatch(args.task_id):
        raise InvalidId("Invalid task ID.")
    task_id = int(args.task_id)

    store = _store(args)
    state = store.load()
    complete_task(state, task_id)
    store.save(state)
    print(f"🎯 Task {task_id} marked as complete!")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = CommandParser(prog="tasklist", description="Minimal to-do list.", exit_on_error=False)
    p.add_argument("--file", help="task file (default: $TASKLIST_FILE or ./tasks.json)")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="command")

    a = sub.add_parser("add")
    a.add_argument("name", nargs="?")
    a.set_defaults(func=cmd_add)

    ls = sub.add_parser("list")
    ls.set_defaults(func=cmd_list)

    d = sub.add_parser("done")
    d.add_argument("task_id", nargs="?")
    d.set_defaults(func=cmd_done)

    return p


def _parse(parser: argparse.ArgumentParser, argv: list[str] | None) -> argparse.Namespace:
    try:
        return parser.parse_args(argv)
    except argparse.ArgumentError as e:
        if e.argument_name == "command":
            raise UnknownCommand("Unknown command.") from e
        raise UsageError(str(e)) from e


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()

    try:
        args = _parse(parser, argv)
    except UsageError as e:
        print(f"❗ {e}")
        print(USAGE)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        print(USAGE)
        return 0

    try:
        return args.func(args)
    except UsageError as e:
        print(f"❗ {e}")
        print(USAGE)
        return 2
    except (TaskError, StoreError) as e:
        print(f"❗ {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
