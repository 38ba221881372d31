#!/usr/bin/env python3
"""
TASKZ - CLI Interface
=====================
Minimalistic command-line todo list.

Usage:
    taskz add buy milk
    taskz list -a
    taskz search milk
    taskz done by milk
    taskz undo
    taskz edit buy milk /// buy oat milk
    taskz clear
    taskz install
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import get_settings
from .installer import Installer
from .manager import TaskManager, TaskStoreError
from .schema import Task

logger = logging.getLogger(__name__)

EDIT_SEPARATOR = "///"

# Short forms accepted in place of the command name
COMMAND_ALIASES = {
    "-i": "install",
    "-u": "uninstall",
    "-?": "-h",
    "/?": "-h",
}


def setup_logging(level_name: str, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, level_name.upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--dir", dest="data_dir", help="Directory holding tasks.json")
    common.add_argument("--threshold", type=float, help="Minimum similarity (0-1) for done/edit")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    parser = argparse.ArgumentParser(
        prog="taskz",
        description="taskz - minimalistic todo list with fuzzy task matching",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  taskz add call the dentist            Add a task
  taskz list -a                         List tasks alphabetically
  taskz search dentist                  Tasks containing "dentist"
  taskz done calling dentist            Finish the closest matching task
  taskz undo                            Bring back the last finished task
  taskz edit dentist /// call the vet   Rewrite the closest matching task
  taskz clear                           Remove all tasks
  taskz -i | install                    Install taskz globally
  taskz -u | uninstall                  Remove the global install
        """
    )
    parser.add_argument("--version", action="version", version=f"taskz {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", parents=[common], help="Add a new task")
    add_parser.add_argument("words", nargs="+", help="Task description")

    # LIST command
    list_parser = subparsers.add_parser("list", parents=[common], help="List tasks")
    list_parser.add_argument("-a", "--alphabetical", action="store_true", help="Sort alphabetically")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # SEARCH command
    search_parser = subparsers.add_parser("search", parents=[common], help="Search tasks")
    search_parser.add_argument("words", nargs="+", help="Text the task contains")

    # DONE command
    done_parser = subparsers.add_parser("done", parents=[common], help="Mark the closest task as done")
    done_parser.add_argument("words", nargs="+", help="Roughly what the task says")

    # UNDO command
    subparsers.add_parser("undo", parents=[common], help="Restore the last finished task")

    # EDIT command
    edit_parser = subparsers.add_parser("edit", parents=[common], help="Edit the closest task")
    edit_parser.add_argument(
        "words", nargs="+",
        help=f"<old description> {EDIT_SEPARATOR} <new description>"
    )

    # CLEAR command
    subparsers.add_parser("clear", parents=[common], help="Remove all tasks")

    # INSTALL / UNINSTALL commands
    install_parser = subparsers.add_parser("install", parents=[common], help="Install taskz globally")
    install_parser.add_argument("--target", help="Install location")
    uninstall_parser = subparsers.add_parser("uninstall", parents=[common], help="Remove the global install")
    uninstall_parser.add_argument("--target", help="Install location")

    return parser


def split_edit_args(words: List[str]) -> Optional[tuple]:
    """'<old> /// <new>' -> (old, new), or None if malformed"""
    parts = [p.strip() for p in " ".join(words).split(EDIT_SEPARATOR)]
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


def format_task(task: Task) -> str:
    return f"[{task.id}] {task.description}"


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if argv:
        argv[0] = COMMAND_ALIASES.get(argv[0], argv[0])

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        print("❌ no command provided")
        parser.print_help()
        return 1

    settings = get_settings()
    setup_logging(settings.log_level, verbose=args.verbose)

    # Install commands never touch the task list
    if args.command in ("install", "uninstall"):
        installer = Installer(target=args.target or settings.install_path)
        if args.command == "install":
            if not installer.install():
                print("❌ installation failed (try running as administrator)")
                return 1
            print(f"✅ installed successfully to {installer.target}")
        else:
            if not installer.is_installed():
                print("❌ no installation found")
                return 1
            if not installer.uninstall():
                print("❌ uninstallation failed (try running as administrator)")
                return 1
            print(f"✅ uninstalled successfully from {installer.target}")
        return 0

    threshold = settings.match_threshold if args.threshold is None else args.threshold
    if not 0.0 <= threshold <= 1.0:
        parser.error(f"--threshold must be between 0 and 1, got {threshold}")

    # Initialize manager
    manager = TaskManager(
        data_dir=args.data_dir or settings.data_dir,
        threshold=threshold
    )

    try:
        manager.load()
        return run_command(args, manager)
    except TaskStoreError as e:
        logger.debug("Task store failure", exc_info=True)
        print(f"❌ failed to {args.command}: {e}")
        return 1


def run_command(args: argparse.Namespace, manager: TaskManager) -> int:
    """Execute a task-list command against a loaded manager"""
    if args.command == "add":
        try:
            manager.add_task(" ".join(args.words))
        except ValueError as e:
            print(f"❌ {e}")
            return 1
        print("✅ task added")

    elif args.command == "list":
        tasks = manager.list_tasks(alphabetical=args.alphabetical)
        if args.json:
            print(json.dumps([t.model_dump(mode="json") for t in tasks], indent=2, ensure_ascii=False))
        elif not tasks:
            print("❌ no tasks found")
        else:
            for task in tasks:
                print(format_task(task))

    elif args.command == "search":
        query = " ".join(args.words)
        tasks = manager.search_tasks(query)
        if not tasks:
            print(f"❌ no tasks found matching \"{query}\"")
            return 1
        for task in tasks:
            print(format_task(task))

    elif args.command == "done":
        task = manager.complete_task(" ".join(args.words))
        if not task:
            print("❌ no matching task found")
            return 1
        print(f"✅ task done and removed: {task.description}")

    elif args.command == "undo":
        task = manager.undo()
        if not task:
            print("❌ no undo available")
            return 1
        print(f"✅ undo successful: task restored: {task.description}")

    elif args.command == "edit":
        parts = split_edit_args(args.words)
        if not parts:
            print(f"❌ please use the format: taskz edit <query> {EDIT_SEPARATOR} <new description>")
            return 1
        query, new_description = parts
        task = manager.edit_task(query, new_description)
        if not task:
            print("❌ no matching task found")
            return 1
        print(f"✅ task updated to: {task.description}")

    elif args.command == "clear":
        count = manager.clear()
        print(f"✅ all tasks cleared ({count} removed)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
