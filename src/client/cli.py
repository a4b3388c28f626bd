"""
todo-client: command-line front end for the todo list.

Usage:
    todo-client list
    todo-client add "buy milk"
    todo-client edit <id> "buy oat milk"
    todo-client toggle <id>
    todo-client delete <id>
    todo-client --hide-finished list

Each command loads the list from the API, applies one action through the
state controller and prints the rendered view.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from src.client.api_client import TodoApiClient
from src.client.controller import TodoController
from src.client.render import render_text
from src.config import settings
from src.core.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo-client", description="Manage your todos")
    parser.add_argument("--api-url", default=None, help=f"API base URL (default: {settings.api_base_url})")
    parser.add_argument("--hide-finished", action="store_true", help="Hide completed todos")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="Show all todos")

    add = sub.add_parser("add", help="Add a todo")
    add.add_argument("text")

    edit = sub.add_parser("edit", help="Change a todo's text")
    edit.add_argument("id")
    edit.add_argument("text")

    toggle = sub.add_parser("toggle", help="Flip a todo's completion flag")
    toggle.add_argument("id")

    delete = sub.add_parser("delete", help="Delete a todo")
    delete.add_argument("id")

    return parser


async def run_command(args: argparse.Namespace, api: TodoApiClient) -> str:
    controller = TodoController(api)
    await controller.load()

    if args.command == "add":
        controller.set_draft(args.text)
        await controller.submit()
    elif args.command == "edit":
        controller.start_edit(args.id)
        # Unknown id: stay out of add mode
        if controller.state.edit_id is not None:
            controller.set_draft(args.text)
            await controller.submit()
    elif args.command == "toggle":
        await controller.toggle_complete(args.id)
    elif args.command == "delete":
        await controller.delete(args.id)

    if args.hide_finished:
        controller.toggle_filter()

    return render_text(controller.view())


async def _main(args: argparse.Namespace) -> str:
    async with TodoApiClient(base_url=args.api_url) as api:
        return await run_command(args, api)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(log_level="warning")
    print(asyncio.run(_main(args)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
