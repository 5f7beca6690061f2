from __future__ import annotations

import mimetypes
import os
from datetime import date as date_cls
from typing import Any

import typer
from appcms_client import FormData
from rich.table import Table

from .. import console
from ..config import load_config
from ..http import run_with_client

TASKS_USAGE = """\
Usage:
  appcms tasks list [--date YYYY-MM-DD]
  appcms tasks statuses
  appcms tasks update <id> [--note TEXT] [--materials TEXT]
  appcms tasks status <id> <status-id> --note TEXT
  appcms tasks notes <id>
  appcms tasks docs-add <id> [--note TEXT] [--image PATH ...]
  appcms tasks docs-update <id> --note TEXT
  appcms tasks docs-delete <id> <doc-id>
  appcms tasks image-delete <id> <doc-id> <image-id>
"""

MAX_TABLE_COLUMNS = 6

app = typer.Typer(help="Field engineer tasks (vinduesgrossisten).\n\n" + TASKS_USAGE)


def _print_rows(data: Any, *, title: str) -> None:
    items = data if isinstance(data, list) else None
    if isinstance(data, dict) and isinstance(data.get("data"), list):
        items = data["data"]
    if not items or not all(isinstance(item, dict) for item in items):
        console.print_json(data)
        return

    columns: list[str] = []
    for item in items:
        for key, value in item.items():
            if key not in columns and not isinstance(value, (dict, list)):
                columns.append(key)
    columns = columns[:MAX_TABLE_COLUMNS]

    table = Table(title=title)
    for col in columns:
        table.add_column(col)
    for item in items:
        table.add_row(*["-" if item.get(col) is None else str(item.get(col)) for col in columns])
    console.console.print(table)


@app.command("list")
def list_tasks(
        day: str | None = typer.Option(None, "--date", help="Day to list (YYYY-MM-DD). Defaults to today."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    day = day or date_cls.today().isoformat()
    data = run_with_client(load_config(), lambda client: client.vinduesgrossisten.tasks(day))
    if json_out:
        console.print_json(data)
        return
    _print_rows(data, title=f"Tasks {day}")


@app.command("statuses")
def list_statuses(
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = run_with_client(load_config(), lambda client: client.vinduesgrossisten.statuses())
    if json_out:
        console.print_json(data)
        return
    _print_rows(data, title="Task statuses")


@app.command("update")
def update_task(
        task_id: str = typer.Argument(..., help="Task ID."),
        note: str | None = typer.Option(None, "--note", help="Task note."),
        materials: str | None = typer.Option(None, "--materials", help="Materials used."),
):
    if note is None and materials is None:
        console.err("Nothing to update: pass --note and/or --materials.")
        raise typer.Exit(code=2)
    data = run_with_client(
        load_config(),
        lambda client: client.vinduesgrossisten.task_update(task_id, note=note, materials=materials),
    )
    console.print_json(data)


@app.command("status")
def update_status(
        task_id: str = typer.Argument(..., help="Task ID."),
        status_id: str = typer.Argument(..., help="Status ID (see `appcms tasks statuses`)."),
        note: str = typer.Option("", "--note", help="Note attached to the status change."),
):
    data = run_with_client(
        load_config(),
        lambda client: client.vinduesgrossisten.tasks_update_status(task_id, status_id, note),
    )
    console.print_json(data)


@app.command("notes")
def task_notes(
        task_id: str = typer.Argument(..., help="Task ID."),
):
    data = run_with_client(load_config(), lambda client: client.vinduesgrossisten.notes(task_id).get())
    console.print_json(data)


def build_documentation_form(note: str | None, images: list[str]) -> FormData:
    form = FormData()
    if note is not None:
        form.add_field("note", note)
    for path in images:
        with open(path, "rb") as f:
            content = f.read()
        content_type = mimetypes.guess_type(path)[0] or "application/octet-stream"
        form.add_file("images[]", content, filename=os.path.basename(path), content_type=content_type)
    return form


@app.command("docs-add")
def add_documentation(
        task_id: str = typer.Argument(..., help="Task ID."),
        note: str | None = typer.Option(None, "--note", help="Documentation note."),
        images: list[str] | None = typer.Option(None, "--image", help="Image file to attach (repeatable)."),
):
    images = images or []
    missing = [p for p in images if not os.path.isfile(p)]
    if missing:
        console.err(f"File not found: {', '.join(missing)}")
        raise typer.Exit(code=2)
    form = build_documentation_form(note, images)
    if not len(form):
        console.err("Nothing to upload: pass --note and/or --image.")
        raise typer.Exit(code=2)
    data = run_with_client(
        load_config(),
        lambda client: client.vinduesgrossisten.task_create_documentations(task_id, form),
    )
    console.print_json(data)


@app.command("docs-update")
def update_documentation(
        task_id: str = typer.Argument(..., help="Task ID."),
        note: str = typer.Option(..., "--note", help="Documentation note."),
):
    data = run_with_client(
        load_config(),
        lambda client: client.vinduesgrossisten.task_update_documentations(task_id, note=note),
    )
    console.print_json(data)


@app.command("docs-delete")
def delete_documentation(
        task_id: str = typer.Argument(..., help="Task ID."),
        documentation_id: str = typer.Argument(..., help="Documentation ID."),
):
    data = run_with_client(
        load_config(),
        lambda client: client.vinduesgrossisten.task_delete_documentation(task_id, documentation_id),
    )
    console.print_json(data)


@app.command("image-delete")
def delete_documentation_image(
        task_id: str = typer.Argument(..., help="Task ID."),
        documentation_id: str = typer.Argument(..., help="Documentation ID."),
        image_id: str = typer.Argument(..., help="Image ID."),
):
    data = run_with_client(
        load_config(),
        lambda client: client.vinduesgrossisten.task_delete_documentation_image(task_id, documentation_id, image_id),
    )
    console.print_json(data)
