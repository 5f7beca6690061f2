from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import run_with_client

app = typer.Typer(help="Content documents and files.")


@app.command("fetch")
def fetch_content(
        locale: str = typer.Argument(..., help="Locale, e.g. da or en."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    data = run_with_client(load_config(), lambda client: client.content.fetch(locale), base_url_override=base_url)
    console.print_json(data)


@app.command("file")
def fetch_file(
        file_id: str = typer.Argument(..., help="Content file ID."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    data = run_with_client(load_config(), lambda client: client.content.file(file_id), base_url_override=base_url)
    console.print_json(data)


def app_config(
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    """Fetch the app configuration."""
    data = run_with_client(load_config(), lambda client: client.app_config.fetch(), base_url_override=base_url)
    console.print_json(data)
