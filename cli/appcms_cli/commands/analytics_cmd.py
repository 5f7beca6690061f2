from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import run_with_client

app = typer.Typer(help="Analytics events.")


@app.command("log")
def log_event(
        event: str = typer.Argument(..., help="Event name."),
        platform: str = typer.Option(..., "--platform", help="Client platform, e.g. ios or android."),
        device_id: str = typer.Option(..., "--device-id", help="Device identifier."),
        data: str | None = typer.Option(None, "--data", help="Free-form event data."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    result = run_with_client(
        load_config(),
        lambda client: client.analytics.log(event, platform, device_id, data),
    )
    if json_out:
        console.print_json(result)
        return
    console.ok(f"Logged '{event}' for {device_id}.")
