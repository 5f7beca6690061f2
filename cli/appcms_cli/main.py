from __future__ import annotations

import typer

from .commands import analytics_cmd, auth_cmd, content_cmd, settings_cmd, tasks_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="appcms",
        help="AppCMS CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(auth_cmd.app, name="auth")
    app.add_typer(content_cmd.app, name="content")
    app.command("app-config")(content_cmd.app_config)
    app.add_typer(analytics_cmd.app, name="analytics")
    app.add_typer(tasks_cmd.app, name="tasks")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
