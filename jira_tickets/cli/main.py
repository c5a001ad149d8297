import logging
from typing import Optional

import typer

from jira_tickets.adapters import JiraAPI, JiraRequestError
from jira_tickets.configs import Config, ConfigError, DEFAULT_MAX_RESULTS, load_config, setup_logging
from jira_tickets.ui import display_tickets

logger = logging.getLogger(__name__)

app = typer.Typer(help="Show your Jira tickets in the console.", add_completion=False)


def _configure(ctx: typer.Context) -> Config:
    """Load and validate settings, exiting with status 1 on failure."""
    try:
        config = load_config(ctx.obj.get("config_path"))
    except ConfigError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Fehler: %s", exc)
        raise typer.Exit(code=1)
    except Exception:
        logging.basicConfig(level=logging.INFO)
        logger.exception("Ein unbekannter Fehler ist aufgetreten")
        raise typer.Exit(code=1)
    if ctx.obj.get("debug"):
        config.debug = True
    setup_logging(config)
    return config


def _run(config: Config, jql: Optional[str] = None, max_results: int = DEFAULT_MAX_RESULTS) -> None:
    typer.echo("Rufe Ihre Jira-Tickets ab...\n")
    try:
        with JiraAPI(config) as api:
            if jql is None:
                tickets = api.get_my_tickets()
            else:
                tickets = api.get_tickets_by_jql(jql, max_results)
    except JiraRequestError as exc:
        logger.error("Fehler: %s", exc)
        raise typer.Exit(code=1)
    except Exception:
        logger.exception("Ein unbekannter Fehler ist aufgetreten")
        raise typer.Exit(code=1)
    display_tickets(tickets, config.jira_url)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to a YAML config file."),
) -> None:
    """Fetch the tickets assigned to you when no command is given."""
    ctx.obj = {"debug": debug, "config_path": config_path}
    if ctx.invoked_subcommand is None:
        _run(_configure(ctx))


@app.command()
def tickets(
    ctx: typer.Context,
    jql: Optional[str] = typer.Option(None, "--jql", help="Custom JQL query."),
    max_results: int = typer.Option(DEFAULT_MAX_RESULTS, "--max-results", min=1, help="Maximum number of tickets."),
) -> None:
    """Run a JQL search and print the matching tickets."""
    config = _configure(ctx)
    _run(config, jql or config.jql, max_results)


@app.command("check-env")
def check_env(ctx: typer.Context) -> None:
    """Print the resolved configuration with the token masked."""
    config = _configure(ctx)
    typer.echo("\n=== Jira Configuration ===\n")
    for name, value in config.masked().items():
        typer.echo(f"{name}: {value}")


if __name__ == "__main__":
    app()
