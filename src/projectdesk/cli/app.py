"""Typer CLI wiring projectdesk intents."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TypeVar, cast

import typer

from projectdesk.config import STORAGE_BACKENDS, AppSettings
from projectdesk.domain import Project, ProjectId, UserId
from projectdesk.intents import IntentResult

from .deps import current_settings, get_container, use_settings

T = TypeVar("T")

app = typer.Typer(help="projectdesk command-line interface")


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
    storage: str | None = typer.Option(None, help="Override PROJECTDESK_STORAGE"),
    database_url: str | None = typer.Option(None, help="Override PROJECTDESK_DATABASE_URL"),
) -> None:
    """Configure logging and settings overrides before any command runs."""

    if storage is not None and storage not in STORAGE_BACKENDS:
        msg = f"must be one of {sorted(STORAGE_BACKENDS)}"
        raise typer.BadParameter(msg, param_hint="--storage")
    if storage or database_url:
        settings = AppSettings.from_env()
        use_settings(
            replace(
                settings,
                storage=storage or settings.storage,
                database_url=database_url or settings.database_url,
            )
        )

    level = "DEBUG" if verbose else current_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _unwrap(result: IntentResult[T]) -> T:
    if not result.ok:
        typer.echo(f"Error ({result.status.value}): {result.error}")
        raise typer.Exit(code=1)
    return cast(T, result.value)


def _describe(project: Project) -> str:
    owners = ", ".join(str(owner) for owner in project.owners) or "(none)"
    status = project.status.value
    return f"{project.id}\t{project.name}\t{project.budget}\t{status}\towners: {owners}"


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Storage:\t" + settings.storage)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo(f"Budget limit:\t{settings.budget_limit} {settings.currency}")
    typer.echo("Notifier:\t" + settings.notifier)


@app.command("add-user")
def add_user(user_id: int, name: str, email: str) -> None:
    """Register a user."""

    container = get_container()
    user = _unwrap(container.register_user.execute(UserId(user_id), name, email))
    typer.echo(f"Created user {user.id} <{user.email}>")


@app.command("create-project")
def create_project(
    project_id: int,
    name: str,
    owner: list[int] = typer.Option(..., "--owner", help="Owner user id (repeatable)"),
    budget: str = typer.Option("0", help="Initial budget amount"),
) -> None:
    """Create a project owned by existing users."""

    container = get_container()
    project = _unwrap(
        container.create_project.execute(
            ProjectId(project_id),
            name,
            [UserId(user_id) for user_id in owner],
            budget,
        )
    )
    typer.echo(f"Created project {project.id}")


@app.command("show-project")
def show_project(project_id: int) -> None:
    """Display a stored project."""

    project = _unwrap(get_container().get_project.execute(ProjectId(project_id)))
    typer.echo(_describe(project))


@app.command("list-projects")
def list_projects(owner_id: int) -> None:
    """List projects owned by a user."""

    result = get_container().list_owner_projects.execute(UserId(owner_id))
    projects = _unwrap(result)
    if not projects:
        typer.echo("No projects found")
        return
    for project in projects:
        typer.echo(_describe(project))


@app.command("allocate")
def allocate(project_id: int, amount: str) -> None:
    """Add funds to a project's budget."""

    project = _unwrap(get_container().allocate_budget.execute(ProjectId(project_id), amount))
    typer.echo(f"Project {project.id} budget is now {project.budget}")


@app.command("notify")
def notify(
    project_id: int,
    subject: str,
    body: str = typer.Option("", help="Message body"),
    token: str = typer.Option(..., envvar="PROJECTDESK_TOKEN", help="Caller API token"),
) -> None:
    """Notify every owner of a project."""

    result = get_container().notify_project_owners.execute(
        token, ProjectId(project_id), subject, body
    )
    count = _unwrap(result)
    typer.echo(f"Notified {count} owner(s)")
