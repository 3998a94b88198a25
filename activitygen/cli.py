"""
activitygen CLI.

Command-line interface for scaffolding Android activities.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.config import get_config
from .core.exceptions import ActivityGenError
from .core.logging import setup_logging
from .core.paths import ProjectPaths
from .models.activity import ActivityType, RunSettings
from .models.report import ReportKind, ScaffoldReport
from .prompting import RequestPrompter
from .services.scaffold import ScaffoldService
from .storage import LocalStorageBackend, RunSettingsStore

app = typer.Typer(
    name="activitygen",
    help="Scaffold Android activities and merge their resources into a project",
    add_completion=False,
)

console = Console()

_STATUS_STYLES = {
    ReportKind.CREATE: "green",
    ReportKind.UPDATE: "cyan",
    ReportKind.ERROR: "bold red",
    ReportKind.WARN: "yellow",
}


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        console.print(f"activitygen v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """activitygen: Android activity scaffolding."""
    pass


def print_report(report: ScaffoldReport) -> None:
    """Print one status line per report event."""
    for event in report.events:
        style = _STATUS_STYLES[event.kind]
        target = escape(event.target)
        if event.kind == ReportKind.ERROR:
            target += " already exists"
        console.print(f"[{style}]{event.kind.value:>8}[/{style}] {target}", highlight=False, soft_wrap=True)

    if not report.success:
        console.print("\n[bold red]✗ Nothing was written.[/bold red]")


@app.command()
def new(
    activity_type: Optional[ActivityType] = typer.Argument(
        None,
        help="Type of activity to create",
        case_sensitive=False,
    ),
    activity_name: Optional[str] = typer.Argument(
        None,
        help="Activity class name (e.g., SettingsActivity)",
    ),
    activity_package: Optional[str] = typer.Argument(
        None,
        help="Package of the activity class (e.g., com.example.app.view.activities)",
    ),
    layout_name: Optional[str] = typer.Argument(
        None,
        help="Layout resource name (e.g., activity_settings)",
    ),
    launcher: Optional[bool] = typer.Option(
        None,
        "--launcher/--no-launcher",
        help="Register the activity as the launcher activity",
    ),
    project_dir: Path = typer.Option(
        Path("."),
        "--project-dir",
        "-d",
        help="Android project directory",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
    app_package: Optional[str] = typer.Option(
        None,
        "--app-package",
        help="Package holding the app's R class (remembered for later runs)",
    ),
    no_input: bool = typer.Option(
        False,
        "--no-input",
        help="Do not prompt, use defaults for missing values",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
) -> None:
    """Create an activity class and layout and merge its resources.

    Missing arguments are prompted for. Shared value files are created when
    absent and only receive the entries they are missing, so running the
    command against an existing project never overwrites user edits.
    """
    try:
        config = get_config()
        if verbose:
            config = config.model_copy(update={"log_level": "DEBUG"})
        setup_logging(config)

        storage = LocalStorageBackend(project_dir)
        settings_store = RunSettingsStore(storage, config.settings_file)

        stored = settings_store.load()
        resolved_app_package = app_package or stored.app_package or config.default_app_package

        prompter = RequestPrompter(console, stored, resolved_app_package, interactive=not no_input)
        request = prompter.collect(
            activity_type=activity_type,
            activity_name=activity_name,
            activity_package=activity_package,
            layout_name=layout_name,
            launcher=launcher,
        )
        settings_store.save(RunSettings.from_request(request, resolved_app_package))

        report = ScaffoldService(storage, config).run(request, resolved_app_package)
    except ActivityGenError as e:
        console.print(f"[bold red]✗ {escape(str(e))}[/bold red]", soft_wrap=True)
        raise typer.Exit(2)

    print_report(report)
    if not report.success:
        raise typer.Exit(1)


@app.command()
def config() -> None:
    """Show the effective configuration."""
    try:
        cfg = get_config()
    except ActivityGenError as e:
        console.print(f"[bold red]✗ {escape(str(e))}[/bold red]", soft_wrap=True)
        raise typer.Exit(2)
    paths = ProjectPaths(cfg.layout)

    table = Table(title="Current Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Log Level", cfg.log_level)
    table.add_row("Source Root", paths.source_root)
    table.add_row("Resources", paths.res_root)
    table.add_row("Manifest", paths.manifest)
    table.add_row("Class Extension", cfg.layout.class_extension)
    table.add_row("Settings File", cfg.settings_file)
    table.add_row("Default App Package", cfg.default_app_package)
    table.add_row(
        "Manifest Position",
        cfg.manifest_position.value if cfg.manifest_position else "per activity type",
    )

    console.print(table)

    console.print("\n[dim]Configure via environment variables:[/dim]")
    console.print("  ACTIVITYGEN_LOG_LEVEL, ACTIVITYGEN_SOURCE_ROOT, ACTIVITYGEN_APP_PACKAGE")
    console.print("  ACTIVITYGEN_MANIFEST_POSITION, ACTIVITYGEN_SETTINGS_FILE")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
