"""Create the main Typer CLI app."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from unitkit.api.config.get_systemctl import get_systemctl
from unitkit.api.service.ServiceStatus import ServiceStatus
from unitkit.api.service.Systemd import Systemd
from unitkit.api.unit.UnitFile import UnitFile
from unitkit.utils.logger import configure_logging

_STATUS_STYLES = {
    ServiceStatus.RUNNING: "green",
    ServiceStatus.STOPPED: "yellow",
    ServiceStatus.FAILED: "red",
    ServiceStatus.NOT_INSTALLED: "dim",
    ServiceStatus.UNKNOWN: "dim",
}


def _controller(config: Path, unit_dir: Path | None) -> Systemd:
    unit = UnitFile.load(config)
    unit.validate()
    return Systemd(unit, unit_dir=unit_dir)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Generate systemd service units and control them with systemctl",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        verbose: bool = typer.Option(False, "--verbose", help="Log systemctl invocations"),
        log_file: Path | None = typer.Option(  # noqa: B008
            None, "--log-file", help="Write logs to this rotating file instead of stderr"
        ),
    ) -> None:
        if verbose or log_file is not None:
            configure_logging(logging.DEBUG if verbose else logging.INFO, log_file=log_file)

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="render")
    def render_cmd(
        config: Path = typer.Argument(..., help="JSON unit configuration file"),  # noqa: B008
    ) -> None:
        """Print the unit file text."""
        typer.echo(UnitFile.load(config).render(), nl=False)

    @app.command(name="validate")
    def validate_cmd(
        config: Path = typer.Argument(..., help="JSON unit configuration file"),  # noqa: B008
    ) -> None:
        """Check every field constraint."""
        unit = UnitFile.load(config)
        unit.validate()
        typer.echo(f"{unit.file_name}: valid")

    @app.command(name="install")
    def install_cmd(
        config: Path = typer.Argument(..., help="JSON unit configuration file"),  # noqa: B008
        unit_dir: Path | None = typer.Option(  # noqa: B008
            None, "--unit-dir", help="Directory unit files are installed into"
        ),
    ) -> None:
        """Write, enable and load the unit."""
        controller = _controller(config, unit_dir)
        controller.install()
        typer.echo(f"Installed {controller.unit_path}")

    @app.command(name="uninstall")
    def uninstall_cmd(
        config: Path = typer.Argument(..., help="JSON unit configuration file"),  # noqa: B008
        unit_dir: Path | None = typer.Option(  # noqa: B008
            None, "--unit-dir", help="Directory unit files are installed into"
        ),
    ) -> None:
        """Disable the unit and remove its file."""
        controller = _controller(config, unit_dir)
        controller.uninstall()
        typer.echo(f"Uninstalled {controller.unit_name}")

    @app.command(name="start")
    def start_cmd(
        config: Path = typer.Argument(..., help="JSON unit configuration file"),  # noqa: B008
        unit_dir: Path | None = typer.Option(  # noqa: B008
            None, "--unit-dir", help="Directory unit files are installed into"
        ),
    ) -> None:
        """Start the service."""
        _controller(config, unit_dir).start()

    @app.command(name="stop")
    def stop_cmd(
        config: Path = typer.Argument(..., help="JSON unit configuration file"),  # noqa: B008
        unit_dir: Path | None = typer.Option(  # noqa: B008
            None, "--unit-dir", help="Directory unit files are installed into"
        ),
    ) -> None:
        """Stop the service."""
        _controller(config, unit_dir).stop()

    @app.command(name="restart")
    def restart_cmd(
        config: Path = typer.Argument(..., help="JSON unit configuration file"),  # noqa: B008
        unit_dir: Path | None = typer.Option(  # noqa: B008
            None, "--unit-dir", help="Directory unit files are installed into"
        ),
    ) -> None:
        """Restart the service."""
        _controller(config, unit_dir).restart()

    @app.command(name="status")
    def status_cmd(
        config: Path = typer.Argument(..., help="JSON unit configuration file"),  # noqa: B008
        unit_dir: Path | None = typer.Option(  # noqa: B008
            None, "--unit-dir", help="Directory unit files are installed into"
        ),
    ) -> None:
        """Show the service status."""
        controller = _controller(config, unit_dir)
        status = controller.status()
        style = _STATUS_STYLES[status]
        Console().print(f"{controller.unit_name}: [{style}]{status}[/{style}]")

    @app.command(name="available")
    def available_cmd() -> None:
        """Exit 0 if systemctl is on PATH, 1 otherwise."""
        if not Systemd.is_available(get_systemctl()):
            typer.echo("systemctl not found", err=True)
            raise typer.Exit(1)
        typer.echo("systemctl available")

    return app
