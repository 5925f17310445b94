"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Usage errors and ``typer.Exit`` are handled by Typer itself and surface
    here as ``SystemExit``; library failures arrive as ``UnitError``.
    """
    import typer

    from unitkit.api.UnitError import UnitError
    from unitkit.cli._create_app import _create_app
    from unitkit.utils.logger import get_logger

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        app(argv, prog_name="unitkit")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except UnitError as e:
        get_logger("cli").debug("%s failed: %s", " ".join(argv), e)
        typer.echo(str(e), err=True)
        return 1
    return 0
