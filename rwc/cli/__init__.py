"""CLI - main entry point."""

import sys

USAGE_EXIT_CODE = 2


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from rwc.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from rwc.api.config.get_package_version import get_package_version

        print(f"rwc {get_package_version()}")
        return 0

    app = _create_app()
    try:
        exit_code = app(argv, prog_name="rwc", standalone_mode=False)
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return USAGE_EXIT_CODE
    except (click.exceptions.Abort, typer.Abort):
        return 130
    except Exception as e:
        # typer may raise these from its own bundled copy of click
        code = getattr(e, "exit_code", None)
        if isinstance(code, int) and hasattr(e, "format_message"):
            label = "Usage error" if code == USAGE_EXIT_CODE else "Error"
            typer.echo(f"{label}: {e.format_message()}", err=True)
            return code
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return exit_code or 0
