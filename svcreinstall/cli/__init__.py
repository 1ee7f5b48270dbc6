"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from svcreinstall.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from svcreinstall.api.version.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"svcreinstall {result.output.get('full_version', 'unknown')}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        # Non-standalone mode hands typer.Exit back as a return value
        rv = app(argv, standalone_mode=False)
        return rv if isinstance(rv, int) else 0
    except SystemExit as e:
        # The stage result handler finishes by calling sys.exit
        return e.code if isinstance(e.code, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
