"""Main CLI entry point for kubectl-ilogs"""

import typer
from kubectl_ilogs.commands import ilogs

app = typer.Typer(
    name="kubectl-ilogs",
    help="Interactively pick pods by name to view their logs",
    pretty_exceptions_enable=False,
    add_completion=False,
)

app.command(name="ilogs")(ilogs.ilogs_wrapper)


def main():
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
