"""Allow ``python -m brewbuddy``."""

from brewbuddy.cli.main import cli

if __name__ == "__main__":
    cli()
