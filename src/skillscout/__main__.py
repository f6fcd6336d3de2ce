"""Entry point for ``python -m skillscout``."""

from skillscout.interfaces.cli.app import run

if __name__ == "__main__":
    run()
