"""Allow running cleanpath as ``python -m cleanpath``."""

from cleanpath.cli.main import app

if __name__ == "__main__":
    app()
