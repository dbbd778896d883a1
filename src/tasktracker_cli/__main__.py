"""Allow running the CLI with ``python -m tasktracker_cli``."""

from tasktracker_cli.main import main

if __name__ == "__main__":
    main()
