"""Allow ``python -m graphsuite``."""

from graphsuite.cli import main

if __name__ == "__main__":
    main()
