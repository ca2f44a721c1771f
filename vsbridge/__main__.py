"""Entry point for running the bridge as a module.

Usage:
    python -m vsbridge <file> [<line>] [<variant>]
"""

from vsbridge.entrypoints.cli import main

if __name__ == "__main__":
    main()
