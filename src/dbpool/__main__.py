"""Main entry point for dbpool package."""

from dbpool.cli.commands import main

if __name__ == '__main__':
    main()
