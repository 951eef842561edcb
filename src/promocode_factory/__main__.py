"""Entry point for 'python -m promocode_factory' command."""

from promocode_factory.cli import main

if __name__ == "__main__":
    main()
