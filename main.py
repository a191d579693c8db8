"""CLI entrypoint for the word hunt puzzle generator."""

from wordhunt.cli import main


if __name__ == "__main__":  # pragma: no cover
    main()
