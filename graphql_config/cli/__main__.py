"""Module wrapper so running ``python -m graphql_config.cli`` matches the console script."""

from graphql_config.cli import main


if __name__ == "__main__":  # pragma: no cover
    main()
