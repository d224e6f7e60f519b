"""
Module entry-point that makes the package runnable with

    python -m graphql_config

The behaviour is identical to the *graphql-config* console script.
"""

from graphql_config.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
