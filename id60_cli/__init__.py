"""Command-line front end for the id60 codec.

Built with Typer and Rich for help and error ergonomics; every command prints a
single machine-friendly JSON object.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
