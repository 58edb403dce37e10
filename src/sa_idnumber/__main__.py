"""Entry point for running sa_idnumber as a module.

This allows the package to be executed as:
    python -m sa_idnumber
"""

from sa_idnumber.cli.main import cli

if __name__ == "__main__":
    cli()
