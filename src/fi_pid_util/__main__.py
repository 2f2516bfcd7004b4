"""Entry point for running fi_pid_util as a module.

This allows the package to be executed as:
    python -m fi_pid_util
"""

from fi_pid_util.cli.main import cli

if __name__ == "__main__":
    cli()
