"""
Main entry point for running as module: python -m autogloss
"""
from autogloss.cli.cli_interface import cli

if __name__ == '__main__':
    cli()
