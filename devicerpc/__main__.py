"""
Entry point for running devicerpc as a module: python -m devicerpc
"""

from devicerpc.cli.commands import app

if __name__ == "__main__":
    app()
