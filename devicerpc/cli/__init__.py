"""CLI module for devicerpc."""
