"""
devicerpc - response decoding for a device-control RPC client.
"""

__version__ = "0.1.0"
__logo__ = "🔌"
