"""
Network operations module for HTTP session setup and request handling.
"""

from netgear_console.network.client import Transport, base_url, build_session, with_query

__all__ = ["Transport", "base_url", "build_session", "with_query"]
