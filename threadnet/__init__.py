"""Thread-safe logging, a worker thread pool, UDP servers and client, and a chat router."""

__version__ = "0.1.0"
__all__ = [
    "logger",
    "thread",
    "threadpool",
    "inetaddr",
    "dictionary",
    "route",
    "udp_server",
    "udp_client",
]