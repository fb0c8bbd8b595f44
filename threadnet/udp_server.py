"""A UDP request/response server and the echo and dictionary services on it."""

from __future__ import annotations

import socket
import sys
from typing import Callable

from threadnet.dictionary import Dictionary
from threadnet.inetaddr import ANY_ADDRESS, InetAddr
from threadnet.logger import LogLevel, log, logger

# One byte of the original 1024-byte buffer is kept for the terminator.
MAX_DATAGRAM = 1023
ECHO_PREFIX = "server say: "

Callback = Callable[[str], str]


def _as_text(data: bytes) -> str:
    """Decode a datagram, stopping at the first NUL byte as a C string would."""
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


class UdpServer:
    """Receives datagrams, passes their text to a callback and sends back the result.

    Without a callback every request gets an empty reply.
    """

    def __init__(
        self, callback: Callback | None, port: int, host: str = ANY_ADDRESS
    ) -> None:
        self.callback = callback
        self.local = InetAddr(port, host)
        self._sock: socket.socket | None = None

    @property
    def sock(self) -> socket.socket:
        """The bound socket; only available after :meth:`init`."""
        if self._sock is None:
            raise RuntimeError("server is not initialised")
        return self._sock

    @property
    def address(self) -> InetAddr:
        """The address the socket is actually bound to."""
        return InetAddr.from_sockaddr(self.sock.getsockname())

    def init(self) -> None:
        """Create the UDP socket and bind it to the configured address."""
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError:
            log(LogLevel.FATAL, "socket create error")
            raise
        log(LogLevel.INFO, "create socket fd success: ", sock.fileno())
        try:
            sock.bind(self.local.addr)
        except OSError:
            sock.close()
            log(LogLevel.FATAL, "bind create error")
            raise
        log(LogLevel.INFO, "bind socket fd success: ", sock.fileno())
        self._sock = sock

    def handle_one(self) -> str:
        """Serve a single request and return the reply that was sent."""
        sock = self.sock
        data, peer = sock.recvfrom(MAX_DATAGRAM)
        message = _as_text(data)
        client = InetAddr.from_sockaddr(peer)
        log(
            LogLevel.INFO,
            "get a message: ", message,
            ",client addr: ", client.ip, ":", client.port,
        )
        result = self.callback(message) if self.callback is not None else ""
        sock.sendto(result.encode("utf-8"), peer)
        return result

    def start(self) -> int:
        """Serve requests until receiving fails; return how many were served."""
        served = 0
        while True:
            try:
                self.handle_one()
            except OSError:
                log(LogLevel.WARNING, "recvfrom error")
                break
            served += 1
        return served

    def close(self) -> None:
        """Close the socket if it is open."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> UdpServer:
        if self._sock is None:
            self.init()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def echo(message: str) -> str:
    """Return the message with the echo server's prefix."""
    return ECHO_PREFIX + message


def _parse_port(prog: str, argv: list[str]) -> int | None:
    if len(argv) != 1:
        print(f"Usage: {prog} port", file=sys.stderr)
        return None
    try:
        port = int(argv[0])
    except ValueError:
        port = -1
    if not 0 <= port <= 0xFFFF:
        print(f"invalid port: {argv[0]!r}", file=sys.stderr)
        return -1
    return port


def echo_main(argv: list[str] | None = None) -> int:
    """Run the echo server on the port given as the only argument."""
    args = sys.argv[1:] if argv is None else argv
    port = _parse_port("udp-echo-server", args)
    if port is None:
        return 0
    if port < 0:
        return 1
    with UdpServer(echo, port) as server:
        server.start()
    return 0


def dict_main(argv: list[str] | None = None) -> int:
    """Run the dictionary server on the port given as the only argument."""
    args = sys.argv[1:] if argv is None else argv
    port = _parse_port("dict-server", args)
    if port is None:
        return 0
    if port < 0:
        return 1
    logger.use_console_strategy()
    dictionary = Dictionary()
    with UdpServer(dictionary.translate, port) as server:
        server.start()
    return 0


if __name__ == "__main__":
    sys.exit(echo_main())