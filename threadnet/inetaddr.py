"""An IPv4 address and port pair, convertible to and from socket addresses."""

from __future__ import annotations

import ipaddress
from typing import Tuple

ANY_ADDRESS = "0.0.0.0"

SockAddr = Tuple[str, int]


class InetAddr:
    """A host-order port and dotted-quad IPv4 address.

    Two addresses are equal when both their IP and port match, so they can
    be kept in sets and used as dictionary keys.
    """

    __slots__ = ("_port", "_ip")

    def __init__(self, port: int, ip: str = ANY_ADDRESS) -> None:
        if not isinstance(port, int) or not 0 <= port <= 0xFFFF:
            raise ValueError(f"port must be an integer in 0..65535, got {port!r}")
        try:
            ipaddress.IPv4Address(ip)
        except (ipaddress.AddressValueError, ValueError) as exc:
            raise ValueError(f"not an IPv4 address: {ip!r}") from exc
        self._port = port
        self._ip = ip

    @classmethod
    def from_sockaddr(cls, addr: SockAddr) -> InetAddr:
        """Build an address from the ``(ip, port)`` pair a socket reports."""
        ip, port = addr[0], addr[1]
        return cls(port, ip)

    @property
    def port(self) -> int:
        """The port number."""
        return self._port

    @property
    def ip(self) -> str:
        """The IPv4 address in dotted-quad form."""
        return self._ip

    @property
    def addr(self) -> SockAddr:
        """The ``(ip, port)`` pair that socket calls take."""
        return (self._ip, self._port)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InetAddr):
            return NotImplemented
        return self._ip == other._ip and self._port == other._port

    def __hash__(self) -> int:
        return hash((self._ip, self._port))

    def __repr__(self) -> str:
        return f"InetAddr(port={self._port}, ip={self._ip!r})"

    def __str__(self) -> str:
        return f"{self._ip}:{self._port}"