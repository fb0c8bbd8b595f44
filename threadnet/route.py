"""Broadcasts chat messages to every client that has spoken."""

from __future__ import annotations

import threading
from typing import Protocol

from threadnet.inetaddr import InetAddr


class _DatagramSender(Protocol):
    def sendto(self, data: bytes, address: tuple[str, int]) -> int: ...


class Route:
    """Keeps the set of online users and relays each message to all of them.

    A user comes online the first time a message arrives from its address.
    """

    def __init__(self) -> None:
        self._users: list[InetAddr] = []
        self._lock = threading.Lock()

    @property
    def users(self) -> list[InetAddr]:
        """The online users, in the order they first spoke."""
        with self._lock:
            return list(self._users)

    def is_online(self, who: InetAddr) -> bool:
        """True if ``who`` has sent a message before."""
        with self._lock:
            return who in self._users

    def route_message(self, message: str | bytes, who: InetAddr, sock: _DatagramSender) -> None:
        """Register ``who`` if new, then send ``message`` to every online user."""
        data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
        with self._lock:
            if who not in self._users:
                self._users.append(who)
            recipients = list(self._users)
        for user in recipients:
            sock.sendto(data, user.addr)