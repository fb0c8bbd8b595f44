"""Interactive UDP client: sends each word typed and prints the reply."""

from __future__ import annotations

import ipaddress
import socket
import sys
from typing import Iterator, TextIO

MAX_REPLY = 1023
PROMPT = "Please Enter: "


def _words(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run_client(
    server_ip: str,
    server_port: int,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Send each whitespace-separated word from ``stdin`` and print each reply.

    Stops at end of input and returns the number of words sent.
    """
    try:
        ipaddress.IPv4Address(server_ip)
    except ValueError as exc:
        raise ValueError(f"not an IPv4 address: {server_ip!r}") from exc
    if not 0 <= server_port <= 0xFFFF:
        raise ValueError(f"port must be in 0..65535, got {server_port!r}")
    source = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    server = (server_ip, server_port)
    sent = 0
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        words = _words(source)
        while True:
            out.write(PROMPT)
            out.flush()
            word = next(words, None)
            if word is None:
                break
            sock.sendto(word.encode("utf-8"), server)
            sent += 1
            data, _ = sock.recvfrom(MAX_REPLY)
            reply = data.split(b"\0", 1)[0].decode("utf-8", errors="replace")
            out.write(reply + "\n")
            out.flush()
    return sent


def main(argv: list[str] | None = None) -> int:
    """Run the client against ``server_ip server_port`` from the arguments."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("Usage: udp-client server_ip server_port", file=sys.stderr)
        return 0
    try:
        port = int(args[1])
    except ValueError:
        print(f"invalid port: {args[1]!r}", file=sys.stderr)
        return 1
    try:
        run_client(args[0], port)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())