"""A line-oriented client for a game server's external console."""

from __future__ import annotations

import socket
from typing import Optional, Union

Address = Union[str, tuple[str, int]]

_CONNECT_TIMEOUT = 10.0


def _split_address(address: Address) -> tuple[str, int]:
    if isinstance(address, str):
        host, sep, port = address.rpartition(":")
        if not sep or not host:
            raise ValueError(f"address {address!r} is not of the form host:port")
        return host, int(port)
    host, port = address
    return host, int(port)


class Econ:
    """Reads lines from and sends commands to an econ connection."""

    def __init__(self, connection: socket.socket, buffer_size: int = 1024) -> None:
        self.connection = connection
        self.buffer_size = buffer_size
        self.lines: list[str] = []
        self.unfinished_line = ""
        self.authed = False

    @classmethod
    def connect(cls, address: Address, buffer_size: int = 1024) -> "Econ":
        """Open a TCP connection, waiting at most ten seconds."""
        connection = socket.create_connection(_split_address(address), timeout=_CONNECT_TIMEOUT)
        connection.settimeout(None)
        return cls(connection, buffer_size)

    def __enter__(self) -> "Econ":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def auth(self, password: str) -> bool:
        """Wait for the password prompt, answer it, and report success."""
        found = False
        while not found:
            try:
                received = self.read()
            except OSError:
                break
            if received == 0:
                raise ConnectionError("connection closed before password prompt")
            while (line := self.pop_line()) is not None:
                if line == "Enter password:":
                    found = True
                    break

        self.send_rcon_cmd(password)
        self.read()

        while (line := self.pop_line()) is not None:
            if line.startswith("Authentication successful"):
                self.authed = True

        return self.authed

    def read(self) -> int:
        """Receive once from the connection; return the number of bytes read."""
        data = self.connection.recv(self.buffer_size)
        if data:
            self.feed(data)
        return len(data)

    def feed(self, data: bytes) -> None:
        """Split received bytes into lines, keeping a trailing partial line."""
        lines = data.decode("utf-8", errors="replace").replace("\0", "").split("\n")

        if lines[-1] == "":
            lines.pop()
            if self.unfinished_line and lines:
                lines[0] = self.unfinished_line + lines[0]
                self.unfinished_line = ""
        else:
            self.unfinished_line = lines.pop()

        self.lines.extend(lines)

    def pop_line(self) -> Optional[str]:
        """Take the most recently received complete line, if any."""
        return self.lines.pop() if self.lines else None

    def send_rcon_cmd(self, command: str) -> None:
        """Send one command line."""
        self.connection.sendall(command.encode("utf-8") + b"\n")

    def close(self) -> None:
        self.connection.close()