import socket
import threading

import pytest

from ddmapgen.econ import Econ


@pytest.fixture
def pair():
    ours, theirs = socket.socketpair()
    econ = Econ(ours, 64)
    yield econ, theirs
    econ.close()
    theirs.close()


def _recv_line(sock):
    data = b""
    while not data.endswith(b"\n"):
        chunk = sock.recv(64)
        if not chunk:
            break
        data += chunk
    return data


def test_feed_pops_lines_last_first():
    econ = Econ(None)
    econ.feed(b"first\nsecond\n")
    assert econ.pop_line() == "second"
    assert econ.pop_line() == "first"
    assert econ.pop_line() is None


def test_feed_joins_partial_line():
    econ = Econ(None)
    econ.feed(b"hel")
    assert econ.pop_line() is None
    assert econ.unfinished_line == "hel"
    econ.feed(b"lo\n")
    assert econ.pop_line() == "hello"
    assert econ.unfinished_line == ""


def test_feed_strips_nul_bytes():
    econ = Econ(None)
    econ.feed(b"a\0b\n\0")
    assert econ.pop_line() == "ab"
    assert econ.pop_line() is None


def test_read_from_socket(pair):
    econ, peer = pair
    peer.sendall(b"line one\n")
    assert econ.read() == len(b"line one\n")
    assert econ.pop_line() == "line one"


def test_send_rcon_cmd_appends_newline(pair):
    econ, peer = pair
    econ.send_rcon_cmd("say hi")
    assert _recv_line(peer) == b"say hi\n"


def _serve_auth(peer, reply):
    peer.sendall(b"Enter password:\n")
    received = _recv_line(peer)
    peer.sendall(reply)
    return received


def test_auth_success(pair):
    econ, peer = pair
    seen = []
    worker = threading.Thread(
        target=lambda: seen.append(_serve_auth(peer, b"Authentication successful. ok\n"))
    )
    worker.start()
    password = "password"
    assert econ.auth(password) is True
    worker.join()
    assert seen == [b"password\n"]
    assert econ.authed is True


def test_auth_failure(pair):
    econ, peer = pair
    worker = threading.Thread(target=lambda: _serve_auth(peer, b"Wrong password\n"))
    worker.start()
    password = "password"
    assert econ.auth(password) is False
    worker.join()
    assert econ.authed is False


def test_auth_raises_when_closed_before_prompt(pair):
    econ, peer = pair
    peer.close()
    password = "password"
    with pytest.raises(ConnectionError):
        econ.auth(password)


def test_connect_by_host_port_string():
    server = socket.create_server(("127.0.0.1", 0))
    port = server.getsockname()[1]
    try:
        with Econ.connect(f"127.0.0.1:{port}", 128) as econ:
            conn, _ = server.accept()
            with conn:
                econ.send_rcon_cmd("reload")
                assert _recv_line(conn) == b"reload\n"
                assert econ.buffer_size == 128
    finally:
        server.close()


def test_connect_rejects_malformed_address():
    with pytest.raises(ValueError):
        Econ.connect("no-port-here", 16)