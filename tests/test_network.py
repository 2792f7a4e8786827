# Area: Network Tests
"""Tests for connections, the broadcast domain and the event loop."""

import socket
import pytest
from unittest.mock import Mock

from board_player.errors import TransportError
from board_player._network import Connection, NetworkDomain, NetworkLoop
from board_player._network.connection import MAX_LINE_LENGTH, RECV_SIZE

LOCALHOST = "127.0.0.1"


class RecordingDomain(NetworkDomain):
    """Domain that remembers every line it handles."""

    def __init__(self):
        super().__init__(port=0, bind_host=LOCALHOST)
        self.lines = []
        self.peers = []

    def received(self, line):
        self.lines.append(line)
        self.peers.append(self.current_peer)


def pump(loop, until, attempts=100):
    """Run the loop until the condition holds or attempts run out."""
    for _ in range(attempts):
        if until():
            return True
        loop.run_once(0.05)
    return until()


def free_port():
    with socket.socket() as sock:
        sock.bind((LOCALHOST, 0))
        return sock.getsockname()[1]


@pytest.fixture
def loop():
    loop = NetworkLoop()
    yield loop
    loop.close()


@pytest.fixture
def domain(loop):
    domain = RecordingDomain()
    loop.install(domain)
    return domain


class TestConnection:
    """Tests for Connection line framing and send failures."""

    def test_feed_splits_lines_and_buffers_rest(self):
        conn = Connection(Mock(spec=socket.socket), peer="p")
        assert conn.feed(b"pos a\nqu") == ["pos a"]
        assert conn.feed(b"it\n") == ["quit"]
        assert conn.feed(b"") == []

    def test_send_failure_closes_link(self):
        """Test that a failing send returns False and closes the link."""
        sock = Mock(spec=socket.socket)
        sock.sendall.side_effect = BrokenPipeError("gone")
        conn = Connection(sock, peer="p")
        assert conn.send_string("pos a\n") is False
        assert conn.closed
        assert conn.send_string("pos b\n") is False

    def test_eof_is_none(self):
        sock = Mock(spec=socket.socket)
        sock.recv.return_value = b""
        assert Connection(sock, peer="p").read_lines() is None

    def test_unterminated_line_over_limit_drops_link(self):
        """Test that a peer streaming without a newline is cut off at the cap."""
        sock = Mock(spec=socket.socket)
        sock.recv.return_value = b"x" * RECV_SIZE
        conn = Connection(sock, peer="p")
        reads = 0
        while conn.read_lines() is not None:
            reads += 1
            assert reads <= MAX_LINE_LENGTH // RECV_SIZE
        assert reads == MAX_LINE_LENGTH // RECV_SIZE

    def test_long_line_under_limit_is_delivered(self):
        sock = Mock(spec=socket.socket)
        sock.recv.return_value = b"p" * (MAX_LINE_LENGTH - 1) + b"\n"
        lines = Connection(sock, peer="p").read_lines()
        assert lines == ["p" * (MAX_LINE_LENGTH - 1)]


class TestNetworkDomain:
    """Tests for listening, dispatch and broadcast over loopback."""

    def test_listen_on_ephemeral_port(self, domain):
        assert domain.port != 0
        assert domain.server is not None

    def test_lines_reach_received(self, loop, domain):
        """Test that inbound lines are delivered in order with the peer name."""
        with socket.create_connection((LOCALHOST, domain.port)) as client:
            assert pump(loop, lambda: domain.connections)
            client.sendall(b"pos one\npos two\n")
            assert pump(loop, lambda: len(domain.lines) == 2)
        assert domain.lines == ["pos one", "pos two"]
        assert domain.peers[0].startswith(LOCALHOST)
        assert domain.current_peer is None

    def test_lines_are_forwarded_to_other_peers(self, loop, domain):
        """Test that one peer's line is relayed to every other peer."""
        with socket.create_connection((LOCALHOST, domain.port)) as a, \
                socket.create_connection((LOCALHOST, domain.port)) as b:
            assert pump(loop, lambda: len(domain.connections) == 2)
            a.sendall(b"hello\n")
            assert pump(loop, lambda: domain.lines)
            b.settimeout(2.0)
            assert b.recv(64) == b"hello\n"

    def test_broadcast_reaches_all_peers(self, loop, domain):
        with socket.create_connection((LOCALHOST, domain.port)) as a, \
                socket.create_connection((LOCALHOST, domain.port)) as b:
            assert pump(loop, lambda: len(domain.connections) == 2)
            assert domain.broadcast("pos x\n") == 2
            for client in (a, b):
                client.settimeout(2.0)
                assert client.recv(64) == b"pos x\n"

    def test_add_connection_links_two_domains(self, loop, domain):
        """Test an outbound link between two domains on one loop."""
        other = RecordingDomain()
        loop.install(other)
        other.add_connection(LOCALHOST, domain.port)
        assert pump(loop, lambda: domain.connections)

        other.broadcast("pos from other\n")
        assert pump(loop, lambda: domain.lines)
        assert domain.lines == ["pos from other"]

    def test_add_connection_failure_raises(self):
        domain = RecordingDomain()
        with pytest.raises(TransportError) as exc_info:
            domain.add_connection(LOCALHOST, free_port())
        assert exc_info.value.port > 0

    def test_closed_peer_is_dropped(self, loop, domain):
        client = socket.create_connection((LOCALHOST, domain.port))
        assert pump(loop, lambda: domain.connections)
        client.close()
        assert pump(loop, lambda: not domain.connections)

    def test_peer_flooding_without_newline_is_dropped(self, loop, domain):
        with socket.create_connection((LOCALHOST, domain.port)) as client:
            assert pump(loop, lambda: domain.connections)
            for _ in range(MAX_LINE_LENGTH // RECV_SIZE + 4):
                try:
                    client.sendall(b"x" * RECV_SIZE)
                except OSError:
                    break
                pump(loop, lambda: False, attempts=1)
            assert pump(loop, lambda: not domain.connections)
        assert domain.lines == []


class TestNetworkLoop:
    """Tests for cooperative shutdown."""

    def test_exit_before_run_returns_immediately(self, loop, domain):
        loop.exit()
        loop.run()
        assert not loop.running
        assert loop.exit_requested
        assert domain.server is None

    def test_exit_from_handler_stops_run(self, loop):
        """Test that a handler calling exit() ends run() and closes the domain."""

        class QuittingDomain(RecordingDomain):
            def received(self, line):
                super().received(line)
                self.loop.exit()

        quitting = QuittingDomain()
        loop.install(quitting)
        client = socket.create_connection((LOCALHOST, quitting.port))
        client.sendall(b"quit\nignored\n")
        try:
            loop.run()
        finally:
            client.close()
        assert quitting.lines == ["quit"]
        assert quitting.connections == []

    def test_handler_error_does_not_stop_loop(self, loop):
        class FailingDomain(RecordingDomain):
            def received(self, line):
                super().received(line)
                raise RuntimeError("boom")

        failing = FailingDomain()
        loop.install(failing)
        with socket.create_connection((LOCALHOST, failing.port)) as client:
            assert pump(loop, lambda: failing.connections)
            client.sendall(b"pos x\n")
            assert pump(loop, lambda: len(failing.lines) == 1)
            client.sendall(b"pos y\n")
            assert pump(loop, lambda: len(failing.lines) == 2)
        assert not loop.exit_requested
