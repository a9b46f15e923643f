"""
Tests for the TCP server, using real sockets on localhost.
"""

import io
import socket
import threading

import pytest

import main as local_main
import server as server_main
from network.server import GameServer

ANN_WINS = "Ann\nX\nBob\n0\n3\n1\n4\n2\nn\n"
BOB_WINS = "Ann\r\nO\r\nBob\r\n0\r\n3\r\n1\r\n4\r\n8\r\n5\r\nno\r\n"


@pytest.fixture
def running_server(quiet_config):
    """A server on an ephemeral localhost port, accepting in the background."""
    game_server = GameServer("127.0.0.1", 0, quiet_config)
    game_server.bind()
    thread = threading.Thread(target=game_server.serve_forever, daemon=True)
    thread.start()
    yield game_server
    game_server.shutdown()
    thread.join(timeout=5)


def play(address, script: str) -> str:
    """Send a whole script and end input, then read until the server hangs up."""
    with socket.create_connection(address, timeout=10) as client:
        client.sendall(script.encode("utf-8"))
        client.shutdown(socket.SHUT_WR)
        chunks = []
        while True:
            data = client.recv(4096)
            if not data:
                break
            chunks.append(data)
    return b"".join(chunks).decode("utf-8")


class TestGameServer:

    def test_bound_to_real_port(self, running_server):
        host, port = running_server.address
        assert host == "127.0.0.1"
        assert port > 0

    def test_full_session(self, running_server):
        output = play(running_server.address, ANN_WINS)

        assert output.startswith("\033[2J\n")
        assert "TIC TAC TOE LOADING" in output
        assert "Enter Player1 Name: " in output
        assert "Name: Ann Choice: X" in output
        assert "Name: Bob Choice: O" in output
        assert "Congrats Ann Wins\n" in output
        assert output.endswith("Do you want to Play Again [y/n]: ")

    def test_crlf_clients(self, running_server):
        # Ann: 0 1 8, Bob (X): 3 4 5
        output = play(running_server.address, BOB_WINS)
        assert "Congrats Bob Wins\n" in output

    def test_connections_are_independent(self, running_server):
        results = {}

        def client(name, script):
            results[name] = play(running_server.address, script)

        threads = [
            threading.Thread(target=client, args=("first", ANN_WINS)),
            threading.Thread(target=client, args=("second", BOB_WINS)),
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=15)

        assert "Congrats Ann Wins\n" in results["first"]
        assert "Congrats Bob Wins\n" not in results["first"]
        assert "Congrats Bob Wins\n" in results["second"]

    def test_client_hangs_up_mid_game(self, running_server):
        # Server closes its side once input runs out
        output = play(running_server.address, "Ann\nX\nBob\n4\n")
        assert "Enter Marker Position (Bob): " in output
        # Still serving afterwards
        assert "Congrats Ann Wins\n" in play(running_server.address, ANN_WINS)


class TestServerCli:

    def test_bind_failure_exits_with_status_1(self, capsys):
        blocker = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        blocker.bind(("127.0.0.1", 0))
        blocker.listen(1)
        try:
            port = blocker.getsockname()[1]
            status = server_main.main(["--host", "127.0.0.1", "--port", str(port)])
        finally:
            blocker.close()

        assert status == 1
        assert "Fatal error :" in capsys.readouterr().err

    def test_default_port(self, monkeypatch):
        seen = {}

        class FakeServer:
            def __init__(self, host, port, config):
                seen["host"], seen["port"] = host, port

            def bind(self):
                raise OSError("no network in this test")

        monkeypatch.setattr(server_main, "GameServer", FakeServer)
        assert server_main.main([]) == 1
        assert seen == {"host": "", "port": 8000}

    @pytest.mark.parametrize("flag", ["-p", "--port", "-port"])
    def test_port_flags(self, monkeypatch, flag):
        seen = {}

        class FakeServer:
            def __init__(self, host, port, config):
                seen["port"] = port

            def bind(self):
                raise OSError("no network in this test")

        monkeypatch.setattr(server_main, "GameServer", FakeServer)
        assert server_main.main([flag, "9000"]) == 1
        assert seen == {"port": 9000}

    @pytest.mark.parametrize("port", ["-1", "70000"])
    def test_out_of_range_port_exits_with_status_1(self, capsys, port):
        status = server_main.main(["--host", "127.0.0.1", "--port", port])

        assert status == 1
        assert "Fatal error :" in capsys.readouterr().err

    def test_bind_rejects_out_of_range_port(self, quiet_config):
        game_server = GameServer("127.0.0.1", 70000, quiet_config)
        with pytest.raises(OverflowError):
            game_server.bind()
        assert game_server.server_socket is None


class TestLocalCli:

    def test_plays_from_stdin(self, monkeypatch, capsys, quiet_config):
        monkeypatch.setattr(local_main, "SessionConfig", lambda: quiet_config)
        monkeypatch.setattr("sys.stdin", io.StringIO(ANN_WINS))

        assert local_main.main([]) == 0
        out = capsys.readouterr().out
        assert "Congrats Ann Wins" in out
        assert out.rstrip().endswith("Goodbye!")

    def test_end_of_input(self, monkeypatch, capsys, quiet_config):
        monkeypatch.setattr(local_main, "SessionConfig", lambda: quiet_config)
        monkeypatch.setattr("sys.stdin", io.StringIO(""))

        assert local_main.main([]) == 0
        assert "Goodbye!" in capsys.readouterr().out
