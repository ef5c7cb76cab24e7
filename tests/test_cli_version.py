import importlib
import json
import sys

import pytest

# We import run.py as a module and exercise parse_args + main with a patched
# start_server so we do not actually start networking.


@pytest.fixture()
def run_module():
    # Ensure a clean import each time (run.py reads VERSION once)
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def test_version_flag_outputs_version(run_module, capsys):
    ver = run_module.__version__
    # argparse handles --version and exits by raising SystemExit
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    captured = capsys.readouterr().out
    assert ver in captured
    assert "Maze Game" in captured


def test_default_command_is_generate(run_module):
    assert run_module.parse_args([]).command == "generate"
    assert run_module.parse_args(["--env-file", "x.env"]).command == "generate"


def test_generate_prints_maze(run_module, capsys):
    assert run_module.main(["generate", "--width", "4", "--height", "3", "--seed", "42"]) == 0
    out = capsys.readouterr().out.rstrip("\n").split("\n")
    assert out[0] == "Seed: 42  Size: 4x3"
    maze = out[1:]
    assert len(maze) == 7
    assert all(len(line) == 9 for line in maze)


def test_generate_is_reproducible(run_module, capsys):
    run_module.main(["generate", "--preset", "small", "--seed", "7"])
    first = capsys.readouterr().out
    run_module.main(["generate", "--preset", "small", "--seed", "7"])
    assert capsys.readouterr().out == first


def test_generate_json(run_module, capsys):
    assert run_module.main(["generate", "--width", "3", "--height", "3", "--seed", "1", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["seed"] == 1
    assert len(data["cells"]) == 9


def test_generate_coords(run_module, capsys):
    run_module.main(["generate", "--width", "2", "--height", "2", "--seed", "1", "--coords"])
    out = capsys.readouterr().out
    assert "(0, 0) (1, 0)" in out


def test_path_command(run_module, capsys):
    code = run_module.main(["path", "--width", "5", "--height", "5", "--seed", "3", "--start", "0,0", "--end", "4,4"])
    assert code == 0
    out = capsys.readouterr().out
    route = [line for line in out.split("\n") if "->" in line][0]
    assert route.startswith("0,0") and route.endswith("4,4")
    assert "Steps:" in out


def test_path_draw(run_module, capsys):
    run_module.main(["path", "--width", "3", "--height", "3", "--seed", "3", "--draw"])
    assert "·" in capsys.readouterr().out


def test_path_out_of_bounds_reports_error(run_module, capsys):
    code = run_module.main(["path", "--width", "3", "--height", "3", "--seed", "3", "--end", "5,5"])
    assert code == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_bad_dimension_reports_error(run_module, capsys):
    assert run_module.main(["generate", "--width", "0"]) == 2
    assert "width must be positive" in capsys.readouterr().err


def test_explicit_zero_width_overrides_preset(run_module, capsys):
    assert run_module.main(["generate", "--preset", "small", "--width", "0", "--seed", "1"]) == 2
    captured = capsys.readouterr()
    assert "width must be positive" in captured.err
    assert "Seed:" not in captured.out


def test_preset_with_explicit_height(run_module, capsys):
    assert run_module.main(["generate", "--preset", "small", "--height", "3", "--seed", "1"]) == 0
    assert capsys.readouterr().out.startswith("Seed: 1  Size: 5x3")


def test_bad_coordinate_syntax_rejected(run_module):
    with pytest.raises(SystemExit):
        run_module.parse_args(["path", "--start", "1-2"])


def test_server_main_invokes_start_server(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):  # signature match
        calls["host"] = host
        calls["port"] = port
        calls["debug"] = debug

    monkeypatch.setenv("PORT", "5555")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setattr(run_module.signal, "signal", lambda *a: None)
    import mazegame.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    assert run_module.main(["server"]) == 0
    assert calls == {"host": "127.0.0.1", "port": 5555, "debug": False}


def test_server_main_debug_flag(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls["debug"] = debug

    monkeypatch.setattr(run_module.signal, "signal", lambda *a: None)
    import mazegame.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    run_module.main(["server", "--debug", "--port", "6001"])
    assert calls["debug"] is True


def test_env_file_argument(tmp_path, run_module, capsys, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("MAZE_WIDTH=3\nMAZE_HEIGHT=2\nMAZE_SEED=11\n")
    # load_dotenv writes into os.environ; register keys so monkeypatch restores them
    for key in ("MAZE_WIDTH", "MAZE_HEIGHT", "MAZE_SEED"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    assert run_module.main(["--env-file", str(env_file), "generate"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Seed: 11  Size: 3x2")
