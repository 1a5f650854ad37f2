import matplotlib

matplotlib.use('Agg')

import pytest  # noqa: E402

import main as cli  # noqa: E402
from main import main  # noqa: E402
from test_small import SMALL_TRACE  # noqa: E402


@pytest.fixture
def trace(tmp_path):
    path = tmp_path / "trace.txt"
    path.write_text(SMALL_TRACE)
    return str(path)


def test_run(trace, capsys):
    assert main(['run', trace, '2', 'fifo', '--quiet']) == 0

    captured = capsys.readouterr()
    assert "Algorithm: FIFO" in captured.out
    assert "Page Faults: 4" in captured.out
    assert "Disk Writes: 1" in captured.out
    assert captured.err == ""


def test_run_reports_progress(trace, capsys):
    main(['run', trace, '2', 'OPT'])
    assert "Processing: 100.0% (5/5 references)" in capsys.readouterr().err


def test_run_custom_access_times(trace, capsys):
    main(['run', trace, '2', 'OPT', '-q', '--memory-time', '1', '--disk-time', '10'])
    assert "Effective Access Time: 7.00 ns" in capsys.readouterr().out


@pytest.mark.parametrize('argv', [
    ['run', 'trace.txt', '2', 'CLOCK'],
    ['run', 'trace.txt', '0', 'FIFO'],
    ['run', 'trace.txt', 'two', 'FIFO'],
    ['generate', 'out.txt', '0', '10'],
    ['generate', 'out.txt', '10', '-1'],
    ['generate', 'out.txt', '10', '5', '--write-ratio', '1.5'],
    ['generate', 'out.txt', 'ten', '5'],
    [],
])
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_missing_trace_is_not_fatal(tmp_path, capsys):
    assert main(['run', str(tmp_path / "nope.txt"), '3', 'LRU', '-q']) == 0
    captured = capsys.readouterr()
    assert "File not found" in captured.err
    assert "Total Memory Accesses: 0" in captured.out


def test_generate(tmp_path, capsys):
    out = tmp_path / "gen.txt"
    assert main(['generate', str(out), '10', '25', '--seed', '1', '--sorted']) == 0
    assert len(out.read_text().splitlines()) == 25
    assert "Register | Type" in capsys.readouterr().out


def test_compare(trace, tmp_path, capsys):
    output = tmp_path / "cmp.png"
    assert main(['compare', trace, '--frames', '1', '2', '--output', str(output)]) == 0
    assert output.exists()
    assert "Graph saved" in capsys.readouterr().out


def test_runtime_value_error_is_not_a_usage_error(trace, monkeypatch):
    def broken(args):
        raise ValueError("plotting failed")

    monkeypatch.setitem(cli.COMMANDS, 'run', broken)
    with pytest.raises(ValueError, match="plotting failed"):
        main(['run', trace, '2', 'FIFO'])


def test_configuration_error_from_command_exits_2(trace, monkeypatch):
    from simulator import ConfigurationError

    def misconfigured(args):
        raise ConfigurationError("bad setup")

    monkeypatch.setitem(cli.COMMANDS, 'run', misconfigured)
    with pytest.raises(SystemExit) as exc:
        main(['run', trace, '2', 'FIFO'])
    assert exc.value.code == 2
