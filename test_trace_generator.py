import pytest

from simulator import run
from trace_generator import generate_trace, print_sorted_trace, sort_trace
from trace_loader import load_trace


def test_writes_requested_number_of_lines(tmp_path):
    path = tmp_path / "gen.txt"
    refs = generate_trace(path, size=20, limit=200, seed=1)

    lines = path.read_text().splitlines()
    assert len(lines) == len(refs) == 200
    for line in lines:
        address, kind = line.split()
        assert len(address) == 8
        int(address, 16)
        assert kind in ('R', 'W')


def test_seed_is_reproducible(tmp_path):
    first = generate_trace(tmp_path / "a.txt", 50, 100, seed=42)
    second = generate_trace(tmp_path / "b.txt", 50, 100, seed=42)
    assert first == second


def test_addresses_come_from_pool(tmp_path):
    refs = generate_trace(tmp_path / "gen.txt", size=10, limit=500, seed=3)
    assert len({address for address, _ in refs}) <= 10


@pytest.mark.parametrize('ratio, kinds', [(0.0, {'R'}), (1.0, {'W'})])
def test_write_ratio(tmp_path, ratio, kinds):
    refs = generate_trace(tmp_path / "gen.txt", 10, 50, seed=5, write_ratio=ratio)
    assert {kind for _, kind in refs} == kinds


def test_bad_pool_size(tmp_path):
    with pytest.raises(ValueError):
        generate_trace(tmp_path / "gen.txt", 0, 10)


def test_generated_trace_feeds_simulator(tmp_path):
    path = tmp_path / "gen.txt"
    generate_trace(path, size=30, limit=400, seed=9)

    stream = load_trace(path)
    assert len(stream) == 400
    stats = run(stream, 4, 'OPT')
    assert stats.total_accesses == 400


def test_sort_trace(tmp_path):
    path = tmp_path / "trace.txt"
    path.write_text("0000ffff W\n00000001 W\n0000ffff R\nbad\n")

    assert sort_trace(path) == [
        ('00000001', 'W'),
        ('0000ffff', 'R'),
        ('0000ffff', 'W'),
    ]


def test_print_sorted_trace(capsys):
    print_sorted_trace([('00000001', 'R')])
    assert capsys.readouterr().out == "Register | Type\n00000001 R\n"

    print_sorted_trace([])
    assert "No references loaded." in capsys.readouterr().out
