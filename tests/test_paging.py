import io

import pytest

from osim.paging import (
    MAX_FRAMES,
    MAX_REF_LEN,
    format_result,
    main,
    simulate_fifo,
    simulate_lru,
)

SEQUENCE = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]
BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]
SIMULATORS = [simulate_fifo, simulate_lru]


@pytest.mark.parametrize("simulate", SIMULATORS)
@pytest.mark.parametrize("frames", [1, 2, 3, 4, MAX_FRAMES])
def test_snapshot_invariants(simulate, frames):
    result = simulate(SEQUENCE, frames)
    assert len(result.snapshots) == len(SEQUENCE)
    for page, snapshot in zip(SEQUENCE, result.snapshots):
        assert len(snapshot) == frames
        assert page in snapshot
    assert len(set(SEQUENCE)) <= result.faults <= len(SEQUENCE)


def test_enough_frames_fault_only_on_first_use():
    assert simulate_fifo(SEQUENCE, MAX_FRAMES).faults == len(set(SEQUENCE))
    assert simulate_lru(SEQUENCE, MAX_FRAMES).faults == len(set(SEQUENCE))


def test_single_frame_faults_on_every_change():
    pages = [1, 1, 2, 2, 2, 1, 3, 3]
    assert simulate_fifo(pages, 1).faults == 4
    assert simulate_lru(pages, 1).faults == 4


def test_fifo_shows_beladys_anomaly():
    assert simulate_fifo(BELADY, 4).faults > simulate_fifo(BELADY, 3).faults


def test_lru_never_gets_worse_with_more_frames():
    for frames in range(1, MAX_FRAMES):
        assert simulate_lru(BELADY, frames + 1).faults <= simulate_lru(BELADY, frames).faults


def test_fifo_and_lru_choose_different_victims():
    pages = [1, 2, 1, 3]
    assert simulate_fifo(pages, 2).snapshots[-1] == (3, 2)
    assert simulate_lru(pages, 2).snapshots[-1] == (1, 3)


def test_unfilled_frames_are_empty():
    assert simulate_fifo([5], 3).snapshots[0] == (5, None, None)
    assert simulate_lru([5], 3).snapshots[0] == (5, None, None)


def test_format_result_layout():
    text = format_result(simulate_fifo([1, 2], 2))
    assert text == (
        "\n--- FIFO Simulation ---\n"
        "Page 1:  1  - \n"
        "Page 2:  1  2 \n"
        "Total Page Faults (FIFO): 2\n"
    )


def test_format_result_has_a_line_per_reference():
    result = simulate_lru(SEQUENCE, 3)
    lines = format_result(result).splitlines()
    assert lines[1] == "--- LRU Simulation ---"
    assert len(lines) == len(SEQUENCE) + 3
    assert lines[-1] == f"Total Page Faults (LRU): {result.faults}"


def test_empty_reference_string():
    fifo = simulate_fifo([], 3)
    lru = simulate_lru([], 3)
    assert fifo.faults == 0
    assert fifo.snapshots == ()
    assert lru.faults == 0
    assert lru.snapshots == ()


@pytest.mark.parametrize("frames", [0, -1, MAX_FRAMES + 1])
def test_frame_count_out_of_range(frames):
    with pytest.raises(ValueError):
        simulate_fifo([1, 2, 3], frames)
    with pytest.raises(ValueError):
        simulate_lru([1, 2, 3], frames)


def test_reference_limit():
    assert len(simulate_fifo([1] * MAX_REF_LEN, 2).snapshots) == MAX_REF_LEN
    assert len(simulate_lru([1] * MAX_REF_LEN, 2).snapshots) == MAX_REF_LEN
    with pytest.raises(ValueError):
        simulate_fifo([1] * (MAX_REF_LEN + 1), 2)
    with pytest.raises(ValueError):
        simulate_lru([1] * (MAX_REF_LEN + 1), 2)


def test_input_sequence_is_not_modified():
    pages = list(SEQUENCE)
    simulate_fifo(pages, 3)
    simulate_lru(pages, 3)
    assert pages == SEQUENCE


def test_main_prints_both_simulations(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n1 2 1 3\n2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter number of frames in memory: " in out
    assert format_result(simulate_fifo([1, 2, 1, 3], 2)) in out
    assert format_result(simulate_lru([1, 2, 1, 3], 2)) in out
    assert out.index("FIFO Simulation") < out.index("LRU Simulation")


def test_main_reports_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err