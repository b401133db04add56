"""Threaded stress tests for the tree engine.

Run with ``pytest tests/stress -v``; all are tagged ``p1``.
"""

import threading

import pytest

from memtree import FileSystem, MTAlreadyExistsError


@pytest.fixture
def atomic_fs():
    return FileSystem(atomic_create=True)


# ---------------------------------------------------------------------------
# ST-01
# ---------------------------------------------------------------------------


@pytest.mark.p1
def test_high_concurrency_private_files(atomic_fs):
    """50 threads append to their own file 500 times; no data is lost."""
    n_threads = 50
    iterations = 500
    errors: list[Exception] = []
    barrier = threading.Barrier(n_threads)

    def writer(thread_id: int) -> None:
        path = f"t{thread_id % 5}/file_{thread_id}"
        try:
            barrier.wait(timeout=10.0)
            for _ in range(iterations):
                atomic_fs.write_file(path, "ab")
            data = atomic_fs.read_file(path)
            if data != "ab" * iterations:
                raise AssertionError(f"thread {thread_id}: got {len(data)} chars")
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=writer, args=(i,), daemon=True) for i in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30.0)

    assert not errors, f"Errors detected: {errors[:3]}"
    assert atomic_fs.stats()["file_count"] == n_threads


# ---------------------------------------------------------------------------
# ST-02
# ---------------------------------------------------------------------------


@pytest.mark.p1
def test_mkdir_race_on_deep_paths(atomic_fs):
    """30 threads create overlapping deep paths; every path ends up present."""
    n_threads = 30
    errors: list[Exception] = []
    barrier = threading.Barrier(n_threads)

    def worker(thread_id: int) -> None:
        try:
            barrier.wait(timeout=10.0)
            for depth in range(1, 8):
                atomic_fs.mkdir("/".join(f"d{j}" for j in range(depth)) + f"/leaf_{thread_id}")
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(i,), daemon=True) for i in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30.0)

    assert not errors, f"Errors during mkdir race: {errors[:3]}"
    for thread_id in range(n_threads):
        assert atomic_fs.is_dir(f"d0/d1/d2/d3/d4/d5/d6/leaf_{thread_id}")


# ---------------------------------------------------------------------------
# ST-03
# ---------------------------------------------------------------------------


@pytest.mark.p1
def test_repeated_create_race_one_winner_per_round(atomic_fs):
    """Each round, 20 threads race to create the same file; one wins."""
    n_threads = 20
    rounds = 50
    wins = [0] * rounds
    lock = threading.Lock()
    errors: list[Exception] = []
    barrier = threading.Barrier(n_threads)

    def worker(_thread_id: int) -> None:
        try:
            for r in range(rounds):
                barrier.wait(timeout=10.0)
                try:
                    atomic_fs.root.create_file(f"round_{r}", "x")
                except MTAlreadyExistsError:
                    continue
                with lock:
                    wins[r] += 1
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(i,), daemon=True) for i in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30.0)

    assert not errors, f"Errors during create race: {errors[:3]}"
    assert wins == [1] * rounds


# ---------------------------------------------------------------------------
# ST-04
# ---------------------------------------------------------------------------


@pytest.mark.p1
def test_readers_during_tree_growth():
    """pretty_print and find run safely while other threads grow the tree."""
    fs = FileSystem(atomic_create=True)
    stop = threading.Event()
    errors: list[Exception] = []

    def grower(thread_id: int) -> None:
        try:
            for i in range(300):
                fs.write_file(f"g{thread_id}/n{i % 10}/f{i}", "x")
        except Exception as exc:
            errors.append(exc)

    def reader() -> None:
        try:
            while not stop.is_set():
                fs.pretty_print()
                fs.exists("g0/n0/f0")
        except Exception as exc:
            errors.append(exc)

    growers = [threading.Thread(target=grower, args=(i,), daemon=True) for i in range(4)]
    readers = [threading.Thread(target=reader, daemon=True) for _ in range(4)]
    for t in growers + readers:
        t.start()
    for t in growers:
        t.join(timeout=30.0)
    stop.set()
    for t in readers:
        t.join(timeout=10.0)

    assert not errors, f"Errors while reading a growing tree: {errors[:3]}"
    assert fs.stats()["file_count"] == 4 * 300
