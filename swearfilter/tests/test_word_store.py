import threading

import pytest

from swearfilter import SwearFilter
from swearfilter.services.rw_lock import ReadWriteLock
from swearfilter.services.word_store import WordStore


def test_store_round_trip():
    store = WordStore(["one"])
    store.add("two", "three")
    store.delete("three")

    assert set(store.words()) == {"one", "two"}
    assert store.snapshot() == frozenset({"one", "two"})
    assert len(store) == 2


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    barrier = threading.Barrier(2, timeout=2)
    errors: list[Exception] = []

    def reader():
        with lock.read_locked():
            try:
                barrier.wait()
            except threading.BrokenBarrierError as e:
                errors.append(e)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert errors == []


def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    acquired = threading.Event()

    def writer():
        with lock.write_locked():
            acquired.set()

    lock.acquire_read()
    thread = threading.Thread(target=writer)
    thread.start()

    assert not acquired.wait(timeout=0.2)

    lock.release_read()
    assert acquired.wait(timeout=2)
    thread.join(timeout=2)


def test_reader_waits_for_writer():
    lock = ReadWriteLock()
    acquired = threading.Event()

    def reader():
        with lock.read_locked():
            acquired.set()

    lock.acquire_write()
    thread = threading.Thread(target=reader)
    thread.start()

    assert not acquired.wait(timeout=0.2)

    lock.release_write()
    assert acquired.wait(timeout=2)
    thread.join(timeout=2)


@pytest.mark.parametrize("workers", [8])
def test_concurrent_add_delete_check(workers):
    swear_filter = SwearFilter(["hello"])
    per_worker = 200
    errors: list[Exception] = []

    def mutate(worker_id: int):
        try:
            for i in range(per_worker):
                word = f"w{worker_id}x{i}"
                swear_filter.add(word, f"tmp{worker_id}x{i}")
                swear_filter.delete(f"tmp{worker_id}x{i}")
                assert word in swear_filter
        except Exception as e:
            errors.append(e)

    def check():
        try:
            for _ in range(per_worker):
                assert "hello" in swear_filter.check("h3ll0 w0x0")
                swear_filter.words()
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=mutate, args=(n,)) for n in range(workers)]
    threads += [threading.Thread(target=check) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    assert errors == []
    words = set(swear_filter.words())
    expected = {f"w{n}x{i}" for n in range(workers) for i in range(per_worker)} | {"hello"}
    assert words == expected
