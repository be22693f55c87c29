import threading
from unittest.mock import MagicMock

import pytest

from gridsource_repository.lazy import Lazy, Memo


def test_lazy_computes_once():
    factory = MagicMock(return_value=["name"])
    holder = Lazy(factory)

    assert not holder.is_computed
    assert holder.get() is holder.get()
    assert holder.is_computed
    factory.assert_called_once_with()


def test_lazy_retries_after_failed_computation():
    factory = MagicMock(side_effect=[RuntimeError("backend down"), "ok"])
    holder = Lazy(factory)

    with pytest.raises(RuntimeError):
        holder.get()
    assert holder.get() == "ok"


def test_lazy_computes_once_across_threads():
    # Validates the one-shot guarantee because key sets and the record type are shared between threads.
    # Arrange
    calls = []
    barrier = threading.Barrier(8)

    def compute():
        calls.append("keys")
        return ["name", "sku"]

    holder = Lazy(compute)
    results = []

    def worker():
        barrier.wait()
        results.append(holder.get())

    threads = [threading.Thread(target=worker) for _ in range(8)]

    # Act
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    # Assert
    assert calls == ["keys"]
    assert len(results) == 8
    assert all(result is results[0] for result in results)


def test_memo_computes_each_key_once_across_threads():
    # Validates the one-shot guarantee because hosts may share a grid source between threads.
    # Arrange
    calls = []
    barrier = threading.Barrier(8)

    def compute(key):
        calls.append(key)
        return object()

    memo = Memo()
    results = []

    def worker():
        barrier.wait()
        results.append(memo.get_or_compute("name", compute))

    threads = [threading.Thread(target=worker) for _ in range(8)]

    # Act
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    # Assert
    assert calls == ["name"]
    assert all(result is results[0] for result in results)
    assert "name" in memo
    assert len(memo) == 1
