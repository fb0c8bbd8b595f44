import os
import threading

import pytest

from threadnet.thread import Thread, ThreadStatus


def _blocking():
    release = threading.Event()
    seen = {}

    def func():
        seen["name"] = threading.current_thread().name
        seen["native"] = threading.get_native_id()
        release.wait(5)

    return func, release, seen


def test_default_names_are_worker_prefixed_and_increasing():
    first = Thread(lambda: None)
    second = Thread(lambda: None)
    assert first.name.startswith("Worker-")
    assert second.name.startswith("Worker-")
    n1 = int(first.name.split("-")[1])
    n2 = int(second.name.split("-")[1])
    assert n2 == n1 + 1


def test_explicit_name_is_kept():
    t = Thread(lambda: None, "custom")
    assert t.name == "custom"


def test_new_thread_state():
    t = Thread(lambda: None)
    assert t.status is ThreadStatus.NEW
    assert t.joinable is True
    assert t.stop_requested is False


def test_start_runs_function_under_its_name(capsys):
    func, release, seen = _blocking()
    t = Thread(func, "runner")
    t.start()
    assert t.status is ThreadStatus.RUNNING
    release.set()
    t.join()
    assert seen["name"] == "runner"
    assert t.lwpid == seen["native"]
    assert t.pid == os.getpid()
    out = capsys.readouterr().out
    assert f"lwp: {t.lwpid}, name: runner, join success" in out


def test_start_twice_raises():
    func, release, _ = _blocking()
    t = Thread(func)
    t.start()
    try:
        with pytest.raises(RuntimeError):
            t.start()
    finally:
        release.set()
        t.join()


def test_stop_on_new_thread_raises():
    t = Thread(lambda: None)
    with pytest.raises(RuntimeError):
        t.stop()
    assert t.status is ThreadStatus.NEW


def test_stop_running_thread_signals_and_changes_status():
    t = None

    def func():
        while not t.stop_requested:
            threading.Event().wait(0.01)

    t = Thread(func)
    t.start()
    t.stop()
    assert t.status is ThreadStatus.STOP
    assert t.stop_requested is True
    t.join()
    with pytest.raises(RuntimeError):
        t.stop()


def test_stopped_thread_can_start_again():
    calls = []
    t = Thread(lambda: calls.append(1))
    t.start()
    t.stop()
    t.join()
    t.start()
    assert t.status is ThreadStatus.RUNNING
    assert t.stop_requested is False
    t.join()
    assert len(calls) == 2


def test_detach_makes_join_fail():
    func, release, _ = _blocking()
    t = Thread(func, "loose")
    t.start()
    t.detach()
    assert t.joinable is False
    with pytest.raises(RuntimeError, match="loose"):
        t.join()
    release.set()


def test_detach_on_new_thread_keeps_it_joinable():
    t = Thread(lambda: None)
    t.detach()
    assert t.joinable is True


def test_join_never_started_raises():
    t = Thread(lambda: None)
    with pytest.raises(RuntimeError):
        t.join()