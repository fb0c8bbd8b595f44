import io
import os
import re
import threading
from datetime import datetime

import pytest

from threadnet import logger as logmod
from threadnet.logger import (
    ConsoleLogStrategy,
    FileLogStrategy,
    LogLevel,
    LogMessage,
    Logger,
    get_timestamp,
    level_to_string,
    log,
    main,
)

PREFIX = re.compile(
    r"^\[(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\] \[(\w+)\] \[(\d+)\] \[([^\]]*)\] \[(\d+)\] - (.*)$"
)


@pytest.fixture
def buffered_logger():
    buf = io.StringIO()
    lg = Logger()
    lg.use_console_strategy(buf)
    return lg, buf


@pytest.mark.parametrize(
    "level, name",
    [
        (LogLevel.DEBUG, "DEBUG"),
        (LogLevel.INFO, "INFO"),
        (LogLevel.WARNING, "WARNING"),
        (LogLevel.ERROR, "ERROR"),
        (LogLevel.FATAL, "FATAL"),
    ],
)
def test_level_to_string(level, name):
    assert level_to_string(level) == name


def test_level_to_string_unknown():
    assert level_to_string(99) == "UNKNOWN"


def test_levels_are_ordered():
    names = [level_to_string(level) for level in sorted(LogLevel)]
    assert names == ["DEBUG", "INFO", "WARNING", "ERROR", "FATAL"]


def test_timestamp_format_and_value():
    stamp = get_timestamp()
    parsed = datetime.strptime(stamp, "%Y-%m-%d %H:%M:%S")
    assert abs((datetime.now() - parsed).total_seconds()) < 5


def test_message_prefix_and_body(buffered_logger):
    lg, buf = buffered_logger
    record = lg.message(LogLevel.INFO, "Main.cc", 12) << "hello" << " bit, " << 3.14
    record.flush()
    lines = buf.getvalue().splitlines()
    assert len(lines) == 1
    match = PREFIX.match(lines[0])
    assert match is not None
    assert match.group(2) == "INFO"
    assert int(match.group(3)) == os.getpid()
    assert match.group(4) == "Main.cc"
    assert match.group(5) == "12"
    assert match.group(6) == "hello bit, 3.14"


def test_float_uses_general_format(buffered_logger):
    lg, buf = buffered_logger
    with lg.message(LogLevel.DEBUG, "f", 1) as record:
        record << 1.0 << "|" << 2
    assert buf.getvalue().endswith("- 1|2\n")


def test_flush_writes_only_once(buffered_logger):
    lg, buf = buffered_logger
    record = lg.message(LogLevel.ERROR, "x", 3).append("once")
    record.flush()
    record.flush()
    assert buf.getvalue().count("once") == 1


def test_context_manager_flushes_on_exit(buffered_logger):
    lg, buf = buffered_logger
    with lg.message(LogLevel.WARNING, "x", 4) as record:
        record.append("inside")
        assert buf.getvalue() == ""
    assert "[WARNING]" in buf.getvalue()
    assert buf.getvalue().rstrip("\n").endswith("inside")


def test_text_matches_written_line(buffered_logger):
    lg, buf = buffered_logger
    record = LogMessage(LogLevel.FATAL, "a.py", 7, lg).append("boom")
    text = record.text
    record.flush()
    assert buf.getvalue() == text + "\n"


def test_no_strategy_writes_nothing(buffered_logger):
    lg, buf = buffered_logger
    lg.strategy = None
    lg.log(LogLevel.INFO, "dropped")
    assert buf.getvalue() == ""


def test_message_defaults_to_caller_location(buffered_logger):
    lg, buf = buffered_logger
    lg.message(LogLevel.DEBUG).append("here").flush()
    match = PREFIX.match(buf.getvalue().rstrip("\n"))
    assert match is not None
    assert match.group(4) == "test_logger.py"
    assert int(match.group(5)) > 0


def test_logger_log_uses_caller_file(buffered_logger):
    lg, buf = buffered_logger
    lg.log(LogLevel.ERROR, "a", 1, "b")
    match = PREFIX.match(buf.getvalue().rstrip("\n"))
    assert match.group(2) == "ERROR"
    assert match.group(4) == "test_logger.py"
    assert match.group(6) == "a1b"


def test_module_log_uses_shared_logger():
    buf = io.StringIO()
    logmod.logger.use_console_strategy(buf)
    try:
        log(LogLevel.WARNING, "shared")
    finally:
        logmod.logger.use_console_strategy()
    match = PREFIX.match(buf.getvalue().rstrip("\n"))
    assert match.group(2) == "WARNING"
    assert match.group(4) == "test_logger.py"
    assert match.group(6) == "shared"


def test_console_strategy_default_stdout(capsys):
    ConsoleLogStrategy().sync_log("to stdout")
    assert capsys.readouterr().out == "to stdout\n"


def test_console_strategy_lines_stay_whole_across_threads():
    buf = io.StringIO()
    strategy = ConsoleLogStrategy(buf)

    def worker(n):
        for i in range(50):
            strategy.sync_log(f"worker-{n}-{i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    lines = buf.getvalue().splitlines()
    assert len(lines) == 400
    assert all(re.fullmatch(r"worker-\d+-\d+", line) for line in lines)
    assert len(set(lines)) == 400


def test_file_strategy_creates_directory_and_appends(tmp_path):
    directory = tmp_path / "a" / "b"
    strategy = FileLogStrategy(directory, "out.log")
    assert directory.is_dir()
    strategy.sync_log("first")
    strategy.sync_log("second")
    assert (directory / "out.log").read_text(encoding="utf-8") == "first\nsecond\n"


def test_file_strategy_reports_bad_directory(tmp_path, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    strategy = FileLogStrategy(blocker / "sub", "log.log")
    assert capsys.readouterr().err.strip()
    strategy.sync_log("lost")
    assert not (blocker / "sub" / "log.log").exists()


def test_logger_file_strategy(tmp_path):
    lg = Logger()
    lg.use_file_strategy(tmp_path, "app.log")
    lg.log(LogLevel.INFO, "to file")
    lg.log(LogLevel.DEBUG, "again")
    lines = (tmp_path / "app.log").read_text(encoding="utf-8").splitlines()
    assert [PREFIX.match(line).group(6) for line in lines] == ["to file", "again"]
    assert [PREFIX.match(line).group(2) for line in lines] == ["INFO", "DEBUG"]


def test_main_logs_to_console_then_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    try:
        assert main([]) == 0
    finally:
        logmod.logger.use_console_strategy()
    out_lines = capsys.readouterr().out.splitlines()
    assert [PREFIX.match(line).group(2) for line in out_lines] == [
        level.name for level in LogLevel
    ]
    assert all(
        PREFIX.match(line).group(6) == "CONSOLE hello world hello bit, 3.14 C"
        for line in out_lines
    )
    file_lines = (tmp_path / "log" / "log.log").read_text(encoding="utf-8").splitlines()
    assert len(file_lines) == 5
    assert all(
        PREFIX.match(line).group(6) == "FILE hello world hello bit, 3.14 C"
        for line in file_lines
    )