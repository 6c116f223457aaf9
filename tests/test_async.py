"""Tests for the background write queue"""

import io
import itertools
import threading
import time

import pytest

from timber import LogFormat, LogLevel, Logger, LoggerBuilder
from timber.core.attributes import Message

MESSAGE_ONLY = LogFormat("%s", [Message()])


class RecordingSink:
    """Byte sink recording each write separately."""

    def __init__(self, delay: float = 0.0):
        self.writes = []
        self.threads = set()
        self.delay = delay

    def write(self, data: bytes) -> None:
        self.threads.add(threading.current_thread().name)
        if self.delay:
            time.sleep(self.delay)
        self.writes.append(data)


@pytest.fixture
def async_logger():
    logger = (LoggerBuilder()
        .with_name("async-test")
        .with_format(MESSAGE_ONLY)
        .with_sink(RecordingSink())
        .build())
    yield logger
    logger.shutdown()


class TestAsyncLogger:
    """Test ordering and lifecycle of the worker thread."""

    def test_writes_happen_on_worker(self, async_logger):
        async_logger.info("hello")
        async_logger.flush()

        assert async_logger.sink.writes == [b"hello\n"]
        assert async_logger.sink.threads == {"async-test-worker"}

    def test_fifo_single_caller(self, async_logger):
        for i in range(200):
            async_logger.info(i)
        async_logger.flush()

        assert async_logger.sink.writes == [f"{i}\n".encode() for i in range(200)]

    def test_fifo_concurrent_callers(self, async_logger):
        counter = itertools.count()
        order_lock = threading.Lock()

        def worker():
            for _ in range(100):
                with order_lock:
                    async_logger.info(next(counter))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        async_logger.flush()

        assert async_logger.sink.writes == [f"{i}\n".encode() for i in range(800)]

    def test_lines_never_interleave(self):
        sink = io.BytesIO()
        logger = LoggerBuilder().with_format(MESSAGE_ONLY).with_sink(sink).build()

        def worker(tag):
            for _ in range(50):
                logger.info(tag * 40)

        threads = [threading.Thread(target=worker, args=(tag,)) for tag in "abcd"]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        logger.flush()
        logger.shutdown()

        lines = sink.getvalue().decode().splitlines()
        assert len(lines) == 200
        assert all(len(set(line)) == 1 and len(line) == 40 for line in lines)

    def test_log_does_not_wait_for_write(self):
        release = threading.Event()

        class BlockingSink:
            def __init__(self):
                self.writes = []

            def write(self, data):
                release.wait(timeout=5)
                self.writes.append(data)

        sink = BlockingSink()
        logger = LoggerBuilder().with_format(MESSAGE_ONLY).with_sink(sink).build()

        logger.info("queued")
        assert sink.writes == []

        release.set()
        logger.flush()
        assert sink.writes == [b"queued\n"]
        logger.shutdown()

    def test_suppressed_calls_never_reach_queue(self):
        logger = Logger(min_level=LogLevel.ERROR)
        logger.sink = RecordingSink()
        logger.info("dropped")
        logger.enabled = False
        logger.fatal("dropped too")

        assert logger._worker_thread is None
        assert logger.get_metrics()["logged"] == 0

    def test_worker_survives_sink_failure(self):
        class FlakySink(RecordingSink):
            def write(self, data):
                if not self.writes and data == b"first\n":
                    self.writes.append(b"<failed>")
                    raise OSError("broken pipe")
                super().write(data)

        errors = []
        logger = LoggerBuilder().with_format(MESSAGE_ONLY).with_sink(FlakySink()).build()
        logger.error_handler = lambda exc, entry: errors.append(entry.message)

        logger.info("first")
        logger.info("second")
        logger.flush()

        assert logger.sink.writes == [b"<failed>", b"second\n"]
        assert errors == ["first"]
        assert logger.get_metrics() == {"logged": 2, "processed": 1, "failed": 1}
        logger.shutdown()

    def test_worker_survives_raising_error_handler(self, capsys):
        class BrokenSink:
            def write(self, data):
                raise OSError("broken")

        def handler(exc, entry):
            raise RuntimeError("handler failed")

        logger = LoggerBuilder().with_sink(BrokenSink()).with_error_handler(handler).build()
        logger.info("one")
        logger.info("two")
        logger.flush()

        assert logger.get_metrics()["failed"] == 2
        assert "handler failed" in capsys.readouterr().err
        logger.shutdown()

    def test_shutdown_drains_queue(self):
        sink = RecordingSink(delay=0.001)
        logger = LoggerBuilder().with_format(MESSAGE_ONLY).with_sink(sink).build()
        for i in range(20):
            logger.info(i)
        logger.shutdown()

        assert len(sink.writes) == 20

    def test_logging_after_shutdown_restarts_worker(self, async_logger):
        async_logger.info("before")
        async_logger.shutdown()
        async_logger.info("after")
        async_logger.flush()

        assert async_logger.sink.writes == [b"before\n", b"after\n"]

    def test_restart_during_shutdown_keeps_order(self):
        class CountingSink(RecordingSink):
            def __init__(self, delay):
                super().__init__(delay)
                self.active = 0
                self.max_active = 0
                self.active_lock = threading.Lock()

            def write(self, data):
                with self.active_lock:
                    self.active += 1
                    self.max_active = max(self.max_active, self.active)
                try:
                    super().write(data)
                finally:
                    with self.active_lock:
                        self.active -= 1

        sink = CountingSink(delay=0.02)
        logger = LoggerBuilder().with_format(MESSAGE_ONLY).with_sink(sink).build()
        for i in range(10):
            logger.info(i)

        stopper = threading.Thread(target=logger.shutdown)
        stopper.start()
        deadline = time.monotonic() + 5
        while logger._worker_thread is not None and time.monotonic() < deadline:
            time.sleep(0.001)

        logger.info("after")
        logger.flush()
        stopper.join()

        assert sink.writes == [f"{i}\n".encode() for i in range(10)] + [b"after\n"]
        assert sink.max_active == 1
        logger.shutdown()

    def test_shutdown_without_worker(self):
        logger = Logger()
        logger.shutdown()
        logger.flush()

    def test_current_thread_bypasses_worker(self):
        sink = RecordingSink()
        logger = LoggerBuilder().with_format(MESSAGE_ONLY).with_sink(sink).with_current_thread().build()
        logger.info("now")

        assert sink.writes == [b"now\n"]
        assert sink.threads == {threading.current_thread().name}
        assert logger._worker_thread is None
