"""
Tests pour LiveValue.
"""

import asyncio
import threading

import pytest

from src.utils.observable import LiveValue


class TestLiveValue:

    def test_initial_value(self):
        value = LiveValue(3)
        assert value.value == 3
        assert value.version == 0

    def test_set_value_notifies_observers(self):
        value = LiveValue[str](None)
        received = []
        value.observe(received.append)

        value.set_value("a")
        value.set_value("b")

        assert received == ["a", "b"]
        assert value.value == "b"
        assert value.version == 2

    def test_emit_current(self):
        value = LiveValue([1, 2])
        received = []

        value.observe(received.append, emit_current=True)

        assert received == [[1, 2]]

    def test_unsubscribe(self):
        value = LiveValue(0)
        received = []
        unsubscribe = value.observe(received.append)

        unsubscribe()
        value.set_value(1)

        assert received == []
        assert value.observer_count == 0

    def test_remove_unknown_observer_is_noop(self):
        LiveValue(0).remove_observer(print)

    @pytest.mark.asyncio
    async def test_post_value_delivers_on_loop_thread(self):
        loop = asyncio.get_running_loop()
        value = LiveValue(0)
        delivered = asyncio.Event()
        threads = []

        def observer(_):
            threads.append(threading.current_thread())
            delivered.set()

        value.observe(observer)
        worker = threading.Thread(target=value.post_value, args=(42, loop))
        worker.start()
        worker.join()
        await asyncio.wait_for(delivered.wait(), timeout=1)

        assert value.value == 42
        assert threads == [threading.current_thread()]
