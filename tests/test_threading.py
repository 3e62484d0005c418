import threading
import time
import unittest

from namewire import Container


class TestConcurrentResolution(unittest.TestCase):
    def test_singleton_factory_runs_once_across_threads(self):
        cont = Container()
        calls = []

        def slow():
            calls.append(1)
            time.sleep(0.01)
            return object()

        cont.register_singleton("slow", slow)

        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(cont.get("slow"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(r is results[0] for r in results)
