import threading
from concurrent.futures import ThreadPoolExecutor

from fibcache import FibonacciCache, Method, fib, fib_range


def test_concurrent_calls():
    """Each call owns its cache, so concurrent callers never interfere."""
    expected = fib_range(300)

    def worker(i):
        for n in range(i, 300, 8):
            assert fib(n) == expected[n]
            assert fib(n, method=Method.STREAM) == expected[n]

    with ThreadPoolExecutor(max_workers=8) as pool:
        futures = [pool.submit(worker, i) for i in range(8)]
        for f in futures:
            f.result()


def test_per_thread_caches():
    results = {}
    lock = threading.Lock()

    def worker(i):
        fc = FibonacciCache()
        values = fc.compute_range(100 + i)
        with lock:
            results[i] = (values, fc.cache_info())

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    for i, (values, info) in results.items():
        assert len(values) == 101 + i
        assert values[-1] == fib(100 + i)
        assert info.current_size == 101 + i
