import threading

from bucketkit.atomic import AtomicBool


def test_default_is_false():
    assert AtomicBool().get() is False


def test_set_and_get():
    flag = AtomicBool()
    flag.set(True)
    assert flag.get() is True
    flag.set(False)
    assert flag.get() is False


def test_race():
    flag = AtomicBool()
    repeat = 10000
    seen = []

    def writer():
        for _ in range(repeat):
            flag.set(True)

    def reader():
        for _ in range(repeat):
            seen.append(flag.get())

    threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert flag.get() is True
    assert len(seen) == repeat
    assert all(isinstance(value, bool) for value in seen)