import threading
from datetime import datetime, timezone

from string_analyzer.analyzer import compute_properties
from string_analyzer.schemas import StringProperties, StringRecord
from string_analyzer.store import StringStore


def make_record(value: str) -> StringRecord:
    props = StringProperties(**compute_properties(value))
    return StringRecord(id=props.sha256_hash, value=value, properties=props, created_at=datetime.now(timezone.utc))


def test_add_get_has_delete():
    store = StringStore()
    record = make_record("hello")
    assert store.add(record) is True
    assert store.has(record.id)
    assert store.get(record.id) == record
    assert store.delete(record.id) is True
    assert store.get(record.id) is None
    assert store.delete(record.id) is False


def test_add_rejects_existing_fingerprint():
    store = StringStore()
    assert store.add(make_record("hello")) is True
    assert store.add(make_record("hello")) is False
    assert len(store) == 1


def test_values_preserve_insertion_order():
    store = StringStore()
    for value in ["b", "a", "c"]:
        store.put(make_record(value))
    assert [r.value for r in store.values()] == ["b", "a", "c"]


def test_stores_are_isolated():
    first, second = StringStore(), StringStore()
    first.add(make_record("only here"))
    assert len(first) == 1
    assert len(second) == 0


def test_concurrent_add_only_one_wins():
    store = StringStore()
    record = make_record("race")
    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(store.add(record))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count(True) == 1
    assert len(store) == 1
