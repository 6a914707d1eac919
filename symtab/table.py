from dataclasses import dataclass
from typing import Any, Callable, Iterator

from .hashing import hash_key, hash_string
from .shared import printf_err


BUCKET_COUNTS = (519, 1021, 2053, 4093, 8191, 16381, 32771, 65521)
MIN_BUCKETS = BUCKET_COUNTS[0]
MAX_BUCKETS = BUCKET_COUNTS[-1]


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


@dataclass
class Binding:
    key: str
    hash: int
    value: Any
    next: "Binding | None"


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class TableStats:
    max_chain: int
    min_chain: int
    weighted_avg_chain: float


Visitor = Callable[[str, Any, Any], None]


@dataclass
class Table:
    """String-keyed hash table with separate chaining.

    The bucket count only ever takes values from BUCKET_COUNTS. New bindings
    are prepended to their chain, and a resize relinks each chain in reverse.
    Values are stored by reference and never inspected.
    """

    bucket_count: int
    binding_count: int
    buckets: list[Binding | None]

    def __init__(self) -> None:
        self.bucket_count = 0
        self.binding_count = 0
        self.buckets = []
        self.free()

    def __len__(self) -> int:
        return self.binding_count

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def contains(self, key: str) -> bool:
        return self.find_binding(key) is not None

    def get(self, key: str) -> Any | NotFound:
        binding = self.find_binding(key)
        if binding is None:
            return NotFound()
        return binding.value

    def put(self, key: str, value: Any) -> bool:
        if self.contains(key):
            return False

        target = self._grow_target()
        if target != self.bucket_count:
            self._adjust_capacity(target)

        hash = hash_string(key)
        index = self._index(key)
        self.buckets[index] = Binding(key, hash, value, self.buckets[index])
        self.binding_count += 1
        return True

    def replace(self, key: str, value: Any) -> Any | NotFound:
        binding = self.find_binding(key)
        if binding is None:
            return NotFound()

        old_value = binding.value
        binding.value = value
        return old_value

    def remove(self, key: str) -> bool:
        index = self._index(key)

        prev: Binding | None = None
        binding = self.buckets[index]
        while binding is not None:
            if binding.key != key:
                prev = binding
                binding = binding.next
                continue

            if prev is None:
                self.buckets[index] = binding.next
            else:
                prev.next = binding.next
            binding.next = None
            self.binding_count -= 1
            return True

        return False

    def add_all(self, from_t: "Table"):
        for key, value in from_t.items():
            self.put(key, value)

    def map(self, visitor: Visitor, extra: Any = None):
        if not callable(visitor):
            raise TypeError("visitor must be callable")

        for binding in self._bindings():
            visitor(binding.key, binding.value, extra)

    def items(self) -> Iterator[tuple[str, Any]]:
        for binding in self._bindings():
            yield binding.key, binding.value

    def stats(self) -> TableStats:
        max_chain = 0
        min_chain = self.binding_count
        non_empty = 0

        for head in self.buckets:
            if head is not None:
                non_empty += 1
            length = 0
            binding = head
            while binding is not None:
                length += 1
                binding = binding.next
            max_chain = max(max_chain, length)
            min_chain = min(min_chain, length)

        if non_empty == 0:
            return TableStats(max_chain, min_chain, 0.0)
        return TableStats(max_chain, min_chain, self.binding_count / non_empty)

    def find_binding(self, key: str) -> Binding | None:
        binding = self.buckets[self._index(key)]
        while binding is not None:
            if binding.key == key:
                return binding
            binding = binding.next
        return None

    def _index(self, key: str) -> int:
        return hash_key(self.bucket_count, key)

    def _bindings(self) -> Iterator[Binding]:
        for head in self.buckets:
            binding = head
            while binding is not None:
                yield binding
                binding = binding.next

    def _grow_target(self) -> int:
        idx = BUCKET_COUNTS.index(self.bucket_count)
        target = self.bucket_count
        while self.binding_count >= target and target != MAX_BUCKETS:
            idx += 1
            target = BUCKET_COUNTS[idx]
        return target

    def _adjust_capacity(self, capacity: int):
        assert capacity in BUCKET_COUNTS
        new_buckets: list[Binding | None] = [None] * capacity

        for head in self.buckets:
            binding = head
            while binding is not None:
                next_binding = binding.next
                index = binding.hash % capacity
                binding.next = new_buckets[index]
                new_buckets[index] = binding
                binding = next_binding

        if _debug_trace_resize:
            printf_err(
                "resize {0:d} -> {1:d} buckets ({2:d} bindings)\n",
                self.bucket_count,
                capacity,
                self.binding_count,
            )

        self.buckets = new_buckets
        self.bucket_count = capacity

    def free(self):
        for head in self.buckets:
            binding = head
            while binding is not None:
                next_binding = binding.next
                binding.next = None
                binding = next_binding

        self.binding_count = 0
        self.bucket_count = MIN_BUCKETS
        self.buckets = [None] * MIN_BUCKETS


def free_table(table: Table | None):
    if table is None:
        return
    table.free()
