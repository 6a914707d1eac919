from .shared import check_key


HASH_MULTIPLIER = 65599
HASH_MASK = 0xFFFFFFFF


def hash_string(key: str) -> int:
    """Full 32-bit hash of key, before reduction to a bucket count."""
    check_key(key)
    hash = 0
    for byte in key.encode("utf-8", "surrogatepass"):
        hash = (hash * HASH_MULTIPLIER + byte) & HASH_MASK
    return hash


def hash_key(bucket_count: int, key: str) -> int:
    """Bucket index of key in a table with bucket_count buckets."""
    if bucket_count < 1:
        raise ValueError(f"bucket count must be positive, got {bucket_count}")
    return hash_string(key) % bucket_count
