import sys
from typing import Any


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def check_key(key: Any):
    if key is None:
        raise TypeError("key must not be None")
    if not isinstance(key, str):
        raise TypeError(f"key must be str, not {type(key).__name__}")
