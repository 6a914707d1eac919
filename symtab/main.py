from dataclasses import dataclass
import random
import sys

from .debug import print_stats
from .shared import printf, printf_err
from .table import NotFound, Table


@dataclass(frozen=True)
class DemoConfig:
    num_keys: int = 1000
    max_key_len: int = 8
    alphabet: str = "abcdefghijklmnopqrstuvwxyz"
    rounds: int = 3


@dataclass(frozen=True)
class UsageError:
    message: str


def parse_args(argv: list[str]) -> DemoConfig | UsageError:
    if len(argv) > 4:
        return UsageError("too many arguments")

    defaults = DemoConfig()
    try:
        num_keys = int(argv[0]) if len(argv) > 0 else defaults.num_keys
        max_key_len = int(argv[1]) if len(argv) > 1 else defaults.max_key_len
        rounds = int(argv[3]) if len(argv) > 3 else defaults.rounds
    except ValueError as e:
        return UsageError(str(e))
    alphabet = argv[2] if len(argv) > 2 else defaults.alphabet

    if num_keys < 1 or max_key_len < 1 or rounds < 1:
        return UsageError("numeric arguments must be positive")
    if not alphabet:
        return UsageError("alphabet must not be empty")

    return DemoConfig(num_keys, max_key_len, alphabet, rounds)


def generate_keys(config: DemoConfig, rng: random.Random) -> list[str]:
    keys = []
    for _ in range(config.num_keys):
        length = rng.randint(1, config.max_key_len)
        keys.append("".join(rng.choice(config.alphabet) for _ in range(length)))
    return keys


def run_round(table: Table, keys: list[str]) -> bool:
    expected: dict[str, int] = {}
    for i, key in enumerate(keys):
        if table.put(key, i):
            expected[key] = i

    if len(table) != len(expected):
        printf_err("length {0:d} != {1:d} distinct keys\n", len(table), len(expected))
        return False

    for key, value in expected.items():
        if not table.contains(key) or table.get(key) != value:
            printf_err("lost binding for {0!r}\n", key)
            return False

    print_stats(table.stats())

    for key in expected:
        if not table.remove(key):
            printf_err("failed to remove {0!r}\n", key)
            return False

    if len(table) != 0 or table.get(keys[0]) != NotFound():
        printf_err("table not empty after removing every key\n")
        return False
    return True


def main():
    config = parse_args(sys.argv[1:])
    if isinstance(config, UsageError):
        printf_err("{0:s}\n", config.message)
        printf("Usage: symtab-demo [num_keys [max_key_len [alphabet [rounds]]]]\n")
        sys.exit(64)

    rng = random.Random()
    table = Table()
    for round_no in range(1, config.rounds + 1):
        printf("== round {0:d} ==\n", round_no)
        if not run_round(table, generate_keys(config, rng)):
            sys.exit(70)
    table.free()
