from .shared import printf
from .table import Binding, Table, TableStats


def dump_table(table: Table, name: str):
    printf("== {0:s} ({1:d} bindings, {2:d} buckets) ==\n", name, len(table), table.bucket_count)

    for index, head in enumerate(table.buckets):
        if head is not None:
            dump_bucket(index, head)


def dump_bucket(index: int, head: Binding):
    printf("{0:05d} ", index)
    binding: Binding | None = head
    while binding is not None:
        printf("-> {0!r}", binding.key)
        binding = binding.next
        if binding is not None:
            printf(" ")
    printf("\n")


def print_stats(stats: TableStats):
    printf("++> Max #bindings in a bucket: {0:d}\n", stats.max_chain)
    printf("++> Min #bindings in a bucket: {0:d}\n", stats.min_chain)
    printf("++> Weighted average bucket size: {0:f}\n", stats.weighted_avg_chain)
