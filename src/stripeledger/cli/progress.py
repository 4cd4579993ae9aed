"""Progress display for streamed ledger listings."""

from typing import Iterable, TypeVar

from tqdm import tqdm

T = TypeVar("T")


def transaction_progress(iterable: Iterable[T]) -> Iterable[T]:
    """Wrap a transaction stream in a progress counter on stderr.

    The counter is disabled automatically when stderr is not a terminal.
    """
    return tqdm(iterable, desc="Fetching transactions", unit=" txn", disable=None, leave=False)
