import sys
from typing import Iterable, Optional

from topn.top_n import TopN
from topn.topn_config import TopNConfig
from topn.utils import default


def main(capacity: Optional[int] = None, values: Optional[Iterable[float]] = None) -> list[float]:
    config: TopNConfig = TopNConfig(capacity=default(capacity, 10))
    top_n: TopN[float] = config.build()

    if values is None:
        values = [float(token) for token in sys.stdin.read().split()]
    evicted: list[float] = top_n.push_many(values)

    print(f"Kept {len(top_n)} of {len(top_n) + len(evicted)} values (capacity {top_n.capacity}).")
    kept: list[float] = top_n.drain_sorted()
    print(" ".join(str(value) for value in kept))
    return kept


if __name__ == "__main__":
    main()
