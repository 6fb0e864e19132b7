from dataclasses import dataclass
from typing import Any, Callable, Optional

from topn.top_n import TopN


@dataclass
class TopNConfig:
    capacity: int
    key: Optional[Callable[[Any], Any]] = None

    def build(self) -> TopN:
        return TopN(capacity=self.capacity, key=self.key)
