import math
from typing import Sequence, TypeVar, Union

import numpy as np
import torch

from topn.top_n import TopN

T = TypeVar('T')

Scores = Union[torch.Tensor, np.ndarray, Sequence[float]]
ScoredItem = tuple[float, T]


def scored_top_n(capacity: int) -> TopN[ScoredItem]:
    """
    A selector over (score, payload) pairs that keeps the `capacity` highest
    scores. Payloads are never compared, so they may be unorderable (dicts, tensors).
    """
    return TopN[ScoredItem](capacity=capacity, key=_score_of)


def push_batch(top_n: TopN[ScoredItem], scores: Scores, payloads: Sequence[T]) -> list[ScoredItem]:
    """
    Push one (score, payload) pair per element of `scores`.
    Scores may be a tensor (any device, any shape), an array or a plain sequence;
    they are flattened in row-major order. Returns the evicted pairs.
    """
    flat_scores: list[float] = to_float_list(scores)

    if len(flat_scores) != len(payloads):
        raise ValueError(
            f"Got {len(flat_scores)} scores for {len(payloads)} payloads."
        )

    for score in flat_scores:
        if math.isnan(score):
            raise ValueError("NaN scores cannot be ranked.")

    return top_n.push_many(zip(flat_scores, payloads))


def to_float_list(scores: Scores) -> list[float]:
    if isinstance(scores, torch.Tensor):
        return [float(x) for x in scores.detach().cpu().reshape(-1).tolist()]

    if isinstance(scores, np.ndarray):
        return [float(x) for x in scores.reshape(-1).tolist()]

    return [float(x) for x in scores]


def _score_of(entry: ScoredItem) -> float:
    return entry[0]
