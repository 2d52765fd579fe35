"""
Distance math for semantic splitting.

Adjacent sentence windows are compared with cosine distance
(1 - cosine similarity). A percentile of the distance distribution
becomes the threshold that decides where chunks are cut.
"""

from typing import List, Sequence

import numpy as np


def dot(x: Sequence[float], y: Sequence[float]) -> float:
    """Dot product of two equal-length vectors."""
    vec1 = np.asarray(x, dtype=np.float64)
    vec2 = np.asarray(y, dtype=np.float64)
    return float(np.dot(vec1, vec2))


def cosine_similarity(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Cosine similarity of two vectors.

    A zero-norm vector has no direction, so its similarity to anything
    is 0.0 (cosine distance 1.0) instead of NaN.
    """
    vec1 = np.asarray(x, dtype=np.float64)
    vec2 = np.asarray(y, dtype=np.float64)

    norm1 = np.linalg.norm(vec1)
    norm2 = np.linalg.norm(vec2)
    if norm1 == 0 or norm2 == 0:
        return 0.0

    return float(np.dot(vec1, vec2) / (norm1 * norm2))


def cosine_distances(vectors: Sequence[Sequence[float]]) -> List[float]:
    """
    Cosine distance between each vector and its predecessor.

    Args:
        vectors: Embeddings in sentence order

    Returns:
        List of the same length; index 0 is always 0.0
    """
    distances = [0.0] * len(vectors)
    for i in range(1, len(vectors)):
        distances[i] = 1 - cosine_similarity(vectors[i - 1], vectors[i])
    return distances


def calculate_threshold(distances: Sequence[float], percentile: float) -> float:
    """
    Pick the distance at the given percentile of the sorted distribution.

    The index is counted from the low end as int((1 - percentile) * N).
    Index 0 is bumped to 1 so the leading zero distance is never chosen.

    Args:
        distances: Distance sequence (first entry is 0.0)
        percentile: Value in (0, 1]

    Returns:
        Threshold distance
    """
    if len(distances) == 0:
        raise ValueError("Cannot compute threshold of empty distances")

    ordered = sorted(distances)
    idx = int((1 - percentile) * len(ordered))
    if idx == 0:
        idx = 1
    idx = min(idx, len(ordered) - 1)
    return ordered[idx]


def find_cut_points(distances: Sequence[float], threshold: float) -> List[int]:
    """Indices (>= 1, ascending) whose distance is at or below the threshold."""
    return [i for i in range(1, len(distances)) if distances[i] <= threshold]
