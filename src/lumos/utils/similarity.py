"""Vector similarity calculation utilities."""

import math


def cosine_similarity(vec1: list[float], vec2: list[float]) -> float:
    """Calculate cosine similarity between two vectors.

    Args:
        vec1: First vector
        vec2: Second vector

    Returns:
        Similarity score in [0, 1] range (normalized from [-1, 1]);
        0.5 when either vector has zero magnitude

    Raises:
        ValueError: If vectors are empty or have different dimensions
    """
    if len(vec1) != len(vec2):
        raise ValueError(
            f"Vector dimension mismatch: {len(vec1)} != {len(vec2)}"
        )

    if not vec1:
        raise ValueError("Vectors cannot be empty")

    norm1 = math.sqrt(sum(a * a for a in vec1))
    norm2 = math.sqrt(sum(b * b for b in vec2))
    if norm1 == 0 or norm2 == 0:
        return 0.5

    cosine = sum(a * b for a, b in zip(vec1, vec2)) / (norm1 * norm2)

    # Clamp to [-1, 1] to handle floating point errors
    cosine = max(-1.0, min(1.0, cosine))

    return (cosine + 1.0) / 2.0
