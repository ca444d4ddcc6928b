"""Random limiting of the scan results."""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def select_images(
    images: Sequence[T],
    limit: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> list[T]:
    """Pick at most `limit` images uniformly at random.

    With no limit, or a limit at least as large as the collection, every
    image is returned in its original order. Otherwise a shuffled copy is
    truncated to `limit` entries, so each image is equally likely to be
    kept and none appears twice.

    Args:
        images: Scan results; never modified
        limit: Maximum number of images to keep
        rng: Random source. Defaults to a fresh, unseeded generator.

    Returns:
        New list with the selection
    """
    if limit is None:
        return list(images)
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    if limit >= len(images):
        return list(images)

    rng = rng or random.Random()
    shuffled = list(images)
    rng.shuffle(shuffled)
    return shuffled[:limit]
