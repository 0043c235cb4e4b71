from __future__ import annotations

from .colors import round_half_up
from .models import ColorBucket, ScoredColor

WHITE_PENALTY = 0.01
BLACK_PENALTY = 0.1
GRAY_PENALTY = 0.2
SATURATION_FLOOR = 0.1


def score_buckets(buckets: list[ColorBucket]) -> list[ScoredColor]:
    """Rank buckets by frequency weighted by saturation, best first.

    Near-white, near-black and gray buckets are penalized rather than
    dropped. The sort is stable, so equal scores keep bucket order.
    """
    scored = [_score_bucket(bucket) for bucket in buckets if bucket.count > 0]
    return sorted(scored, key=lambda color: color.score, reverse=True)


def _score_bucket(bucket: ColorBucket) -> ScoredColor:
    avg_r = round_half_up(bucket.sum_r / bucket.count)
    avg_g = round_half_up(bucket.sum_g / bucket.count)
    avg_b = round_half_up(bucket.sum_b / bucket.count)

    max_ch = max(avg_r, avg_g, avg_b)
    min_ch = min(avg_r, avg_g, avg_b)

    saturation = 0.0 if max_ch == 0 else (max_ch - min_ch) / max_ch
    score = bucket.count * (saturation + SATURATION_FLOOR) * neutral_penalty(max_ch, min_ch)

    return ScoredColor(
        avg_r=avg_r, avg_g=avg_g, avg_b=avg_b, count=bucket.count, score=score
    )


def neutral_penalty(max_ch: int, min_ch: int) -> float:
    if max_ch > 230 and min_ch > 230:
        return WHITE_PENALTY
    if max_ch < 30 and min_ch < 30:
        return BLACK_PENALTY
    if max_ch - min_ch < 20:
        return GRAY_PENALTY
    return 1.0
