"""Eco-score (0-100) and letter ranking from a carbon estimate and hosting verdict.

Penalty per view, by grams of CO2:

    co2 <= 0.5       co2 * 20
    0.5 < co2 <= 1   10 + (co2 - 0.5) * 40
    1 < co2 <= 2     30 + (co2 - 1) * 15
    co2 > 2          45 + min((co2 - 2) * 5, 5)

Green hosting adds 10 points, and the "cleaner than" percentage adds up to 5.
"""

import math

from models import CarbonEstimate, HostingDescriptor, ScoreResult

MAX_SCORE = 100
GREEN_HOSTING_BONUS = 10
CLEANER_THAN_MAX_BONUS = 5

RANKING_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (90, "A"),
    (75, "B"),
    (60, "C"),
    (45, "D"),
    (30, "E"),
)
LOWEST_RANKING = "F"


def co2_penalty(co2: float) -> float:
    if co2 <= 0.5:
        return co2 * 20
    if co2 <= 1:
        return 10 + (co2 - 0.5) * 40
    if co2 <= 2:
        return 30 + (co2 - 1) * 15
    return 45 + min((co2 - 2) * 5, 5)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def ranking_for(score: int) -> str:
    for threshold, ranking in RANKING_THRESHOLDS:
        if score >= threshold:
            return ranking
    return LOWEST_RANKING


def calculate_score(carbon: CarbonEstimate, hosting: HostingDescriptor) -> ScoreResult:
    score = MAX_SCORE - co2_penalty(carbon.grams_co2_per_view)
    if hosting.is_green:
        score += GREEN_HOSTING_BONUS
    score += carbon.cleaner_than_percent / 100 * CLEANER_THAN_MAX_BONUS

    eco_score = max(0, min(MAX_SCORE, _round_half_up(score)))
    return ScoreResult(eco_score=eco_score, ranking=ranking_for(eco_score))
