# app/services/scoring.py
from __future__ import annotations
from typing import Iterable, List, Union

from ..models import PurchaseRecord, ScoreResult
from ..rules.ruleset import DEFAULT_RULES, Rule
from ..rules.validator import validate
from ..utils.logging import logger

def score_receipt(record: PurchaseRecord, rules: Iterable[Rule] = DEFAULT_RULES) -> ScoreResult:
    """
    Sum the contributions of every rule that fires.
    A receipt with no items scores 0 no matter what the other rules say.
    Validation already rejects empty item lists, so that branch is only
    reached when the engine is called directly.
    """
    if not record.items:
        return ScoreResult(points=0, reasons=[])

    reasons: List[str] = []
    points = 0
    for rule in rules:
        hit, inc, why = rule(record)
        if hit:
            points += inc; reasons.append(why)
    return ScoreResult(points=points, reasons=reasons)

def score(record: PurchaseRecord) -> int:
    return score_receipt(record).points

def process_submission(record: Union[PurchaseRecord, dict]) -> int:
    """Validate then score. Raises ValidationError with the first failing reason."""
    validated = validate(record)
    result = score_receipt(validated)
    logger.debug("receipt from %r scored %s (%s)",
                 validated.retailer, result.points, ", ".join(result.reasons))
    return result.points
