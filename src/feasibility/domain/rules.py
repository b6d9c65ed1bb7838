from dataclasses import dataclass, field
from typing import List

from feasibility.domain.evaluation import FinishQuality

STRONG_ROI_PCT = 15.0
VERY_STRONG_ROI_PCT = 20.0
THIN_ROI_PCT = 10.0
LONG_HOLD_MONTHS = 12


@dataclass
class Advice:
    recommendations: List[str] = field(default_factory=list)
    risks: List[str] = field(default_factory=list)


def apply_rules(
    *,
    roi: float,
    estimated_profit: float,
    holding_months: float,
    finish_quality: FinishQuality,
    is_flip: bool,
) -> Advice:
    # Every check is independent; order of evaluation is the order shown to users.
    advice = Advice()
    recs = advice.recommendations
    risks = advice.risks

    # 1. Return thresholds
    if roi >= STRONG_ROI_PCT:
        recs.append("ROI looks strong for a typical investor target range.")
    if roi >= VERY_STRONG_ROI_PCT:
        recs.append("Consider running a premium-finish scenario to see if ARV increase beats added cost.")
    if roi < THIN_ROI_PCT:
        recs.append(
            "Margin is tight—reduce rehab scope, negotiate purchase price, "
            "or validate comps before proceeding."
        )

    # 2. Scenario-specific diligence
    if is_flip:
        recs.append("For flips: verify repair scope, permits, and timeline assumptions before committing.")
    else:
        recs.append(
            "For new builds: confirm zoning/setbacks and utility connections early—"
            "these swing feasibility."
        )

    # 3. Risks
    if holding_months > LONG_HOLD_MONTHS:
        risks.append("Long holding period increases interest exposure and market risk.")
    if finish_quality == "luxury":
        risks.append("Luxury finishes increase cost volatility and buyer pool sensitivity.")
    if estimated_profit < 0:
        risks.append(
            "Projected profit is negative under current assumptions—"
            "treat as a no-go until inputs are validated."
        )

    return advice
