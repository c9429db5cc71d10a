"\"\"\"Human-readable rendering of validation results and scorecards.\"\"\""

from __future__ import annotations

from typing import Literal

from .core import ValidationResult
from .schemas import Scorecard, ScoreBreakdown

VerdictType = Literal["ready_to_ship", "strong_potential", "keep_building"]

READY_THRESHOLD = 80
STRONG_THRESHOLD = 60

_VERDICT_HEADLINES: dict[VerdictType, str] = {
    "ready_to_ship": "**READY TO SHIP!** 🎉 This developer shows excellent potential for the Ship-Every-Friday squad.",
    "strong_potential": "**STRONG POTENTIAL!** This developer has good foundations and could be a great addition to the team.",
    "keep_building": "**KEEP BUILDING!** We encourage this developer to strengthen their GenAI tool usage and open source contributions.",
}

_NEXT_STEPS: dict[VerdictType, tuple[str, ...]] = {
    "ready_to_ship": (
        "The team will review your application promptly",
        "Expect to hear back within 2-3 business days",
        "Start thinking about what you'd ship on your first Friday!",
    ),
    "strong_potential": (
        "Your application will be reviewed by the team",
        "We may reach out for additional information",
        "Consider adding more GenAI tool usage to your projects",
    ),
    "keep_building": (
        "Add .cursorrules or similar AI tool configs to your projects",
        "Contribute to more open source projects",
        "Build projects that demonstrate production readiness",
    ),
}

# (label, field, max) in display order.
_CATEGORIES: tuple[tuple[str, str, int], ...] = (
    ("🤖 GenAI Tool Mastery", "genai_score", 50),
    ("🌟 Open Source Contributions", "oss_score", 30),
    ("🛠️ Project Quality", "projects_score", 10),
    ("📈 GitHub Activity", "activity_score", 5),
    ("🚢 Production Readiness", "prod_score", 5),
)


def verdict_for(total_score: int) -> VerdictType:
    if total_score >= READY_THRESHOLD:
        return "ready_to_ship"
    if total_score >= STRONG_THRESHOLD:
        return "strong_potential"
    return "keep_building"


def is_high_score(total_score: int) -> bool:
    return total_score >= READY_THRESHOLD


def labels_for(breakdown: ScoreBreakdown) -> list[str]:
    """Pull request labels suggested by a score breakdown."""
    labels: list[str] = []
    verdict = verdict_for(breakdown.total_score)
    if verdict == "ready_to_ship":
        labels.extend(["ready-to-ship", "priority-review"])
    elif verdict == "strong_potential":
        labels.append("high-potential")

    if breakdown.genai_score >= 35:
        labels.append("ai-power-user")
    if breakdown.oss_score >= 20:
        labels.append("oss-contributor")
    if breakdown.prod_score >= 4:
        labels.append("prod-ready")
    return labels


def render_validation_report(result: ValidationResult) -> str:
    lines: list[str] = []
    if result.passed:
        lines.append("✅ Validation Passed!")
    else:
        lines.append("❌ Validation Failed!")
        lines.append("")
        lines.append("Errors:")
        lines.extend(f"  - {error}" for error in result.errors)
    if result.warnings:
        lines.append("")
        lines.append("Warnings:")
        marker = "⚠️ " if result.passed else "-"
        lines.extend(f"  {marker} {warning}" for warning in result.warnings)
    return "\n".join(lines)


def render_breakdown(breakdown: ScoreBreakdown) -> str:
    lines = [f"Total score: {breakdown.total_score}/100"]
    for label, field_name, maximum in _CATEGORIES:
        lines.append(f"- {label}: {getattr(breakdown, field_name)}/{maximum}")
    return "\n".join(lines)


def render_scorecard_markdown(scorecard: Scorecard) -> str:
    """Render the detailed markdown scorecard for one applicant."""
    scores = scorecard.scores
    verdict = verdict_for(scores.total_score)
    lines = [
        f"# 🚀 Shipping Potential Analysis: @{scores.username}",
        "",
        f"**Generated**: {scores.timestamp}",
        "",
        f"## Overall Score: {scores.total_score}/100",
        "",
        "### 📊 Detailed Breakdown",
        "",
        "| Category | Score | Weight |",
        "|----------|-------|--------|",
    ]
    for label, field_name, maximum in _CATEGORIES:
        lines.append(f"| {label} | {getattr(scores, field_name)}/{maximum} | {maximum}% |")
    lines.extend(
        [
            "",
            "### 🎯 Recommendation",
            "",
            _VERDICT_HEADLINES[verdict],
            "",
            "### 💡 Next Steps",
            "",
        ]
    )
    lines.extend(f"- {step}" for step in _NEXT_STEPS[verdict])
    return "\n".join(lines) + "\n"
