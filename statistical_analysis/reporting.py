from typing import Mapping

import pandas as pd

from statistical_analysis.results import StudyResult


def format_p_value(p_value: float) -> str:
    """Human-readable p-value, e.g. 'p = 0.042' or 'p < 0.001'"""
    if p_value < 0.001:
        return "p < 0.001"
    return f"p = {p_value:.3f}"


def significance_label(significant: bool) -> str:
    return "Significant" if significant else "Not Significant"


def summarize_result(result: StudyResult) -> str:
    """Plain-text verdict for a single study: statistic, p-value, decision and warnings"""
    lines = []

    if result.z is not None:
        lines.append(f"z = {result.z:.3f}, effect = {result.effect:.4f}")
    elif result.t is not None:
        lines.append(
            f"t({result.degrees_of_freedom}) = {result.t:.3f}, "
            f"mean difference = {result.mean_difference:.4f}"
        )
    elif result.f is not None:
        lines.append(f"F = {result.f:.3f}, grand mean = {result.grand_mean:.4f}")

    lines.append(
        f"{format_p_value(result.p_value)} ({result.alternative.value}, alpha = {result.alpha}): "
        f"{significance_label(result.significant)}"
    )

    if result.confidence_interval is not None:
        lower, upper = result.confidence_interval
        confidence = 1 - result.alpha
        lines.append(f"{confidence:.0%} CI: [{lower:.4f}, {upper:.4f}]")

    lines.extend(f"- {assumption}" for assumption in result.assumptions)
    return "\n".join(lines)


def results_to_frame(results: Mapping[str, StudyResult]) -> pd.DataFrame:
    """One row per named study, columns for every field any of the results populated"""
    rows = []
    for name, result in results.items():
        row = result.to_dict()
        row["assumptions"] = "; ".join(result.assumptions)
        row["study"] = name
        rows.append(row)

    frame = pd.DataFrame(rows)
    if frame.empty:
        return frame
    return frame.set_index("study")
