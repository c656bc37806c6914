from __future__ import annotations

import io

from expeditions.expedition import Expedition
from expeditions.reporting.text_report import render_text_report
from expeditions.result_types import FeasibilityResult


def _result(status, **kwargs) -> FeasibilityResult:
    return FeasibilityResult(expedition=Expedition(name=status.title()), status=status,
                             **kwargs)


def test_render_text_report_lines(make_staff) -> None:
    team = (make_staff("Bard", name="Lute"),)
    results = [
        _result("possible", team=team, satisfied_events=2, total_events=2),
        _result("partial", team=team, satisfied_events=1, total_events=3,
                truncated=True),
        _result("impossible", missing_staff=[f"{i} Janitor (have 0)" for i in range(1, 5)],
                missing_skills=["Mechanics (level 1)"]),
    ]
    out = io.StringIO()
    render_text_report(results, num_print_examples=2, stream=out)
    text = out.getvalue()

    assert "possible=1 | partial=1 | impossible=1" in text
    assert "✅ Possible" in text and "2/2 events" in text and "Lute (Bard)" in text
    assert "1/3 events" in text and "search truncated" in text
    assert "❌ Impossible" in text
    assert "missing staff: 1 Janitor (have 0), 2 Janitor (have 0), +2 more" in text
    assert "missing skills: Mechanics (level 1)" in text
    assert "1 search(es) hit the candidate/time budget" in text


def test_render_text_report_empty() -> None:
    out = io.StringIO()
    render_text_report([], stream=out)
    assert "No expeditions to report." in out.getvalue()
