from __future__ import annotations

from fractions import Fraction

import pytest

from src.bunksmart.bunksmart.core.enums import AttendanceKind, MetricsStatus
from src.bunksmart.bunksmart.core.exceptions import InvalidHistoryError, ValidationError
from src.bunksmart.bunksmart.metrics.calculator.standard_calculator import (
    StandardMetricsCalculator,
    calculate_metrics,
    get_global_metrics,
)
from src.bunksmart.bunksmart.subjects.model import AttendanceEvent, Subject


def make_subject(total: int, attended: int, subject_id: str = "s1") -> Subject:
    history = tuple(
        AttendanceEvent(
            event_id=f"{subject_id}-{i}",
            timestamp=1_700_000_000_000 + i,
            kind=AttendanceKind.PRESENT if i < attended else AttendanceKind.ABSENT,
        )
        for i in range(total)
    )
    return Subject(subject_id=subject_id, name=subject_id.upper(), color="#4f46e5", history=history)


def test_empty_history_is_safe_with_zero_guidance():
    m = calculate_metrics(make_subject(0, 0), 75)

    assert m.percentage == 0
    assert m.safe_to_bunk == 0
    assert m.must_attend == 0
    assert m.status == MetricsStatus.SAFE


def test_below_target_needs_four_more_classes():
    m = calculate_metrics(make_subject(20, 14), 75)

    assert m.percentage == pytest.approx(70)
    assert m.status == MetricsStatus.CRITICAL
    assert m.must_attend == 4
    assert m.safe_to_bunk == 0


def test_above_target_can_skip_four_classes():
    m = calculate_metrics(make_subject(20, 18), 75)

    assert m.percentage == pytest.approx(90)
    assert m.status == MetricsStatus.SAFE
    assert m.safe_to_bunk == 4
    assert m.must_attend == 0


@pytest.mark.parametrize(
    "total, attended, expected",
    [
        (4, 3, MetricsStatus.WARNING),  # exactly 75
        (1000, 799, MetricsStatus.WARNING),  # 79.9
        (5, 4, MetricsStatus.SAFE),  # 80
        (1000, 749, MetricsStatus.CRITICAL),  # 74.9
    ],
)
def test_status_bands_at_target_75(total, attended, expected):
    calc = StandardMetricsCalculator()
    assert calc.from_counts(total=total, attended=attended, target=75).status == expected


def test_percentage_equal_to_target_is_warning_for_non_round_ratio():
    # 7/10 vs 70: exact comparison, no float drift
    m = StandardMetricsCalculator().from_counts(total=10, attended=7, target=70)

    assert m.status == MetricsStatus.WARNING
    assert m.safe_to_bunk == 0
    assert m.must_attend == 0


def test_safe_to_bunk_is_tight():
    calc = StandardMetricsCalculator()
    for target in (50, 60, 65, 70, 72.5, 75, 80, 85, 90, 95):
        goal = Fraction(target)
        for total in range(1, 31):
            for attended in range(total + 1):
                if Fraction(attended * 100, total) < goal:
                    continue
                x = calc.from_counts(total=total, attended=attended, target=target).safe_to_bunk
                assert Fraction(attended * 100, total + x) >= goal
                assert Fraction(attended * 100, total + x + 1) < goal


def test_must_attend_is_tight():
    calc = StandardMetricsCalculator()
    for target in (50, 60, 65, 70, 72.5, 75, 80, 85, 90, 95):
        goal = Fraction(target)
        for total in range(1, 31):
            for attended in range(total + 1):
                if Fraction(attended * 100, total) >= goal:
                    continue
                x = calc.from_counts(total=total, attended=attended, target=target).must_attend
                assert x > 0
                assert Fraction((attended + x) * 100, total + x) >= goal
                assert Fraction((attended + x - 1) * 100, total + x - 1) < goal


def test_target_100_below_is_not_achievable():
    m = StandardMetricsCalculator().from_counts(total=10, attended=9, target=100)

    assert m.must_attend is None
    assert m.status == MetricsStatus.CRITICAL


def test_target_100_with_perfect_attendance_cannot_skip():
    m = StandardMetricsCalculator().from_counts(total=10, attended=10, target=100)

    assert m.safe_to_bunk == 0
    assert m.must_attend == 0
    assert m.status == MetricsStatus.WARNING


def test_target_0_allows_unlimited_bunks():
    m = StandardMetricsCalculator().from_counts(total=5, attended=0, target=0)

    assert m.safe_to_bunk is None
    assert m.must_attend == 0
    assert m.status == MetricsStatus.WARNING


@pytest.mark.parametrize("total, attended", [(3, 4), (-1, 0), (5, -2)])
def test_inconsistent_counts_are_rejected(total, attended):
    with pytest.raises(InvalidHistoryError):
        StandardMetricsCalculator().from_counts(total=total, attended=attended, target=75)


@pytest.mark.parametrize("target", [-1, 100.5, "abc", None])
def test_target_outside_range_is_rejected(target):
    with pytest.raises(ValidationError):
        calculate_metrics(make_subject(4, 3), target)


def test_global_metrics_sum_across_subjects():
    g = get_global_metrics([make_subject(10, 8, "a"), make_subject(5, 5, "b")], 75)

    assert g.total_classes == 15
    assert g.total_attended == 13
    assert g.percentage == pytest.approx(86.67, abs=0.01)
    assert g.is_above_target is True


def test_global_metrics_empty_list():
    g = get_global_metrics([], 75)

    assert g.total_classes == 0
    assert g.total_attended == 0
    assert g.percentage == 0
    assert g.is_above_target is False
    assert get_global_metrics([], 0).is_above_target is True


def test_metrics_to_dict_uses_wire_names():
    d = calculate_metrics(make_subject(20, 14), 75).to_dict()

    assert d == {
        "total": 20,
        "attended": 14,
        "percentage": pytest.approx(70),
        "safeToBunk": 0,
        "mustAttend": 4,
        "status": "critical",
    }


def test_reported_percentage_matches_exact_status():
    # 29/100 as a float quotient drifts below 29
    m = StandardMetricsCalculator().from_counts(total=100, attended=29, target=29)

    assert m.percentage == 29.0
    assert m.status == MetricsStatus.WARNING

    g = get_global_metrics([make_subject(50, 14, "a"), make_subject(50, 15, "b")], 29)
    assert g.percentage == 29.0
    assert g.is_above_target is True
