"""Tests for engagement and time-off validation."""
from datetime import date

import pytest

from factories import make_candidate, make_engagement, make_profile, make_time_off
from member_capacity.engine.validator import (
    END_NOT_AFTER_START,
    HOURS_EXCEED_WORKING_HOURS,
    HOURS_NOT_POSITIVE,
    TIME_OFF_END_BEFORE_START,
    TIME_OFF_OVERLAP,
    TOTAL_EXCEEDS_WORKING_HOURS,
    find_conflicting_engagements,
    validate_engagement_capacity,
    validate_engagement_dates,
    validate_time_off_entry,
)
from member_capacity.errors import CapacityInputError
from member_capacity.schemas import TimeOffCandidate, TimeOffStatus, TimeOffType


def test_total_hours_exceeded(settings):
    profile = make_profile(40, [make_engagement("e1", 25)])
    errors = validate_engagement_capacity(profile, make_candidate(20), settings=settings)
    assert errors == ["Total engagement hours would exceed working hours per week"]


def test_end_date_before_start(settings):
    candidate = make_candidate(10, start=date(2024, 1, 1), end=date(2023, 12, 31))
    errors = validate_engagement_capacity(make_profile(40), candidate, settings=settings)
    assert errors == ["End date must be after start date"]


def test_end_date_equal_to_start(settings):
    candidate = make_candidate(10, start=date(2024, 1, 1), end=date(2024, 1, 1))
    assert validate_engagement_capacity(make_profile(40), candidate, settings=settings) == [END_NOT_AFTER_START]


def test_zero_hours(settings):
    errors = validate_engagement_capacity(make_profile(40), make_candidate(0), settings=settings)
    assert errors == ["Hours per week must be greater than 0"]


def test_negative_hours_only_breaks_first_rule(settings):
    profile = make_profile(40, [make_engagement("e1", 40)])
    assert validate_engagement_capacity(profile, make_candidate(-5), settings=settings) == [HOURS_NOT_POSITIVE]


def test_edit_excludes_own_engagement(settings):
    profile = make_profile(40, [make_engagement("e1", 25)])
    errors = validate_engagement_capacity(profile, make_candidate(30), exclude_engagement_id="e1", settings=settings)
    assert errors == []


def test_multiple_violations_reported_together(settings):
    profile = make_profile(40, [make_engagement("e1", 30)])
    candidate = make_candidate(50, start=date(2024, 3, 1), end=date(2024, 2, 1))
    errors = validate_engagement_capacity(profile, candidate, settings=settings)
    assert errors == [HOURS_EXCEED_WORKING_HOURS, TOTAL_EXCEEDS_WORKING_HOURS, END_NOT_AFTER_START]


def test_inactive_engagements_do_not_count(settings):
    profile = make_profile(40, [make_engagement("e1", 30, active=False)])
    assert validate_engagement_capacity(profile, make_candidate(40), settings=settings) == []


def test_exact_fill_is_allowed(settings):
    profile = make_profile(40, [make_engagement("e1", 20)])
    assert validate_engagement_capacity(profile, make_candidate(20), settings=settings) == []


def test_default_working_hours_used_when_unset(settings):
    profile = make_profile(None, [make_engagement("e1", 30)])
    assert validate_engagement_capacity(profile, make_candidate(15), settings=settings) == [
        TOTAL_EXCEEDS_WORKING_HOURS
    ]


def test_same_project_conflict_is_separate_from_capacity_rules(settings):
    existing = make_engagement("e1", 10, start=date(2024, 1, 1), end=date(2024, 6, 30), project_id="p1")
    other_project = make_engagement("e2", 10, start=date(2024, 1, 1), project_id="p2")
    profile = make_profile(40, [existing, other_project])
    candidate = make_candidate(5, start=date(2024, 6, 1), project_id="p1")

    assert validate_engagement_capacity(profile, candidate, settings=settings) == []
    assert find_conflicting_engagements(profile, candidate) == [existing]
    assert find_conflicting_engagements(profile, candidate, exclude_engagement_id="e1") == []


def test_no_conflict_without_project_or_after_end():
    existing = make_engagement("e1", 10, start=date(2024, 1, 1), end=date(2024, 6, 30), project_id="p1")
    profile = make_profile(40, [existing])

    assert find_conflicting_engagements(profile, make_candidate(5, start=date(2024, 6, 1))) == []
    assert find_conflicting_engagements(profile, make_candidate(5, start=date(2024, 7, 1), project_id="p1")) == []


def _time_off_candidate(start, end, type=TimeOffType.VACATION, id=None):
    return TimeOffCandidate(id=id, type=type, start_date=start, end_date=end)


def test_time_off_valid(settings):
    result = validate_time_off_entry([], _time_off_candidate(date(2024, 6, 3), date(2024, 6, 3)), settings=settings)
    assert result.valid is True
    assert result.errors == []
    assert result.warnings == []


def test_time_off_end_before_start(settings):
    result = validate_time_off_entry([], _time_off_candidate(date(2024, 6, 7), date(2024, 6, 3)), settings=settings)
    assert result.valid is False
    assert result.errors == [TIME_OFF_END_BEFORE_START]


def test_time_off_overlap_with_pending_entry(settings):
    entries = [make_time_off("t1", date(2024, 6, 3), date(2024, 6, 7), status=TimeOffStatus.PENDING)]
    result = validate_time_off_entry(
        entries, _time_off_candidate(date(2024, 6, 7), date(2024, 6, 10), TimeOffType.SICK_LEAVE), settings=settings
    )
    assert result.errors == [TIME_OFF_OVERLAP]


def test_time_off_rejected_entries_never_block(settings):
    entries = [make_time_off("t1", date(2024, 6, 3), date(2024, 6, 7), status=TimeOffStatus.REJECTED)]
    result = validate_time_off_entry(entries, _time_off_candidate(date(2024, 6, 3), date(2024, 6, 7)), settings=settings)
    assert result.valid is True


def test_time_off_edit_excludes_itself(settings):
    entries = [make_time_off("t1", date(2024, 6, 3), date(2024, 6, 7))]
    candidate = _time_off_candidate(date(2024, 6, 4), date(2024, 6, 8), id="t1")
    result = validate_time_off_entry(entries, candidate, exclude_entry_id="t1", settings=settings)
    assert result.valid is True


def test_vacation_allowance_warning(settings):
    entries = [make_time_off("t1", date(2024, 1, 1), date(2024, 1, 21))]
    result = validate_time_off_entry(entries, _time_off_candidate(date(2024, 7, 1), date(2024, 7, 5)), settings=settings)

    assert result.valid is True
    assert len(result.warnings) == 1
    assert "26 vacation days in 2024" in result.warnings[0]


def test_vacation_allowance_ignores_other_years_and_types(settings):
    entries = [
        make_time_off("t1", date(2023, 1, 1), date(2023, 1, 31)),
        make_time_off("t2", date(2024, 2, 1), date(2024, 2, 29), type=TimeOffType.PARENTAL_LEAVE),
    ]
    result = validate_time_off_entry(entries, _time_off_candidate(date(2024, 7, 1), date(2024, 7, 5)), settings=settings)
    assert result.warnings == []


def test_missing_profile_or_candidate_is_an_input_error(settings):
    with pytest.raises(CapacityInputError):
        validate_engagement_capacity(None, make_candidate(10), settings=settings)
    with pytest.raises(CapacityInputError):
        validate_engagement_capacity(make_profile(40), None, settings=settings)
    with pytest.raises(CapacityInputError):
        find_conflicting_engagements(None, make_candidate(10))


def test_engagement_dates_within_range(settings):
    now = date(2024, 6, 5)
    candidate = make_candidate(10, start=date(2014, 6, 5), end=date(2034, 6, 5))
    assert validate_engagement_dates(candidate, now, settings) == []
    assert validate_engagement_dates(make_candidate(10), now, settings) == []


def test_engagement_dates_too_far_from_now(settings):
    now = date(2024, 6, 5)
    candidate = make_candidate(10, start=date(2014, 6, 4), end=date(2034, 6, 6))
    assert validate_engagement_dates(candidate, now, settings) == [
        "Start date cannot be more than 10 years in the past",
        "End date cannot be more than 10 years in the future",
    ]


def test_engagement_dates_from_leap_day(settings):
    candidate = make_candidate(10, start=date(2014, 2, 28), end=date(2034, 3, 1))
    assert validate_engagement_dates(candidate, date(2024, 2, 29), settings) == [
        "End date cannot be more than 10 years in the future",
    ]
