from leave_tracker.leave_service import calculate_leave_days


def test_single_day_counts_as_one():
    assert calculate_leave_days("2024-01-10", "2024-01-10") == 1


def test_range_is_inclusive():
    assert calculate_leave_days("2024-01-10", "2024-01-12") == 3


def test_end_before_start_is_invalid():
    assert calculate_leave_days("2024-01-12", "2024-01-10") <= 0


def test_range_across_month_and_leap_day():
    assert calculate_leave_days("2024-02-28", "2024-03-01") == 3


def test_impossible_calendar_dates_are_rejected():
    # April has 30 days, 2023 is not a leap year
    assert calculate_leave_days("2024-04-31", "2024-05-02") == -1
    assert calculate_leave_days("2023-02-28", "2023-02-29") == -1


def test_malformed_dates_are_rejected():
    assert calculate_leave_days("2024-1-5", "2024-01-06") == -1
    assert calculate_leave_days("10/01/2024", "2024-01-12") == -1
    assert calculate_leave_days("", "2024-01-12") == -1
    assert calculate_leave_days(None, "2024-01-12") == -1
