import pytest

from skillswap_pro.errors import ValidationMissing
from skillswap_pro.schemas import Session, SessionStatus
from skillswap_pro.services.scheduling import compute_end_time, has_conflict


def _session(sid, requester, provider, date, time, status=SessionStatus.PENDING):
    return Session(
        id=sid,
        requester_id=requester,
        provider_id=provider,
        skill_id="s1",
        date=date,
        time=time,
        end_time=compute_end_time(time),
        status=status,
    )


@pytest.mark.parametrize(
    "start, expected",
    [
        ("09:00", "10:20"),
        ("10:40", "12:00"),
        ("14:00", "15:20"),
        ("23:50", "01:10"),
        ("", "00:00"),
        (None, "00:00"),
    ],
)
def test_compute_end_time(start, expected):
    assert compute_end_time(start) == expected


def test_compute_end_time_rejects_garbage():
    with pytest.raises(ValidationMissing):
        compute_end_time("noon")
    with pytest.raises(ValidationMissing):
        compute_end_time("25:00")


def test_overlap_detected_for_same_user_and_date():
    sessions = [_session("a", "u1", "u3", "2024-05-01", "10:00")]

    assert has_conflict(sessions, "u1", "2024-05-01", "11:00", "12:20") is True
    # Touching the end boundary is allowed
    assert has_conflict(sessions, "u1", "2024-05-01", "11:20", "12:40") is False
    assert has_conflict(sessions, "u1", "2024-05-02", "10:00", "11:20") is False


def test_participation_on_either_side_counts():
    sessions = [_session("a", "u2", "u1", "2024-05-01", "10:00")]
    assert has_conflict(sessions, "u1", "2024-05-01", "10:30", "11:50") is True


def test_inactive_sessions_free_the_slot():
    sessions = [
        _session("a", "u1", "u3", "2024-05-01", "10:00", SessionStatus.CANCELLED),
        _session("b", "u1", "u2", "2024-05-01", "10:00", SessionStatus.COMPLETED),
    ]
    assert has_conflict(sessions, "u1", "2024-05-01", "10:00", "11:20") is False


def test_other_users_calendars_are_ignored():
    sessions = [_session("a", "u2", "u3", "2024-05-01", "10:00")]
    assert has_conflict(sessions, "u1", "2024-05-01", "10:00", "11:20") is False
