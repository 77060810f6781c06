import pytest

from skillswap_pro.errors import PermissionDenied, ValidationMissing
from skillswap_pro.schemas import SessionStatus, SkillCategory
from skillswap_pro.services import admin_service, profile_service


def test_platform_stats_require_admin(offline_ctx):
    offline_ctx.current_user_id = "u1"
    with pytest.raises(PermissionDenied):
        admin_service.platform_stats(offline_ctx)

    offline_ctx.current_user_id = "admin1"
    assert admin_service.platform_stats(offline_ctx) == {
        "total_users": 4,
        "active_sessions": 1,
        "completed_swaps": 1,
        "cancelled": 0,
    }


def test_status_breakdown_and_monitor(offline_ctx):
    offline_ctx.current_user_id = "admin1"
    breakdown = admin_service.status_breakdown(offline_ctx)
    assert breakdown == [
        {"name": "Pending", "count": 0},
        {"name": "Approved", "count": 1},
        {"name": "Completed", "count": 1},
        {"name": "Cancelled", "count": 0},
    ]

    rows = admin_service.monitor_sessions(offline_ctx)
    assert rows[0]["requester_name"] == "Sarah Chen"
    assert rows[0]["skill_name"] == "React Development"


def test_admin_cancel_session(offline_ctx):
    offline_ctx.current_user_id = "admin1"
    session = admin_service.cancel_session(offline_ctx, "sess2")
    assert session.status == SessionStatus.CANCELLED


def test_admin_skill_search_matches_category(offline_ctx):
    offline_ctx.current_user_id = "admin1"
    names = [s.name for s in admin_service.search_skills(offline_ctx, "design")]
    assert names == ["UI Design", "Logo Design"]


def test_delete_skill_is_admin_only(offline_ctx):
    offline_ctx.current_user_id = "u1"
    with pytest.raises(PermissionDenied):
        profile_service.delete_skill(offline_ctx, "s1")

    offline_ctx.current_user_id = "admin1"
    assert profile_service.delete_skill(offline_ctx, "missing") is False


def test_add_global_skill(offline_ctx):
    offline_ctx.current_user_id = "u1"
    skill = profile_service.add_global_skill(offline_ctx, "  Pottery ", "Art")

    assert skill.name == "Pottery"
    assert skill.category == SkillCategory.ART
    assert offline_ctx.state.skills[-1] is skill

    with pytest.raises(ValidationMissing):
        profile_service.add_global_skill(offline_ctx, "Juggling", "Circus")
    with pytest.raises(ValidationMissing):
        profile_service.add_global_skill(offline_ctx, " ", "Art")


def test_update_profile_and_skills(offline_ctx):
    offline_ctx.current_user_id = "u3"
    user = profile_service.update_profile(offline_ctx, bio="Bonjour", location="Lyon, FR")
    assert (user.name, user.bio, user.location) == ("Marc Dubois", "Bonjour", "Lyon, FR")

    with pytest.raises(ValidationMissing):
        profile_service.update_profile(offline_ctx, name="  ")

    user = profile_service.set_user_skills(offline_ctx, offered_ids=["s6", "s6", "s2"])
    assert [s.id for s in user.skills_offered] == ["s6", "s2"]
    with pytest.raises(ValidationMissing):
        profile_service.set_user_skills(offline_ctx, requested_ids=["nope"])
