import pytest

from skillswap_pro.errors import ValidationMissing
from skillswap_pro.services import discovery, profile_service, recommendation


class StubOracle:
    def __init__(self, ids=None, error=None):
        self.ids = ids or []
        self.error = error
        self.calls = 0

    def rank(self, current, candidates, limit):
        self.calls += 1
        if self.error:
            raise self.error
        return self.ids


def _ids(users):
    return [u.id for u in users]


def test_discovery_excludes_self_and_admins(offline_ctx):
    offline_ctx.current_user_id = "u1"
    assert _ids(discovery.discover_users(offline_ctx)) == ["u2", "u3"]


def test_discovery_search_matches_names_and_skills(offline_ctx):
    offline_ctx.current_user_id = "u1"
    assert _ids(discovery.discover_users(offline_ctx, search="sushi")) == ["u2"]
    assert _ids(discovery.discover_users(offline_ctx, search="sushi", mode="seeking")) == ["u3"]
    assert _ids(discovery.discover_users(offline_ctx, search="MARC")) == ["u3"]


def test_discovery_filters_location_and_category(offline_ctx):
    offline_ctx.current_user_id = "u1"
    assert _ids(discovery.discover_users(offline_ctx, location="paris")) == ["u3"]
    assert _ids(discovery.discover_users(offline_ctx, category="Design")) == ["u2"]
    with pytest.raises(ValidationMissing):
        discovery.discover_users(offline_ctx, category="Juggling")


def test_hidden_skills_do_not_match(offline_ctx):
    offline_ctx.current_user_id = "admin1"
    assert profile_service.delete_skill(offline_ctx, "s7") is True

    assert discovery.discover_users(offline_ctx, search="sushi") == []
    assert "s7" not in _ids(profile_service.visible_skills(offline_ctx))
    # References are kept
    assert "s7" in _ids(offline_ctx.state.find_user("u2").skills_offered)


def test_heuristic_prefers_what_i_want_to_learn(offline_ctx):
    # Sarah wants React (s1) which Alex teaches; Alex offers nothing Marc lacks
    sarah = offline_ctx.state.find_user("u2")
    ranked = recommendation.heuristic_recommendations(sarah, offline_ctx.state.users)
    assert ranked[0] == "u1"
    assert "admin1" not in ranked
    assert "u2" not in ranked


def test_score_weights(offline_ctx):
    state = offline_ctx.state
    alex, sarah, marc = state.find_user("u1"), state.find_user("u2"), state.find_user("u3")
    # Marc teaches French (wanted by Alex) and wants Python (taught by Alex)
    assert recommendation.score_candidate(alex, marc) == 15
    # Sarah wants React from Alex, but teaches nothing Alex wants
    assert recommendation.score_candidate(alex, sarah) == 5


def test_recommend_partners_uses_oracle_and_drops_unknown_ids(offline_ctx):
    offline_ctx.current_user_id = "u1"
    oracle = StubOracle(ids=["u3", "ghost", "u3", "admin1", "u2"])

    result = recommendation.recommend_partners(offline_ctx, oracle=oracle)

    assert _ids(result) == ["u3", "u2"]
    assert oracle.calls == 1


def test_recommend_partners_falls_back_on_oracle_error(offline_ctx):
    offline_ctx.current_user_id = "u1"
    oracle = StubOracle(error=RuntimeError("rate limited"))

    result = recommendation.recommend_partners(offline_ctx, oracle=oracle)

    assert _ids(result) == ["u2", "u3"]


def test_recommend_partners_without_api_key_uses_heuristic(offline_ctx, monkeypatch):
    monkeypatch.setattr(recommendation, "default_oracle", lambda: None)
    offline_ctx.current_user_id = "u1"

    assert _ids(recommendation.recommend_partners(offline_ctx)) == ["u3", "u2"]


def test_parse_recommended_ids_tolerates_wrapping_text():
    text = 'Sure! ```json\n{"recommendedIds": ["u2", "u3"]}\n```'
    assert recommendation.parse_recommended_ids(text) == ["u2", "u3"]
    assert recommendation.parse_recommended_ids("no json here") == []


def test_prompt_lists_candidates(offline_ctx):
    state = offline_ctx.state
    prompt = recommendation.build_prompt(state.find_user("u1"), [state.find_user("u3")], 3)
    assert "ID: u3" in prompt
    assert "Teaches: French Level B2, Digital Marketing" in prompt
    assert '"recommendedIds"' in prompt
