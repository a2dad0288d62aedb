import pytest

from deadline_engine.onboarding import AppStage, InvalidTransition, OnboardingFlow


def test_linear_onboarding():
    flow = OnboardingFlow()
    assert flow.stage is AppStage.SPLASH
    assert flow.finish_loading() is AppStage.LOGIN
    assert flow.login_succeeded([{"title": "PS1"}]) is AppStage.MANUAL
    assert flow.assignments == [{"title": "PS1"}]
    assert flow.complete_manual() is AppStage.MAIN


def test_logout_skips_manual_on_next_login():
    flow = OnboardingFlow()
    flow.finish_loading()
    flow.login_succeeded([])
    flow.complete_manual()
    assert flow.logout() is AppStage.LOGIN
    assert flow.assignments == []
    assert flow.login_succeeded([{"title": "PS2"}]) is AppStage.MAIN


def test_logout_clears_both_collections():
    flow = OnboardingFlow()
    flow.finish_loading()
    flow.login_succeeded([{"title": "PS1"}], [[{"lecture_title": "Intro"}], []])
    assert flow.lecture_groups == [[{"lecture_title": "Intro"}], []]
    flow.complete_manual()
    flow.logout()
    assert flow.assignments == []
    assert flow.lecture_groups == []


def test_invalid_transition_keeps_stage():
    flow = OnboardingFlow()
    with pytest.raises(InvalidTransition):
        flow.login_succeeded([])
    with pytest.raises(InvalidTransition):
        flow.logout()
    assert flow.stage is AppStage.SPLASH
