"""Onboarding sequence of the client: Splash -> Login -> Manual -> Main."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class AppStage(str, Enum):
    SPLASH = "splash"
    LOGIN = "login"
    MANUAL = "manual"
    MAIN = "main"


class InvalidTransition(RuntimeError):
    """Raised when an event does not apply to the current stage."""


class OnboardingFlow:
    """Explicit state machine replacing independent loaded/logged-in/manual flags.

    The manual is shown after the first login of a session only; logging in
    again after a logout goes straight to the main screen.
    """

    def __init__(self) -> None:
        self.stage = AppStage.SPLASH
        self.lecture_groups: list[list[Any]] = []
        self.assignments: list[Any] = []
        self.manual_completed = False

    def _require(self, expected: AppStage, event: str) -> None:
        if self.stage is not expected:
            raise InvalidTransition(f"Cannot handle '{event}' in stage {self.stage.value}")

    def finish_loading(self) -> AppStage:
        self._require(AppStage.SPLASH, "finish_loading")
        self.stage = AppStage.LOGIN
        return self.stage

    def login_succeeded(
        self,
        assignments: Optional[list[Any]] = None,
        lecture_groups: Optional[list[list[Any]]] = None,
    ) -> AppStage:
        self._require(AppStage.LOGIN, "login_succeeded")
        self.assignments = list(assignments or [])
        self.lecture_groups = [list(group) for group in lecture_groups or []]
        self.stage = AppStage.MAIN if self.manual_completed else AppStage.MANUAL
        return self.stage

    def complete_manual(self) -> AppStage:
        self._require(AppStage.MANUAL, "complete_manual")
        self.manual_completed = True
        self.stage = AppStage.MAIN
        return self.stage

    def logout(self) -> AppStage:
        self._require(AppStage.MAIN, "logout")
        self.assignments = []
        self.lecture_groups = []
        self.stage = AppStage.LOGIN
        return self.stage
