"""Pytest configuration and fixtures for QURI builder tests."""

import pytest
from dotenv import load_dotenv

from quri.group import ExpressionGroup

# Load environment variables
load_dotenv()


class StaticFragment:
    """External collaborator that renders a fixed QURI fragment."""

    def __init__(self, fragment: str) -> None:
        self.fragment = fragment
        self.calls = 0

    def render(self) -> str:
        self.calls += 1
        return self.fragment


@pytest.fixture
def static_fragment():
    """Factory for external renderables."""
    return StaticFragment


@pytest.fixture
def status_group():
    """OR group matching active or pending status."""
    return (
        ExpressionGroup("or")
        .append_comparison("status", "==", "active")
        .append_comparison("status", "==", "pending")
    )


@pytest.fixture
def age_and_status(status_group):
    """AND group: age >= 21 and (status active or pending)."""
    return ExpressionGroup().append_comparison("age", ">=", 21).append_group(status_group)
