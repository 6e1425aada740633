"""Pytest configuration and fixtures."""

import os
import pytest

from prometheus_client import CollectorRegistry

from canvas_assist.core.config import Settings
from canvas_assist.clients import GeminiConfig
from canvas_assist.fields import FieldRegistry
from canvas_assist.interpreter import CommandInterpreter
from canvas_assist.monitoring import MetricsCollector
from canvas_assist.session import EditorSession
from canvas_assist.sync import Component, StateSynchronizer, Trait


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["CANVAS_LOG_LEVEL"] = "DEBUG"
    # Never reach the real model from tests
    os.environ["GEMINI_API_KEY"] = ""
    os.environ.pop("CANVAS_GEMINI_API_KEY", None)


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Settings without a model credential."""
    return Settings(gemini_api_key="")


@pytest.fixture
def model_settings():
    """Settings with a well-formed model credential."""
    return Settings(gemini_api_key="AIza-test-key", model_timeout=2.0)


@pytest.fixture
def metrics():
    """Metrics collector on an isolated registry."""
    return MetricsCollector(CollectorRegistry())


@pytest.fixture
def registry():
    """Field registry with the built-in tables."""
    return FieldRegistry()


@pytest.fixture
def observed():
    """Payloads received by the synchronizer observer."""
    return []


@pytest.fixture
def synchronizer(metrics, observed):
    """State synchronizer recording observer payloads."""
    return StateSynchronizer(observer=observed.append, metrics=metrics)


# ============================================================================
# Model Fixtures
# ============================================================================

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash-latest:generateContent"


@pytest.fixture
def gemini_url():
    return GEMINI_URL


@pytest.fixture
def gemini_config():
    """Gemini config for testing."""
    return GeminiConfig(api_key="AIza-test-key", timeout=2.0, breaker_fail_max=3)


def gemini_reply(text: str) -> dict:
    """generateContent response body carrying one text part."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class StubClient:
    """Model client double returning a canned reply or raising."""

    def __init__(self, reply: str | None = None, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def agenerate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def stub_client():
    """Factory for stub model clients."""
    return StubClient


@pytest.fixture
def heuristic_interpreter(metrics):
    """Interpreter without a model client."""
    return CommandInterpreter(client=None, metrics=metrics)


# ============================================================================
# Component Fixtures
# ============================================================================

@pytest.fixture
def button():
    """Button with a dark background."""
    return Component(
        type="button",
        tag_name="button",
        component_id="btn-1",
        style={"backgroundColor": "#111827", "color": "#ffffff"},
        content="Buy now",
    )


@pytest.fixture
def plain_div():
    """Div without styles."""
    return Component(type="div", tag_name="div", component_id="box-1", content="Hello")


@pytest.fixture
def hero():
    """Smart hero section with traits and attribute fallbacks."""
    return Component(
        type="default",
        tag_name="section",
        component_id="hero-1",
        attributes={
            "data-smart-object-id": "smart-hero-section",
            "data-show-secondary-button": "true",
            "subtitle": "From attributes",
        },
        traits=[Trait("mainTitle", "Welcome"), Trait("width", "640")],
    )


@pytest.fixture
def session(heuristic_interpreter, synchronizer, registry):
    """Editor session in heuristic mode."""
    return EditorSession(heuristic_interpreter, synchronizer, registry)
