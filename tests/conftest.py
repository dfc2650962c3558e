"""Pytest configuration and fixtures."""

import os
import textwrap
from pathlib import Path

import pytest

from component_forge.agents import ComponentGenerator, ComponentService, DescriptionFormatter
from component_forge.core import CredentialStore, Settings
from component_forge.models import ChatPrompt, GeminiConfig
from component_forge.placement import ComponentWriter, PlacementResolver


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["FORGE_LOG_LEVEL"] = "DEBUG"
    os.environ["FORGE_API_KEY"] = "test-api-key"  # Never reach the real API


# ============================================================================
# Fakes
# ============================================================================

class FakeModel:
    """Stands in for GeminiModel; records every prompt it receives."""

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: list[ChatPrompt] = []
        self.configs: list[GeminiConfig] = []

    def factory(self, config: GeminiConfig) -> "FakeModel":
        self.configs.append(config)
        return self

    def invoke(self, prompt: ChatPrompt) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


CARD_REPLY = textwrap.dedent("""\
    COMPONENT_NAME: Card

    Here is your component:

    ```tsx
    /*
     * Card - A simple content card
     *
     * USAGE:
     * import { Card } from '@/components/Card';
     *
     * <Card title="Hello" description="World" ctaText="Go" onCtaClick={() => {}} theme="light" />
     */
    import React from 'react';

    export interface CardProps {
      title: string;
      description: string;
      ctaText: string;
      onCtaClick: () => void;
      theme: 'light' | 'dark';
    }

    export const Card: React.FC<CardProps> = ({ title, description, ctaText, onCtaClick, theme }) => {
      return (
        <div className={theme === 'dark' ? 'bg-gray-800' : 'bg-white'}>
          <h2>{title}</h2>
          <p>{description}</p>
          <button onClick={onCtaClick}>{ctaText}</button>
        </div>
      );
    };
    ```

    The card supports a light and a dark theme.
    """)


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty workspace root."""
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def settings(tmp_path: Path, workspace: Path) -> Settings:
    """Test settings isolated to tmp_path."""
    return Settings(
        api_key="test-api-key",
        credentials_file=tmp_path / "config" / "credentials.json",
        workspace_root=workspace,
    )


@pytest.fixture
def credentials(settings: Settings) -> CredentialStore:
    return CredentialStore(settings)


@pytest.fixture
def card_reply() -> str:
    return CARD_REPLY


@pytest.fixture
def fake_model(card_reply: str) -> FakeModel:
    return FakeModel(reply=card_reply)


# ============================================================================
# Agent Fixtures
# ============================================================================

@pytest.fixture
def generator(settings, credentials, fake_model) -> ComponentGenerator:
    return ComponentGenerator(settings, credentials, model_factory=fake_model.factory)


@pytest.fixture
def formatter(settings, credentials, fake_model) -> DescriptionFormatter:
    return DescriptionFormatter(settings, credentials, model_factory=fake_model.factory)


@pytest.fixture
def writer(workspace: Path) -> ComponentWriter:
    return ComponentWriter(PlacementResolver(workspace))


@pytest.fixture
def service(generator, writer) -> ComponentService:
    return ComponentService(generator, writer)
