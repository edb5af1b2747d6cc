"""Tests for the application-level AgentService."""

import pytest

from conftest import ScriptedProvider, text_response, tool_response
from zeptobot.agent.messages import ToolCall
from zeptobot.config import Config
from zeptobot.providers.litellm_provider import LiteLLMProvider
from zeptobot.service import AgentService, ConfigurationError, build_provider, has_api_key


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("ANTHROPIC_API_KEY", "OPENAI_API_KEY"):
        monkeypatch.delenv(var, raising=False)


def test_build_provider_requires_key():
    config = Config()
    assert not has_api_key(config)
    with pytest.raises(ConfigurationError, match="No API key found"):
        build_provider(config)


def test_build_provider_prefers_anthropic(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-oai")

    provider = build_provider(Config())
    assert isinstance(provider, LiteLLMProvider)
    assert provider.api_key == "sk-ant"
    assert provider.get_default_model().startswith("anthropic/")


@pytest.mark.asyncio
async def test_send_message_drives_desktop(backend):
    call = ToolCall(id="1", name="move_mouse", arguments='{"x": 100, "y": 200}')
    provider = ScriptedProvider([tool_response(call), text_response("Done, I moved the mouse.")])
    service = AgentService.create(Config(), backend=backend, provider=provider)

    result = await service.send_message("move the mouse to 100,200")

    assert result == "Done, I moved the mouse."
    assert backend.calls == [("move_to", 100.0, 200.0)]
    assert len(service.loop.history) == 5
    assert service.loop.history[3].content == "Mouse moved to (100, 200)"
    assert [m.role for m in service.get_history()] == ["user", "assistant"]


@pytest.mark.asyncio
async def test_clear_history(backend):
    provider = ScriptedProvider([text_response("one"), text_response("two")])
    service = AgentService.create(Config(), backend=backend, provider=provider)

    await service.send_message("a")
    await service.clear_history()
    await service.send_message("hi")

    assert [m.content for m in service.get_history()] == ["hi", "two"]


@pytest.mark.asyncio
async def test_execute_automation(backend):
    service = AgentService.create(Config(), backend=backend, provider=ScriptedProvider())
    assert await service.execute_automation("mouse_position") == "(10, 20)"


def test_status_and_dispose(backend):
    service = AgentService.create(Config(), backend=backend, provider=ScriptedProvider())
    status = service.get_status()
    assert status.agent_ready and status.automation_available and not status.listening

    service.dispose()
    with pytest.raises(RuntimeError, match="disposed"):
        service.get_status()
    with pytest.raises(RuntimeError, match="disposed"):
        service.loop


@pytest.mark.asyncio
async def test_automation_disabled():
    config = Config()
    config.automation.enabled = False
    service = AgentService.create(config, provider=ScriptedProvider())

    assert service.loop.tools.names == []
    assert not service.get_status().automation_available
    with pytest.raises(RuntimeError, match="disabled"):
        await service.execute_automation("click")
