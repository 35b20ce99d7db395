"""Tests for the Bedrock chat adapter."""

from unittest.mock import patch

from src.infrastructure.config import Settings
from src.infrastructure.llm.bedrock_adapter import BedrockChatAdapter


def test_builds_chat_bedrock_from_settings():
    settings = Settings(model_id="model-x", region="eu-west-3", temperature=0.2)
    with patch("src.infrastructure.llm.bedrock_adapter.ChatBedrock") as MockBedrock:
        BedrockChatAdapter(settings)

    MockBedrock.assert_called_once_with(
        model="model-x",
        model_kwargs={"temperature": 0.2},
        region_name="eu-west-3",
    )


def test_bind_tools_wraps_bound_runnable():
    with patch("src.infrastructure.llm.bedrock_adapter.ChatBedrock") as MockBedrock:
        adapter = BedrockChatAdapter(Settings())
        bound = adapter.bind_tools(["tool"])
        bound.invoke(["message"])

    MockBedrock.return_value.bind_tools.assert_called_once_with(["tool"])
    MockBedrock.return_value.bind_tools.return_value.invoke.assert_called_once_with(["message"])
