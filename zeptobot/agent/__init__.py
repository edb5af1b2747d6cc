"""Agent core: messages, session, tools and the orchestration loop."""

from zeptobot.agent.executor import ToolExecutor
from zeptobot.agent.loop import AgentLoop
from zeptobot.agent.messages import Message, Role, ToolCall
from zeptobot.agent.session import ConversationSession

__all__ = [
    "AgentLoop",
    "ConversationSession",
    "Message",
    "Role",
    "ToolCall",
    "ToolExecutor",
]
