"""In-memory conversation history for the long-lived agent."""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from zeptobot.agent.messages import Message, Role


class ConversationSession:
    """
    Ordered message history that always starts with the system preamble.

    The preamble is inserted once at creation and restored by ``reset()``.
    Everything after it is an append-only log of user, assistant and tool
    messages written by the agent loop.
    """

    def __init__(self, system_prompt: str) -> None:
        self._system_prompt = system_prompt
        self._messages: list[Message] = [Message.system(system_prompt)]

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the current history."""
        return tuple(self._messages)

    def append(self, message: Message) -> None:
        """
        Append a message to the history.

        Args:
            message: A user, assistant or tool message.

        Raises:
            ValueError: If a second system message is appended.
        """
        if message.role is Role.SYSTEM:
            raise ValueError("The system preamble can only be set at session creation")
        self._messages.append(message)

    def reset(self) -> None:
        """Drop every turn, keeping only the system preamble."""
        dropped = len(self._messages) - 1
        self._messages = [Message.system(self._system_prompt)]
        logger.debug(f"Session reset, dropped {dropped} messages")

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))
