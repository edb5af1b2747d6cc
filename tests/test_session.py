import pytest

from zeptobot.agent.messages import Message, Role
from zeptobot.agent.session import ConversationSession


def test_session_starts_with_system_prompt() -> None:
    session = ConversationSession("be helpful")
    assert len(session) == 1
    assert session.messages[0] == Message.system("be helpful")
    assert session.system_prompt == "be helpful"


def test_append_and_reset() -> None:
    session = ConversationSession("be helpful")
    session.append(Message.user("hello"))
    session.append(Message.assistant("hi"))

    assert [m.role for m in session] == [Role.SYSTEM, Role.USER, Role.ASSISTANT]

    session.reset()
    assert session.messages == (Message.system("be helpful"),)


def test_second_system_message_rejected() -> None:
    session = ConversationSession("be helpful")
    with pytest.raises(ValueError):
        session.append(Message.system("override"))


def test_messages_is_a_snapshot() -> None:
    session = ConversationSession("be helpful")
    snapshot = session.messages
    session.append(Message.user("hello"))
    assert len(snapshot) == 1
    assert len(session.messages) == 2
