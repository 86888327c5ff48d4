import pytest
from pydantic import ValidationError

from charify.models import MessageDraft, RequestId, Role


def test_messages_come_back_in_send_order(chat_store):
    texts = ["Hello", "Hi", "When can you come by?", "Tomorrow at noon"]
    for i, text in enumerate(texts):
        role = Role.REQUESTER if i % 2 == 0 else Role.TAKER
        chat_store.append(RequestId(1), role, MessageDraft(text=text))

    messages = chat_store.get(RequestId(1))
    assert [m.text for m in messages] == texts
    assert [m.sequence for m in messages] == [1, 2, 3, 4]
    assert [m.sender_role for m in messages] == [Role.REQUESTER, Role.TAKER, Role.REQUESTER, Role.TAKER]


def test_unknown_request_has_empty_log(chat_store):
    assert chat_store.get(RequestId(42)) == ()
    assert chat_store.count(RequestId(42)) == 0


@pytest.mark.parametrize("draft", [
    MessageDraft(),
    MessageDraft(text=""),
    MessageDraft(text="   \n"),
    MessageDraft(text=None, attachment_ref=""),
])
def test_empty_draft_is_a_no_op(chat_store, draft):
    chat_store.append(RequestId(1), Role.REQUESTER, MessageDraft(text="before"))

    assert chat_store.append(RequestId(1), Role.REQUESTER, draft) is None

    assert chat_store.count(RequestId(1)) == 1
    follow_up = chat_store.append(RequestId(1), Role.REQUESTER, MessageDraft(text="after"))
    assert follow_up.sequence == 2


def test_attachment_only_message_is_kept(chat_store):
    message = chat_store.append(RequestId(1), Role.TAKER, MessageDraft(attachment_ref="att-123"))

    assert message.text is None
    assert message.attachment_ref == "att-123"
    assert message.sequence == 1


def test_blank_text_with_attachment_drops_the_text(chat_store):
    message = chat_store.append(RequestId(1), Role.TAKER, MessageDraft(text="  ", attachment_ref="att-1"))
    assert message.text is None


def test_sequences_are_independent_per_request(chat_store):
    chat_store.append(RequestId(1), Role.REQUESTER, MessageDraft(text="a"))
    chat_store.append(RequestId(2), Role.REQUESTER, MessageDraft(text="b"))
    chat_store.append(RequestId(1), Role.TAKER, MessageDraft(text="c"))

    assert [m.sequence for m in chat_store.get(RequestId(1))] == [1, 2]
    assert [m.sequence for m in chat_store.get(RequestId(2))] == [1]


def test_get_returns_a_restartable_snapshot(chat_store):
    chat_store.append(RequestId(1), Role.REQUESTER, MessageDraft(text="one"))
    snapshot = chat_store.get(RequestId(1))

    assert list(snapshot) == list(snapshot)

    chat_store.append(RequestId(1), Role.REQUESTER, MessageDraft(text="two"))
    assert len(snapshot) == 1
    assert len(chat_store.get(RequestId(1))) == 2


def test_messages_are_immutable(chat_store):
    message = chat_store.append(RequestId(1), Role.REQUESTER, MessageDraft(text="original"))

    with pytest.raises(ValidationError):
        message.text = "edited"

    assert chat_store.get(RequestId(1))[0].text == "original"


def test_timestamps_are_timezone_aware(chat_store):
    message = chat_store.append(RequestId(1), Role.REQUESTER, MessageDraft(text="hi"))
    assert message.timestamp.tzinfo is not None
