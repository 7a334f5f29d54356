import json

import pytest

from classgroup.messages import (
    BroadcastMessage,
    EmptyMsg,
    KeyGenSuccessWithResult,
    NormalMessage,
    P2pMessage,
    SignOfflineSuccessWithResult,
    SignOnlineSuccessWithResult,
    SubsetMessage,
    dumps,
    from_dict,
    loads,
    to_dict,
)

ALL_MESSAGES = [
    NormalMessage("bob", b"\x01\x02"),
    P2pMessage({"alice": b"\x00", "bob": b"\xff\x10"}),
    SubsetMessage(b"abc"),
    BroadcastMessage(b""),
    EmptyMsg(),
    KeyGenSuccessWithResult("keygen-result"),
    SignOfflineSuccessWithResult("offline-result"),
    SignOnlineSuccessWithResult("online-result"),
]


def test_normal_message_wire_form():
    assert dumps(NormalMessage("bob", b"\x01\x02")) == '{"NormalMessage":["bob",[1,2]]}'


def test_empty_message_wire_form():
    assert dumps(EmptyMsg()) == '"EmptyMsg"'


def test_subset_message_dict_form():
    assert to_dict(SubsetMessage(b"\x01")) == {"SubsetMessage": [1]}


@pytest.mark.parametrize("message", ALL_MESSAGES)
def test_json_round_trip(message):
    assert loads(dumps(message)) == message


@pytest.mark.parametrize("message", ALL_MESSAGES)
def test_dict_round_trip(message):
    assert from_dict(to_dict(message)) == message


def test_result_variant_tag_is_class_name():
    data = to_dict(KeyGenSuccessWithResult("done"))
    assert list(data) == ["KeyGenSuccessWithResult"]
    assert data["KeyGenSuccessWithResult"] == "done"


def test_byte_lists_are_coerced_to_bytes():
    message = BroadcastMessage([7, 8, 9])
    assert message.message == bytes([7, 8, 9])


def test_empty_msg_accepts_null_payload():
    assert from_dict({"EmptyMsg": None}) == EmptyMsg()


def test_p2p_payload_is_mapping_of_lists():
    data = json.loads(dumps(P2pMessage({"alice": b"\x05"})))
    assert data == {"P2pMessage": {"alice": [5]}}


@pytest.mark.parametrize(
    "data",
    [
        {"Unknown": []},
        {"SubsetMessage": [256]},
        {"SubsetMessage": "text"},
        {"NormalMessage": ["bob"]},
        {"P2pMessage": [1, 2]},
        {"KeyGenSuccessWithResult": 5},
        {"EmptyMsg": [1]},
        {"SubsetMessage": [1], "BroadcastMessage": [1]},
        "Other",
    ],
)
def test_malformed_input_raises(data):
    with pytest.raises(ValueError):
        from_dict(data)


def test_loads_rejects_invalid_json():
    with pytest.raises(ValueError):
        loads("{not json")


def test_to_dict_rejects_foreign_object():
    with pytest.raises(TypeError):
        to_dict("EmptyMsg")