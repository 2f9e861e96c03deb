import pytest

from wordlink.services.rooms import ValidationError
from wordlink.services.rooms import messages


def test_create_room_strips_username():
    msg = messages.parse('createRoom', {'username': '  Ana '})
    assert msg.username == 'Ana'


def test_join_room_uppercases_code():
    msg = messages.parse('joinRoom', {'code': ' ab12 ', 'username': 'Ben'})
    assert msg.code == 'AB12'


def test_game_action_term_is_opaque():
    term = {'word': 'lemon', 'meta': [1, 2, 3]}
    assert messages.parse('gameAction', {'term': term}).term == term


def test_extra_fields_ignored():
    msg = messages.parse('createRoom', {'username': 'Ana', 'colour': 'red'})
    assert not hasattr(msg, 'colour')


@pytest.mark.parametrize('event,data,field', [
    ('createRoom', {}, 'username'),
    ('createRoom', {'username': '   '}, 'username'),
    ('createRoom', {'username': 42}, 'username'),
    ('joinRoom', {'username': 'Ben'}, 'code'),
    ('joinRoom', {'code': 'AB12'}, 'username'),
    ('gameAction', {}, 'term'),
])
def test_missing_or_malformed_fields(event, data, field):
    with pytest.raises(ValidationError) as excinfo:
        messages.parse(event, data)
    assert field in excinfo.value.reason


@pytest.mark.parametrize('data', ['ABCD', ['ABCD'], 7])
def test_non_object_payload(data):
    with pytest.raises(ValidationError):
        messages.parse('joinRoom', data)


def test_missing_payload_for_leave_is_fine():
    assert isinstance(messages.parse('leaveRoom', None), messages.LeaveRoom)


def test_unknown_event():
    with pytest.raises(ValidationError):
        messages.parse('teleport', {})


def test_long_username_and_code_accepted():
    name = 'A' * 200
    assert messages.parse('createRoom', {'username': name}).username == name
    assert messages.parse('joinRoom', {'code': 'x' * 40, 'username': name}).code == 'X' * 40
