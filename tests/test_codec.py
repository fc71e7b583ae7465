# Area: Shared Tests
"""Tests for the KGP wire codec."""

import pytest

from kgp_client._shared.codec import (
    VERBS,
    Message,
    MessageIds,
    decode,
    encode,
    encode_arg,
)
from kgp_client.errors import DecodeError, ProtocolError


class TestEncode:
    """Tests for encoding messages and arguments."""

    def test_plain_message(self):
        """Test a message without ref or arguments."""
        assert encode(Message(id=7, verb="goodbye")) == "7 goodbye"

    def test_message_with_ref(self):
        """Test that the ref follows the id after an @."""
        assert encode(Message(id=12, verb="move", args=(4,), ref=9)) == "12@9 move 4"

    def test_bare_word_not_quoted(self):
        assert encode_arg("freeplay") == "freeplay"
        assert encode_arg("info:name") == "info:name"
        assert encode_arg("<3,0,0,1,1,1,1,1,1>") == "<3,0,0,1,1,1,1,1,1>"

    def test_string_with_space_quoted(self):
        assert encode_arg("deep blue") == '"deep blue"'

    def test_numeric_string_quoted(self):
        """Test that a string that looks like a number stays a string."""
        assert encode_arg("42") == '"42"'

    def test_empty_string_quoted(self):
        assert encode_arg("") == '""'

    def test_escapes(self):
        """Test escaping of backslash, quote and control characters."""
        assert encode_arg('a\\b"c\nd\re\tf') == '"a\\\\b\\"c\\nd\\re\\tf"'

    def test_int_argument(self):
        assert encode_arg(-3) == "-3"

    def test_unsupported_type_raises(self):
        with pytest.raises(TypeError):
            encode_arg(1.5)


class TestDecode:
    """Tests for decoding wire lines."""

    def test_greeting(self):
        message = decode("1 kgp 1 0 0\r\n")
        assert message == Message(id=1, verb="kgp", args=(1, 0, 0))

    def test_ref_and_quoted_argument(self):
        message = decode('5@3 comment "hello world"')
        assert message.id == 5
        assert message.ref == 3
        assert message.args == ("hello world",)

    def test_quoted_digits_stay_string(self):
        assert decode('2 set custom:x "17"').args == ("custom:x", "17")

    def test_board_is_a_word(self):
        assert decode("4 state <1,0,0,3,3>").args == ("<1,0,0,3,3>",)

    def test_multiline_comment_round_trip(self):
        """Test that a comment with line breaks survives one wire line."""
        message = Message(id=3, verb="comment", args=("line one\nline two\t\"x\"",), ref=2)
        line = encode(message)
        assert "\n" not in line
        assert decode(line) == message

    def test_extra_whitespace_between_tokens(self):
        assert decode("3   ping   a  b").args == ("a", "b")

    @pytest.mark.parametrize("line", ["", "   ", "move 3", "x kgp 1 0 0", "1@ ping", '"1" ping'])
    def test_missing_or_malformed_id(self, line):
        with pytest.raises(DecodeError):
            decode(line)

    def test_zero_id_rejected(self):
        with pytest.raises(DecodeError, match="positive"):
            decode("0 ping")

    def test_unknown_verb(self):
        with pytest.raises(DecodeError, match="unknown verb"):
            decode("1 dance 3")

    def test_quoted_verb_rejected(self):
        with pytest.raises(DecodeError):
            decode('1 "ping"')

    def test_unterminated_string(self):
        with pytest.raises(DecodeError, match="unterminated"):
            decode('1 comment "oops')

    def test_unknown_escape(self):
        with pytest.raises(DecodeError, match="escape"):
            decode('1 comment "a\\qb"')

    def test_missing_delimiter_after_string(self):
        with pytest.raises(DecodeError, match="delimiter"):
            decode('1 comment "a"b')

    def test_stray_quote_in_word(self):
        with pytest.raises(DecodeError):
            decode('1 comment ab"c')

    def test_decode_error_is_protocol_error(self):
        """Test that decode failures are fatal protocol errors carrying the line."""
        with pytest.raises(ProtocolError) as exc_info:
            decode("1 dance")
        assert exc_info.value.line == "1 dance"


class TestMessageIds:
    """Tests for outbound id allocation."""

    def test_starts_at_one_and_increases(self):
        ids = MessageIds()
        assert [next(ids) for _ in range(3)] == [1, 2, 3]

    def test_verbs_are_closed_set(self):
        assert "move" in VERBS
        assert "dance" not in VERBS
        assert len(VERBS) == 14


class TestRoundTrip:
    """Tests that every constructible Message survives encode then decode."""

    @pytest.mark.parametrize("message", [
        Message(id=1, verb="ping"),
        Message(id=4, verb="move", args=(1,), ref=3),
        Message(id=9, verb="pong", args=(0, -7, 123456789012345678901234567890), ref=0),
        Message(id=2, verb="set", args=("custom:x", "17")),
        Message(id=2, verb="set", args=("custom:x", "-3")),
        Message(id=5, verb="comment", args=("",), ref=4),
        Message(id=5, verb="comment", args=("a\rb\tc\\d\"e",)),
        Message(id=6, verb="comment", args=("tab\x0bvertical", "line\u2028separator")),
        Message(id=7, verb="set", args=("custom:mail", "bot@kalah"), ref=2),
        Message(id=8, verb="comment", args=("@5", "3@2")),
        Message(id=10, verb="state", args=("<1,0,0,3,3>", 30, 25)),
        Message(id=11, verb="goodbye", args=("thanks for playing\n",)),
        Message(id=12, verb="set", args=("custom:digits", "\u0663")),
    ])
    def test_decode_inverts_encode(self, message):
        line = encode(message)
        assert "\n" not in line
        assert decode(line) == message

    def test_args_list_normalised_to_tuple(self):
        assert Message(id=1, verb="ping", args=["a"]).args == ("a",)


class TestMessageValidation:
    """Tests that Message refuses values the wire cannot carry."""

    @pytest.mark.parametrize("kwargs, error", [
        ({"id": 0, "verb": "ping"}, ValueError),
        ({"id": -2, "verb": "ping"}, ValueError),
        ({"id": 3, "verb": "move", "args": (2,), "ref": -1}, ValueError),
        ({"id": 3, "verb": "hello"}, ValueError),
        ({"id": 3, "verb": "comment", "args": (1.5,)}, TypeError),
        ({"id": 3, "verb": "comment", "args": (None,)}, TypeError),
        ({"id": 3, "verb": "move", "args": (True,)}, TypeError),
        ({"id": "3", "verb": "ping"}, TypeError),
        ({"id": 3, "verb": "ping", "ref": "2"}, TypeError),
    ])
    def test_invalid_message_rejected(self, kwargs, error):
        with pytest.raises(error):
            Message(**kwargs)

    def test_zero_ref_allowed(self):
        assert decode("2@0 ok").ref == 0
