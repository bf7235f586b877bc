"""Tests for the lark based lexer."""

import pytest

from rpncalc import LexError, Number, Operator, RecordingObserver, tokenize
from rpncalc.lexer import parse_digits


def test_single_digit_expression():
    assert tokenize('2 + 3') == (Number(2), Operator('+'), Number(3))


def test_multi_digit_numbers_are_one_token():
    assert tokenize('123*4567') == (Number(123), Operator('*'), Number(4567))


def test_leading_zeros_parse_as_integers():
    assert tokenize('007') == (Number(7),)


def test_all_operators():
    tokens = tokenize('1+2-3*4/5')
    assert [str(t) for t in tokens] == ['1', '+', '2', '-', '3', '*', '4', '/', '5']


@pytest.mark.parametrize('text', [
    '2+3',
    '  2  +   3  ',
    '\t2\n+\r3\f',
])
def test_whitespace_is_skipped(text):
    assert tokenize(text) == (Number(2), Operator('+'), Number(3))


def test_empty_and_blank_input_give_no_tokens():
    assert tokenize('') == ()
    assert tokenize('   ') == ()


def test_tokens_are_not_checked_for_order():
    # 순서 검사는 트리 빌더의 몫
    assert tokenize('+ 1 2') == (Operator('+'), Number(1), Number(2))


@pytest.mark.parametrize('text, char, position', [
    ('2 + a', 'a', 4),
    ('(1 + 2)', '(', 0),
    ('2.5 + 1', '.', 1),
    ('4 % 2', '%', 2),
    ('2\u00a0+ 3', '\u00a0', 1),
])
def test_illegal_character(text, char, position):
    with pytest.raises(LexError) as excinfo:
        tokenize(text)
    assert excinfo.value.char == char
    assert excinfo.value.position == position


def test_illegal_character_reports_nothing():
    observer = RecordingObserver()
    with pytest.raises(LexError):
        tokenize('2 + a', observer)
    assert observer.events == []


def test_observer_receives_text_and_tokens():
    seen = []

    class Spy(RecordingObserver):
        def on_tokens(self, text, tokens):
            seen.append((text, tokens))

    tokens = tokenize('1 + 1', Spy())
    assert seen == [('1 + 1', tokens)]


def test_digit_runs_longer_than_int_str_limit():
    assert tokenize('9' * 5000) == (Number(10 ** 5000 - 1),)


@pytest.mark.parametrize('digits, expected', [
    ('0', 0),
    ('007', 7),
    ('1' + '0' * 999, 10 ** 999),
    ('1' + '0' * 1000, 10 ** 1000),
    ('1' + '0' * 2500, 10 ** 2500),
])
def test_parse_digits_across_chunks(digits, expected):
    assert parse_digits(digits) == expected
