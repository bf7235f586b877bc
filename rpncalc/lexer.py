'''
Lexer: raw expression text -> tuple of Number / Operator tokens
'''

import logging
from typing import Tuple

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput

from .errors import LexError
from .tokens import Number, Operator, Token

logger = logging.getLogger(__name__)


# 숫자열 변환 단위; 인터프리터의 int/str 자릿수 제한(4300)보다 작아야 함
DIGIT_CHUNK = 1000


def parse_digits(digits: str) -> int:
    '''
    Converts a digit run of any length to an int

    int() refuses strings longer than the interpreter's digit limit, so
    long runs are converted in chunks and combined arithmetically.
    '''
    value = 0
    for i in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[i:i + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


# 파스 결과를 토큰으로 변환하는 Transformer
@v_args(inline=True)
class TokenTransformer(Transformer):
    def number(self, tok):
        return Number(parse_digits(str(tok)))

    def operator(self, tok):
        return Operator(str(tok))

    def start(self, *tokens):
        return tuple(tokens)


# Lark 파서 초기화 (문법은 한 번만 읽음)
parser = Lark.open('calc.lark', rel_to=__file__, parser='lalr', transformer=TokenTransformer())


def tokenize(text: str, observer=None) -> Tuple[Token, ...]:
    '''
    Splits text into tokens

    Whitespace is skipped, digit runs become a single Number and each
    operator character becomes an Operator. Any other character raises
    LexError and no tokens are returned.
    '''
    try:
        tokens = parser.parse(text)
    except UnexpectedInput as e:
        position = e.pos_in_stream
        char = getattr(e, 'char', None)
        if char is None and position is not None and position < len(text):
            char = text[position]
        raise LexError(char, position) from e

    logger.debug('tokenized %r into %d tokens', text, len(tokens))
    if observer is not None:
        observer.on_tokens(text, tokens)
    return tokens
