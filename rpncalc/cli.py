#!/usr/bin/env python3
import sys
import logging
import argparse

from .config import load_config
from .errors import CalcError
from .observers import LoggingObserver
from .pipeline import Session, calculate

logger = logging.getLogger(__name__)


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog='rpncalc',
        description='Integer arithmetic calculator (+ - * /) built on a postfix pipeline')
    parser.add_argument('expression', nargs='?', help='expression to evaluate; starts a REPL when omitted')
    parser.add_argument('--debug', action='store_true', default=None, help='log tokens, postfix and tree')
    parser.add_argument('--log-level', help='logging level (default from RPNCALC_LOG_LEVEL or WARNING)')
    parser.add_argument('--example', action='store_true', help='evaluate the worked example 2 * 4 + 3 * 2')
    return parser


def report_error(error):
    print(f"{type(error).__name__}: {error}", file=sys.stderr)


def run_example(expression):
    # 토큰/RPN 단계만 디버그 출력
    session = Session.from_text(expression)\
        .enable_debug()\
        .tokenize()\
        .to_postfix()\
        .disable_debug()\
        .build()
    return session.evaluate()


def run_repl(prompt, observer=None):
    print("rpncalc REPL (type 'exit' to quit)")
    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        line = line.strip()
        if not line:
            continue
        if line.lower() == 'exit':
            break

        try:
            print(calculate(line, observer))
        except CalcError as e:
            report_error(e)


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    # 아주 긴 정수도 출력할 수 있도록 int/str 자릿수 제한 해제
    if hasattr(sys, 'set_int_max_str_digits'):
        sys.set_int_max_str_digits(0)

    config = load_config()

    debug = config['debug'] if args.debug is None else args.debug
    level = args.log_level or ('DEBUG' if debug or args.example else config['log_level'])
    logging.basicConfig(level=level.upper(), format=config['log_format'])
    observer = LoggingObserver() if debug else None

    if args.example:
        try:
            result = run_example(config['example'])
        except CalcError as e:
            report_error(e)
            return 1
        print(f"Output: {result}")
        return 0

    if args.expression is None:
        run_repl(config['prompt'], observer)
        return 0

    try:
        result = calculate(args.expression, observer)
    except CalcError as e:
        logger.debug('evaluation of %r failed', args.expression, exc_info=True)
        report_error(e)
        return 1

    print(f"Output: {result}" if debug else result)
    return 0
