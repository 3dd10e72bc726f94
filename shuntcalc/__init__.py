'''Arithmetic expression engine with variables and unary functions

Usage:
    from shuntcalc import Calculator

    calc = Calculator()
    calc.evaluate('2+3*4')
    # 14.0

    postfix = calc.compile('x^2 + sqrt(x)')
    for x in range(100):
        calc.set_variable('x', x).evaluate(postfix)

When run as a program, each line read is evaluated and printed
A line of the form `name = expression` stores the result as a variable
'''

import os
import re
from collections import OrderedDict

from .calculator import Calculator
from .model import Token, TokenType, Operator, SymbolTable
from .util import (
    EquationError,
    InvalidCharacterError,
    ParenthesisError,
    OperandError,
    UndefinedNameError,
    format_result,
)
from .util.equations import tokenize, infix2postfix, solve_postfix, solve

__all__ = [
    'Calculator', 'SymbolTable', 'Token', 'TokenType', 'Operator',
    'EquationError', 'InvalidCharacterError', 'ParenthesisError',
    'OperandError', 'UndefinedNameError',
    'tokenize', 'infix2postfix', 'solve_postfix', 'solve',
    'load_config', 'main',
]

default_config = OrderedDict([
    ('strict', 'no'),
    ('log_level', 'INFO'),
])

assignment = re.compile(r'^\s*([A-Za-z][A-Za-z0-9]*)\s*=(.*)$')


def load_config(environ=os.environ):
    '''
    Reads the settings, each one can be overridden by SHUNTCALC_<NAME>
    '''
    config = OrderedDict(default_config)
    for name in config:
        key = 'SHUNTCALC_' + name.upper()
        if environ.get(key):
            config[name] = environ[key]
    return config


def is_set(value):
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def main(config=None):
    if config is None:
        config = load_config()
    calc = Calculator(strict=is_set(config['strict']))

    while True:
        try:
            line = input('Eq: ')
        except EOFError:
            break
        if not line.strip():
            continue

        match = assignment.match(line)
        try:
            if match:
                name, expression = match.groups()
                value = calc.evaluate(expression)
                calc.set_variable(name, value)
                print('{} = {}'.format(name, format_result(value)))
            else:
                print(format_result(calc.evaluate(line)))
        except EquationError as e:
            print('Error: {}'.format(e))
        except IndexError:
            print('Error: Not enough operands in {}'.format(line.strip()))
