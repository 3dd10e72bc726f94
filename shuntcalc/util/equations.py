'''
Evaluation of arithmetic expressions with variables and unary functions

An expression is tokenized, converted to a postfix token list and then
solved against a symbol table. The postfix list can be kept and solved
again after the variables change.

By default malformed input is tolerated:
    unknown characters are skipped
    unknown names are worth 0
    unbalanced parentheses produce an empty postfix list, which is worth 0
Passing strict=True raises an EquationError for each of these instead.
'''

import logging
import re

import numpy as np

from ..model import (
    Token,
    TokenType,
    Operator,
    SymbolTable,
    PAREN_OPEN,
    function_precedence,
)
from . import (
    EquationError,
    InvalidCharacterError,
    ParenthesisError,
    OperandError,
    UndefinedNameError,
    format_tokens,
)

logger = logging.getLogger(__name__)

operations = {
    Operator.ADD: np.add,
    Operator.SUB: np.subtract,
    Operator.MUL: np.multiply,
    Operator.DIV: np.divide,
    Operator.POW: np.power,
}

unary = {
    Operator.NEGATE: np.negative,
}

# a '-' only continues a number directly after the exponent marker
number_run = r'[0-9.](?:[0-9.eE]|(?<=[eE])-)*'
number_literal = re.compile(r'(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE]-?[0-9]+)?')


def parse_number(run):
    '''
    Converts a number run to a float

    Uses the longest leading part of the run that is a valid literal,
    so 2e reads as 2 and 1.2.3 as 1.2, a run with no such part is 0
    '''
    match = number_literal.match(run)
    if match is None:
        return 0.0
    return float(match.group(0))


def _scanner():
    def token(factory):
        def callback(scanner, match):
            return factory(match)
        return callback
    return re.Scanner([
        (r'\s+', None),
        (r'[-+*/^]', token(Token.operator)),
        (r'[()]', token(Token.separator)),
        (number_run, token(lambda run: Token.number(parse_number(run)))),
        (r'[A-Za-z][A-Za-z0-9]*', token(Token.identifier)),
    ])


scanner = _scanner()


def tokenize(expression, strict=False):
    '''
    Parses an arithmetic expression into an infix token list
    '''
    tokens = []
    rest = expression
    while rest:
        out, rest = scanner.scan(rest)
        tokens.extend(out)
        if rest:
            if strict:
                raise InvalidCharacterError('Could not parse equation from: {}'.format(rest))
            rest = rest[1:]
    return tokens


def is_unary(equation, i):
    '''
    Whether the + or - at position i is a sign rather than a binary operator
    '''
    if equation[i].value not in (Operator.ADD, Operator.SUB):
        return False
    if i == 0:
        return True
    prev = equation[i - 1]
    return prev.type is TokenType.OPERATOR or prev.is_open()


def pops(top, op):
    '''
    Whether the stack entry top has to be output before op is pushed
    '''
    if top.type is TokenType.SEPARATOR:
        return False
    if top.type is TokenType.IDENTIFIER:
        level = function_precedence
    else:
        level = top.value.precedence
    if op is Operator.POW:
        # right associative
        return op.precedence < level
    return op.precedence <= level


def infix2postfix(equation, strict=False):
    '''
    Converts an infix token list to a postfix token list

    Returns an empty list if the parentheses are unbalanced
    '''
    stack = []
    output = []

    for i, item in enumerate(equation):
        type, token = item
        if type is TokenType.NUMBER:
            output.append(item)
        elif type is TokenType.IDENTIFIER:
            # a name directly followed by ( is a function call
            if i + 1 < len(equation) and equation[i + 1].is_open():
                stack.append(item)
            else:
                output.append(item)
        elif type is TokenType.SEPARATOR:
            if token == PAREN_OPEN:
                stack.append(item)
            else:
                while stack and not stack[-1].is_open():
                    output.append(stack.pop())
                if stack:
                    stack.pop()
                elif strict:
                    raise ParenthesisError('Missing open parenthesis: {}'.format(format_tokens(equation)))
        elif type is TokenType.OPERATOR:
            if is_unary(equation, i):
                if token is Operator.SUB:
                    stack.append(Token(TokenType.OPERATOR, Operator.NEGATE))
            else:
                while stack and pops(stack[-1], token):
                    output.append(stack.pop())
                stack.append(item)
        else:
            raise EquationError('Invalid token found: {} in {}'.format(token, format_tokens(equation)))

    while stack:
        item = stack.pop()
        if item.type is TokenType.SEPARATOR:
            if strict:
                raise ParenthesisError('Missing closing parenthesis: {}'.format(format_tokens(equation)))
            logger.warning('Mismatched parentheses in: %s', format_tokens(equation))
            return []
        output.append(item)

    return output


def solve_postfix(equation, symbols=None, strict=False):
    '''
    Solves a postfix token list

    Names are looked up in symbols, functions first and then variables,
    a fresh SymbolTable is used if none is given
    The operand stack is only checked in strict mode
    '''
    if not equation:
        return 0.0
    if symbols is None:
        symbols = SymbolTable()
    stack = []

    with np.errstate(all='ignore'):
        for type, token in equation:
            if type is TokenType.NUMBER:
                stack.append(token)
            elif type is TokenType.OPERATOR:
                if token in unary:
                    if strict and len(stack) < 1:
                        raise OperandError('Not enough operands for unary - in {}'.format(format_tokens(equation)))
                    stack[-1] = unary[token](stack[-1])
                else:
                    if strict and len(stack) < 2:
                        raise OperandError('Not enough operands for {} in {}'.format(token.value, format_tokens(equation)))
                    b = stack.pop()
                    a = stack[-1]
                    if token is Operator.POW and b == 2:
                        stack[-1] = a * a
                    else:
                        stack[-1] = operations[token](a, b)
            elif type is TokenType.IDENTIFIER:
                function = symbols.functions.get(token)
                if function is not None:
                    if strict and len(stack) < 1:
                        raise OperandError('Not enough operands for {} in {}'.format(token, format_tokens(equation)))
                    stack[-1] = function(stack[-1])
                elif token in symbols.variables:
                    stack.append(symbols.variables[token])
                elif strict:
                    raise UndefinedNameError(token)
                else:
                    stack.append(0.0)
            else:
                raise EquationError('Invalid token: {} in {}'.format(token, format_tokens(equation)))

    if strict and len(stack) != 1:
        raise OperandError('Too many operands for operators in {}'.format(format_tokens(equation)))

    return float(stack[-1])


def solve(expression, symbols=None, strict=False):
    '''
    Solves an infix expression

    Runs tokenize, infix2postfix and solve_postfix in order
    '''
    equation = tokenize(expression, strict=strict)
    postfix = infix2postfix(equation, strict=strict)
    return solve_postfix(postfix, symbols, strict=strict)
