import logging

import pytest

from shuntcalc import Token, TokenType, Operator, tokenize, infix2postfix, ParenthesisError


def rpn(expression, strict=False):
    return [str(t) for t in infix2postfix(tokenize(expression), strict=strict)]


class TestInfix2Postfix:
    def test_empty(self):
        assert infix2postfix([]) == []

    def test_precedence(self):
        assert rpn('2+3*4') == ['2.0', '3.0', '4.0', '*', '+']

    def test_left_associative(self):
        assert rpn('8-3-2') == ['8.0', '3.0', '-', '2.0', '-']
        assert rpn('8/4*2') == ['8.0', '4.0', '/', '2.0', '*']

    def test_power_is_right_associative(self):
        assert rpn('2^3^2') == ['2.0', '3.0', '2.0', '^', '^']

    def test_parentheses(self):
        assert rpn('(2+3)*4') == ['2.0', '3.0', '+', '4.0', '*']

    def test_unary_minus_first(self):
        assert rpn('-3+4') == ['3.0', 'neg', '4.0', '+']

    def test_unary_minus_after_paren(self):
        assert rpn('(-2+3)') == ['2.0', 'neg', '3.0', '+']

    def test_unary_minus_after_operator(self):
        assert rpn('3- -2') == ['3.0', '2.0', 'neg', '-']

    def test_negate_is_its_own_operator(self):
        postfix = infix2postfix(tokenize('-x'))
        assert postfix == [Token.identifier('x'), Token(TokenType.OPERATOR, Operator.NEGATE)]

    def test_unary_minus_binds_looser_than_power(self):
        assert rpn('-2^2') == ['2.0', '2.0', '^', 'neg']

    def test_unary_plus_is_dropped(self):
        assert rpn('+3') == ['3.0']
        assert rpn('2*+3') == ['2.0', '3.0', '*']

    def test_function_call(self):
        assert rpn('sqrt(16)') == ['16.0', 'sqrt']

    def test_function_yields_to_operator(self):
        assert rpn('sin(x)*2') == ['x', 'sin', '2.0', '*']

    def test_function_does_not_yield_to_power(self):
        assert rpn('sin(x)^2') == ['x', '2.0', '^', 'sin']

    def test_nested_functions(self):
        assert rpn('cos(sin(x)+1)') == ['x', 'sin', '1.0', '+', 'cos']

    def test_variable_reference(self):
        assert rpn('x') == ['x']
        assert rpn('x*y') == ['x', 'y', '*']

    def test_compilation_is_deterministic(self):
        expression = '-3.5*cos(x*5)+pi*(-2+sqrt(x*pi^2))/3'
        assert infix2postfix(tokenize(expression)) == infix2postfix(tokenize(expression))

    def test_missing_closing_parenthesis(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert infix2postfix(tokenize('(2+3')) == []
        assert 'Mismatched parentheses' in caplog.text

    def test_stray_closing_parenthesis_is_ignored(self):
        assert rpn('2+3)') == ['2.0', '3.0', '+']


class TestInfix2PostfixStrict:
    def test_valid_expression(self):
        assert rpn('(1+2)*3', strict=True) == ['1.0', '2.0', '+', '3.0', '*']

    def test_missing_closing_parenthesis(self):
        with pytest.raises(ParenthesisError, match='Missing closing parenthesis'):
            rpn('(2+3', strict=True)

    def test_missing_open_parenthesis(self):
        with pytest.raises(ParenthesisError, match='Missing open parenthesis'):
            rpn('2+3)', strict=True)
