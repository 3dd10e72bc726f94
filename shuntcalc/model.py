#!/usr/bin/env python3

import enum
from collections import namedtuple

import numpy as np


class TokenType (enum.Enum):
    '''
    The four kinds of lexical token
    '''
    NUMBER = 'number'
    OPERATOR = 'operator'
    SEPARATOR = 'separator'
    IDENTIFIER = 'identifier'


class Operator (enum.Enum):
    '''
    Arithmetic operators

    NEGATE is produced by the converter for a unary minus,
    it has no spelling of its own in an expression
    '''
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    POW = '^'
    NEGATE = '~'

    @property
    def precedence(self):
        return precedence[self]


precedence = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
    Operator.POW: 3,
    Operator.NEGATE: 3,
}

# pending function calls sit on the operator stack at this level
function_precedence = 3

PAREN_OPEN = '('


class Token (namedtuple('Token', ['type', 'value'])):
    '''
    A single lexical token

    The value depends on the type:
        NUMBER      a float
        OPERATOR    an Operator
        SEPARATOR   '(' or ')'
        IDENTIFIER  the name as written
    '''
    __slots__ = ()

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def operator(cls, op):
        return cls(TokenType.OPERATOR, Operator(op))

    @classmethod
    def separator(cls, symbol):
        return cls(TokenType.SEPARATOR, symbol)

    @classmethod
    def identifier(cls, name):
        return cls(TokenType.IDENTIFIER, name)

    def is_open(self):
        return self.type is TokenType.SEPARATOR and self.value == PAREN_OPEN

    def __str__(self):
        if self.type is TokenType.NUMBER:
            return repr(self.value)
        if self.type is TokenType.OPERATOR:
            return 'neg' if self.value is Operator.NEGATE else self.value.value
        return self.value


default_variables = {
    'e': 2.718281828459045,
    'pi': 3.141592653589793,
}

default_functions = {
    'abs': np.abs,
    'acos': np.arccos,
    'asin': np.arcsin,
    'atan': np.arctan,
    'cos': np.cos,
    'exp': np.exp,
    'floor': np.floor,
    'ln': np.log,
    'log': np.log10,
    'sin': np.sin,
    'sqrt': np.sqrt,
    'tan': np.tan,
    'deg2rad': np.deg2rad,
    'rad2deg': np.rad2deg,
}


class SymbolTable:
    '''
    Named variables and named unary functions used during evaluation

    Both mappings are keyed by case sensitive name and are independent,
    a name may be bound in both, in which case the function is used
    '''
    def __init__(self, variables=None, functions=None):
        self.variables = dict(default_variables)
        self.functions = dict(default_functions)
        for name, value in (variables or {}).items():
            self.set_variable(name, value)
        for name, function in (functions or {}).items():
            self.set_function(name, function)

    def set_variable(self, name, value):
        self.variables[name] = float(value)

    def set_function(self, name, function):
        if not callable(function):
            raise TypeError('Function {} is not callable'.format(name))
        self.functions[name] = function

    def __contains__(self, name):
        return name in self.functions or name in self.variables

    def __repr__(self):
        return '<SymbolTable variables={} functions={}>'.format(
            sorted(self.variables), sorted(self.functions))
