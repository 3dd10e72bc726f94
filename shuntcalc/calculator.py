from .model import SymbolTable
from .util import equations


class Calculator:
    '''
    Evaluates arithmetic expressions against its own symbol table

    Example:
        calc = Calculator()
        i = calc.evaluate('2+3*4')
        y = calc.set_variable('i', i).evaluate('-3.5*cos(i*5)+pi*(-2+sqrt(i*pi^2))/3')

    Expressions evaluated in a loop should be compiled once:
        postfix = calc.compile('x^2+1')
        for x in range(10):
            calc.set_variable('x', x)
            calc.evaluate(postfix)
    '''
    def __init__(self, strict=False, symbols=None):
        self.strict = strict
        self.symbols = SymbolTable() if symbols is None else symbols

    def set_variable(self, name, value):
        '''
        Binds a variable, replacing any previous value
        '''
        self.symbols.set_variable(name, value)
        return self

    def set_function(self, name, function):
        '''
        Binds a function of one number, replacing any previous function
        '''
        self.symbols.set_function(name, function)
        return self

    def tokenize(self, expression):
        return equations.tokenize(expression, strict=self.strict)

    def to_postfix(self, infix):
        return equations.infix2postfix(infix, strict=self.strict)

    def compile(self, expression):
        '''
        Converts an expression to a postfix token list for evaluate
        '''
        return self.to_postfix(self.tokenize(expression))

    def evaluate(self, expression):
        '''
        Evaluates an expression string or a compiled postfix token list
        '''
        if isinstance(expression, str):
            expression = self.compile(expression)
        return equations.solve_postfix(expression, self.symbols, strict=self.strict)
