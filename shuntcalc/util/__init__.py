class EquationError (Exception):
    pass


class InvalidCharacterError (EquationError, ValueError):
    pass


class ParenthesisError (EquationError):
    pass


class OperandError (EquationError):
    pass


class UndefinedNameError (EquationError):
    def __init__(self, value=None):
        super().__init__('Could not find: {}'.format(value))
        self.value = value


def format_tokens(tokens):
    '''
    Joins a token list back into readable text
    '''
    return ' '.join(map(str, tokens))


def format_result(value):
    '''
    Drops the fractional part of whole numbers for display
    '''
    if value % 1 == 0 and abs(value) < 2 ** 53:
        return str(int(value))
    return str(value)
