class DriftError(Exception):
    """ Base class for all drift errors"""
    pass

class DriftSyntaxError(DriftError):
    """ Raised when the token sequence cannot be compiled"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)
        self.line = line
        self.column = column

class DriftArityError(DriftError):
    """ Raised when a form or operator receives the wrong number of arguments"""

class DriftTypeError(DriftError):
    """ Raised when the kinds of values passed to a form or operator are incorrect"""

class DriftInvalidSymbol(DriftTypeError):
    """ Raised when something other than a name is used in a binding position"""

class DriftNameError(DriftError):
    """ Raised when a name is defined twice in the same scope"""

class DriftUnboundSymbol(DriftError):
    """ Raised when a name is used or set before it is bound"""

class DriftArithmeticError(DriftError):
    """ Raised when an arithmetic operation has no result, e.g. division by zero"""
