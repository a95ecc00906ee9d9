

class JamError(Exception):
    """ Base class for all Jam errors"""
    pass

class JamSyntaxError(JamError):
    """ Raised by the lexer, parser or checker on a malformed program"""

class JamEvalError(JamError):
    """ Base class for errors raised while evaluating a program"""

class JamUnboundVariable(JamEvalError):
    """ Raised when a variable is not bound in the environment"""

class JamIllegalForwardReference(JamEvalError):
    """ Raised when a binding is read before its definition is installed"""

class JamTypeError(JamEvalError):
    """ Raised when an operator or function is applied to a value of the wrong kind"""

class JamArityError(JamEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""
