
class TypelispError(Exception):
    """ Base class for all typelisp host-level errors"""
    pass

class TypelispTypeError(TypelispError):
    """ Raised when a builtin receives an operand of the wrong type"""

    def __init__(self, message: str = "wrong type"):
        super().__init__(message)

class TypelispArithmeticError(TypelispError):
    """ Raised when an arithmetic builtin cannot produce a number"""

class TypelispConfigError(TypelispError):
    """ Raised when an environment variable holds an unusable setting"""

# Lisp-visible errors are `typelisp.types.Error` values, not these exceptions.
# Builtins raise TypelispTypeError or TypelispArithmeticError and the applier
# turns them into Error values carrying str(exc).
