

class RcalcError(Exception):
    """ Base class for all rcalc errors"""
    pass

class ParseError(RcalcError):
    """ Raised when source text cannot be read as an expression"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message if position is None else f"{message} (at offset {position})")
        self.position = position

class ScopeError(RcalcError):
    """ Raised when the scope stack is misused (e.g. popping the global frame)"""

class ZeroDenominatorError(RcalcError, ValueError):
    """ Raised when a ComplexNumber is built with a zero denominator"""

class EvaluationDepthError(RcalcError, RecursionError):
    """ Raised when evaluation nests deeper than the configured limit"""

class ConfigError(RcalcError):
    """ Raised when a configuration value cannot be interpreted"""
