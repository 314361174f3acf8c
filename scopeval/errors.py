

class ScopevalError(Exception):
    """ Base class for all scopeval errors"""
    pass

class BindingError(ScopevalError):
    """ Raised when a context key cannot be used as a binding name"""
    pass

class ReaderError(ScopevalError):
    """ Raised when text cannot be read as an expression"""

class EvaluationError(ScopevalError):
    """ Raised when an expression cannot be resolved or executed"""

class UnboundSymbolError(EvaluationError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, symbol):
        super().__init__(f"Unable to resolve symbol: {symbol}")
        self.symbol = symbol

class NotCallableError(EvaluationError):
    """ Raised when a value in call position cannot be applied"""

    def __init__(self, value, rendered: str | None = None):
        super().__init__(f"{rendered if rendered is not None else value!r} cannot be called as a function")
        self.value = value

class ArityError(EvaluationError):
    """ Raised when the number of arguments passed to a function or form is incorrect"""

class EvalTypeError(EvaluationError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class UnquoteError(EvaluationError):
    """ Raised when unquote or unquote-splicing escapes its enclosing syntax-quote"""

class EvaluationDepthError(EvaluationError):
    """ Raised when an expression nests deeper than the interpreter stack allows"""

class FrozenEnvironmentError(EvaluationError):
    """ Raised when code tries to define a name in the shared core environment"""

class InvalidBindingFormError(EvaluationError):
    """ Raised when a let or fn binding vector is malformed"""
