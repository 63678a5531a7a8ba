class EldiroError(Exception):
    """Exception type used to report Eldiro parse and evaluation failures.

    The message is the exact text a host should show to the user.
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseError(EldiroError):
    """Raised when source text does not match the grammar."""


class EvalError(EldiroError):
    """Raised when a well-formed tree cannot be evaluated."""


class LimitError(EldiroError):
    """Raised when input is too large or too deeply nested to handle.

    Not a `ParseError`, so parser alternation never swallows it.
    """
