# Eldiro language package
# This package provides a parser and tree-walking interpreter for Eldiro.
from .environment import Environment
from .errors import EldiroError, ParseError, EvalError, LimitError
from .interpreter import Interpreter, ParsedStatement, parse, parse_program, run_program
from .types import NumberVal, UnitVal

__all__ = [
    'parse',
    'parse_program',
    'run_program',
    'ParsedStatement',
    'Interpreter',
    'Environment',
    'NumberVal',
    'UnitVal',
    'EldiroError',
    'ParseError',
    'EvalError',
    'LimitError',
]
