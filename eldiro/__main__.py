"""CLI entry point for the Eldiro interpreter.

Usage:
    python -m eldiro [-v|-vv|-vvv] [--debug-file PATH] <program_file>
    python -m eldiro [-v...] --emit-ast <program_file>
    python -m eldiro [-v...] --ast <ast_json_file>
    python -m eldiro [-v...]

Options:
  -v            Increase debug verbosity (can be repeated)
  --debug-file  Where debug output goes (default: debug.txt)
  --emit-ast    Parse the given file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

With no program file an interactive prompt is started. Every line is
parsed as one statement and evaluated against an environment that lives
for the whole session, so bindings and functions carry over between
lines.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from termcolor import colored

from .ast import Program
from .ast_json import ast_to_obj, program_from_obj
from .environment import Environment
from .errors import EldiroError
from .interpreter import Interpreter, parse, parse_program
from .types import UnitVal, Value

PROMPT = '→ '


def print_error(message: str):
    print(colored('error: ', 'red', attrs=['bold']) + message, file=sys.stderr)


def print_value(value: Value):
    if not isinstance(value, UnitVal):
        print(repr(value))


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def load_ast(path: Path) -> Program:
    source = read_source(path)
    try:
        return program_from_obj(json.loads(source))
    except (ValueError, KeyError, TypeError) as e:
        # json.JSONDecodeError is a ValueError.
        print_error(f"invalid AST file {path}: {e}")
        sys.exit(1)


def repl(interpreter: Interpreter, env: Optional[Environment] = None):
    if env is None:
        env = Environment()
    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not line.strip():
            continue
        try:
            print_value(parse(line).eval(env, interpreter))
        except EldiroError as e:
            print_error(e.message)


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(prog='eldiro', description="Eldiro language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', default='debug.txt', help='file receiving debug output')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PROGRAM_FILE', help='emit AST JSON for the given program file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='program file to execute (omit for an interactive prompt)')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        try:
            program = parse_program(source)
        except EldiroError as e:
            print_error(e.message)
            sys.exit(1)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(ast_to_obj(program), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    interpreter = Interpreter(debug_level=args.v, debug_file=args.debug_file)
    try:
        if args.ast:
            program = load_ast(Path(args.ast))
        elif args.program:
            program = parse_program(read_source(Path(args.program)))
        else:
            repl(interpreter)
            return
        print_value(interpreter.run(program, Environment()))
    except EldiroError as e:
        print_error(e.message)
        sys.exit(1)
    finally:
        interpreter.close()


if __name__ == '__main__':
    main()
