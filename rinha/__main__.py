import argparse
import logging
import sys
from pathlib import Path

from rinha import config
from rinha.errors import RinhaError, RinhaSyntaxError
from rinha.evaluation.runtime import Runtime
from rinha.interpreter import Interpreter
from rinha.reader.json_reader import load

EXIT_OK = 0
EXIT_RUNTIME_ERROR = 1
EXIT_BAD_INPUT = 2
EXIT_STACK_EXHAUSTED = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m rinha",
        usage="python -m rinha [options] [program.json]",
        description="Evaluate a Rinha program given as a JSON AST.",
    )
    parser.add_argument(
        "program",
        nargs="?",
        help=f"path to the JSON AST (default: $RINHA_SOURCE_PATH or {config.get_source_path()})",
    )
    parser.add_argument(
        "--no-fib-fast-path",
        action="store_true",
        help="always interpret calls to `fib` instead of computing them natively",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args_list = sys.argv[1:] if argv is None else argv
    try:
        args = parser.parse_args(args_list)
    except SystemExit as exc:
        return int(exc.code)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger("rinha")

    program_path = Path(args.program) if args.program else config.get_source_path()
    try:
        runtime = Runtime()
        recursion_limit = config.get_recursion_limit()
    except ValueError as exc:
        print(f"rinha: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    if args.no_fib_fast_path:
        runtime.fib_fast_path = False

    # Loading recurses once per AST level too, so raise the limit first.
    sys.setrecursionlimit(max(sys.getrecursionlimit(), recursion_limit))
    try:
        program = load(program_path)
    except OSError as exc:
        print(f"rinha: cannot read {program_path}: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except RinhaSyntaxError as exc:
        print(f"rinha: {program_path}: {exc.diagnostic()}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except RecursionError:
        logger.critical("stack exhausted while loading %s", program_path)
        return EXIT_STACK_EXHAUSTED

    try:
        Interpreter(runtime).run(program)
    except RinhaError as exc:
        print(exc.diagnostic(), file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except RecursionError:
        logger.critical("stack exhausted while evaluating %s", program_path)
        return EXIT_STACK_EXHAUSTED
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
