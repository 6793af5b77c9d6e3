"""Command-line entry point for camel. Reads a λ-term either from a file or from the command line, reduces it and prints
the result. Also uses error handling context manager. Called from the camel executable script.
"""

import argparse
import sys

from termcolor import colored

from camel.lang.error import ErrorHandler, GenericException
from camel.pure.parser import parse
from camel.pure.reduction import RECURSION_LIMIT, NormalOrderReducer, evaluate

RAW_FILE = "<raw>"  # filename used in error messages for --raw input


def get_parser():
    """Returns the argparse parser for the camel executable."""
    parser = argparse.ArgumentParser(prog="camel", description="Untyped lambda calculus interpreter.")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-p", "--path", help="file containing the λ-term to reduce")
    source.add_argument("-r", "--raw", help="λ-term to reduce")

    parser.add_argument("-s", "--strategy", choices=["normal", "eval"], default="normal",
                        help="'normal' reduces to beta normal form, 'eval' does a single bottom-up pass")
    parser.add_argument("-l", "--limit", type=int, default=RECURSION_LIMIT,
                        help=f"maximum number of normal-order steps (default: {RECURSION_LIMIT})")
    parser.add_argument("--parse-only", action="store_true", help="print the parsed term without reducing it")
    parser.add_argument("-v", "--verbose", action="store_true", help="print every normal-order step")
    return parser


def read_source(args):
    """Returns (filename, source) selected by args."""
    if args.raw is not None:
        return RAW_FILE, args.raw

    try:
        with open(args.path, "r", encoding="utf-8") as file:
            return args.path, file.read()
    except OSError:
        raise GenericException("'{}' could not be opened", args.path, diagnosis=False)


def run(args, error_handler):
    """Parses and reduces the source selected by args. Returns the resulting term."""
    path, source = read_source(args)
    error_handler.register_file(path)

    term = parse(source)
    if args.parse_only:
        return term

    if args.strategy == "eval":
        return evaluate(term)

    def print_step(step):
        print(colored("β ", attrs=["bold"]) + str(step))

    if args.verbose:
        print("  " + str(term))
    reducer = NormalOrderReducer(term, args.limit, on_step=print_step if args.verbose else None)
    result = reducer.reduce()

    if not reducer.reached:
        msg = "'{}' has no beta normal form (stopped after {} steps)"
        error_handler.warn(msg, (source.strip(), str(reducer.steps)), diagnosis=False)
    return result


def main(argv=None):
    """Runs camel interpreter. Called from camel executable script."""
    assert sys.version_info >= (3, 7), "camel cannot be run with python < 3.7"

    with ErrorHandler() as error_handler:
        args = get_parser().parse_args(argv)
        print(run(args, error_handler))


if __name__ == "__main__":
    main()
