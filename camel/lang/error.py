"""Error handling for camel. Only GenericExceptions should be encountered during running: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Parsing is the only stage that can fail on user input. Exactly two parse errors exist:
    - UnexpectedToken: a token was found where the grammar requires something else
    - UnexpectedEndOfInput: the source ended where the grammar requires a token
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a camel error/warning. exprs[0] should be the
    source text that contains the offending span [start, end).
    """

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning."""
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)


class ParseError(GenericException):
    """Superclass of the two errors the parser can raise."""


class UnexpectedToken(ParseError):
    """Raised when the current token does not match what the grammar position requires."""

    def __init__(self, token, source):
        self.kind = token.kind
        self.text = token.text
        super().__init__(f"unexpected {self.kind.value} '{{1}}'", (source, token.text),
                         start=token.start, end=token.start + len(token.text))

    def __repr__(self):
        return f"{type(self).__name__}(kind={self.kind}, text={self.text!r})"


class UnexpectedEndOfInput(ParseError):
    """Raised when the source ends where a token is required."""

    def __init__(self, source):
        super().__init__("unexpected end of input", source, start=len(source), end=len(source) + 1)

    def __repr__(self):
        return f"{type(self).__name__}()"


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom camel errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.file = None

    def register_file(self, path):
        """Registers the origin of the source being processed, used as the location prefix of messages."""
        self.file = path

    @staticmethod
    def locate(expr, pos):
        """Returns (line, line_num, col) of offset pos in expr. line_num and col are 1-indexed."""
        pos = min(pos, len(expr))
        line_start = expr.rfind("\n", 0, pos) + 1
        line_end = expr.find("\n", pos)
        if line_end == -1:
            line_end = len(expr)
        return expr[line_start:line_end], expr.count("\n", 0, pos) + 1, pos - line_start + 1

    @staticmethod
    def diagnose(error, warning=False):
        """Returns offending part of error.expr highlighted and bolded, with a caret underline."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        line, __, col = ErrorHandler.locate(error.expr, error.start)
        start = col - 1
        end = max(start + (error.end - error.start), start + 1)

        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:end], color, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), color, attrs=["bold"])

        return diagnosis

    def _prefix(self, error):
        """Returns 'file:line:col: ' for error, or '' if no file has been registered."""
        if self.file is None:
            return ""
        __, line_num, col = ErrorHandler.locate(error.expr, error.start)
        return colored(f"{self.file}:{line_num}:{col}: ", attrs=["bold"])

    def warn(self, *args, **kwargs):
        """Generates and prints runtime warning message based on args."""
        error = GenericException(*args, **kwargs)

        error_msg = self._prefix(error)
        error_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error):
        """Prints error, which must be a GenericException. Exits if self.fatal."""
        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        elif error.expr:
            error_msg += self._prefix(error)

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("λ-term is nested too deeply, maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
