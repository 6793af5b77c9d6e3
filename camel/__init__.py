"""Untyped lambda calculus interpreter.

For reference:
- "pure": lambda calculus as defined by Church, with multi-character lowercase identifiers
- "lang": everything around it needed to run camel from the command line

Basic program flow:
    1. Lexer: produces tokens on demand from the source string (camel/pure/lexical.py)
    2. Parser: recursive descent over the tokens, produces a LambdaTerm (camel/pure/parser.py)
    3. Reduction: beta-reduces the LambdaTerm with capture-avoiding substitution (camel/pure/reduction.py)
    4. Output: str(term) renders the canonical form (camel/pure/term.py)

Parse errors and their display live in camel/lang/error.py.
"""

from camel.lang.error import ParseError, UnexpectedEndOfInput, UnexpectedToken
from camel.pure.lexical import Lexer, Token, TokenKind, tokenize
from camel.pure.parser import Parser, parse
from camel.pure.reduction import NormalOrderReducer, evaluate, substitute
from camel.pure.term import Abstraction, Application, Identifier, LambdaTerm

__version__ = "0.1.0"
