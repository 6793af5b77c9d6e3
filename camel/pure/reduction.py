"""Beta reduction of pure lambda calculus terms.

Two strategies are provided:
    - evaluate: a shallow bottom-up pass. Both sides of an application are evaluated before the application itself is
      contracted, and the contracted result is not evaluated again. Abstraction bodies are left untouched.
    - NormalOrderReducer: repeatedly contracts the leftmost outermost redex (including under abstractions), which finds
      the beta normal form whenever one exists.

Both are built on capture-avoiding substitution: when a substituted value has a free variable that an inner abstraction
binds, the inner abstraction's parameter is renamed first. New names are the old name with a numeric suffix, so x
becomes x1, x2, ... and x1 becomes x2, x3, ...

Sources: https://plato.stanford.edu/entries/lambda-calculus/#Com,
         http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

from camel.pure.term import Abstraction, Application, Identifier

RECURSION_LIMIT = 1000  # default maximum number of normal-order steps


def split(name):
    """Splits name into its alphanumeric stem and its numeric suffix (-1 if there is none)."""
    stem = name.rstrip("0123456789")
    return stem, int(name[len(stem):]) if len(stem) < len(name) else -1


def get_new_name(name, used):
    """Returns the first name like name (same stem, larger suffix) that isn't in used."""
    stem, suffix = split(name)
    suffix = max(suffix + 1, 1)
    while f"{stem}{suffix}" in used:
        suffix += 1
    return f"{stem}{suffix}"


def substitute(value, node, name):
    """Returns node with every free occurence of the identifier name replaced by value. Subtrees that do not change are
    returned as is, not copied.
    """
    if isinstance(node, Identifier):
        return value if node.name == name else node

    if isinstance(node, Application):
        lhs = substitute(value, node.lhs, name)
        rhs = substitute(value, node.rhs, name)
        if lhs is node.lhs and rhs is node.rhs:
            return node
        return Application(lhs, rhs)

    # node is an Abstraction
    if node.param == name or name not in node.body.free_variables():
        return node  # name is shadowed, or does not occur

    param, body = node.param, node.body
    value_free = value.free_variables()
    if param in value_free:
        param = get_new_name(param, value_free | body.free_variables() | {name})
        body = substitute(Identifier(param), body, node.param)

    return Abstraction(param, substitute(value, body, name))


def evaluate(term):
    """Shallow call-by-value evaluation of term. Never fails.

    The left spine of nested applications is walked iteratively, so long chains like `a b c ...` do not recurse once
    per application.
    """
    spine = []
    while isinstance(term, Application):
        spine.append(term)
        term = term.lhs

    lhs = term  # identifiers and abstractions evaluate to themselves
    for node in reversed(spine):
        rhs = evaluate(node.rhs)
        if isinstance(lhs, Abstraction):
            lhs = substitute(rhs, lhs.body, lhs.param)
        elif lhs is node.lhs and rhs is node.rhs:
            lhs = node
        else:
            lhs = Application(lhs, rhs)
    return lhs


class NormalOrderReducer:
    """Implements normal-order beta reduction of a LambdaTerm."""

    def __init__(self, term, limit=RECURSION_LIMIT, on_step=None):
        """on_step, if given, is called with the whole term after every beta step."""
        self.term = term
        self.limit = limit
        self.on_step = on_step

        self.steps = 0
        self.reached = False  # whether or not a beta normal form was found

    @staticmethod
    def step(term):
        """Contracts the leftmost outermost redex of term. Returns None if term is in beta normal form."""
        if isinstance(term, Application):
            if term.is_redex:
                return substitute(term.rhs, term.lhs.body, term.lhs.param)

            lhs = NormalOrderReducer.step(term.lhs)
            if lhs is not None:
                return Application(lhs, term.rhs)

            rhs = NormalOrderReducer.step(term.rhs)
            if rhs is not None:
                return Application(term.lhs, rhs)

        elif isinstance(term, Abstraction):
            body = NormalOrderReducer.step(term.body)
            if body is not None:
                return Abstraction(term.param, body)

        return None

    def reduce(self):
        """Reduces self.term until it is in beta normal form, until a step does not change it, or until self.limit steps
        have been taken. Returns the resulting term.
        """
        while self.steps < self.limit:
            reduced = NormalOrderReducer.step(self.term)
            if reduced is None:
                self.reached = True
                break

            self.steps += 1
            if reduced == self.term:
                break  # ex: (λx.x x) (λx.x x) reduces to itself

            self.term = reduced
            if self.on_step is not None:
                self.on_step(self.term)

        if not self.reached:
            # the last allowed step may have produced a normal form
            self.reached = NormalOrderReducer.step(self.term) is None
        return self.term
