"""Pure lambda calculus terms. A term is exactly one of

```
<λ-term> ::= <lcid>                   ; "variable": Identifier
           | "λ" <lcid> "." <λ-term>  ; "abstraction": Abstraction
           | <λ-term> <λ-term>        ; "application": Application
```

Terms are immutable, so a subtree can be shared by any number of parents: substitution and reduction rebuild only the
nodes along the path they change.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields


class LambdaTerm(ABC):
    """Represents a valid λ-term: identifier, abstraction, or application."""

    @property
    @abstractmethod
    def nodes(self):
        """Child terms, in left-to-right order."""

    @abstractmethod
    def free_variables(self):
        """Returns frozenset of the names occuring free in this term."""

    @abstractmethod
    def alpha_equals(self, other, mapping=None, other_mapping=None):
        """Whether or not two LambdaTerms are alpha-equivalent. mapping maps bound names of self to the names bound at
        the same position in other; other_mapping is the same map from the perspective of other.
        """

    def display(self, indents=0):
        """Recursively displays LambdaTerm tree with readable format.

        Format:
        <LambdaTerm>(<field>='<value>', <field>=[
            <LambdaTerm>(<field>='<value>', ...),
            ...
        ])
        """
        attrs = [f"{field.name}='{getattr(self, field.name)}'" for field in fields(self)
                 if isinstance(getattr(self, field.name), str)]
        result = f"{'    ' * indents}{type(self).__name__}({', '.join(attrs)}"
        if self.nodes:
            result += ", nodes=[" if attrs else "nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __str__(self):
        return self.render()

    @abstractmethod
    def render(self):
        """Canonical textual form of this term."""


@dataclass(frozen=True)
class Identifier(LambdaTerm):
    """Variable reference. name is a lowercase-led ASCII alphanumeric string."""
    name: str

    @property
    def nodes(self):
        return ()

    def free_variables(self):
        return frozenset([self.name])

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if mapping is None:
            mapping = {}
        if other_mapping is None:
            other_mapping = {}

        if not isinstance(other, Identifier):
            return False

        bound = mapping.get(self.name)
        other_bound = other_mapping.get(other.name)
        if bound or other_bound:
            # both must be bound, and by binders at the same position
            return bool(bound and other_bound) and bound[-1] == other.name and other_bound[-1] == self.name
        return self.name == other.name

    def render(self):
        return self.name


@dataclass(frozen=True)
class Abstraction(LambdaTerm):
    """Abstraction: binds param over body."""
    param: str
    body: LambdaTerm

    @property
    def nodes(self):
        return (self.body,)

    def free_variables(self):
        return self.body.free_variables() - {self.param}

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if mapping is None:
            mapping = {}
        if other_mapping is None:
            other_mapping = {}

        if not isinstance(other, Abstraction):
            return False

        mapping.setdefault(self.param, []).append(other.param)
        other_mapping.setdefault(other.param, []).append(self.param)
        try:
            return self.body.alpha_equals(other.body, mapping, other_mapping)
        finally:
            mapping[self.param].pop()
            other_mapping[other.param].pop()

    def render(self):
        return f"(λ{self.param}. {self.body.render()})"


@dataclass(frozen=True)
class Application(LambdaTerm):
    """Application of lhs to rhs."""
    lhs: LambdaTerm
    rhs: LambdaTerm

    @property
    def nodes(self):
        return (self.lhs, self.rhs)

    def free_variables(self):
        return self.lhs.free_variables() | self.rhs.free_variables()

    def alpha_equals(self, other, mapping=None, other_mapping=None):
        if mapping is None:
            mapping = {}
        if other_mapping is None:
            other_mapping = {}

        if not isinstance(other, Application):
            return False

        for node, other_node in zip(self.nodes, other.nodes):
            if not node.alpha_equals(other_node, mapping, other_mapping):
                return False
        return True

    def render(self):
        return f"{self.lhs.render()} {self.rhs.render()}"

    @property
    def is_redex(self):
        """An Application is a redex if its left child is an Abstraction."""
        return isinstance(self.lhs, Abstraction)
