"""Abstract syntax tree for tini. An AST is one expression together with the position of its first token:

```
(define x 5)               ; Define(name="x", parameters=None, value=...)
(define (f x y) (+ x y))   ; Define(name="f", parameters=("x", "y"), value=...)
(if c 1 0)                 ; If(condition=..., consequence=..., alternative=...)
(f 1 2)                    ; FunctionCall(name="f", arguments=(..., ...))
x                          ; Identifier("x")
5                          ; Integer(5)
```

Trees are immutable once built. Positions are diagnostic only and are ignored when comparing trees.
"""

from dataclasses import dataclass, field, fields

from tini.token import Position


class Expression:
    """Superclass of every expression type."""


@dataclass(frozen=True)
class Define(Expression):
    """parameters is None for a variable definition, and a (possibly empty) tuple of names for a function definition.
    """
    name: str
    parameters: tuple
    value: "AST"


@dataclass(frozen=True)
class If(Expression):
    condition: "AST"
    consequence: "AST"
    alternative: "AST"


@dataclass(frozen=True)
class FunctionCall(Expression):
    name: str
    arguments: tuple = ()


@dataclass(frozen=True)
class Identifier(Expression):
    name: str


@dataclass(frozen=True)
class Integer(Expression):
    value: int


@dataclass(frozen=True)
class AST:
    expression: Expression
    position: Position = field(default=Position(), compare=False)

    def display(self, indents=0):
        """Recursively displays the tree with readable format.

        Format:
        <Expression>(<field>=<value>, ..., at <position>)
            <Expression>(...)  # <-- one line per sub-tree, indented
        """
        attributes, nodes = [], []
        for attribute in fields(self.expression):
            value = getattr(self.expression, attribute.name)
            if isinstance(value, AST):
                nodes.append(value)
            elif attribute.name == "arguments":
                nodes.extend(value)
            else:
                attributes.append(f"{attribute.name}={value!r}")

        result = f"{'    ' * indents}{type(self.expression).__name__}({', '.join(attributes)}) at {self.position}"
        for node in nodes:
            result += "\n" + node.display(indents + 1)
        return result

    def source(self):
        """Renders the tree back to tini source text."""
        expr = self.expression
        if isinstance(expr, Integer):
            return str(expr.value)
        elif isinstance(expr, Identifier):
            return expr.name
        elif isinstance(expr, If):
            return f"(if {expr.condition.source()} {expr.consequence.source()} {expr.alternative.source()})"
        elif isinstance(expr, Define):
            name = expr.name if expr.parameters is None else f"({' '.join((expr.name,) + tuple(expr.parameters))})"
            return f"(define {name} {expr.value.source()})"
        return f"({' '.join([expr.name] + [argument.source() for argument in expr.arguments])})"

    def __str__(self):
        return self.display()
