"""Render Lox AST nodes as fully parenthesized prefix expressions.

`-123 * (45.67)` prints as `(* (- 123) (group 45.67))`. Statements use the
same notation, e.g. `(var x = 1)` or `(block (print x))`.
"""

from __future__ import annotations

from typing import List

from .ast import (
    Expr, Stmt, Literal, Unary, Binary, Logical, Grouping, Variable, Assign,
    Expression, Print, Var, Block, If, While, Function, Return, Class,
    Break, Continue, Empty, Error,
)
from .types import String, to_string


def parenthesize(name: str, *parts: str) -> str:
    return '(' + ' '.join((name,) + parts) + ')'


def print_expr(node: Expr) -> str:
    if isinstance(node, (Binary, Logical)):
        return parenthesize(node.operator.lexeme, print_expr(node.left), print_expr(node.right))
    if isinstance(node, Grouping):
        return parenthesize('group', print_expr(node.expression))
    if isinstance(node, Literal):
        if isinstance(node.value, String):
            return f'"{node.value.value}"'
        return to_string(node.value)
    if isinstance(node, Unary):
        return parenthesize(node.operator.lexeme, print_expr(node.right))
    if isinstance(node, Variable):
        return node.name.lexeme
    if isinstance(node, Assign):
        return parenthesize(node.name.lexeme, '=', print_expr(node.value))
    raise TypeError(f"print_expr: unexpected node type {type(node)}")


def print_stmt(node: Stmt) -> str:
    if isinstance(node, Expression):
        return parenthesize(';', print_expr(node.expression))
    if isinstance(node, Print):
        return parenthesize('print', print_expr(node.expression))
    if isinstance(node, Var):
        if node.initializer is None:
            return parenthesize('var', node.name.lexeme)
        return parenthesize('var', node.name.lexeme, '=', print_expr(node.initializer))
    if isinstance(node, Block):
        return parenthesize('block', *(print_stmt(s) for s in node.statements))
    if isinstance(node, If):
        parts = [print_expr(node.condition), print_stmt(node.then_branch)]
        if node.else_branch is not None:
            parts.append(print_stmt(node.else_branch))
        return parenthesize('if', *parts)
    if isinstance(node, While):
        parts = [print_expr(node.condition), print_stmt(node.body)]
        if node.increment is not None:
            parts.append(parenthesize('step', print_expr(node.increment)))
        return parenthesize('while', *parts)
    if isinstance(node, Function):
        params = '(' + ' '.join(p.lexeme for p in node.params) + ')'
        return parenthesize('fun', node.name.lexeme, params, *(print_stmt(s) for s in node.body))
    if isinstance(node, Return):
        if node.value is None:
            return '(return)'
        return parenthesize('return', print_expr(node.value))
    if isinstance(node, Class):
        parts = [node.name.lexeme]
        if node.superclass is not None:
            parts += ['<', node.superclass.name.lexeme]
        parts += [print_stmt(m) for m in node.methods]
        return parenthesize('class', *parts)
    if isinstance(node, Break):
        return '(break)'
    if isinstance(node, Continue):
        return '(continue)'
    if isinstance(node, Empty):
        return '(empty)'
    if isinstance(node, Error):
        return parenthesize('error', f'"{node.message}"')
    raise TypeError(f"print_stmt: unexpected node type {type(node)}")


def print_program(statements: List[Stmt]) -> str:
    return '\n'.join(print_stmt(s) for s in statements)
