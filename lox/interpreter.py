"""Tree-walking interpreter for the Lox language.

The interpreter evaluates the AST produced by `lox.parser` directly. It
owns the current `Environment`: entering a block pushes a child scope and
leaving it, normally or through an exception, restores the parent.

Values are never coerced. Arithmetic and ordering need numbers, `!` and
the logical operators need booleans, and `if`/`while` conditions must be
exactly `true` or `false`. Violations raise `LoxRuntimeError`, which
`interpret` reports through the diagnostic sink before abandoning the rest
of the current program.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Expr, Stmt, Literal, Unary, Binary, Logical, Grouping, Variable, Assign,
    Expression, Print, Var, Block, If, While, Function, Return, Class,
    Break, Continue, Empty, Error,
)
from .environment import Environment
from .errors import BreakSignal, ContinueSignal, Diagnostics, LoxRuntimeError
from .token import Token, TokenType
from .types import (
    LiteralValue, Number, Boolean, NIL, to_string, type_name,
)


class Interpreter:
    """Core interpreter that executes Lox statements."""
    def __init__(self, diagnostics: Optional[Diagnostics] = None,
                 debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.globals = Environment()
        self.environment = self.globals
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def interpret(self, statements: List[Stmt]) -> bool:
        """Execute `statements` in order. Returns False if a runtime error stopped them."""
        try:
            for stmt in statements:
                self.execute(stmt)
        except LoxRuntimeError as ex:
            self.debug(f"runtime error: {ex.message}")
            self.diagnostics.runtime_error(ex)
            return False
        except RecursionError:
            self.diagnostics.runtime_error(LoxRuntimeError("Maximum recursion depth exceeded."))
            return False
        return True

    def execute_block(self, statements: List[Stmt], environment: Environment):
        previous = self.environment
        self.environment = environment
        if self.debug_level >= 2:
            self.debug(f"enter scope depth {environment.depth()}")
        try:
            for stmt in statements:
                self.execute(stmt)
        finally:
            self.environment = previous
            if self.debug_level >= 2:
                self.debug(f"leave scope depth {environment.depth()}")

    def execute(self, node: Stmt):
        if self.debug_level >= 1:
            self.debug(f"execute {type(node).__name__}")
        if isinstance(node, Expression):
            self.evaluate(node.expression)
            return
        if isinstance(node, Print):
            value = self.evaluate(node.expression)
            print(to_string(value))
            return
        if isinstance(node, Var):
            value = self.evaluate(node.initializer) if node.initializer is not None else NIL
            self.environment.define(node.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"define {node.name.lexeme} = {value!r}")
            return
        if isinstance(node, Block):
            self.execute_block(node.statements, Environment(enclosing=self.environment))
            return
        if isinstance(node, If):
            cond = self.condition(node.condition)
            if self.debug_level >= 3:
                self.debug(f"if condition -> {cond}")
            if cond:
                self.execute(node.then_branch)
            elif node.else_branch is not None:
                self.execute(node.else_branch)
            return
        if isinstance(node, While):
            while self.condition(node.condition):
                try:
                    self.execute(node.body)
                except BreakSignal:
                    break
                except ContinueSignal:
                    pass
                if node.increment is not None:
                    self.evaluate(node.increment)
            return
        if isinstance(node, Break):
            raise BreakSignal()
        if isinstance(node, Continue):
            raise ContinueSignal()
        if isinstance(node, (Empty, Error)):
            return
        if isinstance(node, Function):
            raise LoxRuntimeError(f"Function declarations are not supported ('{node.name.lexeme}').", node.name)
        if isinstance(node, Class):
            raise LoxRuntimeError(f"Class declarations are not supported ('{node.name.lexeme}').", node.name)
        if isinstance(node, Return):
            raise LoxRuntimeError("Return statements are not supported.", node.keyword)
        # catch any other nodes
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def condition(self, expr: Expr) -> bool:
        value = self.evaluate(expr)
        if self.debug_level >= 3:
            self.debug(f"condition {value!r}")
        if not isinstance(value, Boolean):
            raise LoxRuntimeError(f"Condition must be a boolean, got {type_name(value)}.")
        return value.value

    def evaluate(self, node: Expr) -> LiteralValue:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Grouping):
            return self.evaluate(node.expression)
        if isinstance(node, Variable):
            return self.environment.get(node.name.lexeme)
        if isinstance(node, Assign):
            value = self.evaluate(node.value)
            self.environment.assign(node.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.name.lexeme} = {value!r}")
            return value
        if isinstance(node, Unary):
            return self.apply_unary_op(node.operator, self.evaluate(node.right))
        if isinstance(node, Logical):
            return self.evaluate_logical(node)
        if isinstance(node, Binary):
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            return self.apply_binary_op(node.operator, left, right)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def evaluate_logical(self, node: Logical) -> Boolean:
        op = node.operator
        left = self.check_boolean_operand(op, self.evaluate(node.left))
        # short-circuit: the right operand only runs when it decides the result
        if op.type in (TokenType.OR_OR, TokenType.OR):
            if left.value:
                return left
        elif not left.value:
            return left
        return self.check_boolean_operand(op, self.evaluate(node.right))

    def check_boolean_operand(self, op: Token, value: LiteralValue) -> Boolean:
        if not isinstance(value, Boolean):
            raise LoxRuntimeError(
                f"Operands must be booleans for operator '{op.lexeme}', got {type_name(value)}.", op)
        return value

    def apply_unary_op(self, op: Token, operand: LiteralValue) -> LiteralValue:
        if op.type == TokenType.MINUS:
            if not isinstance(operand, Number):
                raise LoxRuntimeError(f"Operand must be a number for operator '-', got {type_name(operand)}.", op)
            return Number(-operand.value)
        if op.type == TokenType.BANG:
            if not isinstance(operand, Boolean):
                raise LoxRuntimeError(f"Operand must be a boolean for operator '!', got {type_name(operand)}.", op)
            return Boolean(not operand.value)
        raise LoxRuntimeError(f"Invalid unary operator '{op.lexeme}'.", op)

    def apply_binary_op(self, op: Token, a: LiteralValue, b: LiteralValue) -> LiteralValue:
        if op.type == TokenType.EQUAL_EQUAL:
            return Boolean(a == b)
        if op.type == TokenType.BANG_EQUAL:
            return Boolean(a != b)
        # everything else is numeric
        if not isinstance(a, Number) or not isinstance(b, Number):
            raise LoxRuntimeError(
                f"Operands must be numbers for operator '{op.lexeme}', "
                f"got {type_name(a)} and {type_name(b)}.", op)
        x, y = a.value, b.value
        if op.type == TokenType.PLUS:
            return Number(x + y)
        if op.type == TokenType.MINUS:
            return Number(x - y)
        if op.type == TokenType.STAR:
            return Number(x * y)
        if op.type == TokenType.SLASH:
            if y == 0.0:
                raise LoxRuntimeError("Division by zero.", op)
            return Number(x / y)
        if op.type == TokenType.GREATER:
            return Boolean(x > y)
        if op.type == TokenType.GREATER_EQUAL:
            return Boolean(x >= y)
        if op.type == TokenType.LESS:
            return Boolean(x < y)
        if op.type == TokenType.LESS_EQUAL:
            return Boolean(x <= y)
        raise LoxRuntimeError(f"Invalid binary operator '{op.lexeme}'.", op)
