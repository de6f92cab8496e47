"""Recursive-descent parser for the Lox language.

Each grammar rule is a method, from `declaration` at the top down to
`primary`. Binary operator rules loop so that they associate to the left;
unary and assignment recurse so that they associate to the right.

Syntax errors are reported to the diagnostic sink as soon as they are
found. The parser then discards tokens up to the next statement boundary
and carries on, so one pass reports every independent syntax error. The
statement that failed is kept in the output as an `Error` node.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Expr, Stmt, Literal, Unary, Binary, Logical, Grouping, Variable, Assign,
    Expression, Print, Var, Block, If, While, Function, Return, Class,
    Break, Continue, Empty, Error,
)
from .errors import Diagnostics, ParseError
from .token import Token, TokenType
from .types import NIL, TRUE, FALSE, Number, String

# Nesting bound for statements and expressions combined. Parsing and
# evaluation recurse once per level, so this keeps both well inside the
# interpreter's recursion limit.
MAX_DEPTH = 64

STATEMENT_STARTS = {
    TokenType.CLASS, TokenType.FUN, TokenType.VAR, TokenType.FOR,
    TokenType.IF, TokenType.WHILE, TokenType.PRINT, TokenType.RETURN,
}


class Parser:
    def __init__(self, tokens: List[Token], diagnostics: Diagnostics):
        self.tokens = tokens
        self.diagnostics = diagnostics
        self.current = 0
        self.depth = 0
        self.loop_depth = 0

    # Public API
    def parse(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.is_at_end():
            statements.append(self.declaration())
        return statements

    def parse_expression(self) -> Optional[Expr]:
        """Parse a single expression (used by tests and the AST printer)."""
        try:
            expr = self.expression()
            if not self.is_at_end():
                raise self.error(self.peek(), "Expect end of expression.")
            return expr
        except ParseError:
            return None

    # Token helpers
    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def check(self, token_type: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == token_type

    def match(self, *token_types: TokenType) -> bool:
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type: TokenType, message: str) -> Token:
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        self.diagnostics.token_error(token, message)
        return ParseError(token, message)

    def synchronize(self):
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_STARTS:
                return
            self.advance()

    def enter(self):
        self.depth += 1
        if self.depth > MAX_DEPTH:
            raise self.error(self.peek(), "Too much nesting.")

    def leave(self):
        self.depth -= 1

    # Statements
    def declaration(self) -> Stmt:
        saved_depth, saved_loops = self.depth, self.loop_depth
        try:
            if self.match(TokenType.CLASS):
                return self.class_declaration()
            if self.match(TokenType.FUN):
                return self.function('function')
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except ParseError as e:
            self.depth, self.loop_depth = saved_depth, saved_loops
            self.synchronize()
            return Error(e.token, e.message)

    def class_declaration(self) -> Class:
        name = self.consume(TokenType.IDENTIFIER, "Expect class name.")
        superclass = None
        if self.match(TokenType.LESS):
            self.consume(TokenType.IDENTIFIER, "Expect superclass name.")
            superclass = Variable(self.previous())
        self.consume(TokenType.LEFT_BRACE, "Expect '{' before class body.")
        methods: List[Function] = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end():
            methods.append(self.function('method'))
        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after class body.")
        return Class(name, superclass, methods)

    def function(self, kind: str) -> Function:
        name = self.consume(TokenType.IDENTIFIER, f"Expect {kind} name.")
        self.consume(TokenType.LEFT_PAREN, f"Expect '(' after {kind} name.")
        params: List[Token] = []
        if not self.check(TokenType.RIGHT_PAREN):
            while True:
                if len(params) >= 255:
                    self.diagnostics.token_error(self.peek(), "Can't have more than 255 parameters.")
                params.append(self.consume(TokenType.IDENTIFIER, "Expect parameter name."))
                if not self.match(TokenType.COMMA):
                    break
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after parameters.")
        self.consume(TokenType.LEFT_BRACE, f"Expect '{{' before {kind} body.")
        # loops do not reach into a function body
        saved_loops, self.loop_depth = self.loop_depth, 0
        try:
            body = self.block()
        finally:
            self.loop_depth = saved_loops
        return Function(name, params, body)

    def var_declaration(self) -> Var:
        name = self.consume(TokenType.IDENTIFIER, "Expect variable name.")
        initializer = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return Var(name, initializer)

    def statement(self) -> Stmt:
        if self.match(TokenType.PRINT):
            return self.print_statement()
        if self.match(TokenType.IF):
            return self.if_statement()
        if self.match(TokenType.WHILE):
            return self.while_statement()
        if self.match(TokenType.FOR):
            return self.for_statement()
        if self.match(TokenType.RETURN):
            return self.return_statement()
        if self.match(TokenType.BREAK):
            return self.break_statement()
        if self.match(TokenType.CONTINUE):
            return self.continue_statement()
        if self.match(TokenType.LEFT_BRACE):
            return Block(self.block())
        if self.match(TokenType.SEMICOLON):
            return Empty()
        return self.expression_statement()

    def print_statement(self) -> Print:
        value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return Print(value)

    def braced_block(self, message: str) -> Block:
        self.consume(TokenType.LEFT_BRACE, message)
        return Block(self.block())

    def if_statement(self) -> If:
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'if'.")
        condition = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after if condition.")
        then_branch = self.braced_block("Expect '{' before if body.")
        else_branch = None
        if self.match(TokenType.ELSE):
            else_branch = self.braced_block("Expect '{' after 'else'.")
        return If(condition, then_branch, else_branch)

    def loop_body(self, message: str) -> Block:
        self.loop_depth += 1
        try:
            return self.braced_block(message)
        finally:
            self.loop_depth -= 1

    def while_statement(self) -> While:
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'while'.")
        condition = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after condition.")
        body = self.loop_body("Expect '{' before while body.")
        return While(condition, body)

    def for_statement(self) -> Stmt:
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'for'.")
        if self.match(TokenType.SEMICOLON):
            initializer = None
        elif self.match(TokenType.VAR):
            initializer = self.var_declaration()
        else:
            initializer = self.expression_statement()

        condition = None
        if not self.check(TokenType.SEMICOLON):
            condition = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after loop condition.")

        increment = None
        if not self.check(TokenType.RIGHT_PAREN):
            increment = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.")
        body = self.loop_body("Expect '{' before for body.")

        # for (init; cond; incr) body  =>  { init; while (cond) { body; incr; } }
        if condition is None:
            condition = Literal(TRUE)
        loop: Stmt = While(condition, body, increment)
        if initializer is not None:
            loop = Block([initializer, loop])
        return loop

    def return_statement(self) -> Return:
        keyword = self.previous()
        value = None
        if not self.check(TokenType.SEMICOLON):
            value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after return value.")
        return Return(keyword, value)

    def break_statement(self) -> Break:
        keyword = self.previous()
        if self.loop_depth == 0:
            raise self.error(keyword, "Can't use 'break' outside of a loop.")
        self.consume(TokenType.SEMICOLON, "Expect ';' after 'break'.")
        return Break(keyword)

    def continue_statement(self) -> Continue:
        keyword = self.previous()
        if self.loop_depth == 0:
            raise self.error(keyword, "Can't use 'continue' outside of a loop.")
        self.consume(TokenType.SEMICOLON, "Expect ';' after 'continue'.")
        return Continue(keyword)

    def block(self) -> List[Stmt]:
        # the opening brace has already been consumed
        self.enter()
        statements: List[Stmt] = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end():
            statements.append(self.declaration())
        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        self.leave()
        return statements

    def expression_statement(self) -> Expression:
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return Expression(expr)

    # Expressions
    def expression(self) -> Expr:
        self.enter()
        expr = self.assignment()
        self.leave()
        return expr

    def assignment(self) -> Expr:
        expr = self.logic_or()
        if self.match(TokenType.EQUAL):
            equals = self.previous()
            self.enter()
            value = self.assignment()
            self.leave()
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            # reported, but the statement is still usable
            self.diagnostics.token_error(equals, "Invalid assignment target.")
        return expr

    def logic_or(self) -> Expr:
        expr = self.logic_and()
        while self.match(TokenType.OR_OR, TokenType.OR):
            operator = self.previous()
            right = self.logic_and()
            expr = Logical(expr, operator, right)
        return expr

    def logic_and(self) -> Expr:
        expr = self.equality()
        while self.match(TokenType.AND_AND, TokenType.AND):
            operator = self.previous()
            right = self.equality()
            expr = Logical(expr, operator, right)
        return expr

    def equality(self) -> Expr:
        expr = self.comparison()
        while self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self.previous()
            right = self.comparison()
            expr = Binary(expr, operator, right)
        return expr

    def comparison(self) -> Expr:
        expr = self.term()
        while self.match(TokenType.GREATER, TokenType.GREATER_EQUAL,
                         TokenType.LESS, TokenType.LESS_EQUAL):
            operator = self.previous()
            right = self.term()
            expr = Binary(expr, operator, right)
        return expr

    def term(self) -> Expr:
        expr = self.factor()
        while self.match(TokenType.MINUS, TokenType.PLUS):
            operator = self.previous()
            right = self.factor()
            expr = Binary(expr, operator, right)
        return expr

    def factor(self) -> Expr:
        expr = self.unary()
        while self.match(TokenType.SLASH, TokenType.STAR):
            operator = self.previous()
            right = self.unary()
            expr = Binary(expr, operator, right)
        return expr

    def unary(self) -> Expr:
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            self.enter()
            right = self.unary()
            self.leave()
            return Unary(operator, right)
        return self.primary()

    def primary(self) -> Expr:
        if self.match(TokenType.FALSE):
            return Literal(FALSE)
        if self.match(TokenType.TRUE):
            return Literal(TRUE)
        if self.match(TokenType.NIL):
            return Literal(NIL)
        if self.match(TokenType.NUMBER):
            return Literal(Number(float(self.previous().literal)))
        if self.match(TokenType.STRING):
            return Literal(String(self.previous().literal))
        if self.match(TokenType.IDENTIFIER):
            return Variable(self.previous())
        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)
        raise self.error(self.peek(), "Expect expression.")


def parse(tokens: List[Token], diagnostics: Diagnostics) -> List[Stmt]:
    """Convenience wrapper returning the statements for `tokens`."""
    return Parser(tokens, diagnostics).parse()
