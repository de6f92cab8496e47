from lox.ast import Binary, Grouping, Literal, Unary
from lox.ast_printer import print_expr, print_program
from lox.errors import Diagnostics
from lox.parser import Parser
from lox.scanner import Scanner
from lox.token import Token, TokenType
from lox.types import Number


def parse(source):
    diagnostics = Diagnostics()
    tokens = Scanner(source, diagnostics).scan_tokens()
    return Parser(tokens, diagnostics)


def test_hand_built_expression():
    expr = Binary(
        Unary(Token(TokenType.MINUS, '-', None, 1), Literal(Number(123.0))),
        Token(TokenType.STAR, '*', None, 1),
        Grouping(Literal(Number(45.67))),
    )
    assert print_expr(expr) == '(* (- 123) (group 45.67))'


def test_parsed_expression():
    expr = parse('-123 * (45.67)').parse_expression()
    assert print_expr(expr) == '(* (- 123) (group 45.67))'


def test_literals_and_assignment():
    expr = parse('a = "s" == nil || !true').parse_expression()
    assert print_expr(expr) == '(a = (|| (== "s" nil) (! true)))'


def test_statements():
    statements = parse(
        'var x = 1; var y; print x; { x = 2; } if (x > 1) { } else { print y; } '
        'for (var i = 0; i < 2; i = i + 1) { continue; } ;'
    ).parse()
    assert print_program(statements).split('\n') == [
        '(var x = 1)',
        '(var y)',
        '(print x)',
        '(block (; (x = 2)))',
        '(if (> x 1) (block) (block (print y)))',
        '(block (var i = 0) (while (< i 2) (block (continue)) (step (i = (+ i 1)))))',
        '(empty)',
    ]


def test_declarations():
    statements = parse('fun f(a, b) { return a; } class C < B { m() { return; } }').parse()
    assert print_program(statements).split('\n') == [
        '(fun f (a b) (return a))',
        '(class C < B (fun m () (return)))',
    ]
