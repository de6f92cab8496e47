from lox.ast import (
    Assign, Binary, Block, Break, Class, Continue, Empty, Error, Expression, Function,
    Grouping, If, Literal, Logical, Print, Return, Unary, Var, Variable, While,
)
from lox.errors import Diagnostics
from lox.parser import MAX_DEPTH, Parser
from lox.scanner import Scanner
from lox.types import TRUE, Number


def parse(source):
    diagnostics = Diagnostics()
    tokens = Scanner(source, diagnostics).scan_tokens()
    return Parser(tokens, diagnostics).parse(), diagnostics


def parse_expr(source):
    diagnostics = Diagnostics()
    tokens = Scanner(source, diagnostics).scan_tokens()
    return Parser(tokens, diagnostics).parse_expression()


def test_precedence_factor_binds_tighter_than_term():
    expr = parse_expr('1 + 2 * 3')
    assert isinstance(expr, Binary)
    assert expr.operator.lexeme == '+'
    assert isinstance(expr.right, Binary) and expr.right.operator.lexeme == '*'


def test_binary_operators_are_left_associative():
    expr = parse_expr('1 - 2 - 3')
    assert expr.operator.lexeme == '-'
    assert isinstance(expr.left, Binary)
    assert expr.right == Literal(Number(3.0))


def test_unary_is_right_associative():
    expr = parse_expr('!!true')
    assert isinstance(expr, Unary) and isinstance(expr.right, Unary)


def test_logical_or_is_looser_than_and():
    expr = parse_expr('a || b && c')
    assert isinstance(expr, Logical) and expr.operator.lexeme == '||'
    assert isinstance(expr.right, Logical) and expr.right.operator.lexeme == '&&'


def test_keyword_spellings_of_logical_operators():
    expr = parse_expr('a or b and c')
    assert isinstance(expr, Logical) and expr.operator.lexeme == 'or'


def test_assignment_is_right_associative():
    expr = parse_expr('a = b = 1')
    assert isinstance(expr, Assign) and expr.name.lexeme == 'a'
    assert isinstance(expr.value, Assign) and expr.value.name.lexeme == 'b'


def test_invalid_assignment_target(capsys):
    statements, diagnostics = parse('(a) = 1;')
    assert diagnostics.had_error
    assert isinstance(statements[0], Expression)
    assert 'Invalid assignment target.' in capsys.readouterr().err


def test_grouping():
    expr = parse_expr('(1)')
    assert expr == Grouping(Literal(Number(1.0)))


def test_statement_forms():
    statements, diagnostics = parse(
        'var a; var b = 1; print b; { a = 2; } ; '
        'if (true) { print 1; } else { print 2; } while (false) { }'
    )
    assert not diagnostics.had_error
    kinds = [type(s) for s in statements]
    assert kinds == [Var, Var, Print, Block, Empty, If, While]
    assert statements[0].initializer is None
    assert isinstance(statements[3].statements[0], Expression)
    assert isinstance(statements[5].else_branch, Block)


def test_if_requires_braces(capsys):
    statements, diagnostics = parse('if (true) print 1;')
    assert diagnostics.had_error
    assert "Expect '{' before if body." in capsys.readouterr().err


def test_for_desugars_to_while_in_block():
    statements, diagnostics = parse('for (var i = 0; i < 3; i = i + 1) { print i; }')
    assert not diagnostics.had_error
    block = statements[0]
    assert isinstance(block, Block)
    init, loop = block.statements
    assert isinstance(init, Var) and init.name.lexeme == 'i'
    assert isinstance(loop, While)
    assert isinstance(loop.condition, Binary)
    assert isinstance(loop.increment, Assign)
    assert isinstance(loop.body.statements[0], Print)


def test_for_without_clauses_loops_on_true():
    statements, _ = parse('for (;;) { break; }')
    loop = statements[0]
    assert isinstance(loop, While)
    assert loop.condition == Literal(TRUE)
    assert loop.increment is None
    assert isinstance(loop.body.statements[0], Break)


def test_break_and_continue_outside_loop(capsys):
    statements, diagnostics = parse('break; continue;')
    assert diagnostics.had_error
    err = capsys.readouterr().err
    assert "Can't use 'break' outside of a loop." in err
    assert "Can't use 'continue' outside of a loop." in err


def test_continue_inside_loop():
    statements, diagnostics = parse('while (true) { continue; }')
    assert not diagnostics.had_error
    assert isinstance(statements[0].body.statements[0], Continue)


def test_function_class_and_return_are_parsed():
    statements, diagnostics = parse(
        'fun add(a, b) { return a + b; } '
        'class Point < Base { init(x) { return; } }'
    )
    assert not diagnostics.had_error
    fun, klass = statements
    assert isinstance(fun, Function)
    assert [p.lexeme for p in fun.params] == ['a', 'b']
    assert isinstance(fun.body[0], Return)
    assert isinstance(klass, Class)
    assert klass.superclass == Variable(klass.superclass.name)
    assert klass.superclass.name.lexeme == 'Base'
    assert klass.methods[0].name.lexeme == 'init'
    assert klass.methods[0].body[0].value is None


def test_error_reports_line_and_lexeme(capsys):
    _, diagnostics = parse('var x = 1;\nprint x +;')
    assert diagnostics.had_error
    err = capsys.readouterr().err
    assert '[line 2] Error: Expect expression.' in err
    assert 'About: ;' in err


def test_error_at_end_of_input(capsys):
    _, diagnostics = parse('print 1')
    assert diagnostics.had_error
    err = capsys.readouterr().err
    assert "Expect ';' after value." in err
    assert 'About: end' in err


def test_recovers_and_reports_multiple_errors(capsys):
    statements, diagnostics = parse('var = 1;\nprint 2;\nvar y = ;\nprint 3;')
    assert diagnostics.had_error
    err = capsys.readouterr().err
    assert '[line 1] Error: Expect variable name.' in err
    assert '[line 3] Error: Expect expression.' in err
    assert [type(s) for s in statements] == [Error, Print, Error, Print]


def test_nesting_limit(capsys):
    source = 'print ' + '(' * (MAX_DEPTH + 5) + '1' + ')' * (MAX_DEPTH + 5) + ';'
    _, diagnostics = parse(source)
    assert diagnostics.had_error
    assert 'Too much nesting.' in capsys.readouterr().err


def test_long_assignment_chain_hits_nesting_limit(capsys):
    statements, diagnostics = parse('var a; ' + 'a = ' * 3000 + '1; print a;')
    assert diagnostics.had_error
    assert 'Too much nesting.' in capsys.readouterr().err
    # parsing resumes after the broken statement
    assert [type(s) for s in statements] == [Var, Error, Print]


def test_nesting_within_limit_is_fine():
    source = 'print ' + '(' * 20 + '1' + ')' * 20 + ';'
    _, diagnostics = parse(source)
    assert not diagnostics.had_error
