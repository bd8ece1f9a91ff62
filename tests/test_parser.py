import pytest

from lambdacalc.parser import (
    Abstraction,
    ClassicKind,
    ClassicToken,
    EmptyExpressionError,
    InvalidCharacterError,
    ParseError,
    Sequence,
    Token,
    TokenKind,
    Variable,
    convert_classic_tokens,
    fold_exprs,
    get_ast,
    parse,
    tokenize_cla,
    tokenize_dbr,
)
from lambdacalc.term import Notation, Var, abs_n, app, lam

V1, V2, V3, V4, V5 = (Var(i) for i in range(1, 6))

BLC = (
    "(λ11)(λλλ1(λλλλ3(λ5(3(λ2(3(λλ3(λ123)))(4(λ4(λ31(21))))))(1(2(λ12))"
    "(λ4(λ4(λ2(14)))5))))(33)2)(λ1((λ11)(λ11)))"
)

Y = lam(app(lam(app(V2, app(V1, V1))), lam(app(V2, app(V1, V1)))))
S = abs_n(3, app(app(V3, V1), app(V2, V1)))


def lt():
    return Token(TokenKind.LAMBDA)


def lp():
    return Token(TokenKind.LPAREN)


def rp():
    return Token(TokenKind.RPAREN)


def num(n):
    return Token(TokenKind.NUMBER, n)


def test_tokenization_error_dbr():
    with pytest.raises(InvalidCharacterError) as info:
        tokenize_dbr("λλx2")
    assert (info.value.index, info.value.char) == (2, "x")


def test_tokenization_error_classic():
    with pytest.raises(InvalidCharacterError) as info:
        tokenize_cla("λa.λb a")
    assert (info.value.index, info.value.char) == (5, " ")


def test_tokenization_success():
    quine = "λ 1 ( (λ 1 1) (λ λ λ λ λ 1 4 (3 (5 5) 2) ) ) 1"
    assert tokenize_dbr(quine) == [
        lt(), num(1), lp(), lp(), lt(), num(1), num(1), rp(), lp(),
        lt(), lt(), lt(), lt(), lt(), num(1), num(4), lp(), num(3), lp(),
        num(5), num(5), rp(), num(2), rp(), rp(), rp(), num(1),
    ]


def test_tokenization_success_classic():
    blc_cla = str(parse(BLC, Notation.DE_BRUIJN))
    assert convert_classic_tokens(tokenize_cla(blc_cla)) == tokenize_dbr(BLC)


def test_tokenize_cla_names():
    assert tokenize_cla("λxy.xy (z)") == [
        ClassicToken(ClassicKind.LAMBDA, "xy"),
        ClassicToken(ClassicKind.NAME, "xy"),
        ClassicToken(ClassicKind.LPAREN),
        ClassicToken(ClassicKind.NAME, "z"),
        ClassicToken(ClassicKind.RPAREN),
    ]


def test_convert_free_variable_gets_next_index():
    tokens = tokenize_cla("λa.b")
    assert convert_classic_tokens(tokens) == [lt(), num(2)]


def test_alternative_lambda_parsing():
    assert parse("\\\\\\2(321)", Notation.DE_BRUIJN) == parse(
        "λλλ2(321)", Notation.DE_BRUIJN
    )


def test_succ_ast():
    ast = get_ast(tokenize_dbr("λλλ2(321)"))
    assert ast == Sequence(
        (
            Abstraction(),
            Abstraction(),
            Abstraction(),
            Variable(2),
            Sequence((Variable(3), Variable(2), Variable(1))),
        )
    )


def test_get_ast_empty():
    with pytest.raises(EmptyExpressionError):
        get_ast([])


def test_fold_exprs():
    exprs = (Abstraction(), Variable(1), Variable(1))
    assert fold_exprs(exprs) == lam(app(V1, V1))


def test_parse_y():
    assert parse("λ(λ2(11))(λ2(11))", Notation.DE_BRUIJN) == Y


def test_parse_y_classic():
    assert parse("λf.(λx.f (x x)) (λx.f (x x))", Notation.CLASSIC) == Y
    assert parse("λƒ.(λℵ.ƒ(ℵ ℵ))(λℵ.ƒ(ℵ ℵ))", Notation.CLASSIC) == Y


def test_parse_s():
    assert parse("λλλ31(21)", Notation.DE_BRUIJN) == S
    assert parse("\\\\\\3 1 (2 1)", Notation.DE_BRUIJN) == S


def test_parse_hex_index():
    assert parse("λa", Notation.DE_BRUIJN) == lam(Var(10))


def test_parse_quine():
    expected = lam(
        app(
            app(
                V1,
                app(
                    lam(app(V1, V1)),
                    abs_n(5, app(app(V1, V4), app(app(V3, app(V5, V5)), V2))),
                ),
            ),
            V1,
        )
    )
    assert parse("λ1((λ11)(λλλλλ14(3(55)2)))1", Notation.DE_BRUIJN) == expected


def test_parse_blc():
    p_a = abs_n(2, app(V3, lam(app(app(V1, V2), V3))))
    p_b = lam(
        app(
            app(V2, app(V3, p_a)),
            app(V4, lam(app(V4, lam(app(app(V3, V1), app(V2, V1)))))),
        )
    )
    p_c = app(V5, app(V3, p_b))
    p_d = app(
        app(V1, app(V2, lam(app(V1, V2)))),
        lam(app(app(V4, lam(app(V4, lam(app(V2, app(V1, V4)))))), V5)),
    )
    inner = abs_n(4, app(V3, lam(app(p_c, p_d))))
    body = app(app(app(V1, inner), app(V3, V3)), V2)
    expected = app(
        app(lam(app(V1, V1)), abs_n(3, body)),
        lam(app(V1, app(lam(app(V1, V1)), lam(app(V1, V1))))),
    )
    assert parse(BLC, Notation.DE_BRUIJN) == expected


def test_parse_round_trip_classic():
    term = parse(BLC, Notation.DE_BRUIJN)
    assert parse(str(term), Notation.CLASSIC) == term


@pytest.mark.parametrize("text", ["", "   "])
def test_parse_empty(text):
    with pytest.raises(EmptyExpressionError):
        parse(text, Notation.DE_BRUIJN)


def test_parse_empty_parens():
    with pytest.raises(EmptyExpressionError):
        parse("()", Notation.DE_BRUIJN)


def test_parse_lambda_without_body():
    with pytest.raises(ParseError):
        parse("λ", Notation.DE_BRUIJN)


def test_parse_invalid_character():
    with pytest.raises(InvalidCharacterError) as info:
        parse("λ1?", Notation.DE_BRUIJN)
    assert info.value.index == 2