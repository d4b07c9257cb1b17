# arithmetic.py
"""
Small recursive-descent calculator for "what is 2+2" style questions.

Grammar (after sanitizing):

    expr    := term (('+' | '-') term)*
    term    := unary (('*' | '/') unary)*
    unary   := ('+' | '-') unary | primary
    primary := NUMBER | '(' expr ')'

Nothing is handed to eval(), so the only input that can reach the parser is
digits, the four operators, parentheses and dots.
"""
import math
import re

_DISALLOWED = re.compile(r"[^0-9+\-*/().]")
_NUMBER = re.compile(r"\d+(?:\.\d+)?|\.\d+")


class EvaluationError(ValueError):
    pass


def sanitize(expr: str) -> str:
    """Drop every character that is not a digit, operator, parenthesis or dot."""
    return _DISALLOWED.sub("", expr)


def _tokenize(expr: str):
    tokens = []
    pos = 0
    while pos < len(expr):
        ch = expr[pos]
        if ch in "+-*/()":
            tokens.append(ch)
            pos += 1
            continue
        m = _NUMBER.match(expr, pos)
        if not m:
            raise EvaluationError(f"malformed number at position {pos}")
        text = m.group()
        try:
            number = float(text) if "." in text else int(text)
        except ValueError as e:
            # int() refuses absurdly long digit strings
            raise EvaluationError(str(e)) from e
        if isinstance(number, float) and not math.isfinite(number):
            raise EvaluationError(f"number too large: {text[:20]}...")
        tokens.append(number)
        pos = m.end()
    return tokens


class _Parser:
    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self):
        tok = self.peek()
        if tok is None:
            raise EvaluationError("unexpected end of expression")
        self.pos += 1
        return tok

    def parse(self):
        value = self.expr()
        if self.peek() is not None:
            raise EvaluationError(f"unexpected token {self.peek()!r}")
        return value

    def expr(self):
        value = self.term()
        while self.peek() in ("+", "-"):
            if self.take() == "+":
                value = value + self.term()
            else:
                value = value - self.term()
        return value

    def term(self):
        value = self.unary()
        while self.peek() in ("*", "/"):
            op = self.take()
            rhs = self.unary()
            if op == "*":
                value = value * rhs
            elif rhs == 0:
                raise EvaluationError("division by zero")
            else:
                value = value / rhs
        return value

    def unary(self):
        if self.peek() == "-":
            self.take()
            return -self.unary()
        if self.peek() == "+":
            self.take()
            return self.unary()
        return self.primary()

    def primary(self):
        tok = self.take()
        if tok == "(":
            value = self.expr()
            if self.take() != ")":
                raise EvaluationError("missing closing parenthesis")
            return value
        if isinstance(tok, str):
            raise EvaluationError(f"unexpected token {tok!r}")
        return tok


def evaluate(expr: str):
    """Evaluate a sanitized arithmetic expression.

    Raises EvaluationError on empty or malformed input, division by zero,
    overflow, or a result that is not a finite number.
    """
    tokens = _tokenize(expr)
    if not tokens:
        raise EvaluationError("empty expression")
    try:
        result = _Parser(tokens).parse()
    except (OverflowError, RecursionError) as e:
        raise EvaluationError(str(e) or type(e).__name__) from e
    if isinstance(result, float) and not math.isfinite(result):
        raise EvaluationError(f"non-finite result {result!r}")
    return result


def format_number(value) -> str:
    """4.0 -> '4', 0.5 -> '0.5'"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
