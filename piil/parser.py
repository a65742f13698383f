"""
Parser for knowledge bases written in partial information ionic logic.

Input is a sequence of sentences separated by ';' or newlines:

    /* tweety */
    T bird
    T *0(bird, flies)
    NPT flies & penguin

Grammar (lowest to highest precedence, binary operators right associative):

    sentence     ->  [turnstile] implication
    implication  ->  disjunction ['->' sentence]
    disjunction  ->  conjunction [('|' | '\\/') disjunction]
    conjunction  ->  bang [('&' | '/\\') conjunction]
    bang         ->  unary ['!' bang]
    unary        ->  ('-' | '~' | "~'") unary | primary
    primary      ->  variable | '(' sentence ')' | 'bot' '(' sentence ')'
                   | '*' [digit] '(' sentence ',' sentence ')'

    turnstile    ->  T | NT | PT | NPT          (default T)
    digit        ->  0 .. 8
    variable     ->  letters, digits and '_'    (case-insensitive)

A leading T/NT/PT/NPT is a turnstile only when an operand follows it, so
"T" on its own is a variable. Turnstiles inside parentheses or ion
arguments are accepted and ignored: only whole sentences are signed.
Every parsed sentence is HARD knowledge.
"""

import re

from .core.formula import Formula, Connective, Knowledge, T, NT, PT, NPT

TURNSTILE_WORDS = {"T": T, "NT": NT, "PT": PT, "NPT": NPT}

_TOKEN_RE = re.compile(r"->|/\\|\\/|~'|[-~&|!(),*]|\w+")
_SPACE_RE = re.compile(r"\s+")

_ALIASES = {"/\\": "&", "\\/": "|"}

_UNARY = {
    "-": Connective.NEGATION,
    "~": Connective.STRONG_NEGATION,
    "~'": Connective.WEAK_NEGATION,
}

_OPERAND_START = {"(", "-", "~", "~'", "*"}


class ParseError(ValueError):
    """A sentence that could not be parsed. Carries the offending text."""

    def __init__(self, reason: str, sentence: str = ""):
        self.reason = reason
        self.sentence = sentence
        if sentence:
            super().__init__(f"{reason} (while processing {sentence})")
        else:
            super().__init__(reason)


def strip_comments(text: str) -> str:
    """Remove /* ... */ blocks. An unterminated block is left alone."""
    while True:
        start = text.find("/*")
        if start == -1:
            return text
        end = text.find("*/", start + 1)
        if end == -1:
            return text
        text = text[:start] + text[end + 2:]


def tokenize(text: str) -> list:
    tokens = []
    pos = 0
    while pos < len(text):
        space = _SPACE_RE.match(text, pos)
        if space:
            pos = space.end()
            continue
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise ParseError(f"Unexpected character {text[pos]!r}")
        token = match.group()
        tokens.append(_ALIASES.get(token, token))
        pos = match.end()
    return tokens


def _is_word(token) -> bool:
    return token is not None and (token[0].isalnum() or token[0] == "_")


class _SentenceParser:
    """Recursive descent over the tokens of one sentence."""

    def __init__(self, tokens: list):
        self.tokens = tokens
        self.pos = 0

    def peek(self, offset: int = 0):
        i = self.pos + offset
        return self.tokens[i] if i < len(self.tokens) else None

    def take(self):
        token = self.peek()
        self.pos += 1
        return token

    def expect(self, token: str, reason: str):
        if self.peek() != token:
            raise ParseError(reason)
        return self.take()

    def starts_operand(self, offset: int) -> bool:
        token = self.peek(offset)
        return _is_word(token) or token in _OPERAND_START

    # ── Grammar ──────────────────────────────────────────────────────────────

    def sentence(self):
        """Returns (sign or None, formula)."""
        sign = None
        if self.peek() in TURNSTILE_WORDS and self.starts_operand(1):
            sign = TURNSTILE_WORDS[self.take()]
        return sign, self.implication()

    def implication(self) -> Formula:
        left = self.disjunction()
        if self.peek() == "->":
            self.take()
            _, right = self.sentence()
            return Formula.binary(Connective.IMPLIES, left, right)
        return left

    def disjunction(self) -> Formula:
        left = self.conjunction()
        if self.peek() == "|":
            self.take()
            return Formula.binary(Connective.OR, left, self.disjunction())
        return left

    def conjunction(self) -> Formula:
        left = self.bang()
        if self.peek() == "&":
            self.take()
            return Formula.binary(Connective.AND, left, self.conjunction())
        return left

    def bang(self) -> Formula:
        left = self.unary()
        if self.peek() == "!":
            self.take()
            return Formula.binary(Connective.BANG, left, self.bang())
        return left

    def unary(self) -> Formula:
        token = self.peek()
        if token in _UNARY:
            self.take()
            if self.peek() is None:
                raise ParseError(f"Nothing after {token}")
            return Formula.unary(_UNARY[token], self.unary())
        return self.primary()

    def primary(self) -> Formula:
        token = self.peek()
        if token is None:
            raise ParseError("Empty operand found")
        if token == "*":
            return self.ion()
        if token == "bot" and self.peek(1) == "(":
            self.take()
            return Formula.unary(Connective.BOT, self.group())
        if token == "(":
            return self.group()
        if _is_word(token):
            self.take()
            return Formula.atom(token)
        raise ParseError(f"Unexpected {token!r}, operand expected")

    def group(self) -> Formula:
        self.expect("(", "( expected")
        _, f = self.sentence()
        self.expect(")", "Missing )")
        return f

    def ion(self) -> Formula:
        self.take()
        connective = Connective.GENERIC_ION
        if _is_word(self.peek()):
            digit = self.take()
            if len(digit) != 1 or digit not in "012345678":
                raise ParseError(f"Unknown ion *{digit}")
            connective = Connective.ion(int(digit))
        self.expect("(", "Parsing error. ( expected after ion")
        _, left = self.sentence()
        self.expect(",", "Parsing error. , expected")
        _, right = self.sentence()
        self.expect(")", "Missing )")
        return Formula.binary(connective, left, right)


def parse_sentence(text: str) -> Formula:
    """
    Parse one sentence into a signed HARD formula (default turnstile T).

    Raises ParseError carrying the sentence text.
    """
    try:
        tokens = tokenize(text)
        if not tokens:
            raise ParseError("Empty sentence")
        parser = _SentenceParser(tokens)
        sign, formula = parser.sentence()
        if parser.peek() is not None:
            raise ParseError(f"Unexpected {parser.peek()!r}")
    except ParseError as e:
        raise ParseError(e.reason, text.strip()) from None
    return formula.signed(T if sign is None else sign, Knowledge.HARD)


def split_sentences(text: str) -> list:
    """Sentences separated by ';' or newlines, blanks dropped."""
    return [s.strip() for s in re.split(r"[;\n]", text) if s.strip()]


def parse(text: str) -> list:
    """
    Parse a whole knowledge base. Comments are stripped first; the first
    bad sentence aborts the parse with a ParseError.
    """
    return [parse_sentence(s) for s in split_sentences(strip_comments(text))]
