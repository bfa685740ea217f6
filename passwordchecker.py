#!/usr/bin/env python3
"""
passwordchecker.py

Password strength scoring (0-100) and secure password generation.

Both functions are pure apart from the entropy drawn by generate(); nothing
here logs, stores or transmits a password.
"""

import math
import re
import secrets
from dataclasses import dataclass, field
from typing import Callable, Optional

MIN_LENGTH = 6
FULL_LENGTH = 12  # no extra length credit past this

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
GEN_SYMBOLS = "!@#$%^&*()-_=+[]{};:,.<>/?`~"
ALPHABET = LOWERCASE + UPPERCASE + DIGITS + GEN_SYMBOLS  # 90 chars

# Characters that earn symbol credit when scoring (superset of GEN_SYMBOLS)
SYMBOLS = r"""!@#$%^&*()-_=+[]{};:'",.<>/?\|`~"""

COMMON_PATTERNS = (
    "123", "1234", "12345", "123456", "password", "qwerty",
    "abc", "letmein", "admin", "welcome", "iloveyou",
)

LABEL_INVALID = "Invalid"
LABEL_TOO_SHORT = f"Too short (min {MIN_LENGTH})"
LABEL_WEAK = "Weak"
LABEL_MEDIUM = "Medium"
LABEL_STRONG = "Strong"
LABEL_VERY_STRONG = "Very Strong"

LENGTH_MESSAGE = f"Length must be an integer >= {MIN_LENGTH}"

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile("[" + re.escape(SYMBOLS) + "]")
_REPEAT_RE = re.compile(r"(.)\1\1", re.DOTALL)
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


# -------------------------
# Errors
# -------------------------
class PasswordAnalyzerError(Exception):
    """Base class for errors raised by this module."""


class InvalidLengthError(PasswordAnalyzerError, ValueError):
    """Requested generation length is not an integer >= MIN_LENGTH."""

    def __init__(self, value=None, message: str = LENGTH_MESSAGE):
        super().__init__(message)
        self.value = value
        self.message = message


class EvaluationInputError(PasswordAnalyzerError, TypeError):
    """Unusable scoring input. evaluate() folds this into an "Invalid" result
    instead of raising it."""


# -------------------------
# Result types
# -------------------------
@dataclass(frozen=True)
class ScoreBreakdown:
    length_score: int = 0
    case_score: int = 0
    digit_score: int = 0
    symbol_score: int = 0
    pattern_score: int = 0
    contains_common_pattern: bool = False
    has_repeated_run: bool = False

    @property
    def total(self) -> int:
        return (self.length_score + self.case_score + self.digit_score
                + self.symbol_score + self.pattern_score)

    @property
    def pattern_check(self) -> "PatternCheck":
        return PatternCheck(self.contains_common_pattern, self.has_repeated_run)

    def to_dict(self) -> dict:
        return {
            "lengthScore": self.length_score,
            "caseScore": self.case_score,
            "digitScore": self.digit_score,
            "symbolScore": self.symbol_score,
            "patternScore": self.pattern_score,
            "containsCommonPattern": self.contains_common_pattern,
            "hasRepeatedRun": self.has_repeated_run,
        }


@dataclass(frozen=True)
class ScoreResult:
    score: int
    label: str
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)

    @property
    def short_circuit(self) -> bool:
        """True when scoring stopped before the factor checks ran."""
        return self.label in (LABEL_INVALID, LABEL_TOO_SHORT)

    def to_dict(self) -> dict:
        if self.label == LABEL_INVALID:
            breakdown = {}
        elif self.label == LABEL_TOO_SHORT:
            breakdown = {"lengthScore": 0}
        else:
            breakdown = self.breakdown.to_dict()
        return {"score": self.score, "label": self.label, "breakdown": breakdown}


@dataclass(frozen=True)
class PatternCheck:
    contains_common: bool
    repeated_run: bool

    @property
    def penalized(self) -> bool:
        return self.contains_common or self.repeated_run

    @property
    def reason(self) -> Optional[str]:
        if self.contains_common:
            return "common-pattern"
        if self.repeated_run:
            return "repeated-run"
        return None


# -------------------------
# Scoring
# -------------------------
def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def length_score(pw: str) -> int:
    ramp = (min(len(pw), FULL_LENGTH) - MIN_LENGTH) / (FULL_LENGTH - MIN_LENGTH)
    return min(25, _round_half_up(min(1.0, ramp) * 25))


def case_score(pw: str) -> int:
    has_lower = bool(_LOWER_RE.search(pw))
    has_upper = bool(_UPPER_RE.search(pw))
    if has_lower and has_upper:
        return 15
    if has_lower or has_upper:
        return 7
    return 0


def digit_score(pw: str) -> int:
    return 20 if _DIGIT_RE.search(pw) else 0


def symbol_score(pw: str) -> int:
    return 20 if _SYMBOL_RE.search(pw) else 0


def check_patterns(pw: str) -> PatternCheck:
    lowered = pw.lower()
    return PatternCheck(
        contains_common=any(p in lowered for p in COMMON_PATTERNS),
        repeated_run=bool(_REPEAT_RE.search(pw)),
    )


def classify_score(score: int) -> str:
    if score >= 85:
        return LABEL_VERY_STRONG
    if score >= 65:
        return LABEL_STRONG
    if score >= 40:
        return LABEL_MEDIUM
    return LABEL_WEAK


def evaluate(password) -> ScoreResult:
    """
    Score a password from 0 to 100.

    Five independently capped factors are summed: length (up to 25, full
    marks at 12 chars), letter case (15 for mixed, 7 for one case), digits
    (20), symbols (20) and patterns (20, withheld when the password contains
    a common token or a run of three identical characters).

    Never raises: None, empty or non-string input gives score 0 / "Invalid",
    and anything shorter than MIN_LENGTH gives score 0 / "Too short (min 6)".
    """
    if not password or not isinstance(password, str):
        return ScoreResult(score=0, label=LABEL_INVALID)

    if len(password) < MIN_LENGTH:
        return ScoreResult(score=0, label=LABEL_TOO_SHORT)

    patterns = check_patterns(password)
    breakdown = ScoreBreakdown(
        length_score=length_score(password),
        case_score=case_score(password),
        digit_score=digit_score(password),
        symbol_score=symbol_score(password),
        pattern_score=0 if patterns.penalized else 20,
        contains_common_pattern=patterns.contains_common,
        has_repeated_run=patterns.repeated_run,
    )
    score = min(100, breakdown.total)
    return ScoreResult(score=score, label=classify_score(score), breakdown=breakdown)


# -------------------------
# Generation
# -------------------------
def validate_length(length) -> int:
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(length)
    if length < MIN_LENGTH:
        raise InvalidLengthError(length)
    return length


def parse_length(value) -> int:
    """
    Coerce a request value the way a lenient web form would: ints as-is,
    integral floats, and strings starting with an integer ("12", " 12px").
    Raises InvalidLengthError for anything else or for values below MIN_LENGTH.
    """
    if isinstance(value, bool):
        raise InvalidLengthError(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidLengthError(value)
        value = int(value)
    elif isinstance(value, str):
        m = _LEADING_INT_RE.match(value)
        if not m:
            raise InvalidLengthError(value)
        value = int(m.group(1))
    return validate_length(value)


def generate(length, randbytes: Callable[[int], bytes] = secrets.token_bytes) -> str:
    """
    Return `length` characters drawn from ALPHABET.

    One byte per character from the OS CSPRNG, reduced modulo len(ALPHABET).
    Since 256 is not a multiple of 90, indices 0-75 come up with probability
    3/256 and 76-89 with 2/256. That skew is accepted for suggested
    passwords; do not use this for key material.
    """
    n = validate_length(length)
    raw = randbytes(n)
    return "".join(ALPHABET[b % len(ALPHABET)] for b in raw)


def main(argv=None) -> int:
    import argparse
    import getpass
    import json

    parser = argparse.ArgumentParser(description="Score or generate a password.")
    parser.add_argument("password", nargs="?", help="password to score (prompted if omitted)")
    parser.add_argument("--generate", "-g", metavar="N", type=int,
                        help="print a generated password of length N instead")
    args = parser.parse_args(argv)

    if args.generate is not None:
        try:
            print(generate(args.generate))
        except InvalidLengthError as e:
            parser.error(e.message)
        return 0

    pw = args.password if args.password is not None else getpass.getpass("Password to analyze: ")
    print(json.dumps(evaluate(pw).to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
