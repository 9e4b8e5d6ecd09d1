import re
from typing import NamedTuple, Union

WEAK = 'Weak'
MODERATE = 'Moderate'
STRONG = 'Strong'
NOT_AVAILABLE = 'N/A'

EMPTY_PASSWORD_SUGGESTION = 'Please enter a password.'

# Checked in this order against the lowercased candidate
WEAK_PATTERNS = (b'password', b'admin', b'qwerty', b'1234', b'1111')

_REPEATED_RUN = re.compile(rb'(.)\1{2,}', re.DOTALL)


class AnalysisResult(NamedTuple):
    strength: str
    suggestion: str
    score: int


def _to_bytes(candidate: Union[str, bytes]) -> bytes:
    if isinstance(candidate, bytes):
        return candidate
    if isinstance(candidate, str):
        return candidate.encode('utf-8', errors='surrogateescape')
    raise TypeError(f'password must be str or bytes, not {type(candidate).__name__}')


def strength_for_score(score: int) -> str:
    """
    Map a check score onto its strength label.

    Args:
        score (int): Number of points awarded by the checks, 0 to 9.

    Returns:
        str: 'Weak' up to 3, 'Moderate' from 4 to 6, 'Strong' from 7.
    """
    if score <= 3:
        return WEAK
    if score <= 6:
        return MODERATE
    return STRONG


def analyze_password(candidate: Union[str, bytes]) -> AnalysisResult:
    """
    Score a candidate password and collect suggestions for the checks it fails.

    Text is analysed as UTF-8 bytes, so length and character classes count
    8-bit code units and only ASCII letters and digits are alphanumeric.

    Args:
        candidate (Union[str, bytes]): The submitted password.

    Returns:
        AnalysisResult: strength label, concatenated suggestions and score.
    """
    password = _to_bytes(candidate)
    if not password:
        return AnalysisResult(NOT_AVAILABLE, EMPTY_PASSWORD_SUGGESTION, 0)

    score = 0
    suggestions = []

    # Rule 1: Length
    if len(password) >= 12:
        score += 2
    elif len(password) >= 8:
        score += 1
    else:
        suggestions.append('Use at least 8 characters. ')

    # Rule 2: Character classes
    has_upper = has_lower = has_digit = has_symbol = False
    for code in password:
        if 0x41 <= code <= 0x5A:
            has_upper = True
        elif 0x61 <= code <= 0x7A:
            has_lower = True
        elif 0x30 <= code <= 0x39:
            has_digit = True
        else:
            has_symbol = True

    class_checks = (
        (has_upper, 'Add uppercase letters. '),
        (has_lower, 'Add lowercase letters. '),
        (has_digit, 'Add numbers. '),
        (has_symbol, 'Add symbols (#, @, !). '),
    )
    for present, suggestion in class_checks:
        if present:
            score += 1
        else:
            suggestions.append(suggestion)

    # Rule 3: Repetition
    if _REPEATED_RUN.search(password):
        suggestions.append('Avoid repeating characters. ')
    else:
        score += 1

    # Rule 4: Weak patterns
    lowered = password.lower()
    if any(pattern in lowered for pattern in WEAK_PATTERNS):
        suggestions.append("Remove common weak patterns like '1234'. ")
    else:
        score += 1

    return AnalysisResult(strength_for_score(score), ''.join(suggestions), score)
