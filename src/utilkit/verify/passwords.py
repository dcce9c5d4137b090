"""Password policy validation and strength scoring.

Both functions evaluate every check unconditionally and report all findings;
neither stops at the first unmet requirement.
"""

import re
from typing import Any

from utilkit.config import DEFAULT_PASSWORD_MIN_LENGTH
from utilkit.messages import catalog
from utilkit.results import (
    PasswordDetails,
    PasswordStrengthResult,
    PasswordValidationResult,
    StrengthDetails,
    StrengthLevel,
)

_NUMBER = re.compile(r"\d")
_LETTER = re.compile(r"[a-zA-Z]")
_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_SPECIAL = re.compile(r'[!@#$%^&*(),.?":{}|<>]')

STRENGTH_MIN_LENGTH = 8


def validate_password(  # pylint: disable=too-many-arguments
    password: Any,
    *,
    min_length: int = DEFAULT_PASSWORD_MIN_LENGTH,
    require_number: bool = True,
    require_letter: bool = True,
    require_lower_case: bool = True,
    require_upper_case: bool = True,
    require_special_char: bool = True,
    locale: str | None = None,
) -> PasswordValidationResult:
    """Check ``password`` against a policy.

    The minimum length is always enforced; the character-class requirements
    can be switched off individually. Special characters are
    ``!@#$%^&*(),.?":{}|<>``.

    Args:
        password: Candidate password.
        min_length: Minimum number of characters.
        require_number: Require at least one digit.
        require_letter: Require at least one ASCII letter.
        require_lower_case: Require at least one lower-case ASCII letter.
        require_upper_case: Require at least one upper-case ASCII letter.
        require_special_char: Require at least one special character.
        locale: Message locale; defaults to the configured one.

    Returns:
        PasswordValidationResult: validity, a summary message, the per-check
        flags, and every unmet requirement in policy order.

    Examples:
        >>> validate_password("Password123!").is_valid
        True
        >>> validate_password("Password!", locale="en-US").requirements
        ('Must contain a number',)
    """
    texts = catalog(locale)
    if not isinstance(password, str):
        message = texts["password.not_string"]
        return PasswordValidationResult(
            is_valid=False,
            message=message,
            details=PasswordDetails(),
            requirements=(message,),
        )

    details = PasswordDetails(
        length=len(password) >= min_length,
        has_number=bool(_NUMBER.search(password)),
        has_letter=bool(_LETTER.search(password)),
        has_lower_case=bool(_LOWER.search(password)),
        has_upper_case=bool(_UPPER.search(password)),
        has_special_char=bool(_SPECIAL.search(password)),
    )

    requirements: list[str] = []
    if not details.length:
        requirements.append(texts["password.min_length"].format(min_length=min_length))
    for enabled, satisfied, key in (
        (require_number, details.has_number, "password.require_number"),
        (require_letter, details.has_letter, "password.require_letter"),
        (require_lower_case, details.has_lower_case, "password.require_lower_case"),
        (require_upper_case, details.has_upper_case, "password.require_upper_case"),
        (require_special_char, details.has_special_char, "password.require_special_char"),
    ):
        if enabled and not satisfied:
            requirements.append(texts[key])

    is_valid = not requirements
    message = (
        texts["password.valid"]
        if is_valid
        else texts["password.invalid"].format(
            requirements=texts["password.separator"].join(requirements)
        )
    )
    return PasswordValidationResult(
        is_valid=is_valid,
        message=message,
        details=details,
        requirements=tuple(requirements),
    )


def get_password_strength(password: Any, *, locale: str | None = None) -> PasswordStrengthResult:
    """Score ``password`` and map the score onto a strength level.

    Score = ``min(2, len // 4)`` + 1 each for digits, lower- and upper-case
    letters + 2 for special characters + 1 for every satisfied flag beyond
    two (the ``len >= 8`` flag counts as one).

    Levels: ``<= 2`` weak, ``<= 4`` medium, ``<= 6`` strong, otherwise very
    strong. Non-string input scores 0 with level ``invalid``.

    Examples:
        >>> get_password_strength("abc").level
        <StrengthLevel.WEAK: 'weak'>
        >>> get_password_strength("Password123!").score
        10
    """
    texts = catalog(locale)
    if not isinstance(password, str):
        return PasswordStrengthResult(
            score=0,
            level=StrengthLevel.INVALID,
            message=texts["strength.invalid"],
            details=StrengthDetails(),
        )

    details = StrengthDetails(
        length=len(password) >= STRENGTH_MIN_LENGTH,
        has_number=bool(_NUMBER.search(password)),
        has_lower_case=bool(_LOWER.search(password)),
        has_upper_case=bool(_UPPER.search(password)),
        has_special_char=bool(_SPECIAL.search(password)),
    )

    score = min(2, len(password) // 4)
    score += details.has_number + details.has_lower_case + details.has_upper_case
    score += 2 if details.has_special_char else 0
    score += max(0, details.variety() - 2)

    level = StrengthLevel.from_score(score)
    return PasswordStrengthResult(
        score=score,
        level=level,
        message=texts[f"strength.{level.value}"],
        details=details,
    )
