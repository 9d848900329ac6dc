"""Estonian personal identification code validation"""

from datetime import date
from typing import Optional

from stdnum.ee import ik
from stdnum.exceptions import ValidationError

from decision_engine.domain.exceptions import InvalidPersonalCodeError


def parse_personal_code(code: str, today: Optional[date] = None) -> date:
    """
    Validate a personal code and return the holder's date of birth.

    Format, century marker, birth date and check digit are verified by
    python-stdnum. Codes must be given without separators or whitespace,
    and a birth date after today is rejected.

    Raises:
        InvalidPersonalCodeError: If the code fails any of the checks
    """
    if not isinstance(code, str):
        raise InvalidPersonalCodeError("Personal code must be a string")

    try:
        if ik.compact(code) != code:
            raise InvalidPersonalCodeError("Personal code must contain only digits")
        ik.validate(code)
        date_of_birth = ik.get_birth_date(code)
    except ValidationError as e:
        raise InvalidPersonalCodeError(f"Invalid personal code: {e}") from e

    if date_of_birth > (today or date.today()):
        raise InvalidPersonalCodeError("Date of birth is in the future")

    return date_of_birth


def is_valid_personal_code(code: str, today: Optional[date] = None) -> bool:
    """Check whether a personal code is well-formed and has a valid checksum"""
    try:
        parse_personal_code(code, today)
    except InvalidPersonalCodeError:
        return False
    return True
