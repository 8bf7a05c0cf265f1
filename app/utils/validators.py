"""
Custom Validators
Validation functions for payment initiation input
"""

import re
from typing import Any, Optional

MIN_AMOUNT = 100

# Telma/MVola numbers: operator prefix followed by exactly 7 digits
MVOLA_MSISDN_PATTERN = re.compile(r'^(?:032|033|034|037|038)[0-9]{7}\Z')

INVALID_AMOUNT_MESSAGE = 'Montant invalide (minimum 100 Ar)'
INVALID_PHONE_MESSAGE = 'Numéro de téléphone invalide'
INVALID_REQUEST_MESSAGE = 'Requête invalide'


def parse_amount(amount: Any) -> Optional[int]:
    """
    Coerce an amount to an integer number of Ariary.

    Accepts ints, integral floats and strings of digits ("5000").
    Returns None for anything else, booleans included.
    """
    if isinstance(amount, bool):
        return None
    if isinstance(amount, int):
        return amount
    if isinstance(amount, float):
        return int(amount) if amount.is_integer() else None
    if isinstance(amount, str) and re.match(r'^[0-9]+\Z', amount.strip()):
        return int(amount.strip())
    return None


def validate_amount(amount: Any, min_amount: int = MIN_AMOUNT) -> tuple[bool, Optional[str]]:
    """
    Validate payment amount

    Args:
        amount: Amount to validate, in Ariary
        min_amount: Minimum allowed amount

    Returns:
        Tuple of (is_valid, error_message)
    """
    value = parse_amount(amount)
    if value is None:
        return False, INVALID_AMOUNT_MESSAGE

    if value < min_amount:
        return False, INVALID_AMOUNT_MESSAGE

    return True, None


def validate_phone_number(phone: Any) -> tuple[bool, Optional[str]]:
    """
    Validate an MVola customer number (e.g. 0341234567)

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not phone or not isinstance(phone, str):
        return False, INVALID_PHONE_MESSAGE

    if not MVOLA_MSISDN_PATTERN.match(phone):
        return False, INVALID_PHONE_MESSAGE

    return True, None
