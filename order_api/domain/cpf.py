"""
CPF (Cadastro de Pessoas Físicas) checksum validation
"""
import re

_FORMATTING = re.compile(r"[.\-]")
_ELEVEN_DIGITS = re.compile(r"[0-9]{11}")


def _check_digit(digits: str) -> int:
    # weights run from len+1 down to 2
    weight = len(digits) + 1
    total = sum(int(digit) * (weight - i) for i, digit in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def normalize_cpf(value: str) -> str:
    """Strip the usual 000.000.000-00 punctuation"""
    return _FORMATTING.sub("", value)


def is_valid_cpf(value: str) -> bool:
    """
    Check a CPF against the mod-11 algorithm

    Accepts plain digits or the formatted 000.000.000-00 form. Sequences of a
    single repeated digit pass the checksum but are not valid CPFs.
    """
    digits = normalize_cpf(value)
    if not _ELEVEN_DIGITS.fullmatch(digits):
        return False
    if digits == digits[0] * 11:
        return False

    first = _check_digit(digits[:9])
    second = _check_digit(digits[:9] + str(first))
    return digits[9:] == f"{first}{second}"
