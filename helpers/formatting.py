from fractions import Fraction


def format_fraction(value: Fraction) -> str:
    """Render an exact fraction as ``"numerator/denominator"``, e.g. ``"0/1"``."""
    value = Fraction(value)
    return f"{value.numerator}/{value.denominator}"


def format_decimal(value: float, decimals: int = 3) -> str:
    return f"{value:.{decimals}f}"
