import math
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

# Binary suffixes are checked before the single-letter decimal ones so
# that 'Mi' is not read as 'M' with a trailing 'i'.
_BINARY_SUFFIXES = {
    "Ki": Decimal(1024),
    "Mi": Decimal(1024) ** 2,
    "Gi": Decimal(1024) ** 3,
    "Ti": Decimal(1024) ** 4,
    "Pi": Decimal(1024) ** 5,
    "Ei": Decimal(1024) ** 6,
}

_DECIMAL_SUFFIXES = {
    "n": Decimal("0.000000001"),
    "u": Decimal("0.000001"),
    "m": Decimal("0.001"),
    "k": Decimal(1000),
    "M": Decimal(1000) ** 2,
    "G": Decimal(1000) ** 3,
    "T": Decimal(1000) ** 4,
    "P": Decimal(1000) ** 5,
    "E": Decimal(1000) ** 6,
}


def parse_quantity(quantity: Union[str, int, float, Decimal, None]) -> Decimal:
    """
    Parse a Kubernetes quantity ('500m', '4', '16Gi') to Decimal.
    Unparsable values yield 0.
    """
    if quantity is None:
        return Decimal(0)
    if isinstance(quantity, (int, float, Decimal)):
        value = Decimal(quantity)
        return value if value.is_finite() else Decimal(0)

    quantity = str(quantity).strip()
    number, multiplier = quantity, Decimal(1)
    if quantity[-2:] in _BINARY_SUFFIXES:
        number, multiplier = quantity[:-2], _BINARY_SUFFIXES[quantity[-2:]]
    elif quantity[-1:] in _DECIMAL_SUFFIXES:
        number, multiplier = quantity[:-1], _DECIMAL_SUFFIXES[quantity[-1:]]

    try:
        value = Decimal(number)
    except InvalidOperation:
        return Decimal(0)
    if not value.is_finite():
        return Decimal(0)
    return value * multiplier


def parse_cpu_cores(cpu: Optional[Union[str, int, float]]) -> int:
    """
    Converts a K8s CPU quantity to whole cores, rounding fractions up the way
    resource.Quantity.Value() does. Negative or unparsable values yield 0.
    """
    if cpu is None or cpu == "":
        return 0
    cores = parse_quantity(cpu)
    if cores <= 0:
        return 0
    return int(math.ceil(cores))
