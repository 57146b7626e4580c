# tests/utils/test_k8s_utils.py

from decimal import Decimal

import pytest

from hubkube.utils.k8s_utils import parse_cpu_cores, parse_quantity


@pytest.mark.parametrize(
    "quantity, expected",
    [
        ("4", Decimal(4)),
        ("500m", Decimal("0.5")),
        ("250000u", Decimal("0.25")),
        ("1Ki", Decimal(1024)),
        ("16Gi", Decimal(16) * 1024**3),
        ("2k", Decimal(2000)),
        ("1M", Decimal(1000000)),
        (3, Decimal(3)),
        (1.5, Decimal("1.5")),
        (None, Decimal(0)),
        ("abc", Decimal(0)),
        ("", Decimal(0)),
    ],
)
def test_parse_quantity(quantity, expected):
    assert parse_quantity(quantity) == expected


def test_parse_quantity_non_finite():
    assert parse_quantity(float("nan")) == Decimal(0)
    assert parse_quantity("Infinity") == Decimal(0)


@pytest.mark.parametrize(
    "cpu, expected",
    [
        ("2", 2),
        (2, 2),
        ("0", 0),
        ("100m", 1),
        ("1001m", 2),
        ("2000m", 2),
        ("-1", 0),
        ("", 0),
        (None, 0),
        ("garbage", 0),
    ],
)
def test_parse_cpu_cores(cpu, expected):
    assert parse_cpu_cores(cpu) == expected
