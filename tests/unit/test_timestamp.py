# -*- coding: utf-8 -*-
"""
Testes unitários para conversão de timestamps
"""

import pytest

from edl_render.domain.errors import InvalidTimestamp
from edl_render.domain.models.timestamp import (
    format_timestamp,
    parse_progress_mark,
    parse_timestamp,
    to_seconds,
)


def test_parse_timestamp_basic():
    """Testa conversão HH:MM:SS para segundos"""
    assert parse_timestamp("01:02:03") == 3723
    assert parse_timestamp("00:00:00") == 0


def test_parse_timestamp_negative():
    """Sinal negativo vale para o valor inteiro"""
    assert parse_timestamp("-00:00:05") == -5
    assert parse_timestamp("-01:00:30") == -3630


def test_parse_timestamp_long_hours():
    assert parse_timestamp("100:00:01") == 360001


@pytest.mark.parametrize(
    "text",
    ["1:2:3", "00:00", "00:00:00:00", "aa:bb:cc", "", "00:60:00", "00:00:60", "00:00:01.5", "--00:00:01"],
)
def test_parse_timestamp_invalid(text):
    """Formatos inválidos sempre falham com InvalidTimestamp"""
    with pytest.raises(InvalidTimestamp):
        parse_timestamp(text)


def test_invalid_timestamp_is_value_error():
    with pytest.raises(ValueError):
        parse_timestamp("abc")


def test_parse_progress_mark_fractional():
    """Marcas do FFmpeg aceitam fração no último componente"""
    assert parse_progress_mark("00:00:05.500000") == pytest.approx(5.5)
    assert parse_progress_mark("01:00:00.25") == pytest.approx(3600.25)
    assert parse_progress_mark("0:1:2") == pytest.approx(62)
    assert parse_progress_mark("-00:00:00.023220") == pytest.approx(-0.02322)


@pytest.mark.parametrize("text", ["N/A", "", "00:00", None])
def test_parse_progress_mark_invalid(text):
    with pytest.raises(InvalidTimestamp):
        parse_progress_mark(text)


def test_to_seconds_accepts_int_and_text():
    assert to_seconds(42) == 42
    assert to_seconds("00:00:42") == 42
    with pytest.raises(InvalidTimestamp):
        to_seconds(True)


def test_format_timestamp():
    assert format_timestamp(3723) == "01:02:03"
    assert format_timestamp(5.9) == "00:00:05"
    assert format_timestamp(-5) == "-00:00:05"
