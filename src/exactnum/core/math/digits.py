"""
Digits — Примитивы над десятичными магнитудами

Модуль содержит алгоритмы уровня цифр, на которых построены BigInt и BigFrac.
Магнитуда — строка десятичных цифр, старший разряд первым.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ МАГНИТУДЫ:
1. Строка непустая и состоит только из ASCII-цифр 0-9
2. Нет ведущих нулей, кроме канонического нуля "0"
3. Все функции возвращают магнитуды в канонической форме

Длина канонической магнитуды монотонна по значению, поэтому сравнение
сводится к сравнению длин, а при равенстве длин — к лексикографическому.
"""

import re
from typing import Final

from exactnum.core.errors import DivisionByZero, InvalidFormat

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Каноническая магнитуда без знака
MAGNITUDE_PATTERN: Final[str] = r"^(0|[1-9][0-9]*)$"

# Литерал: необязательный "-" и каноническая магнитуда ("-0" отсекается отдельно)
_LITERAL_RE: Final[re.Pattern[str]] = re.compile(r"(-?)(0|[1-9][0-9]*)")

ZERO_MAGNITUDE: Final[str] = "0"
ONE_MAGNITUDE: Final[str] = "1"

# Размер блока при переводе int <-> str (ниже лимита в 4300 цифр)
INT_CHUNK_DIGITS: Final[int] = 1000
_INT_CHUNK_BASE: Final[int] = 10**INT_CHUNK_DIGITS


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_literal(literal: str) -> tuple[bool, str]:
    """
    Разбор десятичного литерала в пару (negative, magnitude).

    Args:
        literal: Строка вида "[-]digits"

    Returns:
        (negative, magnitude) в канонической форме

    Raises:
        TypeError: Если literal не строка
        InvalidFormat: Пустая строка, нецифровые символы, ведущий ноль
            в многозначной магнитуде или "-0"

    Examples:
        >>> parse_literal("-123")
        (True, '123')
        >>> parse_literal("0")
        (False, '0')
    """
    if not isinstance(literal, str):
        raise TypeError(f"literal must be str, got {type(literal).__name__}")

    match = _LITERAL_RE.fullmatch(literal)
    if match is None:
        raise InvalidFormat(f"Not a number: {literal!r}")

    sign, magnitude = match.groups()
    if sign and magnitude == ZERO_MAGNITUDE:
        # Единственная форма нуля: "0" без знака
        raise InvalidFormat(f"Not a number: {literal!r}")

    return bool(sign), magnitude


def magnitude_from_int(value: int) -> str:
    """
    Магнитуда |value| для Python int любой длины.

    Число режется на блоки по INT_CHUNK_DIGITS цифр через divmod,
    каждый блок короче лимита int/str преобразования (sys.get_int_max_str_digits).
    Все блоки, кроме старшего, дополняются нулями слева.

    Examples:
        >>> magnitude_from_int(-120)
        '120'
    """
    value = abs(value)
    if value < _INT_CHUNK_BASE:
        return str(value)

    chunks: list[str] = []
    while value >= _INT_CHUNK_BASE:
        value, low = divmod(value, _INT_CHUNK_BASE)
        chunks.append(str(low).zfill(INT_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def magnitude_to_int(magnitude: str) -> int:
    """Python int по канонической магнитуде (блоками по INT_CHUNK_DIGITS цифр)."""
    if len(magnitude) <= INT_CHUNK_DIGITS:
        return int(magnitude)

    head = len(magnitude) % INT_CHUNK_DIGITS or INT_CHUNK_DIGITS
    value = int(magnitude[:head])
    for start in range(head, len(magnitude), INT_CHUNK_DIGITS):
        value = value * _INT_CHUNK_BASE + int(magnitude[start : start + INT_CHUNK_DIGITS])
    return value


def trim_leading_zeros(magnitude: str) -> str:
    """Удаление ведущих нулей с сохранением канонического нуля."""
    return magnitude.lstrip("0") or ZERO_MAGNITUDE


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: str, b: str) -> int:
    """
    Сравнение двух канонических магнитуд.

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a == b:
        return 0
    return -1 if a < b else 1


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: str, b: str) -> str:
    """
    Сумма магнитуд: поразрядное сложение с переносом.

    Цифры обходятся от младшего разряда к старшему (развёрнутые строки),
    финальный перенос дописывается старшей цифрой.
    """
    x = a[::-1]
    y = b[::-1]
    if len(y) > len(x):
        x, y = y, x

    out: list[str] = []
    carry = 0
    for i, ch in enumerate(x):
        if carry == 0 and i >= len(y):
            # Остаток длинного слагаемого переносится без изменений
            out.append(x[i:])
            break
        d = int(ch) + carry
        if i < len(y):
            d += int(y[i])
        out.append(str(d % 10))
        carry = d // 10
    else:
        if carry:
            out.append("1")

    return "".join(out)[::-1]


def subtract_magnitudes(a: str, b: str) -> str:
    """
    Разность магнитуд a - b при условии a >= b.

    Args:
        a: Уменьшаемое
        b: Вычитаемое (не больше a)

    Returns:
        Каноническая магнитуда разности (ведущие нули срезаны)

    Raises:
        ValueError: Если a < b (нарушение предусловия)
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError(f"minuend {a} is smaller than subtrahend {b}")

    x = a[::-1]
    y = b[::-1]
    out: list[str] = []
    borrow = 0
    for i, ch in enumerate(x):
        if borrow == 0 and i >= len(y):
            out.append(x[i:])
            break
        d = int(ch) - borrow
        if i < len(y):
            d -= int(y[i])
        if d < 0:
            d += 10
            borrow = 1
        else:
            borrow = 0
        out.append(str(d))

    return trim_leading_zeros("".join(out)[::-1])


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def shift_magnitude(magnitude: str, places: int) -> str:
    """Умножение на 10^places (дописывание нулей; ноль остаётся нулём)."""
    if magnitude == ZERO_MAGNITUDE or places <= 0:
        return magnitude
    return magnitude + "0" * places


def multiply_small(magnitude: str, factor: int) -> str:
    """
    Умножение магнитуды на малое неотрицательное целое.

    Специализированное скалярное умножение: один проход по цифрам
    с переносом, без построения частичных произведений.
    Используется в factorial.

    Args:
        magnitude: Каноническая магнитуда
        factor: Неотрицательный int

    Returns:
        Каноническая магнитуда произведения
    """
    if factor < 0:
        raise ValueError(f"factor must be non-negative, got {factor}")
    if factor == 0 or magnitude == ZERO_MAGNITUDE:
        return ZERO_MAGNITUDE

    out: list[str] = []
    carry = 0
    for ch in reversed(magnitude):
        p = int(ch) * factor + carry
        out.append(str(p % 10))
        carry = p // 10
    while carry > 0:
        out.append(str(carry % 10))
        carry //= 10

    return "".join(out)[::-1]


def multiply_magnitudes(a: str, b: str) -> str:
    """
    Произведение магнитуд школьным методом.

    Для каждой цифры b строится частичное произведение a * digit,
    сдвигается на позицию цифры и накапливается через add_magnitudes.

    Быстрые пути: "0" даёт ноль, "1" возвращает другой операнд.
    """
    if a == ZERO_MAGNITUDE or b == ZERO_MAGNITUDE:
        return ZERO_MAGNITUDE
    if a == ONE_MAGNITUDE:
        return b
    if b == ONE_MAGNITUDE:
        return a

    total = ZERO_MAGNITUDE
    for position, ch in enumerate(reversed(b)):
        digit = int(ch)
        if digit == 0:
            continue
        partial = shift_magnitude(multiply_small(a, digit), position)
        total = add_magnitudes(total, partial)
    return total


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def _count_subtractions(window: str, divisor: str) -> tuple[int, str]:
    # Цифра частного = сколько раз divisor вычитается из окна (0..9)
    count = 0
    while compare_magnitudes(window, divisor) >= 0:
        window = subtract_magnitudes(window, divisor)
        count += 1
    return count, window


def divmod_magnitudes(a: str, b: str) -> tuple[str, str]:
    """
    Деление магнитуд столбиком: (частное, остаток).

    Алгоритм скользящего окна остатка:
    1. Окно = минимальный ведущий префикс a, не меньший b
       (префикс длины len(b), при нехватке удлиняется на одну цифру)
    2. Цифра частного считается повторным вычитанием b из окна
    3. Каждая следующая цифра a дописывается к окну, шаг 2 повторяется

    Args:
        a: Делимое
        b: Делитель (ненулевой)

    Returns:
        (quotient, remainder) — канонические магнитуды, a = q * b + r, 0 <= r < b

    Raises:
        DivisionByZero: Если b == "0"

    Examples:
        >>> divmod_magnitudes("7", "2")
        ('3', '1')
        >>> divmod_magnitudes("1000", "7")
        ('142', '6')
    """
    if b == ZERO_MAGNITUDE:
        raise DivisionByZero("Division by zero")

    if compare_magnitudes(a, b) < 0:
        return ZERO_MAGNITUDE, a

    width = len(b)
    window = a[:width]
    if compare_magnitudes(window, b) < 0:
        # a >= b, значит у a есть ещё хотя бы одна цифра
        width += 1
        window = a[:width]

    digit, window = _count_subtractions(window, b)
    quotient = [str(digit)]

    for ch in a[width:]:
        window = ch if window == ZERO_MAGNITUDE else window + ch
        digit, window = _count_subtractions(window, b)
        quotient.append(str(digit))

    return "".join(quotient), window
