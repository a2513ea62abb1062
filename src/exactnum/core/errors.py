"""
Errors — Иерархия исключений точной арифметики

Все ошибки синхронные и неисправимые в точке возникновения:
- нет частичных результатов
- нет внутренних повторов
- нет приближённого fallback для точных операций

Каждое исключение дополнительно наследует стандартный Python-класс,
чтобы вызывающий код мог ловить его привычным способом
(например, DivisionByZero ловится как ZeroDivisionError).
"""


class ExactArithmeticError(Exception):
    """Базовый класс для всех ошибок exactnum."""

    pass


class InvalidFormat(ExactArithmeticError, ValueError):
    """
    Некорректный десятичный литерал.

    Пустая строка, нецифровые символы, ведущий ноль в многозначной
    магнитуде ("00", "-01") или "-0".
    """

    pass


class DivisionByZero(ExactArithmeticError, ZeroDivisionError):
    """Деление на ноль или нулевой знаменатель дроби."""

    pass


class NegativeArgument(ExactArithmeticError, ValueError):
    """Отрицательный аргумент операции над натуральными числами."""

    pass


class NegativeExponent(ExactArithmeticError, ValueError):
    """Отрицательная степень для целого числа."""

    pass


class IndeterminateForm(ExactArithmeticError, ArithmeticError):
    """Неопределённость 0^0."""

    pass
