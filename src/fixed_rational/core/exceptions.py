"""
Base exception для пакета fixed_rational.

Все ошибки пакета наследуются от FixedRationalError, чтобы вызывающий код
мог перехватывать их одной веткой except.
"""


class FixedRationalError(Exception):
    """Базовая ошибка пакета fixed_rational."""

    pass
