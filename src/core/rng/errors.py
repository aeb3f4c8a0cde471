"""
RNG Errors — Таксономия ошибок random-утилит

Все ошибки поднимаются немедленно к вызывающему коду, ничего не
ретраится и не глотается. Единственный внутренний retry (rejection loop
в decimal_uniform) не является пользовательским путём ошибки.

Отмена delay-хелпера не имеет собственного класса: asyncio.CancelledError
пробрасывается без изменений.
"""


class RandomUtilError(Exception):
    """Базовая ошибка random-утилит."""

    pass


class InvalidRangeError(RandomUtilError, ValueError):
    """
    Некорректные числовые границы.

    Примеры: max_value < 0 для next_int, min_value > max_value,
    отрицательная задержка, scale вне [0, 28].
    """

    pass


class NullArgumentError(RandomUtilError, TypeError):
    """Обязательная коллекция не передана (None)."""

    pass


class InvalidArgumentError(RandomUtilError, ValueError):
    """
    Структурное несоответствие аргументов или вырожденный набор весов.

    Примеры: len(items) != len(weights), пустые списки, отрицательный или
    NaN/Inf вес, сумма весов == 0.
    """

    pass
