"""Formatação dos identificadores de requisição gerados localmente."""

REQUEST_ID_PREFIX = "req-"

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    """Converte um inteiro não negativo para base 36 (dígitos 0-9 e a-z)."""
    if value < 0:
        raise ValueError(f"valor negativo não suportado: {value}")
    if value == 0:
        return "0"

    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def format_request_id(counter: int) -> str:
    """Monta o identificador padrão, ex.: 1 -> 'req-1', 36 -> 'req-10'."""
    return REQUEST_ID_PREFIX + to_base36(counter)
