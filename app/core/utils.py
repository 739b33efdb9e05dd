from decimal import Decimal, ROUND_HALF_UP, getcontext

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0")

CURRENCIES = [
    {"code": "INR", "symbol": "₹", "name": "Indian Rupee"},
    {"code": "USD", "symbol": "$", "name": "US Dollar"},
    {"code": "EUR", "symbol": "€", "name": "Euro"},
    {"code": "GBP", "symbol": "£", "name": "British Pound"},
]
CURRENCY_SYMBOLS = {c["code"]: c["symbol"] for c in CURRENCIES}
DEFAULT_SYMBOL = "$"


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def currency_symbol(code: str | None) -> str:
    return CURRENCY_SYMBOLS.get(code or "", DEFAULT_SYMBOL)


def format_money(amount: Decimal, symbol: str) -> str:
    return f"{symbol}{qround(amount)}"


def parse_id_list(raw) -> list[int]:
    """
    Turn "3, 4,x,-1, 4" or [3, 4] into [3, 4].
    Anything that is not a positive integer is dropped, duplicates keep
    their first position. Any other input type is a ValueError.
    """
    if raw is None:
        return []

    if isinstance(raw, str):
        parts = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        parts = list(raw)
    else:
        raise ValueError("sharedWith must be a string or a list of ids")

    ids: list[int] = []
    for part in parts:
        try:
            value = int(str(part).strip())
        except ValueError:
            continue
        if value > 0 and value not in ids:
            ids.append(value)

    return ids
