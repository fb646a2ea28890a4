import unicodedata


def maybe_int(val: float):
    return int(val) if val.is_integer() else val


def nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def apply_case(text: str, upper: bool) -> str:
    return text.upper() if upper else text.lower()
