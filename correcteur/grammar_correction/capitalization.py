def preserve_capitalization(original: str, replacement: str) -> str:
    """
    Adapt replacement's casing to the text it replaces.
      "HELLO" -> whole replacement upper-cased
      "Hello" -> first letter upper-cased, rest untouched
      "hello" -> replacement unchanged
    """
    if not original or not replacement:
        return replacement

    if original == original.upper():
        return replacement.upper()

    if original[0] == original[0].upper():
        return replacement[0].upper() + replacement[1:]

    return replacement
