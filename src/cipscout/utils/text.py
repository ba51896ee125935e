"""Text helpers for catalog fields."""


def postal_code(address: str) -> str:
    """
    Extract the postal code from a French postal address.

    The source writes addresses as "<street> <zip> <city>" but sometimes
    ends them with the zip itself, so the right-most all-digit token wins
    and the trailing token is the fallback.

    Examples:
        "12 rue Cler 75007 Paris"  ->  "75007"
        "3 place de l'Eglise 94300"  ->  "94300"
    """
    tokens = address.split()
    for token in reversed(tokens):
        if token.isdigit():
            return token
    return tokens[-1] if tokens else ""
