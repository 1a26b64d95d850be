"""
Logical key events understood by the mode machine.

A key is a one-character string. Escape and Enter are reserved control
codes; every other character is treated as typed text.
"""

from typing import Optional

ESC = "\x1b"
ENTER = "\n"

I_LOWER = "i"
V_LOWER = "v"
E_LOWER = "e"
U_LOWER = "u"
U_UPPER = "U"
COMMA = ","

# Host key names (browser KeyboardEvent.key) for the reserved codes
_NAMED_KEYS = {
    "Escape": ESC,
    "Esc": ESC,
    "Enter": ENTER,
    "Return": ENTER,
}


def from_key_name(name: str) -> Optional[str]:
    """
    Translate a host key name into a logical key.

    Returns None for keys without a logical meaning (Shift, arrows, F-keys),
    which the host should ignore.
    """
    if name in _NAMED_KEYS:
        return _NAMED_KEYS[name]
    if len(name) == 1:
        return name
    return None


_KEY_LABELS = {ESC: "Escape", ENTER: "Enter"}


def describe_key(key: str) -> str:
    """Readable form of a key for messages: control codes by name, text quoted."""
    return _KEY_LABELS.get(key, repr(key))
