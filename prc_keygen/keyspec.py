from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional
import re

from .errors import InvalidArgument

# strtol(..., 0): optional sign, then hex, octal or decimal digits
_INT_PREFIX = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


@dataclass(frozen=True)
class KeySpec:
    """One requested trust level.

    ``passphrase`` is None when neither a global nor a per-key pass phrase
    was given; the empty string means "store this key unencrypted".
    """
    level: int
    passphrase: Optional[str] = None


def _parse_int_prefix(token: str):
    m = _INT_PREFIX.match(token)
    if not m:
        return 0, 0
    sign, digits = m.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return (-value if sign == "-" else value), m.end()


def parse_key_spec(token: str, passphrase: Optional[str] = None,
                   got_passphrase: bool = False) -> KeySpec:
    number, end = _parse_int_prefix(token)
    rest = token[end:]

    pp = passphrase if got_passphrase else None
    if rest.startswith(","):
        # a pass phrase for this particular key
        pp = rest[1:]
    elif rest:
        raise InvalidArgument(f"Parameter '{token}' should be an integer.")

    if number <= 0:
        raise InvalidArgument(
            f"Key numbers must be greater than 0; you specified {number}."
        )
    return KeySpec(level=number, passphrase=pp)


def parse_key_specs(tokens: Iterable[str], passphrase: Optional[str] = None,
                    got_passphrase: bool = False) -> List[KeySpec]:
    """Parse every token up front; the first bad token aborts the whole run."""
    return [parse_key_spec(t, passphrase, got_passphrase) for t in tokens]
