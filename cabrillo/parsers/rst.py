"""
Signal report (RST) parsing.

A report is two or three digits: readability, strength and an optional
tone digit (CW/digital only). ``"59"`` and ``"599"`` are both valid.
"""

from __future__ import annotations

from dataclasses import dataclass

from cabrillo.exceptions import FormatError

_DIGIT_NAMES = ("readability", "strength", "tone")


@dataclass(frozen=True)
class RST:
    """A parsed signal report. ``tone == 0`` means no tone digit."""

    readability: int = 0
    strength: int = 0
    tone: int = 0

    def __str__(self) -> str:
        text = f"{self.readability}{self.strength}"
        if self.tone > 0:
            text += str(self.tone)
        return text


def parse_rst(report: str) -> RST:
    """Parse a signal report such as ``"59"`` or ``"599"``.

    A trailing tone digit of ``0`` is indistinguishable from an absent
    tone, so ``"590"`` renders back as ``"59"``.

    Raises:
        FormatError: If the report is not 2-3 characters long, or a
            position is not an ASCII digit (the message names which).
    """
    if len(report) not in (2, 3):
        raise FormatError(f"invalid RST report length: {report!r}")

    digits: list[int] = []
    for name, char in zip(_DIGIT_NAMES, report):
        if not "0" <= char <= "9":
            raise FormatError(f"parsing {name} digit {char!r} of RST {report!r}")
        digits.append(int(char))

    return RST(*digits)
