"""Dice-notation evaluator.

```text
roll  ::= ["-"] term (("+" | "-") term)*
term  ::= [count] "d" sides | constant
```

| Expression      | Meaning                                         |
| --------------- | ----------------------------------------------- |
| d6              | roll one six-sided die                          |
| 4d20            | roll four twenty-sided dice                     |
| 9d4+14          | roll nine four-sided dice and add 14            |
| 3d3-9+2d6       | roll 3d3, subtract 9, add 2d6                   |
| -9              | just -9                                         |
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass

from .errors import DiceError

MAX_DICE = 1_000
_TERM_RE = re.compile(r"([+-]?)(?:(\d*)d(\d+)|(\d+))", re.IGNORECASE)


@dataclass(frozen=True)
class DieRoll:
    """Outcome of one ``NdS`` term; ``sign`` is ``1`` or ``-1``."""

    count: int
    sides: int
    faces: tuple[int, ...]
    sign: int = 1

    @property
    def subtotal(self) -> int:
        return self.sign * sum(self.faces)


@dataclass(frozen=True)
class RollResult:
    expression: str
    rolls: tuple[DieRoll, ...]
    total: int


def roll(expression: str, rng: random.Random | None = None) -> RollResult:
    """Evaluate ``expression`` and return every die face plus the total."""
    rng = rng or random.Random()
    compact = "".join(expression.split())
    if not compact:
        raise DiceError("empty dice expression")

    rolls: list[DieRoll] = []
    total = 0
    pos = 0
    while pos < len(compact):
        match = _TERM_RE.match(compact, pos)
        if match is None or match.end() == pos:
            raise DiceError(f"unexpected {compact[pos:]!r} in {expression!r}")
        sign_text, count_text, sides_text, constant_text = match.groups()
        if pos > 0 and not sign_text:
            raise DiceError(f"missing '+' or '-' before {match.group(0)!r}")
        sign = -1 if sign_text == "-" else 1

        if constant_text is not None:
            total += sign * int(constant_text)
        else:
            count = int(count_text) if count_text else 1
            sides = int(sides_text)
            if count < 1 or count > MAX_DICE:
                raise DiceError(f"dice count must be between 1 and {MAX_DICE}, got {count}")
            if sides < 1:
                raise DiceError("a die needs at least one side")
            faces = tuple(rng.randint(1, sides) for _ in range(count))
            die = DieRoll(count=count, sides=sides, faces=faces, sign=sign)
            rolls.append(die)
            total += die.subtotal
        pos = match.end()

    return RollResult(expression=expression.strip(), rolls=tuple(rolls), total=total)
