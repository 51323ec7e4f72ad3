from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
from .errors import RollParseError

# A generator receives the number of sides and returns the value of one die.
Generator = Callable[[int], int]

_UINT_RE = re.compile(r"\+?[0-9]+")

class RollSpec(BaseModel):
    """How many dice to roll and how many sides each one has.

    2d6 => RollSpec(count=2, sides=6)
    """
    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=0)
    sides: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.count}d{self.sides}"

@dataclass(frozen=True)
class RollOutcome:
    """Values of a single evaluation of a RollSpec, in the order they were rolled."""
    values: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def total(self) -> int:
        return sum(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        return format_outcome(self)

@dataclass(frozen=True)
class ParseResult:
    token: str
    spec: Optional[RollSpec] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.spec is not None

def _parse_uint(part: str) -> Optional[int]:
    if not _UINT_RE.fullmatch(part):
        return None
    return int(part)

def parse_roll_spec(token: str, strict: bool = False) -> RollSpec:
    """
    Parse "NdM" or "M" into a RollSpec.

    Fragments between 'd' delimiters that are not integers are dropped before
    counting, so "d6" is read as "6". With strict=True every fragment must be
    an integer and "d6" is rejected.
    """
    parts = token.split("d")
    numbers: List[int] = []
    for part in parts:
        n = _parse_uint(part)
        if n is None:
            if strict:
                raise RollParseError(token)
            continue
        numbers.append(n)

    if len(numbers) == 2:
        count, sides = numbers
        return RollSpec(count=count, sides=sides)
    if len(numbers) == 1:
        return RollSpec(count=1, sides=numbers[0])
    raise RollParseError(token)

def parse_tokens(tokens: Iterable[str], strict: bool = False) -> List[ParseResult]:
    results: List[ParseResult] = []
    for token in tokens:
        try:
            results.append(ParseResult(token=token, spec=parse_roll_spec(token, strict=strict)))
        except RollParseError as e:
            results.append(ParseResult(token=token, error=str(e)))
    return results

def valid_specs(results: Iterable[ParseResult]) -> Iterator[RollSpec]:
    for r in results:
        if r.spec is not None:
            yield r.spec

def roll(spec: RollSpec, generate: Generator) -> RollOutcome:
    """
    Evaluate a RollSpec, calling generate(spec.sides) once per die.

    Whatever the generator returns is stored as is; range checks are its job.
    The spec can be reused, each call produces a new outcome:

        >>> roll(RollSpec(count=2, sides=6), lambda sides: sides).values
        (6, 6)
    """
    return RollOutcome([generate(spec.sides) for _ in range(spec.count)])

def format_outcome(outcome: RollOutcome) -> str:
    # [1, 2, 3] => "1, 2, 3 (6)"
    joined = ", ".join(str(v) for v in outcome.values)
    return f"{joined} ({outcome.total})"
