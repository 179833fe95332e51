"""
Opt-in tracing for complex arithmetic.

Operators on `Complex` never log or print. A caller that wants a record of
an operation runs it through `trace`, which applies the operator and hands a
`TraceEvent` to an observer. The default observer writes a DEBUG record to
this module's logger.
"""
import logging
import operator
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

OPERATIONS: dict[str, Callable[..., Any]] = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "truediv": operator.truediv,
    "pow": operator.pow,
    "neg": operator.neg,
    "pos": operator.pos,
    "iadd": operator.iadd,
    "isub": operator.isub,
    "imul": operator.imul,
    "itruediv": operator.itruediv,
    "conjugate": lambda z: z.conjugate(),
    "inverse": lambda z: z.inverse(),
}


@dataclass(frozen=True)
class TraceEvent:
    op: str
    operands: tuple[str, ...]   # repr of each operand, taken before the call
    result: Any


Observer = Callable[[TraceEvent], None]


def log_observer(event: TraceEvent) -> None:
    logger.debug("%s(%s) -> %r", event.op, ", ".join(event.operands), event.result)


class TraceRecorder:
    """Observer that keeps every event it sees, in order."""

    def __init__(self):
        self.events: list[TraceEvent] = []

    def __call__(self, event: TraceEvent) -> None:
        self.events.append(event)


def trace(op: str, *operands, observer: Observer | None = log_observer):
    """
    Apply the named operation to `operands` and report it to `observer`.

    In-place operations ("iadd", ...) mutate the first operand exactly like
    the matching augmented assignment. Errors from the operation propagate
    and the observer is not called. Pass `observer=None` to skip reporting.
    """
    try:
        fn = OPERATIONS[op]
    except KeyError:
        raise ValueError(f"Unknown operation {op!r}; expected one of {sorted(OPERATIONS)}") from None

    before = tuple(repr(x) for x in operands)
    result = fn(*operands)
    if observer is not None:
        observer(TraceEvent(op, before, result))
    return result
