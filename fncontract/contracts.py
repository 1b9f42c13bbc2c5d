"""
contracts.py

Callable contracts: named single-operation capabilities satisfied by plain
functions, lambdas or bound methods.

    printer = Printer(lambda n: print(n))
    printer.print("Hello World")

    parser = Transformer(parse_decimal)
    parser.transform("123.45")        # 123.45

    game = BinaryChooser(random_choice())
    game.choose("Meta", "Google")     # one of the two
    game.no_show()                    # prints "No Game"

Each contract checks its implementation against a CapabilityDescriptor on
construction and logs every invocation at DEBUG level. Contracts hold no
state besides the implementation itself.
"""

import logging
import random
import re
from typing import Any, Callable, Generic, Optional, TypeVar

from fncontract.capability import (
    BI_CONSUMER,
    BINARY_CHOOSER,
    PRINTER,
    SUPPLIER,
    TRANSFORMER,
    CapabilityDescriptor,
)
from fncontract.errors import ContractViolationError, ParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")

NO_SHOW_MESSAGE = "No Game"

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPECIAL = re.compile(r"[+-]?(?:nan|inf|infinity)", re.IGNORECASE)


class Contract:
    """
    Base class binding one CapabilityDescriptor to one implementation.

    Subclasses set `descriptor` and expose the operation under its own name.
    """

    descriptor: CapabilityDescriptor

    __slots__ = ('_fn',)

    def __init__(self, fn: Callable[..., Any]):
        if getattr(type(self), "descriptor", None) is None:
            raise ContractViolationError(
                type(self).__name__,
                "no CapabilityDescriptor is bound to this contract class",
            )
        self.descriptor.check(fn)
        self._fn = fn
        logger.debug("Bound %r to %s", fn, self.descriptor)

    @property
    def implementation(self) -> Callable[..., Any]:
        return self._fn

    def _invoke(self, *args: Any) -> Any:
        logger.debug("%s%r", self.descriptor.name, args)
        return self._fn(*args)

    def __call__(self, *args: Any) -> Any:
        return self._invoke(*args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fn!r})"


class Printer(Contract, Generic[T]):
    """(T) -> None"""

    descriptor = PRINTER

    __slots__ = ()

    def print(self, value: T) -> None:
        self._invoke(value)

    __call__ = print


class Transformer(Contract, Generic[A, B]):
    """
    (A) -> B

    Failures raised by the implementation (ParseError for the decimal
    parser) propagate to the caller unchanged.
    """

    descriptor = TRANSFORMER

    __slots__ = ()

    def transform(self, value: A) -> B:
        return self._invoke(value)

    __call__ = transform


class BinaryChooser(Contract, Generic[T]):
    """
    (T, T) -> T, with a `no_show` default behaviour.

    The chosen value must be one of the two inputs; anything else raises
    ContractViolationError.
    """

    descriptor = BINARY_CHOOSER

    __slots__ = ('_no_show',)

    def __init__(
        self,
        fn: Callable[[T, T], T],
        *,
        no_show: Optional[Callable[[], None]] = None,
    ):
        super().__init__(fn)
        if no_show is not None:
            # no_show takes no arguments, same shape as a supplier
            SUPPLIER.check(no_show)
        self._no_show = no_show

    def choose(self, a: T, b: T) -> T:
        result = self._invoke(a, b)
        if result is a or result is b or result == a or result == b:
            return result
        raise ContractViolationError(
            self.descriptor.name,
            f"chose {result!r}, which is neither {a!r} nor {b!r}",
        )

    def no_show(self) -> None:
        if self._no_show is None:
            print(NO_SHOW_MESSAGE)
        else:
            self._no_show()

    __call__ = choose


class Supplier(Contract, Generic[T]):
    """() -> T"""

    descriptor = SUPPLIER

    __slots__ = ()

    def get(self) -> T:
        return self._invoke()

    __call__ = get


class BiConsumer(Contract, Generic[T]):
    """(T, T) -> None"""

    descriptor = BI_CONSUMER

    __slots__ = ()

    def consume(self, a: T, b: T) -> None:
        self._invoke(a, b)

    __call__ = consume


# =============================================================================
# Stock implementations
# =============================================================================

def console_print(value: Any) -> None:
    """Write str(value) and a newline to the current standard output."""
    print(value)


def parse_decimal(text: str) -> float:
    """
    Parse decimal text into a float.

    Surrounding whitespace is ignored. Accepts an optional sign, digits with
    an optional fraction and exponent, or NaN/Infinity.

    Raises:
        ParseError: If text is not a string or not a decimal representation
    """
    if not isinstance(text, str):
        raise ParseError(text)

    stripped = text.strip()
    if not (_DECIMAL.fullmatch(stripped) or _SPECIAL.fullmatch(stripped)):
        raise ParseError(text)

    return float(stripped)


def random_choice(rng: Optional[random.Random] = None) -> Callable[[T, T], T]:
    """
    Build a chooser returning `a` when the draw exceeds one half, else `b`.

    Without `rng` the module-level generator is used.
    """
    draw = rng.random if rng is not None else random.random

    def choose(a: T, b: T) -> T:
        return a if draw() > 0.5 else b

    return choose
