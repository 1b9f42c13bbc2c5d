"""
fncontract: Callable Contracts
==============================

fncontract describes single-operation capabilities (a printer, a
transformer, a binary chooser, ...) and lets any plain function, lambda
or bound method of the right shape satisfy them.

What's Public
-------------
Everything exported in ``__all__`` is public:

- **Descriptors**: CapabilityDescriptor, CapabilityInput and the standard
  instances (PRINTER, TRANSFORMER, BINARY_CHOOSER, SUPPLIER, BI_CONSUMER)
- **Contracts**: Printer, Transformer, BinaryChooser, Supplier, BiConsumer
- **Stock implementations**: console_print, parse_decimal, random_choice
- **Records**: Student
- **Exceptions**: all validation and contract errors

Example
-------
::

    from fncontract import Printer, Transformer, parse_decimal

    Printer(lambda n: print(n)).print("Hello World")
    value = Transformer(parse_decimal).transform("123.45")
"""

__version__ = "1.0.0"

__all__ = [
    # --- Package Metadata ---
    "__version__",

    # --- CapabilityDescriptor Primitive ---
    "CapabilityDescriptor",
    "CapabilityInput",
    "CapabilityValidationError",
    "InvalidCapabilityInputError",
    "DuplicateInputKeyError",
    "CapabilityImmutabilityError",
    "PRINTER",
    "TRANSFORMER",
    "BINARY_CHOOSER",
    "SUPPLIER",
    "BI_CONSUMER",
    "STANDARD_CAPABILITIES",

    # --- Contracts ---
    "Contract",
    "Printer",
    "Transformer",
    "BinaryChooser",
    "Supplier",
    "BiConsumer",
    "NO_SHOW_MESSAGE",
    "console_print",
    "parse_decimal",
    "random_choice",

    # --- Records ---
    "Student",

    # --- Errors ---
    "ContractError",
    "ParseError",
    "ContractViolationError",
    "format_error_for_user",
]

from fncontract.capability import (
    BI_CONSUMER,
    BINARY_CHOOSER,
    PRINTER,
    STANDARD_CAPABILITIES,
    SUPPLIER,
    TRANSFORMER,
    CapabilityDescriptor,
    CapabilityImmutabilityError,
    CapabilityInput,
    CapabilityValidationError,
    DuplicateInputKeyError,
    InvalidCapabilityInputError,
)
from fncontract.contracts import (
    NO_SHOW_MESSAGE,
    BiConsumer,
    BinaryChooser,
    Contract,
    Printer,
    Supplier,
    Transformer,
    console_print,
    parse_decimal,
    random_choice,
)
from fncontract.errors import (
    ContractError,
    ContractViolationError,
    ParseError,
    format_error_for_user,
)
from fncontract.student import Student
