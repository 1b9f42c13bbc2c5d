"""
capability.py

fncontract CapabilityDescriptor Primitive

A CapabilityDescriptor is a declarative, immutable description of a
single-operation contract:
- What it consumes (symbolic input types)
- What it produces (symbolic output type, "none" for nothing)
- Which errors it may raise
- Which default behaviours it carries alongside its operation

Design Invariants:
- Immutable after creation
- Deterministic serialization (sorted keys, content-based hash)
- Describes a signature; any function of that shape satisfies it
"""

import hashlib
import inspect
import json
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from fncontract.errors import ContractViolationError

# Save reference to built-in type before any shadowing
_builtin_type = type

logger = logging.getLogger(__name__)

NO_OUTPUT = "none"


# =============================================================================
# Capability Errors
# =============================================================================

class CapabilityValidationError(Exception):
    """
    Raised when a CapabilityDescriptor cannot be constructed due to validation failure.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str = "C000",
    ):
        self.message = message
        self.error_code = error_code
        super().__init__(self.format())

    def format(self) -> str:
        """Format as human-readable error message."""
        return f"[{self.error_code}] Capability validation failed: {self.message}"


class InvalidCapabilityInputError(CapabilityValidationError):
    """Raised when a CapabilityInput is invalid."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(
            message=f"Invalid input '{key}': {reason}",
            error_code="C001",
        )


class DuplicateInputKeyError(CapabilityValidationError):
    """Raised when multiple inputs have the same key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            message=f"Duplicate input key: '{key}'",
            error_code="C002",
        )


class CapabilityImmutabilityError(Exception):
    """Raised when attempting to mutate an immutable capability object."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"Cannot {operation}: Capability is immutable after creation"
        )


# =============================================================================
# Helper Functions
# =============================================================================

def _validate_string(value: Any, field_name: str, *, allow_empty: bool = False) -> str:
    """Validate that a value is a string."""
    if not isinstance(value, str):
        raise CapabilityValidationError(
            f"{field_name} must be a string, got {_builtin_type(value).__name__}",
            error_code="C003",
        )
    if not allow_empty and not value.strip():
        raise CapabilityValidationError(
            f"{field_name} cannot be empty or whitespace-only",
            error_code="C003",
        )
    return value


def _validate_names(values: Any, field_name: str) -> Tuple[str, ...]:
    """Validate a sequence of non-empty, unique names."""
    if values is None:
        return ()
    if isinstance(values, str) or not isinstance(values, (list, tuple)):
        raise CapabilityValidationError(
            f"{field_name} must be a list of strings, got {_builtin_type(values).__name__}",
            error_code="C004",
        )
    names = tuple(_validate_string(v, f"{field_name}[{i}]") for i, v in enumerate(values))
    if len(set(names)) != len(names):
        raise CapabilityValidationError(
            f"{field_name} contains duplicates",
            error_code="C004",
        )
    return names


def _compute_hash(data: Dict[str, Any]) -> str:
    """Compute SHA-256 hash of JSON-serialized data."""
    json_str = json.dumps(data, sort_keys=True, separators=(',', ':'))
    return hashlib.sha256(json_str.encode('utf-8')).hexdigest()


# =============================================================================
# CapabilityInput
# =============================================================================

class CapabilityInput:
    """
    A single positional input of a capability.

    Types are symbolic strings ("T", "A", "string"), not Python types.
    """

    __slots__ = ('_key', '_type', '_description', '_frozen')

    def __init__(
        self,
        *,
        key: str,
        type: str,
        description: Optional[str] = None,
    ):
        key = _validate_string(key, "key")

        if not isinstance(type, str):
            raise InvalidCapabilityInputError(
                key,
                f"type must be a symbolic string, got {type!r}",
            )
        type = _validate_string(type, "type")

        if description is not None:
            description = _validate_string(description, "description", allow_empty=True)

        object.__setattr__(self, '_key', key)
        object.__setattr__(self, '_type', type)
        object.__setattr__(self, '_description', description)
        object.__setattr__(self, '_frozen', True)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, '_frozen', False):
            raise CapabilityImmutabilityError(f"set attribute '{name}'")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if getattr(self, '_frozen', False):
            raise CapabilityImmutabilityError(f"delete attribute '{name}'")
        object.__delattr__(self, name)

    @property
    def key(self) -> str:
        return self._key

    @property
    def type(self) -> str:
        return self._type

    @property
    def description(self) -> Optional[str]:
        return self._description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapabilityInput):
            return NotImplemented
        return (
            self._key == other._key
            and self._type == other._type
            and self._description == other._description
        )

    def __hash__(self) -> int:
        return hash((self._key, self._type, self._description))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary."""
        result = {"key": self._key, "type": self._type}
        if self._description is not None:
            result["description"] = self._description
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CapabilityInput":
        """Construct from a dictionary."""
        return cls(
            key=data["key"],
            type=data["type"],
            description=data.get("description"),
        )

    def __repr__(self) -> str:
        return f"CapabilityInput(key={self._key!r}, type={self._type!r})"

    def __str__(self) -> str:
        return f"{self._key}: {self._type}"


# =============================================================================
# CapabilityDescriptor
# =============================================================================

class CapabilityDescriptor:
    """
    A declarative description of a single-operation callable contract.

    Attributes:
        capability_id: Content-based hash (computed, not user-provided)
        name: Capability name, e.g. "printer"
        version: Version string
        description: Human-readable description
        inputs: Ordered positional inputs
        output: Symbolic output type ("none" when nothing is produced)
        raises: Names of errors the operation may raise
        defaults: Names of default behaviours carried with the operation
    """

    __slots__ = (
        '_capability_id',
        '_name',
        '_version',
        '_description',
        '_inputs',
        '_output',
        '_raises',
        '_defaults',
        '_frozen',
    )

    def __init__(
        self,
        *,
        name: str,
        version: str = "1.0.0",
        description: Optional[str] = None,
        inputs: Optional[List[CapabilityInput | Dict[str, Any]]] = None,
        output: str = NO_OUTPUT,
        raises: Optional[List[str]] = None,
        defaults: Optional[List[str]] = None,
    ):
        name = _validate_string(name, "name")
        version = _validate_string(version, "version")
        output = _validate_string(output, "output")

        if description is not None:
            description = _validate_string(description, "description", allow_empty=True)

        parsed_inputs: List[CapabilityInput] = []
        seen_keys = set()

        if inputs:
            for i, inp in enumerate(inputs):
                if isinstance(inp, dict):
                    ci = CapabilityInput.from_dict(inp)
                elif isinstance(inp, CapabilityInput):
                    ci = inp
                else:
                    raise InvalidCapabilityInputError(
                        f"input[{i}]",
                        f"must be CapabilityInput or dict, got {_builtin_type(inp).__name__}",
                    )

                if ci.key in seen_keys:
                    raise DuplicateInputKeyError(ci.key)

                parsed_inputs.append(ci)
                seen_keys.add(ci.key)

        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_version', version)
        object.__setattr__(self, '_description', description)
        object.__setattr__(self, '_inputs', tuple(parsed_inputs))
        object.__setattr__(self, '_output', output)
        object.__setattr__(self, '_raises', _validate_names(raises, "raises"))
        object.__setattr__(self, '_defaults', _validate_names(defaults, "defaults"))
        object.__setattr__(self, '_capability_id', self._compute_capability_id())
        object.__setattr__(self, '_frozen', True)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, '_frozen', False):
            raise CapabilityImmutabilityError(f"set attribute '{name}'")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if getattr(self, '_frozen', False):
            raise CapabilityImmutabilityError(f"delete attribute '{name}'")
        object.__delattr__(self, name)

    def _compute_capability_id(self) -> str:
        """Compute content-based hash for capability_id."""
        data = {
            "defaults": list(self._defaults),
            "description": self._description,
            "inputs": [i.to_dict() for i in self._inputs],
            "name": self._name,
            "output": self._output,
            "raises": list(self._raises),
            "version": self._version,
        }
        return _compute_hash(data)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def capability_id(self) -> str:
        """Content-based hash of this capability descriptor."""
        return self._capability_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> str:
        return self._version

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def inputs(self) -> Tuple[CapabilityInput, ...]:
        return self._inputs

    @property
    def output(self) -> str:
        return self._output

    @property
    def raises(self) -> Tuple[str, ...]:
        return self._raises

    @property
    def defaults(self) -> Tuple[str, ...]:
        return self._defaults

    @property
    def arity(self) -> int:
        """Number of positional arguments the operation takes."""
        return len(self._inputs)

    @property
    def may_fail(self) -> bool:
        return bool(self._raises)

    @property
    def signature(self) -> str:
        """Signature in arrow notation, e.g. '(T, T) -> T'."""
        args = ", ".join(i.type for i in self._inputs)
        return f"({args}) -> {self._output}"

    def input_keys(self) -> List[str]:
        return [i.key for i in self._inputs]

    def has_default(self, name: str) -> bool:
        return name in self._defaults

    # -------------------------------------------------------------------------
    # Conformance
    # -------------------------------------------------------------------------

    def check(self, fn: Callable[..., Any]) -> None:
        """
        Verify that fn can be called with exactly `arity` positional arguments.

        Functions whose signature cannot be introspected are accepted.

        Raises:
            ContractViolationError: If fn is not callable or has the wrong shape
        """
        if not callable(fn):
            raise ContractViolationError(
                self._name,
                f"expected a callable, got {_builtin_type(fn).__name__}",
            )

        try:
            sig = inspect.signature(fn)
        except (TypeError, ValueError):
            logger.debug("Cannot introspect %r; accepting it for %s", fn, self._name)
            return

        try:
            sig.bind(*([None] * self.arity))
        except TypeError as e:
            raise ContractViolationError(
                self._name,
                f"expected signature {self.signature}, but {e}",
            ) from e

    # -------------------------------------------------------------------------
    # Comparison Methods
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapabilityDescriptor):
            return NotImplemented
        return self._capability_id == other._capability_id

    def __hash__(self) -> int:
        return hash(self._capability_id)

    def __len__(self) -> int:
        """Return count of inputs."""
        return len(self._inputs)

    def __iter__(self) -> Iterator[CapabilityInput]:
        """Iterate over inputs."""
        return iter(self._inputs)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary."""
        result = {
            "capability_id": self._capability_id,
            "defaults": list(self._defaults),
            "inputs": [i.to_dict() for i in self._inputs],
            "name": self._name,
            "output": self._output,
            "raises": list(self._raises),
            "version": self._version,
        }
        if self._description is not None:
            result["description"] = self._description
        return result

    def to_json(self, *, indent: Optional[int] = None) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), sort_keys=True, indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CapabilityDescriptor":
        """Construct from a dictionary."""
        return cls(
            name=data["name"],
            version=data.get("version", "1.0.0"),
            description=data.get("description"),
            inputs=[CapabilityInput.from_dict(i) for i in data.get("inputs", [])],
            output=data.get("output", NO_OUTPUT),
            raises=data.get("raises"),
            defaults=data.get("defaults"),
        )

    @classmethod
    def from_json(cls, json_str: str) -> "CapabilityDescriptor":
        """Construct from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def __repr__(self) -> str:
        return (
            f"CapabilityDescriptor(name={self._name!r}, "
            f"signature={self.signature!r}, version={self._version!r})"
        )

    def __str__(self) -> str:
        return f"{self._name}{self.signature}"


# =============================================================================
# Standard Capabilities
# =============================================================================

PRINTER = CapabilityDescriptor(
    name="printer",
    description="Consumes a value and produces no result.",
    inputs=[CapabilityInput(key="value", type="T")],
)

TRANSFORMER = CapabilityDescriptor(
    name="transformer",
    description="Converts a value of one type into a value of another.",
    inputs=[CapabilityInput(key="value", type="A")],
    output="B",
    raises=["ParseError"],
)

BINARY_CHOOSER = CapabilityDescriptor(
    name="binary_chooser",
    description="Selects one of two values of the same type.",
    inputs=[CapabilityInput(key="a", type="T"), CapabilityInput(key="b", type="T")],
    output="T",
    defaults=["no_show"],
)

SUPPLIER = CapabilityDescriptor(
    name="supplier",
    description="Produces a value from nothing.",
    output="T",
)

BI_CONSUMER = CapabilityDescriptor(
    name="bi_consumer",
    description="Consumes two values and produces no result.",
    inputs=[CapabilityInput(key="a", type="T"), CapabilityInput(key="b", type="T")],
)

STANDARD_CAPABILITIES: Dict[str, CapabilityDescriptor] = {
    c.name: c for c in (PRINTER, TRANSFORMER, BINARY_CHOOSER, SUPPLIER, BI_CONSUMER)
}
