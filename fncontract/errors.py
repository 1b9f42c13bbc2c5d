"""
errors.py

Human-friendly error system for fncontract.

Design principles:
- Every error carries a stable error code
- Explain what went wrong in plain language
- Suggest fixes when possible
- Internal stack traces are never shown to users
"""

from typing import Any, List, Optional


class ContractError(Exception):
    """
    Base class for all fncontract errors.

    Errors are designed to be user-friendly:
    - Clear explanation of what went wrong
    - Actionable suggestions for fixes
    """

    def __init__(
        self,
        message: str,
        *,
        explanation: str = "",
        suggestions: Optional[List[str]] = None,
        error_code: str = "E000",
    ):
        self.message = message
        self.explanation = explanation
        self.suggestions = suggestions or []
        self.error_code = error_code
        super().__init__(self.format_short())

    def format_short(self) -> str:
        """Format as single-line error message."""
        return f"[{self.error_code}] {self.message}"

    def format_full(self) -> str:
        """Format as multi-line human-readable error."""
        lines = [f"Error {self.error_code}", "", f"  {self.message}"]

        if self.explanation:
            lines.append("")
            lines.append(f"  {self.explanation}")

        if self.suggestions:
            lines.append("")
            if len(self.suggestions) == 1:
                lines.append(f"  Suggestion: {self.suggestions[0]}")
            else:
                lines.append("  Suggestions:")
                for suggestion in self.suggestions:
                    lines.append(f"    - {suggestion}")

        return "\n".join(lines)


# === Parse Errors (E1xx) ===

class ParseError(ContractError, ValueError):
    """Raised when text cannot be converted to the requested type."""

    def __init__(self, text: Any, target: str = "float"):
        self.text = text
        self.target = target

        if isinstance(text, str):
            message = f"Cannot parse {text!r} as {target}"
            if not text.strip():
                explanation = "The text is empty."
            else:
                explanation = f"{text.strip()!r} is not a valid decimal representation."
        else:
            message = f"Cannot parse {type(text).__name__} value as {target}"
            explanation = "Only text can be parsed."

        super().__init__(
            message=message,
            explanation=explanation,
            suggestions=["Use digits with an optional sign, fraction and exponent, e.g. '123.45' or '-1.5e3'"],
            error_code="E101",
        )


# === Contract Errors (E2xx) ===

class ContractViolationError(ContractError, TypeError):
    """Raised when an implementation does not honour a capability's signature."""

    def __init__(self, capability: str, reason: str):
        self.capability = capability
        self.reason = reason
        super().__init__(
            message=f"Implementation does not satisfy '{capability}': {reason}",
            explanation="A contract accepts any function whose shape matches its signature.",
            error_code="E201",
        )


# === Utility Functions ===

def format_error_for_user(error: BaseException) -> str:
    """
    Format any exception for user display.

    For ContractError instances, returns the human-friendly format.
    For other exceptions, returns a generic message without stack trace.
    """
    if isinstance(error, ContractError):
        return error.format_full()

    return (
        "Error E000\n"
        "\n"
        "  An unexpected error occurred.\n"
        "\n"
        "  If this persists, please report it as a bug."
    )
