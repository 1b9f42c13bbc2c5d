"""
student.py

Student value record: immutable after construction, with generated
equality and string representation.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict


@dataclass(frozen=True)
class Student:
    """A student enrolled in a department."""
    id: int
    name: str
    email: str
    department: str

    def __post_init__(self) -> None:
        # bool is an int subclass but never a valid id
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise TypeError(f"id must be int, got {type(self.id).__name__}")
        for field_name in ("name", "email", "department"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise TypeError(f"{field_name} must be str, got {type(value).__name__}")

    def with_department(self, department: str) -> "Student":
        return replace(self, department=department)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Student":
        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            department=data["department"],
        )
