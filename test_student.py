"""
test_student.py

Tests for the Student value record.
"""

import dataclasses

import pytest

from fncontract import Student


def _student(**overrides):
    fields = dict(id=1, name="Ada", email="ada@example.org", department="Mathematics")
    fields.update(overrides)
    return Student(**fields)


class TestStudent:

    def test_fields(self):
        s = _student()
        assert s.id == 1
        assert s.name == "Ada"
        assert s.email == "ada@example.org"
        assert s.department == "Mathematics"

    def test_positional_construction(self):
        assert Student(1, "Ada", "ada@example.org", "Mathematics") == _student()

    def test_equality_and_hash(self):
        assert _student() == _student()
        assert _student() != _student(id=2)
        assert hash(_student()) == hash(_student())

    def test_immutable(self):
        s = _student()
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.name = "Grace"

    def test_repr(self):
        assert repr(_student()) == (
            "Student(id=1, name='Ada', email='ada@example.org', department='Mathematics')"
        )

    def test_with_department(self):
        s = _student()
        moved = s.with_department("Physics")
        assert moved.department == "Physics"
        assert s.department == "Mathematics"
        assert moved.id == s.id

    def test_dict_round_trip(self):
        data = _student().to_dict()
        assert data == {
            "id": 1,
            "name": "Ada",
            "email": "ada@example.org",
            "department": "Mathematics",
        }
        assert Student.from_dict(data) == _student()

    @pytest.mark.parametrize("overrides", [
        {"id": "1"},
        {"id": True},
        {"name": None},
        {"email": 5},
        {"department": ["Maths"]},
    ])
    def test_invalid_field_types(self, overrides):
        with pytest.raises(TypeError):
            _student(**overrides)

    def test_missing_field(self):
        with pytest.raises(KeyError):
            Student.from_dict({"id": 1, "name": "Ada"})
