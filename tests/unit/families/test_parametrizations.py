from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import pytest

from pysatl_normal.families import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)


@parametrization(name="scale")
class _Scale(Parametrization):
    __slots__ = ("value",)
    __parameter_names__ = ("value",)

    def __init__(self, value: float) -> None:
        self.value = value

    @constraint(description="value > 0")
    def check_positive(self) -> bool:
        return self.value > 0


class TestParametrizationAPI:
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", False) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_decorator_attaches_name_and_constraints(self) -> None:
        obj = _Scale(1.25)

        assert obj.name == "scale"
        assert obj.parameters == {"value": 1.25}
        assert [c.description for c in obj.constraints] == ["value > 0"]

    def test_validate(self) -> None:
        _Scale(2.0).validate()
        with pytest.raises(ValueError, match='Constraint "value > 0" does not hold'):
            _Scale(-2.0).validate()

    def test_static_constraint_is_rejected(self) -> None:
        with pytest.raises(TypeError, match="must be an instance method"):

            @parametrization(name="broken")
            class _Broken(Parametrization):
                @staticmethod
                @constraint(description="always")
                def check() -> bool:
                    return True
