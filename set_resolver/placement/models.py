"""
Data models for placement objects read from a stage SET description.

Key concepts
────────────
ParamType        — which variant a Parameter carries (int / float / string)
Parameter        — one named, typed value in a placement object's list
PlacementObject  — type tag + ordered parameters + world transform
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from set_resolver.exceptions import ParameterTypeError
from set_resolver.transform import IDENTITY, ZERO, Quaternion, Vector3

__all__ = ["ParamType", "Parameter", "PlacementObject"]

ParamValue = Union[int, float, str]


class ParamType(str, Enum):
    INT    = "int"
    FLOAT  = "float"
    STRING = "string"


@dataclass(frozen=True)
class Parameter:
    """
    A single placement parameter.

    Construct through the typed factories (Parameter.of_int, …) or
    Parameter.infer(); the value is validated against `type` on creation.
    """
    name:  str
    type:  ParamType
    value: ParamValue

    def __post_init__(self) -> None:
        expected = _PYTHON_TYPES[self.type]
        # bool is an int subclass but never a valid parameter value
        if isinstance(self.value, bool) or not isinstance(self.value, expected):
            raise ParameterTypeError(
                f"Parameter '{self.name}' declared {self.type.value} "
                f"but holds {type(self.value).__name__}"
            )

    # ── Factories ─────────────────────────────────────────────────────────

    @classmethod
    def of_int(cls, value: int, name: str = "") -> "Parameter":
        return cls(name, ParamType.INT, value)

    @classmethod
    def of_float(cls, value: float, name: str = "") -> "Parameter":
        return cls(name, ParamType.FLOAT, float(value))

    @classmethod
    def of_str(cls, value: str, name: str = "") -> "Parameter":
        return cls(name, ParamType.STRING, value)

    @classmethod
    def infer(cls, value: ParamValue, name: str = "") -> "Parameter":
        """Pick the variant from the Python type of *value*."""
        if isinstance(value, bool):
            raise ParameterTypeError(f"Parameter '{name}': bool is not a supported variant")
        if isinstance(value, int):
            return cls.of_int(value, name)
        if isinstance(value, float):
            return cls.of_float(value, name)
        if isinstance(value, str):
            return cls.of_str(value, name)
        raise ParameterTypeError(
            f"Parameter '{name}': unsupported value type {type(value).__name__}"
        )

    # ── Conversion helpers ────────────────────────────────────────────────

    def as_int(self) -> int:
        if self.type is not ParamType.INT:
            raise ParameterTypeError(f"Parameter '{self.name}' is {self.type.value}, expected int")
        return self.value  # type: ignore[return-value]

    def as_float(self) -> float:
        """Float value; int parameters widen to float."""
        if self.type is ParamType.STRING:
            raise ParameterTypeError(f"Parameter '{self.name}' is string, expected float")
        return float(self.value)

    def as_str(self) -> str:
        if self.type is not ParamType.STRING:
            raise ParameterTypeError(f"Parameter '{self.name}' is {self.type.value}, expected string")
        return self.value  # type: ignore[return-value]

    # ── Serialisation ─────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {"name": self.name, "type": self.type.value, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict) -> "Parameter":
        name = data.get("name", "")
        if "type" not in data:
            return cls.infer(data["value"], name)
        ptype = ParamType(data["type"])
        value = data["value"]
        if ptype is ParamType.FLOAT and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        return cls(name, ptype, value)


_PYTHON_TYPES = {
    ParamType.INT:    int,
    ParamType.FLOAT:  float,
    ParamType.STRING: str,
}


@dataclass(frozen=True)
class PlacementObject:
    """
    One object placed in a stage.
    Produced by the SET decoder; never mutated by resolvers.
    """
    type:       str
    parameters: tuple[Parameter, ...] = ()
    position:   Vector3 = ZERO
    rotation:   Quaternion = IDENTITY
    name:       str = ""

    def parameter(self, index: int) -> Optional[Parameter]:
        """Parameter at *index*, or None when out of range."""
        if 0 <= index < len(self.parameters):
            return self.parameters[index]
        return None

    def variant(self, index: int = 0) -> int:
        """
        Integer variant stored at *index*; 0 when the parameter is absent.

        Raises:
            ParameterTypeError: the parameter exists but is not an int.
        """
        param = self.parameter(index)
        if param is None:
            return 0
        return param.as_int()

    def __str__(self) -> str:
        label = f" '{self.name}'" if self.name else ""
        return f"PlacementObject({self.type}{label} @ {tuple(self.position)})"

    # ── Serialisation ─────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        d: dict = {
            "type": self.type,
            "parameters": [p.to_dict() for p in self.parameters],
            "position": list(self.position),
            "rotation": list(self.rotation),
        }
        if self.name:
            d["name"] = self.name
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "PlacementObject":
        return cls(
            type=data["type"],
            parameters=tuple(Parameter.from_dict(p) for p in data.get("parameters", [])),
            position=Vector3.from_iterable(data.get("position", ZERO)),
            rotation=Quaternion.from_iterable(data.get("rotation", IDENTITY)),
            name=data.get("name", ""),
        )

