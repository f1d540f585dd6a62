import json
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic.config import ConfigDict

E = TypeVar('E', bound='RichEnum')


###################################
# BASE MODELS
###################################
class RichBaseModel(BaseModel):
    """Base class for the public, serializable records of the package."""

    model_config = ConfigDict(extra='forbid', frozen=True)

    def __repr__(self) -> str:
        """Returns a detailed JSON representation for debugging."""
        return f'{self.__class__.__name__}({self.model_dump_json(exclude_none=True)})'

    def __getitem__(self, key: str):
        """Allows dictionary-like access to attributes."""
        return getattr(self, key, None)

    def to_dict(self, exclude_none: bool = True, **kwargs) -> Dict[str, Any]:
        """Converts the model to a dictionary."""
        return self.model_dump(exclude_none=exclude_none, **kwargs)

    def to_json(self, exclude_none: bool = True) -> str:
        """Converts the model to a json."""
        return json.dumps(self.model_dump(exclude_none=exclude_none), indent=2)


###################################
# ENUMS
###################################
class RichEnum(Enum):
    """
    Enhanced Enum class with utility methods for case-insensitive lookups,
    value/name checks and string conversions.
    """

    @classmethod
    def values(cls) -> List[Any]:
        """Return a list of all enum member values."""
        return [member.value for member in cls]

    @classmethod
    def from_str(cls: Type[E], string: str, default: Optional[E] = None) -> E:
        """
        Retrieve enum member by string value (case-insensitive for strings).
        """
        if string is None:
            if default is not None:
                return default
            raise ValueError(f'Cannot look up None in {cls.__name__}')

        for member in cls:
            val = member.value
            if string == val or (
                isinstance(val, str) and string.lower() == val.lower()
            ):
                return member

        if default is not None:
            return default

        raise KeyError(f"'{string}' not found in {cls.__name__}")

    @classmethod
    def has_value(cls, value: Any) -> bool:
        """Check if a value exists in the enum (case-insensitive for strings)."""
        if value is None:
            return False

        return any(
            value == member.value
            or (
                isinstance(value, str)
                and isinstance(member.value, str)
                and value.lower() == member.value.lower()
            )
            for member in cls
        )

    def __str__(self) -> str:
        return str(self.value)
