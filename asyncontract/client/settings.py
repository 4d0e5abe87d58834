# asyncontract/client/settings.py
"""
Code-style settings for generated contracts.

Type mappings:
    date-time   datetime_class   datetime | AwareDatetime | NaiveDatetime
    date        date_class       date | PastDate | FutureDate
    time        datetime.time (fixed by the library)
    duration    datetime.timedelta (fixed by the library)
    array/map   container_style  one switch for both; datamodel-code-generator
                                 has no separate option for mappings
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ClassStyle(str, Enum):
    """Shape of generated types."""

    MODEL = "model"  # mutable pydantic model
    VALUE = "value"  # frozen pydantic model


class ContainerStyle(str, Enum):
    """Annotation used for arrays and maps."""

    STANDARD = "standard"  # list[...] / dict[...]
    TYPING = "typing"  # List[...] / Dict[...]
    ABSTRACT = "abstract"  # Sequence[...] / Mapping[...]


class ContractGeneratorSettings(BaseModel):
    """
    Options handed to the code generation library.

    Examples:
        >>> ContractGeneratorSettings(class_style="value").class_style
        <ClassStyle.VALUE: 'value'>
    """

    class_style: ClassStyle = ClassStyle.MODEL
    generate_data_annotations: bool = Field(
        default=True,
        description="Emit constraints as Annotated[...] metadata",
    )
    generate_nullable_reference_types: bool = Field(
        default=True,
        description="Nullable schemas become Optional even when required",
    )
    datetime_class: Literal["datetime", "AwareDatetime", "NaiveDatetime"] = "datetime"
    date_class: Literal["date", "PastDate", "FutureDate"] = "date"
    container_style: ContainerStyle = ContainerStyle.STANDARD
    python_version: str = Field(default="3.11", description="Target Python version")

    model_config = ConfigDict(extra="forbid")


__all__ = ["ClassStyle", "ContainerStyle", "ContractGeneratorSettings"]
