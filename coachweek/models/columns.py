"""Column helpers shared by the models."""

import enum
from typing import Type

from sqlalchemy import Column, Enum as SAEnum


def enum_column(enum_cls: Type[enum.Enum], name: str, index: bool = False) -> Column:
    """Non-null enum column persisted by *value* (``"no_show"``), not by member name."""
    return Column(
        SAEnum(enum_cls, name=name, values_callable=lambda members: [m.value for m in members]),
        nullable=False,
        index=index,
    )
