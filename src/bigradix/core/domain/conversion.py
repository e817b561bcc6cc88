"""
Conversion — Запись результата конверсии между базами

Immutable Pydantic модель, фиксирующая одну конверсию:
исходная строка → значение → представление в целевой базе.
Соответствует схеме contracts/schema/conversion.json.
"""

from typing import Any, Dict

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator

from bigradix.core.math.digit_codec import MAX_BASE, MIN_BASE
from bigradix.core.math.radix_encoder import encode_to_base
from bigradix.core.math.tagged import encode_tagged


class Conversion(BaseModel):
    """
    Результат конверсии целого числа между системами счисления.

    Immutable модель (frozen=True). Все строковые представления
    согласованы с value (проверяется model validator).
    """

    # Вход
    # В контракте поле называется "input"
    source: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("source", "input"),
        serialization_alias="input",
        description="Исходная строка (как передана)",
    )
    base_from: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="База исходной строки")
    base_to: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Целевая база")

    # Значение
    value: int = Field(..., description="Значение (произвольной точности)")

    # Представления
    decimal: str = Field(..., min_length=1, description="Десятичная запись value")
    converted: str = Field(..., min_length=1, description="Запись value в base_to без тега")
    tagged: str = Field(..., min_length=1, description="Тегированная запись value в base_to")

    model_config = {"frozen": True}  # Immutable

    @field_validator("value", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        """bool является подклассом int, но не является значением конверсии."""
        if isinstance(v, bool):
            raise ValueError("value must be an integer, not bool")
        return v

    @model_validator(mode="after")
    def check_representations(self) -> "Conversion":
        """Все представления должны описывать одно и то же значение."""
        if self.decimal != encode_to_base(self.value, 10):
            raise ValueError(f"decimal {self.decimal!r} does not match value")
        if self.converted != encode_to_base(self.value, self.base_to):
            raise ValueError(f"converted {self.converted!r} does not match value in base {self.base_to}")
        if self.tagged != encode_tagged(self.value, self.base_to):
            raise ValueError(f"tagged {self.tagged!r} does not match value in base {self.base_to}")
        return self

    @classmethod
    def from_value(cls, source: str, value: int, base_from: int, base_to: int) -> "Conversion":
        """
        Построение записи по уже разобранному значению.

        Args:
            source: Исходная строка
            value: Разобранное значение
            base_from: База исходной строки
            base_to: Целевая база

        Returns:
            Conversion со всеми представлениями
        """
        return cls(
            source=source,
            base_from=base_from,
            base_to=base_to,
            value=value,
            decimal=encode_to_base(value, 10),
            converted=encode_to_base(value, base_to),
            tagged=encode_tagged(value, base_to),
        )

    def to_contract(self) -> Dict[str, Any]:
        """
        JSON-совместимое представление для contracts/schema/conversion.json.

        value сериализуется десятичной строкой: JSON числа теряют точность
        за пределами 2^53.
        """
        data = self.model_dump(by_alias=True)
        data["value"] = self.decimal
        return data
