"""
JSON Schema Contract Validators

Модуль для валидации сериализованных запросов и результатов решателя
согласно формальным JSON Schema контрактам (Draft 2020-12).
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (src/core/contracts/schema/):
- lattice_query.json: уравнение и (необязательный) бокс
- lattice_result.json: результат любой операции решателя (to_contract())
"""

import json
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.equation import Equation
from src.core.domain.interval import Interval


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'lattice_query')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        # check_schema не разрешает $ref: локальные ссылки проверяются отдельно
        for ref in _iter_local_refs(schema):
            if not _resolve_pointer(schema, ref):
                raise ValueError(f"Unresolvable $ref '{ref}' in {schema_name}.json")

        self._schemas[schema_name] = schema
        return schema


def _iter_local_refs(node: Any):
    """Все локальные $ref ('#/...') внутри схемы."""
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith("#/"):
            yield ref
        for value in node.values():
            yield from _iter_local_refs(value)
    elif isinstance(node, list):
        for item in node:
            yield from _iter_local_refs(item)


def _resolve_pointer(schema: Dict[str, Any], ref: str) -> bool:
    """True если JSON Pointer из ref указывает на существующий узел схемы."""
    node: Any = schema
    for token in ref[2:].split("/"):
        token = token.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict) and token in node:
            node = node[token]
        elif isinstance(node, list) and token.isdigit() and int(token) < len(node):
            node = node[int(token)]
        else:
            return False
    return True


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


class LatticeQueryValidator(ContractValidator):
    """Валидатор для lattice_query контракта."""

    def __init__(self):
        super().__init__("lattice_query")


class LatticeResultValidator(ContractValidator):
    """Валидатор для lattice_result контракта."""

    def __init__(self):
        super().__init__("lattice_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


class LatticeQuery(NamedTuple):
    """Разобранный lattice_query."""

    equation: Equation
    x_range: Optional[Interval]
    y_range: Optional[Interval]
    objective: Optional[str]


def validate_lattice_query(data: Dict[str, Any]) -> None:
    """
    Валидация lattice_query данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LatticeQueryValidator().validate(data)


def validate_lattice_result(data: Dict[str, Any]) -> None:
    """
    Валидация lattice_result данных (результат to_contract()).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LatticeResultValidator().validate(data)


def parse_lattice_query(data: Dict[str, Any]) -> LatticeQuery:
    """
    Валидация и разбор lattice_query в доменные модели.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если интервал пуст (lo > hi)
    """
    validate_lattice_query(data)

    x_range = Interval(**data["x_range"]) if "x_range" in data else None
    y_range = Interval(**data["y_range"]) if "y_range" in data else None

    return LatticeQuery(
        equation=Equation(a=data["a"], b=data["b"], c=data["c"]),
        x_range=x_range,
        y_range=y_range,
        objective=data.get("objective"),
    )
