"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самой схемы
- Валидация правильных данных (объектная и массивная формы)
- Детекция нарушений required полей и типов
- Детекция лишних полей и неверной длины массива
- Интеграция с Pydantic моделью Vector3
"""

import json
from pathlib import Path

import pytest
from jsonschema import SchemaError, ValidationError

from src.core.contracts import (
    SchemaLoader,
    Vector3Validator,
    parse_vector3_payload,
    validate_vector3,
)
from src.core.domain import InvalidArgument, Vector3


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_vector3_schema(self) -> None:
        """Схема vector3 загружается и проходит meta-validation"""
        schema = SchemaLoader().load_schema("vector3")
        assert schema["title"] == "Vector3"
        assert "oneOf" in schema

    def test_schema_is_cached(self) -> None:
        """Повторная загрузка возвращает закэшированный объект"""
        loader = SchemaLoader()
        assert loader.load_schema("vector3") is loader.load_schema("vector3")

    def test_missing_schema_raises(self) -> None:
        """Отсутствующая схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("matrix4x4")

    def test_invalid_schema_raises_with_cause(self, tmp_path: Path) -> None:
        """Невалидная JSON Schema → ValueError, причина SchemaError сохраняется"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")
        loader = SchemaLoader()
        loader._schema_dir = tmp_path

        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json") as exc_info:
            loader.load_schema("broken")

        assert isinstance(exc_info.value.__cause__, SchemaError)


# =============================================================================
# VECTOR3 CONTRACT
# =============================================================================


class TestVector3Contract:
    """Тесты vector3 контракта"""

    @pytest.mark.parametrize(
        "payload",
        [
            {"x": 1, "y": 2},
            {"x": 1.5, "y": -2.5, "z": 3},
            [1, 2],
            [1.0, 2.0, 3.0],
        ],
    )
    def test_valid_payloads(self, payload: object) -> None:
        """Правильные payload проходят валидацию"""
        validate_vector3(payload)
        assert Vector3Validator().is_valid(payload)

    @pytest.mark.parametrize(
        "payload",
        [
            {"x": 1},
            {"y": 2, "z": 3},
            {"x": "1", "y": 2},
            {"x": True, "y": 2},
            {"x": 1, "y": 2, "w": 0},
            [1],
            [1, 2, 3, 4],
            ["1", "2"],
            "1,2,3",
            None,
        ],
    )
    def test_invalid_payloads(self, payload: object) -> None:
        """Неправильные payload отвергаются"""
        with pytest.raises(ValidationError):
            validate_vector3(payload)

        assert not Vector3Validator().is_valid(payload)

    def test_iter_errors_reports_problems(self) -> None:
        """iter_errors возвращает хотя бы одну ошибку"""
        errors = list(Vector3Validator().iter_errors({"x": "a"}))
        assert len(errors) >= 1


# =============================================================================
# PAYLOAD PARSING
# =============================================================================


class TestParseVector3Payload:
    """Тесты parse_vector3_payload"""

    def test_object_payload(self) -> None:
        assert parse_vector3_payload({"x": 1, "y": 2}).to_tuple() == (1.0, 2.0, 0.0)

    def test_array_payload(self) -> None:
        assert parse_vector3_payload([1, 2, 3]).to_tuple() == (1.0, 2.0, 3.0)

    def test_schema_violation_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            parse_vector3_payload({"x": 1, "y": 2, "extra": 3})

    def test_non_finite_component_raises_invalid_argument(self) -> None:
        """NaN проходит схему (это number), но отвергается Vector3"""
        payload = json.loads('{"x": NaN, "y": 0}')
        with pytest.raises(InvalidArgument):
            parse_vector3_payload(payload)


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class TestPydanticIntegration:
    """Сериализация Vector3 соответствует контракту"""

    def test_model_dump_matches_schema(self) -> None:
        v = Vector3.of(1, 2, 3)
        validate_vector3(v.model_dump())

    def test_json_round_trip_through_contract(self) -> None:
        v = Vector3.of(0.5, -1.25, 8)
        payload = json.loads(v.model_dump_json())

        validate_vector3(payload)
        assert parse_vector3_payload(payload).equals(v)
