"""
Tests for RSA key configuration and the rsa_key_config JSON contract

Покрывает:
- Валидацию строк цифр в Pydantic модели (frozen, extra=forbid)
- Загрузку из mapping, JSON файла и переменных окружения
- Проверку JSON документа по контракту (jsonschema)
- Преобразование в RSAKeyMaterial
"""

import json

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.core.contracts import RSAKeyConfigValidator, SchemaLoader, validate_rsa_key_config
from src.core.domain import (
    ENV_MODULUS,
    ENV_PRIVATE_EXPONENT,
    ENV_PUBLIC_EXPONENT,
    RSAKeyConfig,
    RSAKeyMaterial,
    load_key_material,
)
from src.core.errors import ErrorCode, KeyConfigError
from src.core.math.decimal_bigint import DecimalBigInt


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_key_data():
    """Валидный документ учебного ключа."""
    return {"modulus": "3233", "public_exponent": "17", "private_exponent": "2753"}


@pytest.fixture
def key_file(tmp_path, valid_key_data):
    path = tmp_path / "keys.json"
    path.write_text(json.dumps(valid_key_data), encoding="utf-8")
    return path


# =============================================================================
# CONTRACT
# =============================================================================


class TestKeyConfigContract:
    """JSON Schema контракт rsa_key_config"""

    def test_schema_is_valid(self):
        schema = SchemaLoader().load_schema("rsa_key_config")
        assert schema["title"] == "RSA key configuration"

    def test_valid_document(self, valid_key_data):
        validate_rsa_key_config(valid_key_data)
        RSAKeyConfigValidator().validate(valid_key_data)

    @pytest.mark.parametrize("field", ["modulus", "public_exponent", "private_exponent"])
    def test_missing_field(self, valid_key_data, field):
        del valid_key_data[field]
        with pytest.raises(ValidationError):
            validate_rsa_key_config(valid_key_data)

    def test_non_digit_string(self, valid_key_data):
        valid_key_data["modulus"] = "0x3233"
        with pytest.raises(ValidationError):
            validate_rsa_key_config(valid_key_data)

    def test_number_instead_of_string(self, valid_key_data):
        valid_key_data["public_exponent"] = 17
        with pytest.raises(ValidationError, match="is not of type 'string'"):
            validate_rsa_key_config(valid_key_data)

    def test_additional_properties_rejected(self, valid_key_data):
        valid_key_data["comment"] = "toy key"
        with pytest.raises(ValidationError, match="Additional properties"):
            RSAKeyConfigValidator().validate(valid_key_data)


# =============================================================================
# MODEL
# =============================================================================


class TestRSAKeyConfig:
    """Pydantic модель RSAKeyConfig"""

    def test_from_mapping(self, valid_key_data):
        config = RSAKeyConfig.from_mapping(valid_key_data)
        assert config.modulus == "3233"

    def test_to_key_material(self, valid_key_data):
        material = RSAKeyConfig.from_mapping(valid_key_data).to_key_material()
        assert isinstance(material, RSAKeyMaterial)
        assert material.modulus == DecimalBigInt("3233")
        assert material.public_exponent == DecimalBigInt("17")
        assert material.private_exponent == DecimalBigInt("2753")

    def test_frozen(self, valid_key_data):
        config = RSAKeyConfig.from_mapping(valid_key_data)
        with pytest.raises(PydanticValidationError):
            config.modulus = "1"

    @pytest.mark.parametrize("bad", ["", "12a", "-5", "²", " 17"])
    def test_non_digit_values_rejected(self, valid_key_data, bad):
        valid_key_data["public_exponent"] = bad
        with pytest.raises(KeyConfigError) as exc_info:
            RSAKeyConfig.from_mapping(valid_key_data)
        assert exc_info.value.code == ErrorCode.INVALID_KEY_CONFIG

    @pytest.mark.parametrize("zero", ["0", "000"])
    def test_zero_modulus_rejected(self, valid_key_data, zero):
        valid_key_data["modulus"] = zero
        with pytest.raises(KeyConfigError, match="non-zero"):
            RSAKeyConfig.from_mapping(valid_key_data)

    def test_missing_field_rejected(self, valid_key_data):
        del valid_key_data["private_exponent"]
        with pytest.raises(KeyConfigError):
            RSAKeyConfig.from_mapping(valid_key_data)

    def test_extra_field_rejected(self, valid_key_data):
        valid_key_data["p"] = "61"
        with pytest.raises(KeyConfigError):
            RSAKeyConfig.from_mapping(valid_key_data)


# =============================================================================
# SOURCES
# =============================================================================


class TestKeySources:
    """JSON файл и переменные окружения"""

    def test_from_json_file(self, key_file):
        config = RSAKeyConfig.from_json_file(key_file)
        assert config.private_exponent == "2753"

    def test_json_file_missing(self, tmp_path):
        with pytest.raises(KeyConfigError, match="Cannot read"):
            RSAKeyConfig.from_json_file(tmp_path / "absent.json")

    def test_json_file_not_json(self, tmp_path):
        path = tmp_path / "keys.json"
        path.write_text("modulus=3233", encoding="utf-8")
        with pytest.raises(KeyConfigError, match="not valid JSON"):
            RSAKeyConfig.from_json_file(path)

    def test_json_file_violates_contract(self, tmp_path):
        path = tmp_path / "keys.json"
        path.write_text(json.dumps({"modulus": 3233}), encoding="utf-8")
        with pytest.raises(KeyConfigError, match="violates contract"):
            RSAKeyConfig.from_json_file(path)

    def test_from_env(self):
        environ = {
            ENV_MODULUS: "3233",
            ENV_PUBLIC_EXPONENT: "17",
            ENV_PRIVATE_EXPONENT: " 2753\n",
        }
        config = RSAKeyConfig.from_env(environ)
        assert config.private_exponent == "2753"

    def test_from_env_missing(self):
        with pytest.raises(KeyConfigError, match=ENV_PRIVATE_EXPONENT):
            RSAKeyConfig.from_env({ENV_MODULUS: "3233", ENV_PUBLIC_EXPONENT: "17"})

    def test_load_key_material_from_file(self, key_file):
        assert load_key_material(key_file).modulus == DecimalBigInt("3233")

    def test_load_key_material_from_os_environ(self, monkeypatch):
        monkeypatch.setenv(ENV_MODULUS, "3233")
        monkeypatch.setenv(ENV_PUBLIC_EXPONENT, "17")
        monkeypatch.setenv(ENV_PRIVATE_EXPONENT, "2753")
        assert load_key_material().private_exponent == DecimalBigInt("2753")

    def test_generated_key_fixture(self, rsa_key_config):
        """Модуль тестового ключа длиннее 153 разрядов"""
        assert len(rsa_key_config.modulus) > 153
