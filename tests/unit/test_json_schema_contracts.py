"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора network_config:
- Валидность самой схемы
- Валидация правильных данных (в том числе поставляемого networks.json)
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (min/max/pattern)
"""

import copy
import json

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.config.networks import DEFAULT_NETWORKS_FILE
from src.core.contracts import (
    NetworkConfigValidator,
    SchemaLoader,
    network_config_errors,
    validate_network_config,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_network_config():
    """Валидный network_config для тестирования."""
    return {
        "schema_version": "1",
        "networks": {
            "development": {
                "host": "localhost",
                "port": 8545,
                "network_id": "*",
                "gas_price": 22000000000,
            },
            "ropsten": {
                "provider_url": "https://ropsten.infura.io/",
                "network_id": "3",
                "gas": 5700000,
                "gas_price": "50 gwei",
            },
        },
        "rpc": {"host": "localhost", "port": 8545},
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schema_is_valid_draft_2020_12(self) -> None:
        schema = SchemaLoader().load_schema("network_config")
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("network_config") is loader.load_schema("network_config")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# NETWORK CONFIG VALIDATION
# =============================================================================


class TestNetworkConfigValidation:
    """Тесты валидации network_config"""

    def test_valid_data(self, valid_network_config) -> None:
        validate_network_config(valid_network_config)

    def test_shipped_networks_file_is_valid(self) -> None:
        data = json.loads(DEFAULT_NETWORKS_FILE.read_text(encoding="utf-8"))
        assert NetworkConfigValidator().is_valid(data)

    def test_rpc_section_optional(self, valid_network_config) -> None:
        del valid_network_config["rpc"]
        validate_network_config(valid_network_config)

    def test_missing_networks(self, valid_network_config) -> None:
        del valid_network_config["networks"]
        with pytest.raises(ValidationError, match="'networks' is a required property"):
            validate_network_config(valid_network_config)

    def test_empty_networks(self, valid_network_config) -> None:
        valid_network_config["networks"] = {}
        with pytest.raises(ValidationError):
            validate_network_config(valid_network_config)

    def test_wrong_schema_version(self, valid_network_config) -> None:
        valid_network_config["schema_version"] = "2"
        with pytest.raises(ValidationError):
            validate_network_config(valid_network_config)

    def test_missing_network_id(self, valid_network_config) -> None:
        del valid_network_config["networks"]["development"]["network_id"]
        with pytest.raises(ValidationError, match="'network_id' is a required property"):
            validate_network_config(valid_network_config)

    @pytest.mark.parametrize("port", [0, 65536, -1, "8545"])
    def test_invalid_port(self, valid_network_config, port) -> None:
        valid_network_config["networks"]["development"]["port"] = port
        assert not NetworkConfigValidator().is_valid(valid_network_config)

    def test_network_without_endpoint(self, valid_network_config) -> None:
        """Профиль должен иметь host+port или provider_url"""
        del valid_network_config["networks"]["development"]["host"]
        with pytest.raises(ValidationError):
            validate_network_config(valid_network_config)

    @pytest.mark.parametrize("gas_price", ["50 gwei", "1.5 ether", "21000", 0, 1])
    def test_valid_quantities(self, valid_network_config, gas_price) -> None:
        valid_network_config["networks"]["development"]["gas_price"] = gas_price
        validate_network_config(valid_network_config)

    @pytest.mark.parametrize("gas_price", ["50 bananas", "-5", "gwei", -1, 1.5, None])
    def test_invalid_quantities(self, valid_network_config, gas_price) -> None:
        valid_network_config["networks"]["development"]["gas_price"] = gas_price
        assert not NetworkConfigValidator().is_valid(valid_network_config)

    def test_unknown_field_rejected(self, valid_network_config) -> None:
        valid_network_config["networks"]["development"]["private_key"] = "00"
        with pytest.raises(ValidationError, match="Additional properties"):
            validate_network_config(valid_network_config)

    def test_iter_errors_reports_all(self, valid_network_config) -> None:
        data = copy.deepcopy(valid_network_config)
        data["networks"]["development"]["port"] = 0
        data["networks"]["ropsten"]["network_id"] = "mainnet"
        errors = list(NetworkConfigValidator().iter_errors(data))
        assert len(errors) >= 2

    def test_network_config_errors_sorted_by_path(self, valid_network_config) -> None:
        data = copy.deepcopy(valid_network_config)
        data["networks"]["ropsten"]["network_id"] = "mainnet"
        data["networks"]["development"]["port"] = 0
        paths = [list(e.absolute_path) for e in network_config_errors(data)]
        assert paths == [
            ["networks", "development", "port"],
            ["networks", "ropsten", "network_id"],
        ]

    def test_network_config_errors_empty_for_valid(self, valid_network_config) -> None:
        assert network_config_errors(valid_network_config) == []
