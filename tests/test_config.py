"""
Tests for configuration loading and the api facade.
"""
import pytest

from payrest import (
    ApiClient,
    ClientConfig,
    ClientParameters,
    ConfigError,
    build_environment,
    create_api_client,
    load_client_config,
    load_env_file,
)

API_KEY = "test_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM"
LIVE_KEY = "live_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM"


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig.from_mapping({"PAYREST_API_KEY": API_KEY})

        assert config.api_key == API_KEY
        assert config.base_url == "https://api.mollie.com/v2"
        assert config.timeout_seconds == 10
        assert config.is_test_key

    def test_custom_values(self):
        config = ClientConfig.from_mapping(
            {
                "PAYREST_API_KEY": f"  {LIVE_KEY} ",
                "PAYREST_API_ENDPOINT": "https://api.example/",
                "PAYREST_API_VERSION": "/v3/",
                "PAYREST_TIMEOUT_SECONDS": "30",
            }
        )

        assert config.api_key == LIVE_KEY
        assert config.base_url == "https://api.example/v3"
        assert config.timeout_seconds == 30
        assert not config.is_test_key

    def test_missing_api_key(self):
        with pytest.raises(ConfigError, match="must be provided"):
            ClientConfig.from_mapping({})

    @pytest.mark.parametrize("api_key", ["", "   ", "test_short", "prod_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM"])
    def test_invalid_api_key(self, api_key):
        with pytest.raises(ConfigError):
            ClientConfig.from_mapping({"PAYREST_API_KEY": api_key})

    @pytest.mark.parametrize("timeout", ["soon", "0", "-5"])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ConfigError):
            ClientConfig.from_mapping({"PAYREST_API_KEY": API_KEY, "PAYREST_TIMEOUT_SECONDS": timeout})

    def test_config_is_frozen(self):
        config = ClientConfig(api_key=API_KEY)

        with pytest.raises(AttributeError):
            config.api_key = LIVE_KEY


class TestEnvironment:
    def test_layers(self, tmp_path):
        """Should let overrides win and .env only fill gaps"""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# settings\n"
            "PAYREST_API_KEY=from-file\n"
            "export PAYREST_API_VERSION='v9'\n"
            "PAYREST_TIMEOUT_SECONDS=5\n",
            encoding="utf-8",
        )

        environment = build_environment(
            env_file=str(env_file),
            base={"PAYREST_API_KEY": "from-base"},
            overrides={"PAYREST_TIMEOUT_SECONDS": "7"},
        )

        assert environment.get("PAYREST_API_KEY") == "from-base"
        assert environment.get("PAYREST_API_VERSION") == "v9"
        assert environment.get("PAYREST_TIMEOUT_SECONDS") == "7"
        assert environment.get("MISSING", "default") == "default"

    def test_missing_env_file(self, tmp_path):
        environment = build_environment(env_file=str(tmp_path / "nope"), base={})

        assert dict(environment.variables) == {}

    def test_load_env_file_keeps_existing(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("A=1\nB=2\n", encoding="utf-8")
        environ = {"A": "0"}

        merged = load_env_file(str(env_file), environ=environ)

        assert merged == {"A": "0", "B": "2"}
        assert environ == {"A": "0", "B": "2"}


class TestLoadClientConfig:
    def test_keyword_arguments_win(self):
        config = load_client_config(
            env_file=None,
            base={"PAYREST_API_KEY": LIVE_KEY},
            api_key=API_KEY,
            timeout_seconds=3,
        )

        assert config.api_key == API_KEY
        assert config.timeout_seconds == 3

    def test_parameters_bundle(self):
        parameters = ClientParameters(api_key=API_KEY, api_endpoint="https://api.example")

        config = load_client_config(env_file=None, base={}, parameters=parameters)

        assert config.base_url == "https://api.example/v2"


class TestCreateApiClient:
    def test_from_config(self, config, transport):
        client = create_api_client(config=config, transport=transport)

        assert isinstance(client, ApiClient)
        assert client.config is config
        assert client.transport is transport

    def test_from_parameters(self):
        client = create_api_client(env_file=None, base={}, api_key=API_KEY)

        assert client.config.api_key == API_KEY

    def test_config_and_parameters_conflict(self, config):
        with pytest.raises(ValueError, match="not both"):
            create_api_client(config=config, api_key=API_KEY)
