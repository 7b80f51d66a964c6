"""Unit tests for WidgetConfig."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from campus_chat.config import ServerConfig, WidgetConfig, get_server_config, get_widget_config


class TestWidgetConfig:
    """Tests for WidgetConfig validation."""

    def test_defaults(self) -> None:
        """Config falls back to local backend and standard paths."""
        with patch.dict("os.environ", {}, clear=True):
            config = WidgetConfig()

        assert config.api_base_url == "http://localhost:8080"
        assert config.chat_path == "/api/chat"
        assert config.upload_path == "/api/upload-knowledge"
        assert config.faqs_path == "/api/faqs"
        assert config.request_timeout == 30.0
        assert config.contact_email == "admissions@college.edu"
        assert config.max_faq_shortcuts == 5

    def test_trailing_slash_is_stripped(self) -> None:
        config = WidgetConfig(api_base_url="http://example.edu/ ")

        assert config.api_base_url == "http://example.edu"

    def test_rejects_invalid_contact_email(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            WidgetConfig(contact_email="admissions")

        assert "CONTACT_EMAIL" in str(exc_info.value)

    @pytest.mark.parametrize("timeout", [0.5, 301])
    def test_rejects_timeout_out_of_range(self, timeout: float) -> None:
        with pytest.raises(ValidationError) as exc_info:
            WidgetConfig(request_timeout=timeout)

        assert "request_timeout" in str(exc_info.value)

    def test_rejects_negative_faq_limit(self) -> None:
        with pytest.raises(ValidationError):
            WidgetConfig(max_faq_shortcuts=-1)


class TestGetWidgetConfig:
    """Tests for get_widget_config factory function."""

    def test_reads_environment(self) -> None:
        env = {
            "API_BASE_URL": "http://backend:9000/",
            "REQUEST_TIMEOUT": "12",
            "CONTACT_EMAIL": "help@college.edu",
        }
        with patch.dict("os.environ", env):
            config = get_widget_config()

        assert config.api_base_url == "http://backend:9000"
        assert config.request_timeout == 12.0
        assert config.contact_email == "help@college.edu"

    def test_backend_url_follows_server_port(self) -> None:
        """Without API_BASE_URL the widget calls the server it is served from."""
        with patch.dict("os.environ", {"PORT": "9000"}, clear=True):
            server = get_server_config()
            widget = get_widget_config()

        assert server.port == 9000
        assert widget.api_base_url == server.local_url == "http://localhost:9000"

    def test_explicit_backend_url_wins_over_port(self) -> None:
        env = {"PORT": "9000", "API_BASE_URL": "http://api.college.edu"}
        with patch.dict("os.environ", env, clear=True):
            config = get_widget_config()

        assert config.api_base_url == "http://api.college.edu"


class TestServerConfig:
    """Tests for ServerConfig."""

    def test_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            config = ServerConfig()

        assert config.host == "0.0.0.0"
        assert config.port == 8080
        assert config.log_level == "INFO"

    def test_log_level_is_uppercased(self) -> None:
        with patch.dict("os.environ", {"LOG_LEVEL": "debug"}):
            config = get_server_config()

        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("port", [0, 70000])
    def test_rejects_port_out_of_range(self, port: int) -> None:
        with pytest.raises(ValidationError):
            ServerConfig(port=port)
