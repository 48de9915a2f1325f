from configs import RestClientConfig


class TestRestClientConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("HTTP_FORCE_DECODE_ON_ERROR", raising=False)
        monkeypatch.delenv("STREAM_MAX_BUFFER_SIZE", raising=False)
        config = RestClientConfig(_env_file=None)
        assert config.HTTP_DEFAULT_TIMEOUT == 30.0
        assert config.HTTP_FORCE_DECODE_ON_ERROR is False
        assert config.STREAM_MAX_BUFFER_SIZE == 512 * 1024
        assert config.LOG_LEVEL == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("HTTP_FORCE_DECODE_ON_ERROR", "true")
        monkeypatch.setenv("STREAM_MAX_BUFFER_SIZE", "1024")
        config = RestClientConfig(_env_file=None)
        assert config.HTTP_FORCE_DECODE_ON_ERROR is True
        assert config.STREAM_MAX_BUFFER_SIZE == 1024
