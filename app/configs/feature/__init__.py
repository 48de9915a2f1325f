from pydantic import Field, NonNegativeFloat, PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings


class HttpConfig(BaseSettings):
    """
    Defaults for the transport created when no httpx client is supplied
    """

    HTTP_DEFAULT_TIMEOUT: PositiveFloat = Field(
        description="Default timeout in seconds for a whole request/response exchange",
        default=30.0,
    )

    HTTP_MAX_CONNECTIONS: PositiveInt = Field(
        description="Maximum number of concurrent connections in the pool",
        default=100,
    )

    HTTP_MAX_KEEPALIVE_CONNECTIONS: PositiveInt = Field(
        description="Maximum number of idle keep-alive connections kept in the pool",
        default=20,
    )

    HTTP_KEEPALIVE_EXPIRY: NonNegativeFloat = Field(
        description="Seconds an idle keep-alive connection stays in the pool",
        default=30.0,
    )

    HTTP_PROXY_URL: str | None = Field(
        description="Proxy URL for outgoing requests, e.g. http://proxy:8080",
        default=None,
    )

    HTTP_FORCE_DECODE_ON_ERROR: bool = Field(
        description="Decode response bodies even when the status code is 400 or above",
        default=False,
    )


class StreamConfig(BaseSettings):
    STREAM_MAX_BUFFER_SIZE: PositiveInt = Field(
        description="Largest newline-delimited record, in bytes, accepted from a streaming response",
        default=512 * 1024,
    )


class LoggingConfig(BaseSettings):
    """
    Configuration for logging
    """

    LOG_LEVEL: str = Field(
        description="Logging level, default to INFO. Set to DEBUG to trace every exchange.",
        default="INFO",
    )

    LOG_FILE: str | None = Field(
        description="File path for log output.",
        default=None,
    )

    LOG_FILE_MAX_SIZE: PositiveInt = Field(
        description="Maximum file size for file rotation retention, the unit is megabytes (MB)",
        default=20,
    )

    LOG_FILE_BACKUP_COUNT: PositiveInt = Field(
        description="Maximum file backup count file rotation retention",
        default=5,
    )

    LOG_FORMAT: str = Field(
        description="Format string for log messages",
        default=(
            "%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] "
            "[%(filename)s:%(lineno)d] %(trace_id)s - %(message)s"
        ),
    )

    LOG_DATEFORMAT: str | None = Field(
        description="Date format string for log timestamps",
        default=None,
    )

    LOG_TZ: str | None = Field(
        description="Timezone for log timestamps (e.g., 'America/New_York')",
        default="UTC",
    )


class FeatureConfig(
    HttpConfig,
    StreamConfig,
    LoggingConfig,
):
    pass
