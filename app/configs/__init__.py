from pydantic import Field
from pydantic_settings import SettingsConfigDict

from configs.feature import FeatureConfig


class RestClientConfig(FeatureConfig):
    PROJECT_NAME: str = Field(default="restclient")

    model_config = SettingsConfigDict(
        # read from dotenv format config file
        env_file=".env",
        env_file_encoding="utf-8",
        # ignore extra attributes
        extra="ignore",
    )


restclient_config: RestClientConfig = RestClientConfig()

__all__ = ["RestClientConfig", "restclient_config"]
