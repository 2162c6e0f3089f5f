"""Settings for the API."""

from pydantic import Field

from generator.app.config.settings import Settings as GeneratorSettings


class Settings(GeneratorSettings):
    api_host: str = Field("127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(8000, validation_alias="API_PORT")
