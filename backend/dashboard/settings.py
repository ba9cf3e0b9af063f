from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field

class Settings(BaseSettings):
	openai_api_key: str | None = Field(default=None, validation_alias="OPENAI_API_KEY")
	# Model used by every tool unless a caller overrides it
	openai_model: str = Field(default="gpt-4o", validation_alias="OPENAI_MODEL")
	openai_base_url: str = Field(default="https://api.openai.com/v1/chat/completions", validation_alias="OPENAI_BASE_URL")
	openai_timeout_seconds: float = Field(default=30, validation_alias="OPENAI_TIMEOUT_SECONDS")

	# Demo mode: LLM-backed tools answer with hand-authored examples instead of calling the API
	use_mock_data: bool = Field(
		default=False,
		validation_alias=AliasChoices("USE_MOCK_DATA", "NEXT_PUBLIC_USE_MOCK_DATA"),
	)

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
