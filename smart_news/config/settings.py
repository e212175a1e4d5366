from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	GEMINI_API_KEY: str | None = None
	GEMINI_MODEL: str = 'gemini-2.5-flash'

	# App Settings
	APP_NAME: str = 'Smart News'
	LOG_LEVEL: str = 'INFO'
	LOG_TO_FILE: bool = True

	# Paths
	BASE_DIR: Path = Path(__file__).parent.parent.parent
	CONFIG_DIR: Path = BASE_DIR / 'config'
	DATA_DIR: Path = BASE_DIR / 'data'
	CACHE_DIR: Path = DATA_DIR / 'cache'

	# Response cache
	CACHE_ENABLED: bool = True
	CACHE_TTL_SECONDS: int = 15 * 60

	# Normalizer tuning: shortest prose answer that still gets a fallback record
	FALLBACK_MIN_LENGTH: int = 50

	OUTPUT_LANGUAGE: str = 'Persian'

	model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')


settings = Settings()
