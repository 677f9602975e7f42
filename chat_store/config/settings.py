# config/settings.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
	"""Values read from the environment, or from a .env file if one is present."""
	# Database settings
	MONGO_USER: str = "mongodb://127.0.0.1:27017/"
	MONGO_DB_NAME: str = "chatstore"
	CHAT_MESSAGES_COLLECTION: str = "chat_messages"

	# Query settings
	DEFAULT_PAGE_SIZE: int = 40

	class Config:
		env_file = ".env"
		env_file_encoding = "utf-8"
		extra = "ignore"

_settings: Settings | None = None

def get_settings() -> Settings:
	"""Returns the settings instance, loading it on first use."""
	global _settings
	if _settings is None:
		_settings = Settings()
	return _settings

def reload_settings() -> Settings:
	global _settings
	_settings = Settings()
	return _settings
