from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Upstream providers
	PROVIDER_TIMEOUT: float = 5.0

	FAWAZ_BASE_URL: str = 'https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@latest/v1'
	FRANKFURTER_BASE_URL: str = 'https://api.frankfurter.app'
	FIXERIO_BASE_URL: str = 'http://data.fixer.io/api'
	OPENEXCHANGE_BASE_URL: str = 'https://openexchangerates.org/api'
	CURRENCYAPI_BASE_URL: str = 'https://api.currencyapi.com/v3'

	# Keyed providers are only registered when their key is set
	FIXERIO_API_KEY: str = ''
	OPENEXCHANGE_APP_ID: str = ''
	CURRENCYAPI_API_KEY: str = ''

	# Application
	APP_NAME: str = 'Exchange Rate Gateway'
	HOST: str = '0.0.0.0'
	PORT: int = 8080

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
