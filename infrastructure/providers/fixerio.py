from collections.abc import Sequence
from typing import Any

import httpx

from domain.exceptions.currency import ProviderError
from domain.models.currency import ProviderResult

from .base import BaseAPIProvider


class FixerIOProvider(BaseAPIProvider):
	BASE_URL = 'http://data.fixer.io/api'
	label = 'Fixer.io'

	def __init__(self, api_key: str, base_url: str = BASE_URL, client: httpx.AsyncClient | None = None, timeout: float = 5):
		super().__init__(base_url=base_url, client=client, timeout=timeout)
		self.api_key = api_key

	@property
	def name(self) -> str:
		return 'fixerio'

	def _check_payload(self, data: dict[str, Any]) -> None:
		if not data.get('success', False):
			info = data.get('error', {}).get('info', 'Unknown error')
			raise ProviderError(f'Fixer.io API error: {info}')

	async def fetch_rates(self, base: str, symbols: Sequence[str]) -> ProviderResult:
		data = await self._request(
			'latest', {'access_key': self.api_key, 'base': base, 'symbols': ','.join(symbols)}
		)
		return self._select_rates(data.get('rates'), symbols)
