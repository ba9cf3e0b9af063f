from __future__ import annotations
import httpx
from typing import Any, Dict, List, Optional
from .settings import settings

class OpenAIClient:
	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		model: Optional[str] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		self.api_key = api_key or settings.openai_api_key
		if not self.api_key:
			raise ValueError("OPENAI_API_KEY is not configured")
		self.model = model or settings.openai_model
		self.base_url = base_url or settings.openai_base_url
		self._headers = {
			"Authorization": f"Bearer {self.api_key}",
			"Content-Type": "application/json",
		}
		self._client = httpx.AsyncClient(timeout=settings.openai_timeout_seconds, transport=transport)

	async def complete(
		self,
		messages: List[Dict[str, str]],
		*,
		temperature: float = 0.7,
		max_tokens: Optional[int] = None,
		json_mode: bool = False,
	) -> str:
		payload: Dict[str, Any] = {
			"model": self.model,
			"messages": messages,
			"temperature": temperature,
		}
		if max_tokens is not None:
			payload["max_tokens"] = int(max_tokens)
		if json_mode:
			payload["response_format"] = {"type": "json_object"}
		r = await self._client.post(self.base_url, headers=self._headers, json=payload)
		r.raise_for_status()
		try:
			data = r.json()
			content = data["choices"][0]["message"]["content"]
		except (ValueError, KeyError, IndexError, TypeError) as err:
			raise RuntimeError(f"Unexpected chat completion response: {r.text}") from err
		return content or ""

	async def aclose(self) -> None:
		await self._client.aclose()

	async def __aenter__(self) -> "OpenAIClient":
		return self

	async def __aexit__(self, *exc_info: Any) -> None:
		await self.aclose()
