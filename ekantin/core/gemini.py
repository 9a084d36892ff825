"""
core/gemini.py – GeminiService class.
Tanggung jawab: berkomunikasi dengan Google Gemini API.
"""
import asyncio
import logging

import google.generativeai as genai
from google.generativeai.types import GenerationConfig

logger = logging.getLogger(__name__)

PING_PROMPT = "Halo, jawab dengan singkat: apa itu nasi goreng?"


class GeminiNotConfigured(RuntimeError):
    pass


class GeminiService:
    """Wrapper Gemini API. Error dari SDK diteruskan ke pemanggil."""

    def __init__(self, api_key: str, model_name: str = "gemini-2.0-flash") -> None:
        self._api_key = api_key
        self._model_name = model_name
        if api_key:
            genai.configure(api_key=api_key)

    @property
    def model_name(self) -> str:
        return self._model_name

    async def ask(
        self,
        message: str,
        system: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> str:
        """Satu kali generate_content, mengembalikan teks jawaban (sudah di-strip)."""
        if not self._api_key:
            raise GeminiNotConfigured("GEMINI_API_KEY not configured")
        cfg = GenerationConfig(
            temperature=temperature, top_k=40, top_p=0.95, max_output_tokens=max_tokens,
        )

        def _call() -> str:
            model = genai.GenerativeModel(
                model_name=self._model_name,
                system_instruction=system,
                generation_config=cfg,
            )
            return model.generate_content(message).text

        text = await asyncio.get_event_loop().run_in_executor(None, _call)
        if not text:
            raise RuntimeError("No response from Gemini")
        return text.strip()

    async def ping(self) -> str:
        """Panggilan pendek untuk diagnostik test-gemini."""
        return await self.ask(PING_PROMPT, max_tokens=100, temperature=0.5)
