import os
from typing import Optional, Type, TypeVar
from openai import OpenAI
from google import genai
from pydantic import BaseModel

from yomikaki import AI_BACKEND, MODEL_GEMINI, MODEL_OPENAI
from yomikaki.prompts import get_system_instruction

T = TypeVar('T', bound=BaseModel)


class BaseAIClient:
    """Shared backend setup for the OpenAI and Gemini clients."""

    def __init__(
        self,
        backend: str = AI_BACKEND,
        language: str = "ja",
        model_openai: str = MODEL_OPENAI,
        model_gemini: str = MODEL_GEMINI,
        system_prompt: Optional[str] = None,
    ):
        self.backend = backend.lower()
        self.language = language
        self.model_openai = model_openai
        self.model_gemini = model_gemini
        self.system_prompt = system_prompt or get_system_instruction(language)
        self._setup_backend()

    def _setup_backend(self):
        if self.backend == "openai":
            self._setup_openai()
        elif self.backend == "gemini":
            self._setup_gemini()
        else:
            raise ValueError(f"Unsupported backend: {self.backend}")

    def _setup_openai(self):
        self.client = OpenAI(api_key=os.getenv("OPENAI_API_KEY"))
        self.model = self.model_openai
        self._messages = [{"role": "system", "content": self.system_prompt}]

    def _setup_gemini(self):
        self.client = genai.Client(api_key=os.getenv("GEMINI_KEY"))
        self.model = self.model_gemini


class CompletionClient(BaseAIClient):

    def reset(self):
        """Clear conversation history (but keep the system instruction)."""
        if self.backend == "openai":
            self._messages = [{"role": "system", "content": self.system_prompt}]

    def complete(
        self,
        prompt: str,
        response_schema: Optional[Type[T]] = None,
        json_output: bool = True,
    ) -> str:
        """
        Send one non-streaming request and get the full reply.

        Args:
            prompt: The prompt to send to the model
            response_schema: Optional Pydantic model class that defines the expected response schema
            json_output: Ask the model for a JSON document instead of plain text
        """
        if self.backend == "openai":
            self._messages.append({"role": "user", "content": prompt})
            kwargs = {}
            if json_output:
                kwargs["response_format"] = {"type": "json_object"}
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=self._messages,
                **kwargs,
            )
            return resp.choices[0].message.content

        else:  # gemini
            config = {'system_instruction': self.system_prompt}
            if json_output:
                config['response_mime_type'] = 'application/json'
                if response_schema:
                    config['response_schema'] = response_schema

            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config
            )

            return response.text


def get_ai_client(backend: str = AI_BACKEND, language: str = "ja", **kwargs) -> CompletionClient:
    """Build a completion client for *backend* with the *language* system prompt."""
    return CompletionClient(backend=backend, language=language, **kwargs)
