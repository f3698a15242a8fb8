import json
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from config.settings import settings
from utils.exceptions import UpstreamServiceError
from utils.langfuse_config import get_langfuse_handler
from utils.language_config import is_english, resolve_language_name

logger = logging.getLogger(__name__)


def _apply_language_instruction(system_prompt: Optional[str], language: Optional[str]) -> Optional[str]:
    """
    Append a language instruction to the system prompt if a language is set
    and is not English.

    Args:
        system_prompt: Original system prompt (may be None)
        language: ISO 639-1 code ("no", "sv") or language name ("Norwegian")

    Returns:
        System prompt with language instruction appended, or original if no change needed
    """
    language_name = resolve_language_name(language)
    if not language_name or is_english(language_name):
        return system_prompt

    instruction = (
        f"\n\nIMPORTANT: You MUST respond entirely in {language_name}. "
        "Do not use English unless quoting technical terms."
    )

    if system_prompt:
        return system_prompt + instruction
    return instruction.strip()


class LLMProvider(Enum):
    GEMINI = "gemini"
    OPENAI = "openai"
    OLLAMA = "ollama"
    OPENROUTER = "openrouter"


class LLMService:
    """
    Provider-agnostic LLM wrapper that supports:
    - OpenAI
    - OpenRouter (OpenAI-compatible)
    - Gemini
    - Ollama (local, OpenAI-compatible)

    Every call raises UpstreamServiceError on provider failure or on an
    unusable response; callers never receive an empty placeholder.
    """

    def __init__(
        self,
        provider: Optional[str] = None,
        model_name: Optional[str] = None,
        temperature: float = 0.7,
    ):
        self.provider = (provider or settings.LLM_PROVIDER).lower()
        self.model_name = model_name or settings.LLM_MODEL
        self.temperature = temperature

        self.model = self._load_provider_model()

    @classmethod
    def fast(cls) -> "LLMService":
        """Create LLM service with fast model for short generations"""
        return cls(model_name=settings.LLM_FAST_MODEL)

    @classmethod
    def deep(cls) -> "LLMService":
        """Create LLM service with deep model for scoring and analysis"""
        return cls(model_name=settings.LLM_DEEP_MODEL, temperature=0.3)

    # ---------------------------------------------------------------------
    # Provider Loader
    # ---------------------------------------------------------------------
    def _load_provider_model(self):
        provider = self.provider

        if provider == LLMProvider.OPENAI.value:
            return ChatOpenAI(
                model=self.model_name,
                temperature=self.temperature,
            )

        # OpenAI-compatible API
        if provider == LLMProvider.OPENROUTER.value:
            return ChatOpenAI(
                api_key=settings.OPENROUTER_API_KEY,
                base_url="https://openrouter.ai/api/v1",
                model=self.model_name,
                temperature=self.temperature,
            )

        if provider == LLMProvider.OLLAMA.value:
            return ChatOpenAI(
                api_key="ollama",  # not used
                base_url="http://localhost:11434/v1",
                model=self.model_name,
                temperature=self.temperature,
            )

        if provider == LLMProvider.GEMINI.value:
            return ChatGoogleGenerativeAI(
                model=self.model_name,
                temperature=self.temperature,
                google_api_key=settings.GEMINI_API_KEY,
            )

        raise ValueError(f"Unsupported LLM provider: {provider}")

    # ---------------------------------------------------------------------
    # Invocation
    # ---------------------------------------------------------------------
    def _build_config(self, session_id: Optional[str], tags: Optional[List[str]]) -> Dict[str, Any]:
        """Build LangChain run config with Langfuse tracing."""
        handler = get_langfuse_handler()
        metadata: Dict[str, Any] = {"langfuse_tags": tags or []}
        if session_id:
            metadata["langfuse_session_id"] = session_id
        return {
            "callbacks": [handler] if handler else [],
            "metadata": metadata,
        }

    def _invoke(
        self,
        messages: Sequence[BaseMessage],
        session_id: Optional[str] = None,
        tags: Optional[List[str]] = None,
        **kwargs: Any,
    ) -> str:
        try:
            response = self.model.invoke(
                list(messages),
                config=self._build_config(session_id, tags),
                **kwargs,
            )
        except Exception as e:
            logger.error(f"LLM call failed ({self.provider}/{self.model_name}): {e}")
            raise UpstreamServiceError(f"Language model request failed: {e}") from e

        # LangChain models return text in different formats
        if isinstance(response.content, str):
            content = response.content
        else:
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part)
                for part in response.content
            )

        if not content.strip():
            raise UpstreamServiceError("Language model returned an empty response")
        return content.strip()

    # ---------------------------------------------------------------------
    # Text Generator
    # ---------------------------------------------------------------------
    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        langcode: Optional[str] = None,
        session_id: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> str:
        """
        Generate raw text response from LLM

        Args:
            prompt: The main prompt/question
            system_prompt: Optional system prompt for context
            langcode: Optional language code or name for the response language
            session_id: Optional trace session (application id)
            tags: Optional trace tags

        Returns:
            Raw text response from LLM

        Raises:
            UpstreamServiceError: If the provider fails or returns nothing
        """
        system_prompt = _apply_language_instruction(system_prompt, langcode)
        messages: List[BaseMessage] = []

        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))

        messages.append(HumanMessage(content=prompt))

        return self._invoke(messages, session_id=session_id, tags=tags)

    # ---------------------------------------------------------------------
    # Multi-turn Chat Generator
    # ---------------------------------------------------------------------
    def generate_chat(
        self,
        system_prompt: str,
        history: Sequence[Dict[str, str]],
        langcode: Optional[str] = None,
        session_id: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> str:
        """
        Generate the next assistant turn of a conversation.

        Args:
            system_prompt: Instructions for the assistant
            history: [{"role": "user" | "assistant", "content": "..."}] in order;
                must start with a user turn for Gemini
            langcode: Optional language code or name for the response language
            session_id: Optional trace session (application id)
            tags: Optional trace tags

        Returns:
            Assistant reply text

        Raises:
            UpstreamServiceError: If the provider fails or returns nothing
        """
        messages: List[BaseMessage] = [
            SystemMessage(content=_apply_language_instruction(system_prompt, langcode))
        ]
        for entry in history:
            if entry.get("role") == "assistant":
                messages.append(AIMessage(content=entry.get("content", "")))
            else:
                messages.append(HumanMessage(content=entry.get("content", "")))

        return self._invoke(messages, session_id=session_id, tags=tags)

    # ---------------------------------------------------------------------
    # JSON Generator
    # ---------------------------------------------------------------------
    def generate_json(
        self,
        system_prompt: str,
        human_prompt: str,
        schema: Dict[str, Any],
        langcode: Optional[str] = None,
        session_id: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """
        Generate a JSON object matching `schema`.

        Raises:
            UpstreamServiceError: If the provider fails or the output is not a JSON object
        """
        system_prompt = _apply_language_instruction(system_prompt, langcode)
        messages = [
            SystemMessage(content=self._inject_json_rules(system_prompt, schema)),
            HumanMessage(content=human_prompt)
        ]

        # JSON mode only for providers that support response_format;
        # Gemini and Ollama rely on system prompt enforcement
        kwargs: Dict[str, Any] = {}
        if self.provider in (LLMProvider.OPENAI.value, LLMProvider.OPENROUTER.value):
            kwargs["response_format"] = {"type": "json_object"}

        content = self._invoke(messages, session_id=session_id, tags=tags, **kwargs)
        return self._parse_json(content)

    @staticmethod
    def _parse_json(content: str) -> Dict[str, Any]:
        text = content.strip()
        # Strip markdown code fences some providers add anyway
        if text.startswith("```"):
            text = text.strip("`")
            if text.lower().startswith("json"):
                text = text[4:]
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"LLM returned invalid JSON: {content[:200]}")
            raise UpstreamServiceError("Language model returned invalid JSON") from e

        if not isinstance(data, dict):
            raise UpstreamServiceError("Language model returned JSON that is not an object")
        return data

    # ---------------------------------------------------------------------
    # JSON Enforcement Layer
    # ---------------------------------------------------------------------
    def _inject_json_rules(self, system_prompt: str, schema: Dict[str, Any]) -> str:
        """
        Ensures all providers return the correct JSON, especially Ollama and OpenRouter.
        """

        return f"""
{system_prompt}

You MUST return ONLY valid JSON matching this schema:

{json.dumps(schema, indent=2)}

Rules:
- Output **only** a JSON object.
- No commentary, no markdown, no code fences.
- Do not explain the JSON, only output it.
- Keys and structure must match the schema exactly.
"""
