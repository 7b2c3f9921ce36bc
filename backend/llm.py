from typing import Optional
import logging
import os

from openai import AsyncOpenAI

from config.extraction_config import LLM_CONFIG, OPENAI_API_KEY_PLACEHOLDER
from errors import ModelError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# Configuration – OpenAI-compatible LLM wiring
# ---------------------------------------------------------
# Any OpenAI-compatible runtime works; set OPENAI_BASE_URL to point at a local
# server. The AI path is only enabled when an API key is configured.
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")

current_model = LLM_CONFIG["model"]

# HTTP client created lazily on first use
client: Optional[AsyncOpenAI] = None


def is_ai_enabled() -> bool:
    """Whether a model-provider credential is configured."""
    return bool(OPENAI_API_KEY) and OPENAI_API_KEY != OPENAI_API_KEY_PLACEHOLDER


def create_client(base_url: Optional[str] = None) -> AsyncOpenAI:
    """Create (or recreate) the AsyncOpenAI client.

    Note: This function mutates the module-global `client` variable.
    """
    global client
    base = base_url or LLM_CONFIG["base_url"]
    client = AsyncOpenAI(
        api_key=OPENAI_API_KEY,
        base_url=base,
        timeout=LLM_CONFIG["timeout"],
        max_retries=0,
    )
    return client


def get_client() -> AsyncOpenAI:
    if client is None:
        return create_client()
    return client


async def ask_model(
    prompt: str,
    system: str = "",
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
) -> str:
    """Single non-streaming chat completion returning the assistant text.

    Raises:
        ModelError: when no key is configured, the call fails or times out,
            or the reply carries no content.
    """
    if not is_ai_enabled():
        raise ModelError("OpenAI API key not configured")

    messages = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": prompt})

    try:
        response = await get_client().chat.completions.create(
            model=current_model,
            messages=messages,
            temperature=LLM_CONFIG["temperature"] if temperature is None else temperature,
            max_tokens=LLM_CONFIG["max_tokens"] if max_tokens is None else max_tokens,
        )
    except Exception as e:
        raise ModelError(f"Model call failed: {e}") from e

    try:
        content = (response.choices[0].message.content or "").strip()
    except (AttributeError, IndexError) as e:
        raise ModelError(f"Unexpected model response shape: {e}") from e

    if not content:
        raise ModelError("Model returned an empty reply")

    logger.info(f"AI response received, length: {len(content)}")
    return content
