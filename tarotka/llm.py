from __future__ import annotations
import os
from typing import Optional

import structlog
from dotenv import load_dotenv

# pip install google-generativeai python-dotenv
import google.generativeai as genai

load_dotenv()
GEMINI_TOKEN = os.getenv("GEMINI_TOKEN")
DEFAULT_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
DEFAULT_TEMPERATURE = float(os.getenv("GEMINI_TEMPERATURE", "0.7"))

logger = structlog.get_logger(__name__)


class ConfigurationError(RuntimeError):
    """The upstream credential is not configured."""


def _extract_text(resp) -> str:
    """
    Safely extract plain text from a Gemini response, even if Parts are present.
    """
    # The SDK's aggregated .text raises ValueError when the candidate has no text part
    try:
        t = getattr(resp, "text", None)
        if t:
            return t
    except ValueError:
        pass

    texts = []
    for cand in getattr(resp, "candidates", []) or []:
        content = getattr(cand, "content", None)
        parts = getattr(content, "parts", None) if content else None
        if parts:
            for p in parts:
                pt = getattr(p, "text", None)
                if pt:
                    texts.append(pt)
    return "\n".join(texts).strip()


def chat(
    prompt: str,
    system: Optional[str] = None,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
) -> str:
    """
    Single-turn generation with Gemini. Returns plain text.

    Raises ConfigurationError when GEMINI_TOKEN is missing; SDK/transport
    errors propagate to the caller.
    """
    if not GEMINI_TOKEN:
        raise ConfigurationError(
            "Missing GEMINI_TOKEN in environment. "
            "Create one in Google AI Studio and set it in your .env."
        )

    genai.configure(api_key=GEMINI_TOKEN)
    model_name = model or DEFAULT_MODEL
    gmodel = genai.GenerativeModel(model_name=model_name, system_instruction=system)

    temp = DEFAULT_TEMPERATURE if temperature is None else float(temperature)
    logger.debug("llm_generate", model=model_name, temperature=temp, prompt_chars=len(prompt))
    resp = gmodel.generate_content(prompt, generation_config={"temperature": temp})

    text = _extract_text(resp)
    return text or ""
