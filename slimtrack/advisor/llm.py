# -*- coding: utf-8 -*-
"""OpenAI-compatible chat completions client (DashScope / Qwen by default).

Shared by the advisor chat, meal-plan recommendation, food vision and per-food
advice. Configuration problems surface as HTTP 503, upstream problems as 502.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
from fastapi import HTTPException

from ..config import Settings

log = logging.getLogger(__name__)


def _completions_url(base_url: str) -> str:
    base = base_url.rstrip("/")
    if base.endswith("/chat/completions"):
        return base
    return f"{base}/chat/completions"


def extract_content(data: object) -> str:
    """Text of the first choice; list-style content parts are concatenated."""
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    first = choices[0]
    if not isinstance(first, dict):
        return ""
    message = first.get("message")
    content = message.get("content") if isinstance(message, dict) else None
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: List[str] = []
        for part in content:
            if isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts)
    return ""


def call_chat(
    app_settings: Settings,
    messages: List[Dict[str, Any]],
    *,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
) -> str:
    if not app_settings.llm_api_key:
        raise HTTPException(status_code=503, detail="LLM_API_KEY not set")

    payload = {
        "model": model or app_settings.llm_model,
        "messages": messages,
        "temperature": app_settings.llm_temperature if temperature is None else temperature,
        "max_tokens": app_settings.llm_max_tokens,
    }
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {app_settings.llm_api_key}",
    }
    try:
        with httpx.Client(timeout=app_settings.llm_timeout) as client:
            resp = client.post(_completions_url(app_settings.llm_base_url), headers=headers, json=payload)
            resp.raise_for_status()
            data = resp.json()
    except httpx.HTTPStatusError as exc:
        log.warning("LLM API returned %s", exc.response.status_code, exc_info=True)
        raise HTTPException(status_code=502, detail=f"LLM API error: {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        log.warning("LLM API unreachable", exc_info=True)
        raise HTTPException(status_code=502, detail=f"LLM API unreachable: {exc}") from exc
    except ValueError as exc:
        log.warning("LLM API returned non-JSON body", exc_info=True)
        raise HTTPException(status_code=502, detail="LLM API returned an invalid body") from exc

    content = extract_content(data)
    if not content.strip():
        raise HTTPException(status_code=502, detail="LLM API returned an empty reply")
    return content
