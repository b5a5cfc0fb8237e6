# -*- coding: utf-8 -*-
"""Diet — food photo recognition via an OpenAI-compatible vision model."""

from __future__ import annotations

import ast
import base64
import json
import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from ..advisor import llm
from ..advisor.prompts import FOOD_VISION_SYSTEM, FOOD_VISION_USER
from ..config import Settings
from .models import RecognizedFood

log = logging.getLogger(__name__)

UNPARSEABLE_WARNING = "模型输出无法解析，请手动添加/修改食物条目后再保存。"
EMPTY_WARNING = "未识别到食物，请手动添加食物条目。"

_NUM_RE = re.compile(r"-?\d+(?:\.\d+)?")
_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def _strip_fences(text: str) -> str:
    return _FENCE_RE.sub("", text.strip())


def _json_candidates(text: str) -> List[str]:
    """Balanced top-level {...} / [...] spans, skipping brackets inside string literals."""
    cleaned = _strip_fences(text)
    out: List[str] = []
    stack: List[str] = []
    start: Optional[int] = None
    in_str = False
    escaped = False
    pairs = {"{": "}", "[": "]"}
    for i, ch in enumerate(cleaned):
        if in_str:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == "\"":
                in_str = False
            continue
        if ch == "\"":
            in_str = True
        elif ch in pairs:
            if not stack:
                start = i
            stack.append(pairs[ch])
        elif stack and ch == stack[-1]:
            stack.pop()
            if not stack and start is not None:
                out.append(cleaned[start : i + 1])
                start = None
    return out


def _sanitize(text: str) -> str:
    cleaned = text.replace("：", ":").replace("，", ",")
    cleaned = cleaned.replace("“", "\"").replace("”", "\"")
    cleaned = re.sub(r",\s*([}\]])", r"\1", cleaned)
    cleaned = re.sub(r"\bNaN\b|-?\bInfinity\b", "null", cleaned)
    return cleaned


def parse_model_output(content: str) -> Any:
    """Best-effort JSON extraction from model text. Raises ValueError when nothing parses."""
    last_error: Optional[Exception] = None
    for candidate in _json_candidates(content):
        for attempt in (candidate, _sanitize(candidate)):
            try:
                return json.loads(attempt)
            except ValueError as exc:
                last_error = exc
        # Python-literal style output: single quotes, None/True/False.
        py = _sanitize(candidate)
        py = re.sub(r"\bnull\b", "None", py)
        py = re.sub(r"\btrue\b", "True", py)
        py = re.sub(r"\bfalse\b", "False", py)
        try:
            return ast.literal_eval(py)
        except (ValueError, SyntaxError) as exc:
            last_error = exc
    raise ValueError(f"Failed to parse model JSON: {last_error or 'no JSON found'}")


def _coerce_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        m = _NUM_RE.search(value.replace(",", ""))
        return float(m.group(0)) if m else None
    return None


def _pick(raw: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
    for k in keys:
        if k in raw and raw[k] is not None:
            return raw[k]
    return None


def normalize_items(parsed: Any) -> List[RecognizedFood]:
    """Map loosely shaped model output onto RecognizedFood entries.

    Accepts `{"foods": [...]}`, `{"items": [...]}` or a bare list. Confidence given
    as a percentage is scaled to 0-1; entries without a usable name are dropped.
    """
    if isinstance(parsed, dict):
        raw_items = _pick(parsed, ("foods", "items", "food"))
    else:
        raw_items = parsed
    if not isinstance(raw_items, list):
        return []

    out: List[RecognizedFood] = []
    for raw in raw_items:
        if not isinstance(raw, dict):
            continue
        name = _pick(raw, ("name", "food", "item", "dish"))
        name = str(name).strip() if name is not None else ""
        if not name:
            continue

        confidence = _coerce_float(_pick(raw, ("confidence", "conf", "score")))
        if confidence is None:
            confidence = 0.0
        elif 1 < confidence <= 100:
            confidence = confidence / 100.0
        confidence = max(0.0, min(1.0, confidence))

        grams = _coerce_float(_pick(raw, ("estimated_grams", "estimatedGrams", "grams", "weight_g", "weight")))
        grams = max(0.0, grams) if grams is not None else 0.0

        out.append(RecognizedFood(name=name, confidence=confidence, estimated_grams=grams))
    return out


def _data_url(mime: str, image_bytes: bytes) -> str:
    b64 = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime};base64,{b64}"


def recognize_food(
    app_settings: Settings,
    *,
    image_bytes: bytes,
    image_mime: str,
) -> Tuple[List[RecognizedFood], List[str], str]:
    """Returns (items, warnings, model). LLM transport errors propagate as HTTPException."""
    model = app_settings.llm_vision_model
    messages = [
        {"role": "system", "content": FOOD_VISION_SYSTEM},
        {
            "role": "user",
            "content": [
                {"type": "text", "text": FOOD_VISION_USER},
                {"type": "image_url", "image_url": {"url": _data_url(image_mime, image_bytes), "detail": "high"}},
            ],
        },
    ]
    content = llm.call_chat(app_settings, messages, model=model, temperature=0.1)

    try:
        parsed = parse_model_output(content)
    except ValueError:
        log.warning("diet vision output unparseable: %s", content[:500], exc_info=True)
        return [], [UNPARSEABLE_WARNING], model

    items = normalize_items(parsed)
    warnings: List[str] = [] if items else [EMPTY_WARNING]
    return items, warnings, model
