"""
AI Nurse Service

Maternal-care chat assistant backed by Gemini. The system prompt is fixed to
the nurse persona and carries the user's pregnancy or postpartum context.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from flask import current_app
from google import genai
from google.genai import types

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = (
    "I'm sorry, I'm having trouble connecting right now. Please try again later "
    "or contact your healthcare provider if you have urgent concerns."
)

PERSONA = """You are MamaAlert AI Nurse, a specialized AI assistant for pregnant women and new mothers in Nigeria. You provide caring, accurate, and culturally sensitive maternal health advice.

Key guidelines:
- Always be warm, supportive, and reassuring
- Provide practical advice relevant to Nigerian healthcare context
- Use simple, clear language that's easy to understand
- Always recommend consulting healthcare providers for serious concerns
- Be mindful of cultural practices and beliefs in Nigeria
- Include relevant local context when appropriate"""

CLOSING = """If asked about emergency symptoms, always emphasize seeking immediate medical attention.
For routine questions, provide helpful information while encouraging regular prenatal and postnatal care."""


@dataclass
class ChatResult:
    success: bool
    response: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"response": self.response, "success": True}
        return {"error": self.error, "fallbackResponse": FALLBACK_RESPONSE, "success": False}


def build_context(pregnancy_week: int = 0, has_delivered: bool = False,
                  baby_count: Optional[int] = None, baby_ages: Optional[List[Any]] = None) -> str:
    if has_delivered:
        context = "Current context: the mother has delivered and is in postpartum care."
        if baby_count:
            context += f" She has {baby_count} baby(ies)."
        if baby_ages:
            context += f" Baby ages: {', '.join(str(a) for a in baby_ages)}."
        return context
    return f"Current pregnancy context: Week {pregnancy_week} of pregnancy."


def build_system_prompt(**context) -> str:
    return f"{PERSONA}\n\n{build_context(**context)}\n\n{CLOSING}"


def ask(message: str, pregnancy_week: int = 0, has_delivered: bool = False,
        baby_count: Optional[int] = None, baby_ages: Optional[List[Any]] = None) -> ChatResult:
    api_key = current_app.config.get("GEMINI_API_KEY")
    if not api_key:
        return ChatResult(success=False, error="AI service is not configured")

    system_prompt = build_system_prompt(
        pregnancy_week=pregnancy_week,
        has_delivered=has_delivered,
        baby_count=baby_count,
        baby_ages=baby_ages,
    )

    try:
        client = genai.Client(api_key=api_key)
        response = client.models.generate_content(
            model=current_app.config.get("GEMINI_MODEL", "gemini-2.0-flash"),
            contents=message,
            config=types.GenerateContentConfig(
                system_instruction=system_prompt,
                temperature=0.7,
                max_output_tokens=500,
            ),
        )
    except Exception as e:
        logger.error("Error in AI nurse chat: %s", e)
        return ChatResult(success=False, error=str(e))

    if response and response.text:
        return ChatResult(success=True, response=response.text.strip())

    logger.warning("Empty response from Gemini for message: %s", message[:40])
    return ChatResult(success=False, error="Empty response from AI service")
