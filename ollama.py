from __future__ import annotations

import logging
from typing import Optional

import httpx

from config.settings import get_settings
from models.student import StudentBase


logger = logging.getLogger("students.ollama")

PROMPT_TEMPLATE = (
    "Generate a brief summary of this student:\n"
    "Name: {name}\n"
    "Age: {age}\n"
    "Email: {email}"
)


def build_student_prompt(student: StudentBase) -> str:
    return PROMPT_TEMPLATE.format(name=student.name, age=student.age, email=student.email)


class OllamaClient:
    """Relays a student summary prompt to an Ollama text-generation server.

    Errors are not retried: transport failures and non-2xx replies surface as
    ``httpx.HTTPError``, an unreadable reply as ``ValueError``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.ollama_base_url).rstrip("/")
        self.model = model or settings.ollama_model
        self.timeout = timeout if timeout is not None else settings.ollama_timeout
        self.transport = transport

    def generate_student_summary(self, student: StudentBase) -> str:
        payload = {
            "model": self.model,
            "prompt": build_student_prompt(student),
            "stream": False,
        }

        logger.info("Requesting summary from %s (model=%s)", self.base_url, self.model)
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            response = client.post(f"{self.base_url}/api/generate", json=payload)
            response.raise_for_status()
            data = response.json()

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise ValueError("Ollama reply has no 'response' text")
        return text
