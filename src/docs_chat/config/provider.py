"""Decide which chat-completion provider serves a request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from docs_chat.config.settings import Settings

ProviderSlot = Literal["primary", "secondary", "none"]

PROVIDER_NAMES: dict[str, str] = {
    "primary": "OpenAI",
    "secondary": "Azure OpenAI",
    "none": "none",
}


@dataclass(frozen=True)
class ProviderDecision:
    active: ProviderSlot
    endpoint: str = ""
    credential: str = field(default="", repr=False)
    model_id: str = ""
    api_version: str = ""

    @property
    def available(self) -> bool:
        return self.active != "none"

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAMES[self.active]


def resolve_provider(settings: Settings) -> ProviderDecision:
    """Azure when requested and keyed, otherwise OpenAI when keyed, otherwise none."""
    if settings.use_azure_openai and settings.azure_openai_key:
        return ProviderDecision(
            active="secondary",
            endpoint=settings.azure_openai_endpoint,
            credential=settings.azure_openai_key,
            model_id=settings.azure_openai_deployment,
            api_version=settings.azure_openai_api_version,
        )
    if settings.openai_api_key:
        return ProviderDecision(
            active="primary",
            endpoint=settings.openai_base_url,
            credential=settings.openai_api_key,
            model_id=settings.openai_model,
        )
    return ProviderDecision(active="none")
