"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    environment: str = "development"

    # Provider selection
    use_azure_openai: bool = False

    # OpenAI (primary)
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4"

    # Azure OpenAI (secondary)
    azure_openai_endpoint: str = ""
    azure_openai_key: str = ""
    azure_openai_deployment: str = "gpt-4"
    azure_openai_api_version: str = "2024-02-15-preview"

    # Completion
    completion_max_tokens: int = 1500
    completion_temperature: float = 0.3
    prompt_rules_version: Literal["concise", "extended"] = "extended"

    # Documentation search (public, search-only credentials)
    docsearch_enabled: bool = True
    algolia_app_id: str = "DCCC0T0ITC"
    algolia_search_key: str = "870d45e2eaf4483e87c2204607df57c7"
    algolia_index_name: str = "prometheux-co"
    docsearch_hits_per_page: int = 5
    docsearch_top_k: int = 3
    docs_base_url: str = "https://docs.prometheux.ai"

    # CORS
    allowed_origin: str = "https://docs.prometheux.ai"

    # Streaming
    stream_chunk_delay_ms: int = 10

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = {"env_file": ".env", "env_prefix": "DOCS_CHAT_", "frozen": True}

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"
