"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # System Configuration
    api_v1_prefix: str = "/api/v1"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:4173"

    # Supabase Configuration
    supabase_url: str = "https://test.supabase.co"
    supabase_anon_key: str = "test-anon-key"
    supabase_service_role_key: str = "test-service-role-key"

    # Collections
    interviews_table: str = "interviews"
    feedback_table: str = "feedback"

    # Google GenAI API Key (for feedback scoring)
    google_api_key: str = ""

    # Model Configuration
    llm_feedback_model: str = "gemini-2.0-flash-001"
    llm_temperature: float = 0.2
    llm_max_tokens: int = 2048
    llm_max_attempts: int = 1  # 1 = single call, no transport retry

    # Feedback records
    feedback_record_source: bool = True  # Persist "source": "model" | "fallback"

    # Discovery listing
    store_supports_composite_filter: bool = False
    latest_default_limit: int = 20
    latest_overfetch_factor: int = 2
    latest_max_fetch_rounds: int = 1

    # Opik Configuration (OPIK_API_KEY / OPIK_WORKSPACE are read by the Opik SDK itself)
    opik_project_name: str = "mockview-feedback"
    opik_enabled: bool = False


settings = Settings()
