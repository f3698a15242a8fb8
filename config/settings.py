from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from dotenv import load_dotenv

# Load .env file into os.environ BEFORE pydantic reads it
# so that pydantic-settings, the Langfuse SDK and the LangChain
# provider clients all see the same environment.
load_dotenv()


class Settings(BaseSettings):
    # LLM Configuration
    LLM_PROVIDER: str = "openrouter"
    LLM_MODEL: str = "openai/gpt-4.1-mini"

    # Multi-model configuration for different tasks
    LLM_FAST_MODEL: str = "openai/gpt-4.1-nano"  # Language detection
    LLM_DEEP_MODEL: str = "openai/gpt-4.1-mini"  # Scoring and analysis

    # OpenRouter
    OPENROUTER_API_KEY: Optional[str] = None

    # Gemini
    GEMINI_API_KEY: Optional[str] = None

    # Database (postgresql://... in production, SQLite file locally)
    DATABASE_URL: str = "sqlite:///./hiring_pipeline.db"
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000

    # API Security
    # When API_SECRET_KEY is unset every request is accepted (local development).
    API_SECRET_KEY: Optional[str] = None
    # Privileged routes (raw application updates, company approval)
    ADMIN_API_KEY: Optional[str] = None
    ALLOWED_ORIGINS: str = "*"

    # Langfuse Observability
    LANGFUSE_PUBLIC_KEY: Optional[str] = None
    LANGFUSE_SECRET_KEY: Optional[str] = None
    LANGFUSE_HOST: str = "https://cloud.langfuse.com"
    LANGFUSE_ENABLED: bool = False

    # Outbound email (Resend)
    RESEND_API_KEY: Optional[str] = None
    EMAIL_FROM: str = "noreply@ansora.no"
    EMAIL_FROM_NAME: str = "Ansora"
    EMAIL_TIMEOUT_SECONDS: float = 10.0

    # Public URL of the web app, used for links in emails
    APP_URL: str = "http://localhost:3000"

    # Language used for generated text when the candidate's language is unknown
    DEFAULT_LANGUAGE: str = "Norwegian"

    LOG_LEVEL: str = "INFO"

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # ignore unknown env vars instead of raising errors
    )


settings = Settings()
