from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "HelpDesk Pro"

    # Ticket store
    seed_file: str | None = None
    unassigned_label: str = "Не назначен"

    # CORS
    allowed_origins: list[str] = ["http://localhost:5173"]

    # MCP
    mcp_path: str = "/mcp"
    mcp_allowed_hosts: list[str] = ["localhost", "localhost:*", "127.0.0.1:*", "[::1]:*"]

    # Logging
    log_level: str = "INFO"

    # Analytics windows
    activity_days: int = 7
    trend_window_days: int = 30
    top_assignees_limit: int = 4

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
