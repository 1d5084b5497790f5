"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Flowgraph"
    debug: bool = False
    log_level: str = "INFO"
    max_graph_nodes: int = 500
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    model_config = {"env_prefix": "FLOWGRAPH_"}


settings = Settings()
