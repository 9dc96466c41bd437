from pydantic_settings import BaseSettings


class ServerSettings(BaseSettings):
    """Settings needed before the app starts (middleware, listening port)."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    cors_origins: list[str] = ["http://localhost:5173"]
    port: int = 5000


class Settings(ServerSettings):
    access_token_secret: str
    db_user: str = ""
    db_pass: str = ""
    db_host: str = "cluster0.khjiv.mongodb.net"
    db_name: str = "hotel-booking"
    mongodb_uri: str = ""
    token_ttl_hours: int = 5
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def database_uri(self) -> str:
        if self.mongodb_uri:
            return self.mongodb_uri
        return (
            f"mongodb+srv://{self.db_user}:{self.db_pass}@{self.db_host}/"
            "?retryWrites=true&w=majority&appName=Cluster0"
        )
