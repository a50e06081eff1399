from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "auth-service"
    environment: str = "local"
    debug: bool = True
    log_level: str = "INFO"

    mongo_scheme: str = "mongodb+srv"
    mongo_host: str = "localhost"
    mongo_db: str = "auth_service"
    mongo_password: str | None = None
    mongo_params: str | None = None
    mongo_user: str | None = None

    jwt_algorithm: str = "HS256"
    jwt_secret_key: str = "very-secret-key"
    session_expires_days: int = 7
    session_cookie_name: str = "token"

    verification_token_expires_hours: int = 24
    reset_token_expires_minutes: int = 60

    client_url: str = "http://localhost:5173"

    mailtrap_token: str | None = None
    mailtrap_endpoint: str = "https://send.api.mailtrap.io/api/send"
    mail_sender_email: str = "hello@demomailtrap.com"
    mail_sender_name: str = "Auth Service"
    mail_timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(env_file=(".env",), case_sensitive=True)

    @property
    def mongo_uri(self) -> str:
        auth = ""
        if self.mongo_user and self.mongo_password:
            auth = f"{self.mongo_user}:{self.mongo_password}@"
        params = self.mongo_params or "retryWrites=true&w=majority"
        return f"{self.mongo_scheme}://{auth}{self.mongo_host}/{self.mongo_db}?{params}"

    @property
    def secure_cookies(self) -> bool:
        """Cookies are only marked secure outside local development."""
        return self.environment != "local"


settings = Settings()


def get_settings() -> Settings:
    return settings
