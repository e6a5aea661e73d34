from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str
    ENV: str = "local"  # Environment setting: "local" or "prod"

    # Server
    HOST: str = "localhost"
    PORT: int = 8000

    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False

    class Config:
        env_file = ".env"

settings = Settings()
