from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    @property
    def LISTEN_URL(self):
        return f"http://{self.HOST}:{self.PORT}"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
