from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    BUILD_API_KEY: str = ""
    BUILD_API_URL: str = "https://build.electricimp.com/v4/"
    BUILD_BASE_URL: str = "https://build.electricimp.com/"
    BUILD_REQUEST_TIMEOUT: float = 30.0
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None


    model_config = {"env_file":".env", "extra":"ignore"}


settings = Settings()
