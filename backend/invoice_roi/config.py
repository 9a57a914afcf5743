from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATA_DIR: str = "./data"
    SCENARIOS_FILENAME: str = "scenarios.json"
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"
    REPORT_FILENAME: str = "roi_report.pdf"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
