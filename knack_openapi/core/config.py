from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KNACK_OPENAPI_", env_file=".env", extra="ignore")

    app_name: str = "knack-openapi"
    log_level: str = "INFO"

    default_schema_source: str = "application_schema.json"
    default_output_dir: str = "output"
    http_timeout: float = 60.0

    api_version: str = "1.0.0"
    default_api_domain: str = "knack.com"
    default_api_subdomain: str = "api"

    json_filename: str = "openapi.json"
    yaml_filename: str = "openapi.yaml"

settings = Settings()
