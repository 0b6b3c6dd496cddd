from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    port: int = 3000
    log_dir: str = "logs"
    http_timeout: float = 30.0

    payments_enabled: bool = False
    payments_pay_to: str | None = None
    payments_network: str = "base"
    # USDC on Base; prices are in the asset's smallest unit
    payments_asset: str = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"
    payments_facilitator_url: str = "https://x402.org/facilitator"
    payments_max_timeout_seconds: int = 60

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False)


settings = Settings()
