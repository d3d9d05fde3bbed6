from pydantic_settings import BaseSettings

from vaultwatch.domain.enums import OverflowPolicy


class Settings(BaseSettings):
    solana_rpc_url: str = "https://api.mainnet-beta.solana.com"
    program_id: str = ""
    source_id: str = ""  # defaults to program_id when empty
    rpc_rate_per_second: float = 5.0
    rpc_timeout: float = 30.0
    commitment: str = "confirmed"
    poll_interval_seconds: float = 2.0
    signature_batch_limit: int = 1000
    overflow_policy: OverflowPolicy = OverflowPolicy.FALLBACK_STRING
    strict_schema: bool = False  # raise on decimal-field mismatches (test builds)
    log_level: str = "INFO"
    event_decoder: str = ""  # "package.module:callable" turning payload bytes into (name, data)
    debug: bool = False

    @property
    def effective_source_id(self) -> str:
        return self.source_id or self.program_id

    class Config:
        env_file = ".env"
        env_prefix = "VAULTWATCH_"


settings = Settings()
