from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    event_signature: str = "AppEvent(uint256,bytes)"
    # Reject instead of truncating when the tag exceeds 8 bits or the nonce exceeds 64 bits
    strict_narrowing: bool = False

    class Config:
        env_prefix = "ETHBRIDGE_"
        env_file = ".env"


settings = Settings()
