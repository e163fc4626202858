import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://mandrillapp.com/api/1.0"


class MandrillSettings(BaseModel):
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "MandrillSettings":
        return cls(
            api_key=os.getenv("MANDRILL_API_KEY", ""),
            base_url=os.getenv("MANDRILL_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("MANDRILL_TIMEOUT", "30")),
        )


@lru_cache()
def get_settings() -> MandrillSettings:
    return MandrillSettings.from_env()
