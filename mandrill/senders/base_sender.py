from abc import ABC, abstractmethod
from typing import Dict, Optional


class BaseSender(ABC):
    @abstractmethod
    def send(self,
             from_email: str,
             reply_to: Optional[str],
             to_email: str,
             subject: str,
             html_body: str,
             text_body: Optional[str] = None,
             headers: Optional[Dict[str, str]] = None,
             from_name: Optional[str] = None) -> bool:
        pass
