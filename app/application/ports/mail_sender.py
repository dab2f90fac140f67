from abc import ABC, abstractmethod


class MailSenderPort(ABC):
    @abstractmethod
    def send(self, to: str, subject: str, html: str) -> bool:
        """Send an HTML email. Returns True if the provider accepted it."""
        raise NotImplementedError
