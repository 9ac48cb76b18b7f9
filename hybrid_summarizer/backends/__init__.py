from hybrid_summarizer.backends.client_base import BaseChatClient
from hybrid_summarizer.backends.factory import BackendRole, ChatClientFactory

__all__ = ["BackendRole", "BaseChatClient", "ChatClientFactory"]
