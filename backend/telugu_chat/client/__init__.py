from .conversation import ConversationClient, ConversationState, RelayError

__all__ = [
    "ConversationClient",
    "ConversationState",
    "RelayError",
]
