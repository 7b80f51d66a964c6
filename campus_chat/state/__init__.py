"""Client state for the chat widget.

A single store per widget owns the transcript, the pending input, the
loading flag and the FAQ list. Nothing else mutates them.
"""

from campus_chat.state.store import GREETING, ConversationState, ConversationStore

__all__ = ["GREETING", "ConversationState", "ConversationStore"]
