"""Default state key names for LangGraph integration."""

# Standard state keys used by sentgroup nodes
TOKENS = "tokens"
SENTENCES = "sentences"

# Additional optional keys
SENTENCE_STATS = "sentence_stats"
