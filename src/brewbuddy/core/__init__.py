"""Core configuration, exceptions and logging setup — no Textual widgets."""
