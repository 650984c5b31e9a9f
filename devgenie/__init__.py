"""Dev Genie: project ideas and learning material from several LLM providers."""

__version__ = "0.1.0"
