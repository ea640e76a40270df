"""Interactive command-line chat client for Azure OpenAI chat completions."""

__version__ = "0.1.0"
