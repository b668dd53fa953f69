"""tsurch - command-line web search."""

__version__ = "0.1.0"
__description__ = "Command-line web search tool"
