"""GPT MD Translator: translate Markdown documents with a chat model, chunking by paragraph when needed."""

__version__ = "1.0.0"
