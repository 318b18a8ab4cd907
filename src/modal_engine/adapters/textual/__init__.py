"""Textual front end for the modal editor."""

from .controller import TextualUIHooks, TextualEditorAdapter, describe_event

__all__ = ["TextualUIHooks", "TextualEditorAdapter", "describe_event"]
