"""Exceptions raised by modalfunction.

Both concrete errors subclass ``ValueError`` so callers that already guard
against bad input with ``except ValueError`` keep working.
"""


class ModalFunctionError (ValueError):

	"""Base class for modalfunction errors."""


class ConfigurationError (ModalFunctionError):

	"""The fact table cannot be built (bad scale output or unknown mode)."""


class InvalidPatternError (ModalFunctionError):

	"""A query pattern does not fit the shape of the relation it targets."""
