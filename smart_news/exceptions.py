class SmartNewsError(Exception):
	pass


class UpstreamServiceError(SmartNewsError):
	"""The generative-text service call failed or returned nothing usable."""

	pass


class ResponseFormatError(SmartNewsError):
	"""A schema-constrained payload could not be decoded into its model."""

	pass


class ConfigurationError(ValueError):
	"""Server-side configuration (such as the API key) is missing or invalid."""

	pass
