class FormatError(ValueError):
  """Input bytes violate a structural constraint of the expected container."""
