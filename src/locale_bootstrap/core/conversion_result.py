"""
Data structures representing the output of the locale pass on a source string.

This module defines the `ConversionResult` Pydantic model, which encapsulates
the generated code, any errors encountered, and whether the code changed.
"""

from typing import List

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
  """
  Container for the results of one locale registration run.
  """

  code: str = Field(default="", description="The generated source code.")
  errors: List[str] = Field(default_factory=list, description="List of error messages encountered.")
  success: bool = Field(
    default=True,
    description="True if the pass completed without fatal errors.",
  )
  changed: bool = Field(default=False, description="True if registration code was inserted.")
  inserted: List[str] = Field(default_factory=list, description="Source of each inserted statement, in order.")

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0
